from typing import Optional, List
from sqlalchemy.orm import Session, Query, selectinload
from sqlalchemy import and_

from models.planning import Team, Project, Task, TimeEntry, DesignerCapacity


class TeamRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, team_id: str) -> Optional[Team]:
        return self.db.query(Team).filter(Team.id == team_id).first()

    def list_all(self) -> List[Team]:
        return self.db.query(Team).order_by(Team.name.asc()).all()


class ProjectRepository:
    def __init__(self, db: Session):
        self.db = db

    def create(self, project: Project) -> Project:
        self.db.add(project)
        self.db.flush()
        return project

    def get_by_id(self, project_id: str, team_id: str) -> Optional[Project]:
        return self.db.query(Project).options(
            selectinload(Project.tasks),
            selectinload(Project.time_entries),
        ).filter(
            and_(
                Project.id == project_id,
                Project.team_id == team_id
            )
        ).first()

    def get_by_id_any_team(self, project_id: str) -> Optional[Project]:
        return self.db.query(Project).filter(Project.id == project_id).first()

    def query_for_team(
        self,
        team_id: str,
        designer: Optional[str] = None,
        status: Optional[str] = None
    ) -> Query:
        query = self.db.query(Project).filter(Project.team_id == team_id)

        if designer:
            query = query.filter(Project.instructional_designer == designer)

        if status:
            query = query.filter(Project.status == status)

        return query.order_by(Project.due_date.asc(), Project.id.asc())

    def list_for_team(
        self,
        team_id: str,
        designer: Optional[str] = None,
        status: Optional[str] = None
    ) -> List[Project]:
        return self.query_for_team(team_id, designer, status).all()

    def delete(self, project: Project) -> None:
        self.db.delete(project)
        self.db.flush()


class TaskRepository:
    def __init__(self, db: Session):
        self.db = db

    def create(self, task: Task) -> Task:
        self.db.add(task)
        self.db.flush()
        return task

    def get_by_id(self, task_id: str, team_id: str) -> Optional[Task]:
        return self.db.query(Task).join(Project).filter(
            and_(
                Task.id == task_id,
                Project.team_id == team_id
            )
        ).first()

    def delete(self, task: Task) -> None:
        self.db.delete(task)
        self.db.flush()


class TimeEntryRepository:
    def __init__(self, db: Session):
        self.db = db

    def create(self, entry: TimeEntry) -> TimeEntry:
        self.db.add(entry)
        self.db.flush()
        return entry

    def get_by_id(self, entry_id: str, team_id: str) -> Optional[TimeEntry]:
        return self.db.query(TimeEntry).join(Project).filter(
            and_(
                TimeEntry.id == entry_id,
                Project.team_id == team_id
            )
        ).first()

    def get_running_timer(self, designer_name: str) -> Optional[TimeEntry]:
        return self.db.query(TimeEntry).filter(
            and_(
                TimeEntry.designer_name == designer_name,
                TimeEntry.is_timer_entry.is_(True),
                TimeEntry.timer_ended_at.is_(None)
            )
        ).first()

    def total_hours_for_project(self, project_id: str) -> float:
        entries = self.db.query(TimeEntry.hours).filter(TimeEntry.project_id == project_id).all()
        return sum(hours for (hours,) in entries)

    def delete(self, entry: TimeEntry) -> None:
        self.db.delete(entry)
        self.db.flush()


class CapacityRepository:
    def __init__(self, db: Session):
        self.db = db

    def create(self, capacity: DesignerCapacity) -> DesignerCapacity:
        self.db.add(capacity)
        self.db.flush()
        return capacity

    def get_by_id(self, capacity_id: str, team_id: str) -> Optional[DesignerCapacity]:
        return self.db.query(DesignerCapacity).filter(
            and_(
                DesignerCapacity.id == capacity_id,
                DesignerCapacity.team_id == team_id
            )
        ).first()

    def get_by_name(self, team_id: str, designer_name: str) -> Optional[DesignerCapacity]:
        return self.db.query(DesignerCapacity).filter(
            and_(
                DesignerCapacity.team_id == team_id,
                DesignerCapacity.designer_name == designer_name
            )
        ).first()

    def list_for_team(self, team_id: str) -> List[DesignerCapacity]:
        return self.db.query(DesignerCapacity).filter(
            DesignerCapacity.team_id == team_id
        ).order_by(DesignerCapacity.designer_name.asc()).all()

    def delete(self, capacity: DesignerCapacity) -> None:
        self.db.delete(capacity)
        self.db.flush()
