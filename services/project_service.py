import logging
from datetime import date
from typing import Optional

from common.exceptions import NotFoundError
from common.pagination import paginate
from domain.records import RiskThresholds
from domain.risk import evaluate_risk
from models.planning import Project, Team
from schemas.project_schemas import (
    ProjectCreate,
    ProjectUpdate,
    ProjectResponse,
    ProjectWithRiskResponse,
    ProjectDetailResponse,
    PaginatedProjectResponse,
    RiskFlagsResponse,
    TaskResponse,
    TimeEntryResponse,
)
from services.uow import UnitOfWork

logger = logging.getLogger(__name__)

NULLABLE_FIELDS = ("priority", "early_reminder_date", "media_budget", "notes")


class ProjectService:
    def __init__(self, uow: UnitOfWork, thresholds: Optional[RiskThresholds] = None):
        self.uow = uow
        self.thresholds = thresholds or RiskThresholds()

    def _risk(self, project: Project, today: date) -> RiskFlagsResponse:
        return RiskFlagsResponse.model_validate(evaluate_risk(project, today, self.thresholds))

    def with_risk(self, project: Project, today: date) -> ProjectWithRiskResponse:
        base = ProjectResponse.model_validate(project)
        return ProjectWithRiskResponse(**base.model_dump(), risk=self._risk(project, today))

    def get_project(self, project_id: str, team: Team) -> Project:
        project = self.uow.projects.get_by_id(project_id, team.id)
        if not project:
            raise NotFoundError(f"Project {project_id} not found")
        return project

    def list_projects(
        self,
        team: Team,
        today: date,
        designer: Optional[str] = None,
        status: Optional[str] = None,
        page: int = 1,
        page_size: int = 50,
    ) -> PaginatedProjectResponse:
        query = self.uow.projects.query_for_team(team.id, designer=designer, status=status)
        result = paginate(query, page=page, page_size=page_size)

        return PaginatedProjectResponse(
            projects=[self.with_risk(project, today) for project in result.items],
            total_count=result.total,
            page=result.page,
            size=result.page_size,
            total_pages=result.total_pages,
        )

    def get_project_detail(self, project_id: str, team: Team, today: date) -> ProjectDetailResponse:
        project = self.get_project(project_id, team)
        base = ProjectResponse.model_validate(project)
        return ProjectDetailResponse(
            **base.model_dump(),
            risk=self._risk(project, today),
            tasks=[TaskResponse.model_validate(task) for task in project.tasks],
            time_entries=[TimeEntryResponse.model_validate(entry) for entry in project.time_entries],
        )

    def create_project(self, data: ProjectCreate, team: Team, created_by: str = "user") -> Project:
        project = Project(
            team_id=team.id,
            title=data.title,
            client=data.client,
            instructional_designer=data.instructional_designer,
            status=data.status.value,
            priority=data.priority,
            due_date=data.due_date,
            early_reminder_date=data.early_reminder_date,
            estimated_scoped_hours=data.estimated_scoped_hours,
            hours_worked=0.0,
            media_budget=data.media_budget or None,
            notes=data.notes or None,
            created_by=created_by,
        )
        self.uow.projects.create(project)
        self.uow.commit()
        logger.info(f"Project created: id={project.id}, team_id={team.id}, designer={project.instructional_designer}")
        return project

    def update_project(self, project_id: str, data: ProjectUpdate, team: Team) -> Project:
        project = self.get_project(project_id, team)

        changes = data.model_dump(exclude_unset=True)
        for field, value in changes.items():
            if field in NULLABLE_FIELDS:
                value = value or None
            elif value is None:
                # required columns cannot be cleared
                continue
            elif field == "status":
                value = value.value
            setattr(project, field, value)

        self.uow.flush()
        self.uow.commit()
        logger.info(f"Project updated: id={project.id}, fields={sorted(changes)}")
        return project

    def delete_project(self, project_id: str, team: Team) -> None:
        project = self.get_project(project_id, team)
        # tasks and time entries go with it through the relationship cascade
        self.uow.projects.delete(project)
        self.uow.commit()
        logger.info(f"Project deleted: id={project_id}, team_id={team.id}")
