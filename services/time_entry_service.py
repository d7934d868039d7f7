"""
Time tracking: manual entries and start/stop timers.

Every write recomputes the owning project's ``hours_worked`` from its time
entries, which is what the risk and workload calculations read.
"""
import logging
from datetime import datetime, time
from typing import Optional

from common.exceptions import ConflictError, NotFoundError
from models.planning import Project, Team, TimeEntry
from schemas.project_schemas import TimeEntryCreate, TimerStartRequest
from services.uow import UnitOfWork

logger = logging.getLogger(__name__)

MIN_TIMER_HOURS = 0.1
SECONDS_PER_HOUR = 60 * 60


def timer_hours(started_at: Optional[datetime], ended_at: datetime) -> float:
    """Elapsed hours rounded to two decimals, never below MIN_TIMER_HOURS."""
    started_at = started_at or ended_at
    hours = round((ended_at - started_at).total_seconds() / SECONDS_PER_HOUR, 2)
    return max(MIN_TIMER_HOURS, hours)


class TimeEntryService:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    def _get_project(self, project_id: str, team: Team) -> Project:
        project = self.uow.projects.get_by_id(project_id, team.id)
        if not project:
            raise NotFoundError(f"Project {project_id} not found")
        return project

    def _refresh_project_hours(self, project_id: str) -> None:
        project = self.uow.projects.get_by_id_any_team(project_id)
        if project is None:
            return
        self.uow.flush()
        project.hours_worked = self.uow.time_entries.total_hours_for_project(project_id)

    def create_entry(self, project_id: str, data: TimeEntryCreate, team: Team) -> TimeEntry:
        project = self._get_project(project_id, team)
        entry = TimeEntry(
            project_id=project.id,
            designer_name=data.designer_name,
            hours=data.hours,
            date=datetime.combine(data.date, time.min),
            description=data.description,
            is_timer_entry=False,
        )
        self.uow.time_entries.create(entry)
        self._refresh_project_hours(project.id)
        self.uow.commit()
        logger.info(f"Time entry logged: project_id={project.id}, designer={entry.designer_name}, hours={entry.hours}")
        return entry

    def start_timer(
        self,
        project_id: str,
        data: TimerStartRequest,
        team: Team,
        now: Optional[datetime] = None,
    ) -> TimeEntry:
        project = self._get_project(project_id, team)
        if self.uow.time_entries.get_running_timer(data.designer_name):
            raise ConflictError("You already have an active timer. Please stop it first.")

        now = now or datetime.utcnow()
        entry = TimeEntry(
            project_id=project.id,
            designer_name=data.designer_name,
            description=data.description,
            hours=0.0,
            date=now,
            is_timer_entry=True,
            timer_started_at=now,
        )
        self.uow.time_entries.create(entry)
        self.uow.commit()
        logger.info(f"Timer started: id={entry.id}, project_id={project.id}, designer={entry.designer_name}")
        return entry

    def stop_timer(self, timer_id: str, team: Team, now: Optional[datetime] = None) -> TimeEntry:
        entry = self.uow.time_entries.get_by_id(timer_id, team.id)
        if not entry or not entry.is_timer_entry or entry.timer_ended_at is not None:
            raise NotFoundError("Timer not found or already stopped")

        now = now or datetime.utcnow()
        entry.timer_ended_at = now
        entry.hours = timer_hours(entry.timer_started_at, now)
        self._refresh_project_hours(entry.project_id)
        self.uow.commit()
        logger.info(f"Timer stopped: id={entry.id}, hours={entry.hours}")
        return entry

    def get_active_timer(self, designer_name: str) -> Optional[TimeEntry]:
        return self.uow.time_entries.get_running_timer(designer_name)

    def delete_entry(self, entry_id: str, team: Team) -> None:
        entry = self.uow.time_entries.get_by_id(entry_id, team.id)
        if not entry:
            raise NotFoundError(f"Time entry {entry_id} not found")
        project_id = entry.project_id
        self.uow.time_entries.delete(entry)
        self._refresh_project_hours(project_id)
        self.uow.commit()
        logger.info(f"Time entry deleted: id={entry_id}, project_id={project_id}")
