import logging

from common.exceptions import NotFoundError
from models.planning import Task, Team
from schemas.project_schemas import TaskCreate
from services.uow import UnitOfWork

logger = logging.getLogger(__name__)


class TaskService:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    def _get_task(self, task_id: str, team: Team) -> Task:
        task = self.uow.tasks.get_by_id(task_id, team.id)
        if not task:
            raise NotFoundError(f"Task {task_id} not found")
        return task

    def create_task(self, project_id: str, data: TaskCreate, team: Team) -> Task:
        project = self.uow.projects.get_by_id(project_id, team.id)
        if not project:
            raise NotFoundError(f"Project {project_id} not found")

        task = Task(
            project_id=project.id,
            name=data.name,
            estimated_hours=data.estimated_hours or None,
            completed=False,
        )
        self.uow.tasks.create(task)
        self.uow.commit()
        logger.info(f"Task created: id={task.id}, project_id={project.id}")
        return task

    def set_completed(self, task_id: str, completed: bool, team: Team) -> Task:
        task = self._get_task(task_id, team)
        task.completed = completed
        self.uow.flush()
        self.uow.commit()
        return task

    def delete_task(self, task_id: str, team: Team) -> None:
        task = self._get_task(task_id, team)
        self.uow.tasks.delete(task)
        self.uow.commit()
        logger.info(f"Task deleted: id={task_id}")
