import logging

from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_uow, get_current_team
from common.exceptions import to_http_exception
from models.planning import Team
from schemas.project_schemas import TaskCreate, TaskUpdate, TaskResponse, DeleteResponse
from services.task_service import TaskService
from services.uow import UnitOfWork

logger = logging.getLogger(__name__)

tasks_router = APIRouter(tags=["Tasks"])


@tasks_router.post("/projects/{project_id}/tasks", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(
    project_id: str,
    request: TaskCreate,
    team: Team = Depends(get_current_team),
    uow: UnitOfWork = Depends(get_uow),
):
    try:
        return TaskService(uow).create_task(project_id, request, team)
    except ValueError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"Failed to create task for project {project_id}: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create task"
        )


@tasks_router.patch("/tasks/{task_id}", response_model=TaskResponse)
async def toggle_task(
    task_id: str,
    request: TaskUpdate,
    team: Team = Depends(get_current_team),
    uow: UnitOfWork = Depends(get_uow),
):
    try:
        return TaskService(uow).set_completed(task_id, request.completed, team)
    except ValueError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"Failed to update task {task_id}: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update task"
        )


@tasks_router.delete("/tasks/{task_id}", response_model=DeleteResponse)
async def delete_task(
    task_id: str,
    team: Team = Depends(get_current_team),
    uow: UnitOfWork = Depends(get_uow),
):
    try:
        TaskService(uow).delete_task(task_id, team)
        return DeleteResponse(status="deleted", id=task_id)
    except ValueError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"Failed to delete task {task_id}: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete task"
        )
