import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from api.dependencies import get_uow, get_current_team
from common.exceptions import to_http_exception
from models.planning import Team
from schemas.project_schemas import (
    TimeEntryCreate,
    TimeEntryResponse,
    TimerStartRequest,
    DeleteResponse,
)
from services.time_entry_service import TimeEntryService
from services.uow import UnitOfWork

logger = logging.getLogger(__name__)

time_entries_router = APIRouter(tags=["Time Tracking"])


def internal_error(action: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {action}"
    )


@time_entries_router.post(
    "/projects/{project_id}/time-entries",
    response_model=TimeEntryResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_time_entry(
    project_id: str,
    request: TimeEntryCreate,
    team: Team = Depends(get_current_team),
    uow: UnitOfWork = Depends(get_uow),
):
    """
    Log hours against a project manually. The project's hours worked is recomputed.
    """
    try:
        return TimeEntryService(uow).create_entry(project_id, request, team)
    except ValueError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"Failed to log time for project {project_id}: {str(e)}", exc_info=True)
        raise internal_error("log time entry")


@time_entries_router.post(
    "/projects/{project_id}/timer/start",
    response_model=TimeEntryResponse,
    status_code=status.HTTP_201_CREATED,
)
async def start_timer(
    project_id: str,
    request: TimerStartRequest,
    team: Team = Depends(get_current_team),
    uow: UnitOfWork = Depends(get_uow),
):
    """
    Start a timer for a designer. A designer can only run one timer at a time.
    """
    try:
        return TimeEntryService(uow).start_timer(project_id, request, team)
    except ValueError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"Failed to start timer for project {project_id}: {str(e)}", exc_info=True)
        raise internal_error("start timer")


@time_entries_router.post("/timers/{timer_id}/stop", response_model=TimeEntryResponse)
async def stop_timer(
    timer_id: str,
    team: Team = Depends(get_current_team),
    uow: UnitOfWork = Depends(get_uow),
):
    try:
        return TimeEntryService(uow).stop_timer(timer_id, team)
    except ValueError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"Failed to stop timer {timer_id}: {str(e)}", exc_info=True)
        raise internal_error("stop timer")


@time_entries_router.get("/timers/active", response_model=Optional[TimeEntryResponse])
async def get_active_timer(
    designer: str = Query(..., min_length=1),
    uow: UnitOfWork = Depends(get_uow),
):
    try:
        return TimeEntryService(uow).get_active_timer(designer)
    except Exception as e:
        logger.error(f"Failed to load active timer for {designer}: {str(e)}", exc_info=True)
        raise internal_error("load active timer")


@time_entries_router.delete("/time-entries/{entry_id}", response_model=DeleteResponse)
async def delete_time_entry(
    entry_id: str,
    team: Team = Depends(get_current_team),
    uow: UnitOfWork = Depends(get_uow),
):
    try:
        TimeEntryService(uow).delete_entry(entry_id, team)
        return DeleteResponse(status="deleted", id=entry_id)
    except ValueError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"Failed to delete time entry {entry_id}: {str(e)}", exc_info=True)
        raise internal_error("delete time entry")
