from datetime import date
from typing import Optional
import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from api.dependencies import get_uow, get_current_team
from common.exceptions import to_http_exception
from domain.records import ProjectStatus
from models.planning import Team
from schemas.project_schemas import (
    ProjectCreate,
    ProjectUpdate,
    ProjectWithRiskResponse,
    ProjectDetailResponse,
    PaginatedProjectResponse,
    DeleteResponse,
)
from services.project_service import ProjectService
from services.uow import UnitOfWork
from settings.config import Settings, get_settings

logger = logging.getLogger(__name__)

projects_router = APIRouter(prefix="/projects", tags=["Projects"])

STATUS_VALUES = {s.value for s in ProjectStatus}


def get_project_service(
    uow: UnitOfWork = Depends(get_uow),
    settings: Settings = Depends(get_settings),
) -> ProjectService:
    return ProjectService(uow, settings.risk_thresholds)


@projects_router.get("", response_model=PaginatedProjectResponse)
async def list_projects(
    designer: Optional[str] = Query(None, description="Only projects owned by this designer"),
    project_status: Optional[str] = Query(None, alias="status", description="Unknown values are ignored"),
    page: int = Query(1, ge=1),
    page_size: int = Query(50, ge=1, le=1000),
    team: Team = Depends(get_current_team),
    service: ProjectService = Depends(get_project_service),
):
    """
    List the current team's projects ordered by due date, each with its risk flags.
    """
    return service.list_projects(
        team,
        date.today(),
        designer=designer,
        status=project_status if project_status in STATUS_VALUES else None,
        page=page,
        page_size=page_size,
    )


@projects_router.get("/{project_id}", response_model=ProjectDetailResponse)
async def get_project(
    project_id: str,
    team: Team = Depends(get_current_team),
    service: ProjectService = Depends(get_project_service),
):
    try:
        return service.get_project_detail(project_id, team, date.today())
    except ValueError as e:
        raise to_http_exception(e)


@projects_router.post("", response_model=ProjectWithRiskResponse, status_code=status.HTTP_201_CREATED)
async def create_project(
    request: ProjectCreate,
    team: Team = Depends(get_current_team),
    service: ProjectService = Depends(get_project_service),
):
    try:
        project = service.create_project(request, team)
        return service.with_risk(project, date.today())
    except ValueError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"Failed to create project: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create project"
        )


@projects_router.patch("/{project_id}", response_model=ProjectWithRiskResponse)
async def update_project(
    project_id: str,
    request: ProjectUpdate,
    team: Team = Depends(get_current_team),
    service: ProjectService = Depends(get_project_service),
):
    try:
        project = service.update_project(project_id, request, team)
        return service.with_risk(project, date.today())
    except ValueError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"Failed to update project {project_id}: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update project"
        )


@projects_router.delete("/{project_id}", response_model=DeleteResponse)
async def delete_project(
    project_id: str,
    team: Team = Depends(get_current_team),
    service: ProjectService = Depends(get_project_service),
):
    try:
        service.delete_project(project_id, team)
        return DeleteResponse(status="deleted", id=project_id)
    except ValueError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"Failed to delete project {project_id}: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete project"
        )
