import logging

from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_uow, get_current_team
from common.exceptions import to_http_exception
from models.planning import Team
from schemas.capacity_schemas import CapacityCreate, CapacityUpdate, CapacityResponse, CapacityListResponse
from schemas.project_schemas import DeleteResponse
from services.capacity_service import CapacityService
from services.uow import UnitOfWork

logger = logging.getLogger(__name__)

capacities_router = APIRouter(prefix="/capacities", tags=["Capacity"])


@capacities_router.get("", response_model=CapacityListResponse)
async def list_capacities(
    team: Team = Depends(get_current_team),
    uow: UnitOfWork = Depends(get_uow),
):
    try:
        capacities = CapacityService(uow).list_capacities(team)
        return CapacityListResponse(
            capacities=[CapacityResponse.model_validate(c) for c in capacities],
            total_count=len(capacities),
        )
    except Exception as e:
        logger.error(f"Failed to list capacities: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list capacities"
        )


@capacities_router.post("", response_model=CapacityResponse, status_code=status.HTTP_201_CREATED)
async def create_capacity(
    request: CapacityCreate,
    team: Team = Depends(get_current_team),
    uow: UnitOfWork = Depends(get_uow),
):
    try:
        return CapacityService(uow).create_capacity(request, team)
    except ValueError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"Failed to create capacity: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create capacity"
        )


@capacities_router.patch("/{capacity_id}", response_model=CapacityResponse)
async def update_capacity(
    capacity_id: str,
    request: CapacityUpdate,
    team: Team = Depends(get_current_team),
    uow: UnitOfWork = Depends(get_uow),
):
    try:
        return CapacityService(uow).update_capacity(capacity_id, request, team)
    except ValueError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"Failed to update capacity {capacity_id}: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update capacity"
        )


@capacities_router.delete("/{capacity_id}", response_model=DeleteResponse)
async def delete_capacity(
    capacity_id: str,
    team: Team = Depends(get_current_team),
    uow: UnitOfWork = Depends(get_uow),
):
    try:
        CapacityService(uow).delete_capacity(capacity_id, team)
        return DeleteResponse(status="deleted", id=capacity_id)
    except ValueError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"Failed to delete capacity {capacity_id}: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete capacity"
        )
