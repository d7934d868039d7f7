from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.dependencies import get_uow, get_current_team
from common.exceptions import to_http_exception
from models.planning import Team
from schemas.team_schemas import TeamListResponse, TeamResponse, SelectTeamRequest
from services.team_context import get_team, list_teams
from services.uow import UnitOfWork
from settings.config import Settings, get_settings

teams_router = APIRouter(prefix="/teams", tags=["Teams"])


@teams_router.get("", response_model=TeamListResponse)
async def get_teams(
    team: Team = Depends(get_current_team),
    uow: UnitOfWork = Depends(get_uow),
):
    return TeamListResponse(
        teams=[TeamResponse.model_validate(t) for t in list_teams(uow)],
        current_team_id=team.id,
    )


@teams_router.post("/select", response_model=TeamResponse)
async def select_team(
    request: SelectTeamRequest,
    uow: UnitOfWork = Depends(get_uow),
    settings: Settings = Depends(get_settings),
):
    """
    Remember the selected team in a cookie for subsequent requests.
    """
    try:
        team = get_team(uow, request.team_id)
    except ValueError as e:
        raise to_http_exception(e)

    response = JSONResponse(content=TeamResponse.model_validate(team).model_dump())
    response.set_cookie(
        key=settings.team_cookie_name,
        value=team.id,
        httponly=True,
        samesite="lax",
        secure=settings.is_production,
    )
    return response
