import logging
from datetime import date, datetime

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import Response

from api.dependencies import get_uow, get_current_team
from domain.workload import aggregate_workload
from models.planning import Team
from schemas.dashboard_schemas import DashboardResponse
from services.dashboard_service import build_dashboard
from services.export_service import build_report_csv, report_filename
from services.uow import UnitOfWork
from settings.config import Settings, get_settings

logger = logging.getLogger(__name__)

dashboard_router = APIRouter(tags=["Dashboard"])


@dashboard_router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard(
    team: Team = Depends(get_current_team),
    uow: UnitOfWork = Depends(get_uow),
    settings: Settings = Depends(get_settings),
):
    """
    Team workload, each designer's focus project and the projects flagged
    at risk or over budget, computed fresh from current data.
    """
    try:
        projects = uow.projects.list_for_team(team.id)
        capacities = uow.capacities.list_for_team(team.id)
        return build_dashboard(
            team.id,
            projects,
            capacities,
            today=date.today(),
            default_capacity=settings.default_capacity_hours,
            thresholds=settings.risk_thresholds,
        )
    except Exception as e:
        logger.error(f"Failed to build dashboard for team {team.id}: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to build dashboard"
        )


@dashboard_router.get("/export/report.csv")
async def export_report(
    team: Team = Depends(get_current_team),
    uow: UnitOfWork = Depends(get_uow),
    settings: Settings = Depends(get_settings),
):
    try:
        projects = uow.projects.list_for_team(team.id)
        capacities = uow.capacities.list_for_team(team.id)
        workload = aggregate_workload(projects, capacities, settings.default_capacity_hours)

        generated_at = datetime.now()
        content = build_report_csv(projects, workload, generated_at)
    except Exception as e:
        logger.error(f"Failed to export report for team {team.id}: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to export report"
        )

    return Response(
        content=content,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{report_filename(generated_at)}"'},
    )
