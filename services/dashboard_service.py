"""
Dashboard composition.

Feeds the team's projects and capacities through the planning core and
shapes the result for the API. Nothing here decides risk or workload; that
lives in ``domain``.
"""
import logging
from datetime import date
from typing import Any, List, Sequence

from domain.focus import group_projects_by_designer, select_focus
from domain.records import RiskThresholds, TeamWorkloadSummary
from domain.risk import evaluate_risk
from domain.workload import aggregate_workload
from schemas.dashboard_schemas import (
    DashboardResponse,
    DesignerFocusResponse,
    FlaggedProjectResponse,
    TeamWorkloadResponse,
)
from schemas.project_schemas import ProjectResponse, RiskFlagsResponse

logger = logging.getLogger(__name__)


def build_focus_list(projects: Sequence[Any], today: date, thresholds: RiskThresholds) -> List[DesignerFocusResponse]:
    focus = []
    for designer_name, designer_projects in group_projects_by_designer(projects).items():
        project = select_focus(designer_projects, today, thresholds)
        focus.append(
            DesignerFocusResponse(
                designer_name=designer_name,
                project=ProjectResponse.model_validate(project) if project else None,
            )
        )
    return focus


def build_flagged_projects(projects: Sequence[Any], today: date, thresholds: RiskThresholds) -> List[FlaggedProjectResponse]:
    flagged = []
    for project in projects:
        flags = evaluate_risk(project, today, thresholds)
        if flags.is_at_risk or flags.is_over_budget:
            flagged.append(
                FlaggedProjectResponse(
                    project=ProjectResponse.model_validate(project),
                    risk=RiskFlagsResponse.model_validate(flags),
                )
            )
    return flagged


def build_dashboard(
    team_id: str,
    projects: Sequence[Any],
    capacities: Sequence[Any],
    today: date,
    default_capacity: float,
    thresholds: RiskThresholds,
) -> DashboardResponse:
    workload: TeamWorkloadSummary = aggregate_workload(projects, capacities, default_capacity)
    flagged = build_flagged_projects(projects, today, thresholds)

    logger.info(
        f"Dashboard built: team_id={team_id}, projects={len(projects)}, "
        f"designers={len(workload.designers)}, flagged={len(flagged)}"
    )

    return DashboardResponse(
        team_id=team_id,
        as_of=today,
        workload=TeamWorkloadResponse.model_validate(workload),
        focus=build_focus_list(projects, today, thresholds),
        flagged_projects=flagged,
    )
