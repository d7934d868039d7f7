from typing import Any, Dict, Iterable, List, Optional

from domain.records import RiskThresholds, is_active
from domain.risk import DateLike, days_until_due, evaluate_risk

AT_RISK_WEIGHT = 100
OVER_BUDGET_WEIGHT = 50
URGENCY_WINDOW_DAYS = 30


def score_project(
    project: Any,
    today: DateLike,
    thresholds: Optional[RiskThresholds] = None,
) -> int:
    """Urgency score used to rank a designer's projects. Overdue projects score above the window."""
    flags = evaluate_risk(project, today, thresholds)
    score = 0
    if flags.is_at_risk:
        score += AT_RISK_WEIGHT
    if flags.is_over_budget:
        score += OVER_BUDGET_WEIGHT
    score += max(0, URGENCY_WINDOW_DAYS - days_until_due(project.due_date, today))
    return score


def select_focus(
    projects_for_designer: Iterable[Any],
    today: DateLike,
    thresholds: Optional[RiskThresholds] = None,
) -> Optional[Any]:
    """
    Pick the single project a designer should work on next.

    The caller is expected to pass one designer's projects; no grouping
    happens here. Handed-over projects are ignored. The highest score wins
    and the earliest project in input order wins a tie.
    """
    best = None
    best_score = None
    for project in projects_for_designer:
        if not is_active(project):
            continue
        score = score_project(project, today, thresholds)
        if best_score is None or score > best_score:
            best, best_score = project, score
    return best


def group_projects_by_designer(projects: Iterable[Any]) -> Dict[str, List[Any]]:
    grouped: Dict[str, List[Any]] = {}
    for project in projects:
        grouped.setdefault(project.instructional_designer, []).append(project)
    return grouped
