import math
from datetime import date, datetime
from typing import Any, Optional, Union

from domain.records import RiskFlags, RiskThresholds, is_active

SECONDS_PER_DAY = 60 * 60 * 24

DEFAULT_THRESHOLDS = RiskThresholds()

DateLike = Union[date, datetime]


def _as_date(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def days_until_due(due_date: DateLike, today: DateLike) -> int:
    """
    Whole days from ``today`` until ``due_date``, rounded up.

    Negative when the due date has passed. Two datetimes are compared to the
    second and the fractional day count is rounded up; anything else is
    compared as calendar dates.
    """
    if isinstance(due_date, datetime) and isinstance(today, datetime):
        return math.ceil((due_date - today).total_seconds() / SECONDS_PER_DAY)
    return (_as_date(due_date) - _as_date(today)).days


def evaluate_risk(
    project: Any,
    today: DateLike,
    thresholds: Optional[RiskThresholds] = None,
) -> RiskFlags:
    """
    Derive the over-budget / at-risk flags for one project.

    Over budget depends only on hours. At risk additionally requires the
    project to be active, not yet overdue, due within
    ``thresholds.days_threshold`` days (inclusive) and to have more than
    ``thresholds.min_remaining_hours`` left. Over budget suppresses at risk.

    Args:
        project: Anything exposing status, due_date, estimated_scoped_hours
            and hours_worked.
        today: Reference date; callers pass the request date.
        thresholds: Optional override of the default 7 days / 8 hours.

    Returns:
        RiskFlags with at most one reason.
    """
    thresholds = thresholds or DEFAULT_THRESHOLDS

    scoped_hours = project.estimated_scoped_hours
    remaining_hours = scoped_hours - project.hours_worked
    is_over_budget = project.hours_worked > scoped_hours

    diff_days = days_until_due(project.due_date, today)
    active = is_active(project) and diff_days >= 0

    is_at_risk = (
        active
        and diff_days <= thresholds.days_threshold
        and remaining_hours > thresholds.min_remaining_hours
        and not is_over_budget
    )

    reason = None
    if is_over_budget:
        reason = (
            f"Hours worked ({project.hours_worked:.1f}) "
            f"exceed scoped hours ({scoped_hours:.1f})."
        )
    elif is_at_risk:
        reason = f"Due in {diff_days} day(s) with {remaining_hours:.1f} hours remaining."

    return RiskFlags(is_over_budget=is_over_budget, is_at_risk=is_at_risk, reason=reason)
