from domain.records import (
    CapacityRecord,
    ProjectRecord,
    ProjectStatus,
    RiskFlags,
    RiskThresholds,
    TeamWorkloadSummary,
    WorkloadSummary,
    is_active,
)
from domain.risk import days_until_due, evaluate_risk
from domain.workload import DEFAULT_CAPACITY_HOURS, aggregate_workload
from domain.focus import group_projects_by_designer, score_project, select_focus

__all__ = [
    "CapacityRecord",
    "ProjectRecord",
    "ProjectStatus",
    "RiskFlags",
    "RiskThresholds",
    "TeamWorkloadSummary",
    "WorkloadSummary",
    "is_active",
    "days_until_due",
    "evaluate_risk",
    "DEFAULT_CAPACITY_HOURS",
    "aggregate_workload",
    "group_projects_by_designer",
    "score_project",
    "select_focus",
]
