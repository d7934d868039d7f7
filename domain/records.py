"""
Plain records consumed and produced by the planning core.

The aggregation functions only read attributes, so SQLAlchemy rows from
``models.planning`` and the dataclasses below can be passed interchangeably.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, List, Optional


class ProjectStatus(str, Enum):
    PLANNING = "PLANNING"
    IN_PROGRESS = "IN_PROGRESS"
    REVIEW = "REVIEW"
    HANDOVER = "HANDOVER"  # terminal


def is_active(project: Any) -> bool:
    """A project counts toward workload and focus until it is handed over."""
    return project.status != ProjectStatus.HANDOVER


@dataclass(frozen=True)
class ProjectRecord:
    id: str
    instructional_designer: str
    status: ProjectStatus
    due_date: date
    estimated_scoped_hours: float
    hours_worked: float = 0.0
    title: str = ""


@dataclass(frozen=True)
class CapacityRecord:
    designer_name: str
    weekly_available_hours: float


@dataclass(frozen=True)
class RiskThresholds:
    days_threshold: int = 7
    min_remaining_hours: float = 8


@dataclass(frozen=True)
class RiskFlags:
    is_over_budget: bool
    is_at_risk: bool
    reason: Optional[str] = None


@dataclass(frozen=True)
class WorkloadSummary:
    designer_name: str
    capacity: float
    estimated_hours: float
    hours_remaining: float
    active_projects: List[Any] = field(default_factory=list)


@dataclass(frozen=True)
class TeamWorkloadSummary:
    designers: List[WorkloadSummary]
    total_capacity: float
    total_estimated_hours: float
    total_hours_remaining: float
