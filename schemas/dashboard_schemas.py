from pydantic import BaseModel
from typing import Optional, List
from datetime import date

from schemas.project_schemas import ProjectResponse, RiskFlagsResponse


class DesignerWorkloadResponse(BaseModel):
    designer_name: str
    capacity: float
    estimated_hours: float
    hours_remaining: float
    active_projects: List[ProjectResponse]

    class Config:
        from_attributes = True


class TeamWorkloadResponse(BaseModel):
    designers: List[DesignerWorkloadResponse]
    total_capacity: float
    total_estimated_hours: float
    total_hours_remaining: float

    class Config:
        from_attributes = True


class DesignerFocusResponse(BaseModel):
    designer_name: str
    project: Optional[ProjectResponse] = None


class FlaggedProjectResponse(BaseModel):
    project: ProjectResponse
    risk: RiskFlagsResponse


class DashboardResponse(BaseModel):
    team_id: str
    as_of: date
    workload: TeamWorkloadResponse
    focus: List[DesignerFocusResponse]
    flagged_projects: List[FlaggedProjectResponse]
