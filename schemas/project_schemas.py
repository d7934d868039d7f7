from pydantic import BaseModel, Field, field_validator
from typing import Optional, List, Literal
from datetime import date, datetime

from domain.records import ProjectStatus

Priority = Literal["A", "B", "C"]


class RiskFlagsResponse(BaseModel):
    is_over_budget: bool
    is_at_risk: bool
    reason: Optional[str] = None

    class Config:
        from_attributes = True


class ProjectCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    client: str = Field(..., min_length=1, max_length=200)
    instructional_designer: str = Field(..., min_length=1, max_length=200)
    status: ProjectStatus = ProjectStatus.PLANNING
    priority: Optional[Priority] = None
    due_date: date
    early_reminder_date: Optional[date] = None
    estimated_scoped_hours: float = Field(..., ge=0.5)
    media_budget: Optional[str] = Field(None, max_length=500)
    notes: Optional[str] = None

    @field_validator('title', 'client', 'instructional_designer')
    @classmethod
    def strip_names(cls, v):
        v = v.strip()
        if not v:
            raise ValueError('must not be blank')
        return v


class ProjectUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    client: Optional[str] = Field(None, min_length=1, max_length=200)
    instructional_designer: Optional[str] = Field(None, min_length=1, max_length=200)
    status: Optional[ProjectStatus] = None
    priority: Optional[Priority] = None
    due_date: Optional[date] = None
    early_reminder_date: Optional[date] = None
    estimated_scoped_hours: Optional[float] = Field(None, ge=0.5)
    hours_worked: Optional[float] = Field(None, ge=0)
    media_budget: Optional[str] = Field(None, max_length=500)
    notes: Optional[str] = None


class TaskResponse(BaseModel):
    id: str
    project_id: str
    name: str
    estimated_hours: Optional[float] = None
    completed: bool

    class Config:
        from_attributes = True


class TimeEntryResponse(BaseModel):
    id: str
    project_id: str
    designer_name: str
    hours: float
    date: datetime
    description: Optional[str] = None
    is_timer_entry: bool
    timer_started_at: Optional[datetime] = None
    timer_ended_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ProjectResponse(BaseModel):
    id: str
    team_id: str
    title: str
    client: str
    instructional_designer: str
    status: ProjectStatus
    priority: Optional[str] = None
    due_date: date
    early_reminder_date: Optional[date] = None
    estimated_scoped_hours: float
    hours_worked: float
    media_budget: Optional[str] = None
    notes: Optional[str] = None
    created_by: Optional[str] = None

    class Config:
        from_attributes = True


class ProjectWithRiskResponse(ProjectResponse):
    risk: RiskFlagsResponse


class ProjectDetailResponse(ProjectWithRiskResponse):
    tasks: List[TaskResponse] = []
    time_entries: List[TimeEntryResponse] = []


class PaginatedProjectResponse(BaseModel):
    projects: List[ProjectWithRiskResponse]
    total_count: int
    page: int
    size: int
    total_pages: int


class DeleteResponse(BaseModel):
    status: str
    id: str


class TaskCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=500)
    estimated_hours: Optional[float] = Field(None, ge=0)


class TaskUpdate(BaseModel):
    completed: bool


class TimeEntryCreate(BaseModel):
    designer_name: str = Field(..., min_length=1, max_length=200)
    hours: float = Field(..., ge=0.1)
    date: date
    description: Optional[str] = None


class TimerStartRequest(BaseModel):
    designer_name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
