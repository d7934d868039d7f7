from pydantic import BaseModel, Field, field_validator
from typing import List


class CapacityCreate(BaseModel):
    designer_name: str = Field(..., min_length=1, max_length=200)
    weekly_available_hours: float = Field(..., ge=0, le=168, description="Cannot exceed 168 hours per week")

    @field_validator('designer_name')
    @classmethod
    def strip_designer_name(cls, v):
        v = v.strip()
        if not v:
            raise ValueError('Designer name is required')
        return v


class CapacityUpdate(BaseModel):
    weekly_available_hours: float = Field(..., ge=0, le=168, description="Cannot exceed 168 hours per week")


class CapacityResponse(BaseModel):
    id: str
    team_id: str
    designer_name: str
    weekly_available_hours: float

    class Config:
        from_attributes = True


class CapacityListResponse(BaseModel):
    capacities: List[CapacityResponse]
    total_count: int
