from pydantic import BaseModel
from typing import List


class TeamResponse(BaseModel):
    id: str
    name: str

    class Config:
        from_attributes = True


class TeamListResponse(BaseModel):
    teams: List[TeamResponse]
    current_team_id: str


class SelectTeamRequest(BaseModel):
    team_id: str
