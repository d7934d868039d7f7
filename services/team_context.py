"""
Team context resolution.

There is no login yet: the selected team travels in a cookie and falls back
to the first team, which is created on demand.
"""
import logging
from typing import List, Optional

from common.db_utils import get_or_create_team
from common.exceptions import NotFoundError
from models.planning import Team
from services.uow import UnitOfWork

logger = logging.getLogger(__name__)


def resolve_team(uow: UnitOfWork, team_id: Optional[str], default_team_name: str) -> Team:
    if team_id:
        team = uow.teams.get_by_id(team_id)
        if team:
            return team
        logger.info(f"Ignoring unknown team id from cookie: {team_id}")

    team, created = get_or_create_team(uow.db, default_team_name)
    if created:
        uow.commit()
        logger.info(f"Created default team {team.id} ({team.name})")
    return team


def get_team(uow: UnitOfWork, team_id: str) -> Team:
    team = uow.teams.get_by_id(team_id)
    if not team:
        raise NotFoundError(f"Team {team_id} not found")
    return team


def list_teams(uow: UnitOfWork) -> List[Team]:
    return uow.teams.list_all()
