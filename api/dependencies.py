from typing import Generator
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from models.planning import Team
from services.team_context import resolve_team
from services.uow import UnitOfWork
from settings.config import Settings, get_settings
from settings.database import get_db


def get_uow(db: Session = Depends(get_db)) -> Generator[UnitOfWork, None, None]:
    """
    Dependency to get Unit of Work instance.

    Args:
        db: Database session

    Yields:
        UnitOfWork instance
    """
    yield UnitOfWork(db)


def get_current_team(
    request: Request,
    uow: UnitOfWork = Depends(get_uow),
    settings: Settings = Depends(get_settings),
) -> Team:
    """
    Resolve the team the request is scoped to.

    Reads the team cookie and falls back to the first team, creating the
    default team when the database is empty.
    """
    return resolve_team(
        uow,
        request.cookies.get(settings.team_cookie_name),
        settings.default_team_name,
    )
