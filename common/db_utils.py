from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from datetime import datetime
from typing import Tuple, Dict, Any, Type, TypeVar
from models.planning import Team

T = TypeVar('T')


def get_or_create_team(db: Session, name: str) -> Tuple[Team, bool]:
    """
    Get the first team, creating one named ``name`` if the table is empty.

    Args:
        db: Database session
        name: Name used for the team when one has to be created

    Returns:
        Tuple of (Team instance, created flag)
    """
    team = db.query(Team).order_by(Team.created_on.asc(), Team.id.asc()).first()
    if team:
        return team, False

    team = Team(name=name)
    db.add(team)
    db.flush()
    return team, True


def generic_upsert(
    db: Session,
    model_class: Type[T],
    unique_keys: Dict[str, Any],
    update_data: Dict[str, Any],
) -> Tuple[T, bool]:
    """
    Generic upsert function for any model.

    Args:
        db: Database session
        model_class: SQLAlchemy model class
        unique_keys: Dictionary of key-value pairs for unique constraint lookup
        update_data: Dictionary of fields to update/create

    Returns:
        Tuple of (model instance, created flag)
        created flag: True if created, False if updated
    """
    def _lookup():
        query = db.query(model_class)
        for key, value in unique_keys.items():
            query = query.filter(getattr(model_class, key) == value)
        return query.first()

    def _apply_update(instance):
        for key, value in update_data.items():
            if key not in unique_keys and value is not None:
                setattr(instance, key, value)
        if hasattr(instance, 'modified_on'):
            instance.modified_on = datetime.utcnow()
        db.flush()
        return instance

    instance = _lookup()
    if instance:
        return _apply_update(instance), False

    instance = model_class(**{**unique_keys, **update_data})
    db.add(instance)

    try:
        db.flush()
        return instance, True
    except IntegrityError:
        db.rollback()
        instance = _lookup()
        if instance:
            return _apply_update(instance), False
        raise
