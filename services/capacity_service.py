import logging
from typing import List

from common.exceptions import ConflictError, NotFoundError
from models.planning import DesignerCapacity, Team
from schemas.capacity_schemas import CapacityCreate, CapacityUpdate
from services.uow import UnitOfWork

logger = logging.getLogger(__name__)


class CapacityService:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    def list_capacities(self, team: Team) -> List[DesignerCapacity]:
        return self.uow.capacities.list_for_team(team.id)

    def create_capacity(self, data: CapacityCreate, team: Team) -> DesignerCapacity:
        if self.uow.capacities.get_by_name(team.id, data.designer_name):
            raise ConflictError(f'Designer "{data.designer_name}" already exists')

        capacity = DesignerCapacity(
            team_id=team.id,
            designer_name=data.designer_name,
            weekly_available_hours=data.weekly_available_hours,
        )
        self.uow.capacities.create(capacity)
        self.uow.commit()
        logger.info(f"Capacity created: designer={capacity.designer_name}, hours={capacity.weekly_available_hours}")
        return capacity

    def update_capacity(self, capacity_id: str, data: CapacityUpdate, team: Team) -> DesignerCapacity:
        capacity = self.uow.capacities.get_by_id(capacity_id, team.id)
        if not capacity:
            raise NotFoundError(f"Capacity {capacity_id} not found")
        capacity.weekly_available_hours = data.weekly_available_hours
        self.uow.flush()
        self.uow.commit()
        return capacity

    def delete_capacity(self, capacity_id: str, team: Team) -> None:
        capacity = self.uow.capacities.get_by_id(capacity_id, team.id)
        if not capacity:
            raise NotFoundError(f"Capacity {capacity_id} not found")
        self.uow.capacities.delete(capacity)
        self.uow.commit()
        logger.info(f"Capacity deleted: id={capacity_id}")
