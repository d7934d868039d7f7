from sqlalchemy.orm import Session

from services.repositories import (
    TeamRepository,
    ProjectRepository,
    TaskRepository,
    TimeEntryRepository,
    CapacityRepository
)


class UnitOfWork:
    def __init__(self, db: Session):
        self.db = db
        self.teams = TeamRepository(db)
        self.projects = ProjectRepository(db)
        self.tasks = TaskRepository(db)
        self.time_entries = TimeEntryRepository(db)
        self.capacities = CapacityRepository(db)

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()

    def flush(self):
        self.db.flush()
