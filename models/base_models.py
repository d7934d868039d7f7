import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, func
from settings.database import Base


def generate_id() -> str:
    return str(uuid.uuid4())


class BaseModel(Base):
    __abstract__ = True

    created_by = Column(String(255), nullable=True)
    modified_by = Column(String(255), nullable=True)
    created_on = Column(DateTime, server_default=func.now(), nullable=False)
    modified_on = Column(DateTime, server_default=func.now(), onupdate=datetime.utcnow, nullable=False)
