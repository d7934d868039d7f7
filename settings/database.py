from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from settings.config import get_settings

settings = get_settings()
DATABASE_URL = settings.resolved_database_url

connect_args = {}
if str(DATABASE_URL).startswith("sqlite"):
    # sessions are handed across FastAPI's threadpool
    connect_args["check_same_thread"] = False

engine = create_engine(DATABASE_URL, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
