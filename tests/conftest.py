"""
Pytest configuration and shared fixtures for ClarityCanvas tests.

This file provides:
- An in-memory SQLite database wired into the FastAPI app
- API client fixture
- Test data builders
"""

import pytest
from datetime import date, timedelta
from typing import Generator

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from domain.records import ProjectRecord, ProjectStatus
from models import planning  # noqa: F401
from settings.database import Base, get_db

TODAY = date(2026, 10, 19)


# ============================================================================
# Database Fixtures
# ============================================================================

@pytest.fixture
def engine():
    """Fresh in-memory database per test."""
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


# ============================================================================
# API Client Fixtures
# ============================================================================

@pytest.fixture
def client(session_factory) -> Generator[TestClient, None, None]:
    """FastAPI test client backed by the in-memory database."""
    from settings.server import clarity_app

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    clarity_app.dependency_overrides[get_db] = override_get_db
    with TestClient(clarity_app) as test_client:
        yield test_client
    clarity_app.dependency_overrides.clear()


# ============================================================================
# Test Data Fixtures
# ============================================================================

@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def make_project():
    """Build a ProjectRecord with sensible defaults relative to TODAY."""
    counter = {"n": 0}

    def _make(
        designer="Alice",
        status=ProjectStatus.IN_PROGRESS,
        due_in_days=14,
        scoped=20.0,
        worked=0.0,
        project_id=None,
    ):
        counter["n"] += 1
        return ProjectRecord(
            id=project_id or f"p{counter['n']}",
            instructional_designer=designer,
            status=status,
            due_date=TODAY + timedelta(days=due_in_days),
            estimated_scoped_hours=scoped,
            hours_worked=worked,
        )

    return _make


@pytest.fixture
def project_payload():
    """Valid create-project request body due in 3 days."""
    return {
        "title": "Product Knowledge Base",
        "client": "Product Team",
        "instructional_designer": "David Kim",
        "status": "IN_PROGRESS",
        "due_date": (date.today() + timedelta(days=3)).isoformat(),
        "estimated_scoped_hours": 25,
    }
