"""
Pytest configuration and fixtures for backend tests.
"""

import os

# Configure the application before it is imported: no server database and no
# schema creation on startup.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("CREATE_SCHEMA_ON_STARTUP", "false")
os.environ.setdefault("ENVIRONMENT", "test")

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from rest_api.main import app
from shared.infrastructure.db import create_db_engine, get_db
from shared.config.constants import (
    CIStatus,
    IncidentImpact,
    IncidentStatus,
    IncidentUrgency,
    ProblemStatus,
    RFCStatus,
)
from rest_api.models import Base, ConfigItem, Incident, Problem, RFC


# SQLite in-memory database for testing (foreign keys enforced)
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_db_engine(SQLALCHEMY_DATABASE_URL, poolclass=StaticPool)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """
    Create a fresh database session for each test.
    Uses SQLite in-memory for isolation.
    """
    # Create all tables
    Base.metadata.create_all(bind=engine)

    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        # Drop all tables after test
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """
    Create a test client with database session override.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def seed_configitem(db_session):
    """
    Create a test configuration item.

    Seed objects are detached so commits made by the API do not expire them.
    """
    item = ConfigItem(
        name="db-01",
        status=CIStatus.ACTIVE,
        created_at=datetime(2024, 1, 10, 9, 0, tzinfo=timezone.utc),
        type="database",
        owner="dba-team",
        description="Primary PostgreSQL server",
    )
    db_session.add(item)
    db_session.commit()
    db_session.refresh(item)
    db_session.expunge(item)
    return item


@pytest.fixture
def seed_incident(db_session):
    """Create a test incident."""
    incident = Incident(
        title="Checkout is down",
        status=IncidentStatus.OPEN,
        created_at=datetime(2024, 2, 1, 12, 30, tzinfo=timezone.utc),
        impact=IncidentImpact.HIGH,
        urgency=IncidentUrgency.MEDIUM,
        owner="service-desk",
        assignee="alice",
        description="Customers receive HTTP 502 on checkout",
    )
    db_session.add(incident)
    db_session.commit()
    db_session.refresh(incident)
    db_session.expunge(incident)
    return incident


@pytest.fixture
def seed_problem(db_session):
    """Create a test problem."""
    problem = Problem(
        title="Connection pool exhaustion",
        status=ProblemStatus.OPEN,
        detection_timedate=datetime(2024, 2, 2, 8, 0, tzinfo=timezone.utc),
        description="Pool runs dry under peak load",
        causes="Leaked sessions in the payment worker",
        workarounds="Restart the payment worker",
    )
    db_session.add(problem)
    db_session.commit()
    db_session.refresh(problem)
    db_session.expunge(problem)
    return problem


@pytest.fixture
def seed_rfc(db_session):
    """Create a test change request."""
    rfc = RFC(
        title="Raise pool size",
        status=RFCStatus.OPEN,
        created_at=datetime(2024, 2, 3, 10, 0, tzinfo=timezone.utc),
        requester="bob",
        description="Raise the connection pool size to 40",
    )
    db_session.add(rfc)
    db_session.commit()
    db_session.refresh(rfc)
    db_session.expunge(rfc)
    return rfc
