"""Shared fixtures: an in-memory SQLite database behind the real application."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, text
from sqlalchemy.pool import StaticPool

from app import models  # noqa: F401 - registers the table on Base
from app.database import Base
from app.main import create_app


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def client(engine):
    app = create_app(engine=engine)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def schedule_payload():
    return {
        "SCHEDULER_TYPE": "daily",
        "SCHEDULER_DETAILS": "d",
        "NUMBER_OF_DAYS": 3,
        "STATUS": "active",
        "VENDOR_ID": "V1",
    }


@pytest.fixture
def create_schedule(client, schedule_payload):
    def _create(**overrides):
        r = client.post("/api/schedules", json={**schedule_payload, **overrides})
        assert r.status_code == 201
        return r.json()["id"]

    return _create


def fetch_row(engine, schedule_id):
    """Read a schedule straight from the table, bypassing the API"""
    with engine.connect() as conn:
        row = conn.execute(
            text("SELECT * FROM SMP_USER_MASTER_SCHEDULES WHERE USER_SCHD_ID = :id"),
            {"id": schedule_id},
        ).mappings().first()
    return dict(row) if row else None
