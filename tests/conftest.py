"""Shared test fixtures and configuration for Swift Flow backend tests."""
import os

# Settings are read at import time, so configure the environment first
os.environ["APP_ENV"] = "test"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"

import pytest
from decimal import Decimal
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from app.database import Base, get_db
from app.data.users.models import User  # noqa: F401  (registers the users table)
from app.currency.provider import RateTable
from app.main import app
from app.middleware import limiter


REGISTRATION = {
    "name": "Ada Lovelace",
    "email": "Ada@SwiftFlow.io",
    "password": "analytical1",
    "age": 36,
    "gender": "female",
    "country": "United Kingdom",
}


@pytest.fixture
def db_url(tmp_path):
    """A fresh SQLite file with the schema created."""
    path = tmp_path / "swift_flow_test.db"
    sync_engine = create_engine(f"sqlite:///{path}")
    Base.metadata.create_all(sync_engine)
    sync_engine.dispose()
    return f"sqlite+aiosqlite:///{path}"


@pytest.fixture
def client(db_url):
    """TestClient wired to the per-test database."""
    engine = create_async_engine(db_url, poolclass=NullPool)
    session_factory = async_sessionmaker(engine, expire_on_commit=False)

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    limiter.reset()

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def registration():
    """A valid registration payload."""
    return dict(REGISTRATION)


@pytest.fixture
def registered(client, registration):
    """Register the default user and return the auth response body."""
    response = client.post("/api/auth/register", json=registration)
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
def auth_headers(registered):
    return {"Authorization": f"Bearer {registered['token']}"}


@pytest.fixture
def usd_table():
    """A USD rate table as the provider would return it."""
    return RateTable(
        base="USD",
        date="2026-10-17",
        rates={
            "USD": Decimal("1"),
            "EUR": Decimal("0.9123456"),
            "GBP": Decimal("0.79"),
            "JPY": Decimal("149.52"),
        },
    )
