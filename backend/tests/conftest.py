"""
Blog API Backend — Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session: Mock AsyncSession (no database)
    ├── database:        Connected Database on a throwaway SQLite file
    ├── db_session:      A session on that database, for repository tests
    ├── app:             FastAPI app serving from that database
    ├── test_client:     HTTPX AsyncClient talking to the app in-process
    └── user_payload / make_user: request bodies and a helper to create users
"""

import os
import tempfile
from unittest.mock import AsyncMock, MagicMock

# Point settings at SQLite BEFORE any blogapi import builds the default app
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///" + os.path.join(
    tempfile.mkdtemp(prefix="blogapi_test_"), "default.db"
)
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from blogapi.database import Database
from blogapi.main import create_app


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_x(mock_db_session):
            mock_db_session.get.return_value = user
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.get = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest_asyncio.fixture
async def database(tmp_path):
    """A connected Database on a fresh SQLite file, disposed after the test."""
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'blog.db'}")
    await db.connect()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def db_session(database):
    async with database.session_factory() as session:
        yield session


@pytest.fixture
def app(database):
    return create_app(database=database)


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient routed straight into the ASGI app.

    raise_app_exceptions=False: the catch-all 500 handler's response is
    returned to the test instead of the exception being re-raised.
    """
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def user_payload():
    return {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@example.com",
        "password": "analytical",
    }


@pytest.fixture
def make_user(test_client, user_payload):
    """Create a user through the API and return the response JSON."""

    async def _make_user(**overrides):
        body = {**user_payload, **overrides}
        response = await test_client.post("/users", json=body)
        assert response.status_code == 200, response.text
        return response.json()

    return _make_user
