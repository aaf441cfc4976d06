"""
Blog API Backend — Application Wiring Tests
============================================

What:  Health check, startup/shutdown lifecycle, catch-all error handling and
       configuration loading.
"""

from unittest.mock import AsyncMock

import pytest
from httpx import AsyncClient, ASGITransport
from pydantic import ValidationError as SettingsValidationError

from blogapi.config import Settings
from blogapi.database import Database
from blogapi.exceptions import DatabaseConnectionError
from blogapi.main import create_app, lifespan


class TestHealth:

    @pytest.mark.asyncio
    async def test_health_ok(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"
        assert "uptimeSeconds" in body

    @pytest.mark.asyncio
    async def test_health_database_down(self, app, test_client):
        app.state.database.ping = AsyncMock(return_value=False)

        response = await test_client.get("/health")

        assert response.status_code == 503
        assert response.json()["status"] == "unhealthy"


class TestLifecycle:

    @pytest.mark.asyncio
    async def test_connect_failure_raises(self, tmp_path):
        database = Database(f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'dir' / 'x.db'}")

        with pytest.raises(DatabaseConnectionError):
            await database.connect()
        await database.dispose()

    @pytest.mark.asyncio
    async def test_startup_aborts_when_database_unreachable(self, tmp_path):
        database = Database(f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'x.db'}")
        app = create_app(database=database)

        with pytest.raises(DatabaseConnectionError):
            async with lifespan(app):
                pass

    @pytest.mark.asyncio
    async def test_lifespan_connects_and_disposes(self, tmp_path):
        database = Database(f"sqlite+aiosqlite:///{tmp_path / 'blog.db'}")
        database.dispose = AsyncMock(wraps=database.dispose)
        app = create_app(database=database)

        async with lifespan(app):
            assert await database.ping() is True

        database.dispose.assert_awaited_once()


class TestUnexpectedErrors:

    @pytest.mark.asyncio
    async def test_unknown_exception_becomes_500_message(self, app):
        @app.get("/boom")
        async def boom():
            raise RuntimeError("storage exploded")

        transport = ASGITransport(app=app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/boom")

        assert response.status_code == 500
        assert response.json() == {"message": "storage exploded"}

    @pytest.mark.asyncio
    async def test_unknown_exception_without_text(self, app):
        @app.get("/silent")
        async def silent():
            raise RuntimeError()

        transport = ASGITransport(app=app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/silent")

        assert response.status_code == 500
        assert response.json() == {"message": "An unknown error occurred"}


class TestSettings:

    def test_port_defaults_to_8080(self, monkeypatch):
        monkeypatch.delenv("PORT", raising=False)

        assert Settings().port == 8080

    def test_port_from_environment(self, monkeypatch):
        monkeypatch.setenv("PORT", "3000")

        assert Settings().port == 3000

    def test_database_url_from_environment(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@db:5432/blog")

        assert Settings().database_url == "postgresql+asyncpg://u:p@db:5432/blog"

    def test_log_level_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_log_level_rejected(self):
        with pytest.raises(SettingsValidationError):
            Settings(log_level="chatty")
