"""
Blog API Backend — Database Handle & Session Management
========================================================

What:  The `Database` handle (async engine + session factory), the declarative
       base for ORM models, and the FastAPI session dependency.
How:   A `Database` is constructed explicitly at startup, stored on
       `app.state.database`, connected once in the lifespan handler and
       disposed on shutdown. Each request borrows one session from it; the
       session commits on success and rolls back on error.
Who:   The app factory owns the handle; route dependencies borrow sessions.

Connection Pooling:
    PostgreSQL (asyncpg): pool_size / max_overflow / pre_ping from settings,
    connections recycled hourly.
    SQLite (aiosqlite): SQLAlchemy's default pool for the dialect; the pool
    arguments above do not apply.
"""

import logging
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from blogapi.config import Settings
from blogapi.exceptions import DatabaseConnectionError

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Every model registers with this metadata, which `Database.connect()`
    uses to create missing tables.
    """
    pass


class Database:
    """
    Explicitly constructed storage handle.

    Lifecycle:
        created   → `Database(url)` or `Database.from_settings(settings)`
        connect() → verifies connectivity and creates missing tables
        session() → per-request sessions from the shared factory
        dispose() → closes every pooled connection
    """

    def __init__(
        self,
        url: str,
        *,
        pool_size: int = 10,
        max_overflow: int = 10,
        pool_pre_ping: bool = True,
        echo: bool = False,
    ):
        self.url = url
        engine_kwargs = {"echo": echo}
        if not url.startswith("sqlite"):
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_pre_ping=pool_pre_ping,
                pool_recycle=3600,
            )
        self.engine = create_async_engine(url, **engine_kwargs)

        # expire_on_commit=False: response models read attributes after the
        # dependency has committed
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(
            settings.database_url,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            echo=settings.log_level == "DEBUG",
        )

    async def connect(self) -> None:
        """
        Open the first connection and create any missing tables.

        Raises:
            DatabaseConnectionError: the backend is unreachable or rejected
            the schema. The caller is expected to abort startup.
        """
        # Models must be registered on Base.metadata before create_all
        from blogapi import models  # noqa: F401

        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except Exception as e:
            raise DatabaseConnectionError(
                message=f"Could not connect to the database: {e}",
                context={"error_type": type(e).__name__},
            ) from e

    async def ping(self) -> bool:
        """Run `SELECT 1`; False if the database cannot answer."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except Exception as e:
            logger.warning("Database ping failed: %s", str(e))
            return False
        return True

    async def dispose(self) -> None:
        """Close all pooled connections."""
        await self.engine.dispose()


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Borrows a session from the app's `Database` handle
        2. Yields it to the route (services and repositories use it)
        3. On success: commits the transaction
        4. On error: rolls back and re-raises for the exception handlers
    """
    database: Database = request.app.state.database
    async with database.session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
