"""
Blog API Backend — FastAPI Application Factory
===============================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() wires middleware, exception handlers and
       routers around an explicitly constructed Database handle.
Who:   uvicorn imports `blogapi.main:app`; tests call create_app(database=...).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware:  Request ID → Access Log               │
    │                                                     │
    │  Routes:      /users  /users/{id}                   │
    │               /posts  /posts/{id}                   │
    │               /health                               │
    │                                                     │
    │  Exception Handlers:                                │
    │   MissingField/Uniqueness→400  NotFound→404         │
    │   Storage/Unknown→500          Bad body→400         │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging → connect database (create tables).
              A failed connection aborts startup and the process exits
              with a non-zero status. There is no retry.
    Shutdown: dispose the database engine.
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from blogapi import __version__
from blogapi.config import settings
from blogapi.database import Database
from blogapi.exceptions import (
    BlogError,
    DatabaseConnectionError,
    MissingFieldError,
    NotFoundError,
    StorageError,
    UniquenessError,
)
from blogapi.middleware.logging import RequestLoggingMiddleware
from blogapi.middleware.request_id import RequestIDMiddleware, request_id_var
from blogapi.routes import health, posts, users

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the whole process.

    Format: 2026-01-15T12:00:00 [INFO] blogapi.access: GET /users 200 3.1ms [a1b2c3d4] from 127.0.0.1
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Our access log replaces uvicorn's
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Connect the database on startup, dispose it on shutdown."""
    setup_logging()
    database: Database = app.state.database
    logger.info("Blog API %s starting up...", __version__)

    try:
        await database.connect()
    except DatabaseConnectionError as e:
        logger.critical("Database connection error: %s", e.message)
        await database.dispose()
        raise

    logger.info(
        "Database connected: %s",
        database.engine.url.render_as_string(hide_password=True),
    )
    logger.info("Server ready at http://%s:%d", settings.host, settings.port)

    yield

    logger.info("Blog API shutting down...")
    await database.dispose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions to responses.

    Handler table:
        RequestValidationError → 400 {"error": "Invalid request body", "details": [...]}
        MissingFieldError      → 400 {"error": msg}
        UniquenessError        → 400 {"error": msg}
        NotFoundError          → 404 {"error": msg}
        StorageError           → 500 {"message": msg}
        BlogError (other)      → 500 {"message": msg}
        Exception (fallback)   → 500 {"message": str(exc)}
    """

    @app.exception_handler(RequestValidationError)
    async def handle_bad_body(request: Request, exc: RequestValidationError):
        """Body is not valid JSON, or not a JSON object."""
        rid = request_id_var.get("")
        details = [
            {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
            for err in exc.errors()
        ]
        logger.warning("[%s] Invalid request body: %s", rid, details)
        return JSONResponse(
            status_code=400,
            content={"error": "Invalid request body", "details": details},
        )

    @app.exception_handler(MissingFieldError)
    @app.exception_handler(UniquenessError)
    async def handle_client_error(request: Request, exc: BlogError):
        rid = request_id_var.get("")
        logger.warning("[%s] %s: %s", rid, type(exc).__name__, exc.message)
        return JSONResponse(status_code=400, content={"error": exc.message})

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content={"error": exc.message})

    @app.exception_handler(StorageError)
    async def handle_storage_error(request: Request, exc: StorageError):
        """Schema violations, malformed ids and other storage rejections."""
        rid = request_id_var.get("")
        logger.error("[%s] %s: %s | Context: %s", rid, type(exc).__name__, exc.message, exc.context)
        return JSONResponse(status_code=500, content={"message": exc.message})

    @app.exception_handler(BlogError)
    async def handle_blog_error(request: Request, exc: BlogError):
        rid = request_id_var.get("")
        logger.error("[%s] %s: %s", rid, type(exc).__name__, exc.message)
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Catch-all: anything not raised on purpose by the application."""
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=exc)
        return JSONResponse(
            status_code=500,
            content={"message": str(exc) or "An unknown error occurred"},
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(database: Optional[Database] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        database: Storage handle to serve from. Built from settings when
                  omitted. The app owns its lifecycle: connected on startup,
                  disposed on shutdown.
    """
    app = FastAPI(
        title="Blog API",
        description="Users and posts over REST. Posts are returned with their author populated.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.database = database or Database.from_settings(settings)

    # Last added runs first: RequestID → Logging → routes
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(users.router)
    app.include_router(posts.router)
    app.include_router(health.router)

    return app


# uvicorn entry: `uvicorn blogapi.main:app`
app = create_app()
