"""
Blog API Backend — Application Package Initializer
===================================================

What: Marks the `blogapi` directory as a Python package.
Who:  Used by uvicorn (`blogapi.main:app`), `python -m blogapi`, and pytest.

Architecture Note:
    The backend is a thin layered stack:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │     Services (Resource Handlers)    │  ← presence checks, not-found, populate
    ├─────────────────────────────────────┤
    │   Repositories (Storage Contract)   │  ← insert / find / update / delete
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async engine, session per request
    └─────────────────────────────────────┘

    Every request flows straight down and back up this stack. Nothing is
    cached or queued in-process; all state lives in the database.
"""

__version__ = "1.0.0"
