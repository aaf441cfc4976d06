"""
Blog API Backend — Shared Pydantic Schemas
===========================================

What:  Response shapes shared by both resources: messages, errors, health.

Error bodies follow two shapes:
    client errors (400, 404)   {"error": "User not found"}
    server errors (500)        {"message": "<error text>"}
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for API models: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageResponse(BaseModel):
    """Returned by the delete endpoints, e.g. {"message": "User deleted"}."""
    message: str


class ErrorResponse(BaseModel):
    """400 / 404 body."""
    error: str = Field(description="Human-readable error description")
    details: Optional[List[Any]] = Field(
        default=None,
        description="Field-level problems for malformed request bodies",
    )


class ServerErrorResponse(BaseModel):
    """500 body."""
    message: str = Field(description="Text of the underlying failure")


class HealthResponse(CamelModel):
    """GET /health payload."""
    status: str = Field(description="healthy or unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="connected or disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
