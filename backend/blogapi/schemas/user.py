"""
Blog API Backend — User Request/Response Schemas
=================================================

Request bodies declare every field optional and untyped: presence is checked
by the service so that a missing field yields the API's own 400 message, and
values are cast by the model, so `"password": 1234567` is stored as text and
an object where text is expected fails schema validation (500). Unknown keys
are ignored.

Responses never include `password`.
"""

import uuid
from datetime import datetime
from typing import Any

from pydantic import ConfigDict, Field

from blogapi.schemas.common import CamelModel


class UserCreate(CamelModel):
    """POST /users body."""
    first_name: Any = None
    last_name: Any = None
    email: Any = None
    password: Any = None
    is_active: Any = None


class UserUpdate(CamelModel):
    """PUT /users/{id} body. Only these three fields are ever written."""
    first_name: Any = None
    last_name: Any = None
    email: Any = None


class UserResponse(CamelModel):
    """A stored user as returned to clients."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID = Field(description="Generated user identifier")
    first_name: str
    last_name: str
    email: str
    is_active: bool
    created_at: datetime
    updated_at: datetime
