"""
Blog API Backend — Post Request/Response Schemas
=================================================

A post is always returned populated: `userId` carries the author's id, names
and email, or null when the stored id matches no user.
"""

import uuid
from datetime import datetime
from typing import Any, Optional

from pydantic import ConfigDict

from blogapi.schemas.common import CamelModel


class PostWrite(CamelModel):
    """
    POST /posts and PUT /posts/{id} body; all three fields are required.

    Values are passed to the Post model as received and cast there.
    """
    title: Any = None
    content: Any = None
    user_id: Any = None


class AuthorSummary(CamelModel):
    """The projection of a User used to populate `Post.userId`."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    first_name: str
    last_name: str
    email: str


class PostResponse(CamelModel):
    id: uuid.UUID
    title: str
    content: str
    user_id: Optional[AuthorSummary] = None
    created_at: datetime
    updated_at: datetime
