"""
Blog API Backend — Post SQLAlchemy Model
=========================================

What:  ORM model for the `posts` table.

`user_id` holds the author's id but carries no foreign key: a post may point
at a user that does not exist (or no longer exists), and reads then show the
author as null. Deleting a user leaves their posts in place.
"""

import uuid
from typing import ClassVar, Dict

from sqlalchemy import Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, validates

from blogapi.database import Base
from blogapi.models.base import SchemaMixin, TimestampMixin, cast_string, coerce_uuid, trim


class Post(SchemaMixin, TimestampMixin, Base):
    """A blog post referencing its author by id."""

    __tablename__ = "posts"
    schema_name: ClassVar[str] = "Post"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)

    __table_args__ = (
        Index("idx_posts_user_id", "user_id"),
    )

    @validates("title", "content")
    def _trim(self, key, value):
        return trim(cast_string(value))

    @validates("user_id")
    def _cast_user_id(self, key, value):
        return coerce_uuid(value)

    def schema_errors(self) -> Dict[str, str]:
        errors: Dict[str, str] = {}
        self._string(errors, "title", self.title, "Title is required")
        self._string(errors, "content", self.content, "Content is required")
        if self._required(errors, "userId", self.user_id, "User ID is required"):
            if not isinstance(self.user_id, uuid.UUID):
                errors["userId"] = f'Cast to id failed for value "{self.user_id}"'
        return errors

    def __repr__(self) -> str:
        return f"<Post(id={self.id}, user_id={self.user_id})>"
