"""
Blog API Backend — User SQLAlchemy Model
=========================================

What:  ORM model for the `users` table.
Who:   Written by UserRepository; read by UserRepository and the Post
       populate step.

Schema rules (checked by `validate()` before every write):
    firstName  required, trimmed
    lastName   required, trimmed
    email      required, trimmed, ^\\S+@\\S+\\.\\S+$, unique (database constraint)
    password   required, at least 6 characters, never serialized
    isActive   defaults to true; also accepts "true"/"false", 1/0, "yes"/"no"

Numbers and booleans sent for text fields are stored as text. Objects and
arrays fail the cast and are reported by `validate()`.
"""

import re
import uuid
from typing import ClassVar, Dict

from sqlalchemy import Boolean, String, Uuid, true
from sqlalchemy.orm import Mapped, mapped_column, validates

from blogapi.database import Base
from blogapi.models.base import SchemaMixin, TimestampMixin, cast_boolean, cast_string, trim

EMAIL_PATTERN = re.compile(r"^\S+@\S+\.\S+$")
PASSWORD_MIN_LENGTH = 6


class User(SchemaMixin, TimestampMixin, Base):
    """A blog author."""

    __tablename__ = "users"
    schema_name: ClassVar[str] = "User"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)

    # unique=True is what makes duplicate detection atomic
    email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True, index=True)

    # Stored as given; hashing is out of scope
    password: Mapped[str] = mapped_column(String(255), nullable=False)

    is_active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        server_default=true(),
    )

    @validates("first_name", "last_name", "email")
    def _trim(self, key, value):
        return trim(cast_string(value))

    @validates("password")
    def _cast_password(self, key, value):
        return cast_string(value)

    @validates("is_active")
    def _cast_is_active(self, key, value):
        return cast_boolean(value)

    def schema_errors(self) -> Dict[str, str]:
        errors: Dict[str, str] = {}
        self._string(errors, "firstName", self.first_name, "First name is required")
        self._string(errors, "lastName", self.last_name, "Last name is required")
        if self._string(errors, "email", self.email, "Email is required"):
            if not EMAIL_PATTERN.match(self.email):
                errors["email"] = "Email is not valid"
        if self._string(errors, "password", self.password, "Password is required"):
            if len(self.password) < PASSWORD_MIN_LENGTH:
                errors["password"] = (
                    f"Password must be at least {PASSWORD_MIN_LENGTH} characters long"
                )
        self._boolean(errors, "isActive", self.is_active)
        return errors

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}')>"
