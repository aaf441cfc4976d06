"""
Blog API Backend — Shared Model Behaviour
==========================================

What:  Timestamps and schema validation shared by the User and Post models.
How:   `TimestampMixin` adds `created_at`/`updated_at` columns.
       `SchemaMixin.validate()` runs every field rule of the model and raises a
       single ValidationError listing all failures, before anything is
       written. Field names in messages use the API's camelCase spelling.
"""

import json
import uuid
from datetime import datetime, timezone
from typing import ClassVar, Dict

from sqlalchemy import DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import TypeDecorator

from blogapi.exceptions import ValidationError


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


TRUE_VALUES = (True, "true", 1, "1", "yes")
FALSE_VALUES = (False, "false", 0, "0", "no")


def cast_string(value):
    """
    Cast a scalar request value to text the way string fields accept it.

    Numbers and booleans become their JSON spelling (7 → "7", 7.0 → "7",
    true → "true"). Objects and arrays are returned unchanged so `validate()`
    can report them as a failed cast.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    return value


def cast_boolean(value):
    """Map the accepted spellings of true/false to bool; leave anything else."""
    if isinstance(value, (dict, list)):
        return value
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    return value


def trim(value):
    """Strip surrounding whitespace from strings; leave other values alone."""
    if isinstance(value, str):
        return value.strip()
    return value


def cast_failed(value, kind: str, path: str) -> str:
    rendered = json.dumps(value, default=str)
    return (
        f'Cast to {kind} failed for value "{rendered}" '
        f'(type {type(value).__name__}) at path "{path}"'
    )


def is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def coerce_uuid(value):
    """
    Best-effort conversion of an id to UUID.

    Unparseable values are returned unchanged so `validate()` can report them.
    """
    if value is None or isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except ValueError:
        return value


class UTCDateTime(TypeDecorator):
    """Timezone-aware datetime column that always reads back as UTC."""

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_result_value(self, value, dialect):
        # SQLite drops the offset; stored values are always UTC
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value


class TimestampMixin:
    """createdAt / updatedAt, set on insert and refreshed by repository updates."""

    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        nullable=False,
        default=utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        nullable=False,
        default=utcnow,
    )

    def touch(self) -> None:
        self.updated_at = utcnow()


class SchemaMixin:
    """
    Runs the model's field rules; one ValidationError lists every failure.

    Hook:
        schema_errors()  must be overridden by every model using the mixin.
                         Returns {camelCase field: message}, empty when valid.

    The mixin is not an `abc.ABC`: ABCMeta cannot be combined with the
    declarative metaclass of `Base`, so a model that forgets the hook fails
    with NotImplementedError on its first `validate()`.
    """

    schema_name: ClassVar[str] = "Record"

    def schema_errors(self) -> Dict[str, str]:
        raise NotImplementedError(
            f"{type(self).__name__} must implement schema_errors()"
        )

    def validate(self) -> None:
        errors = self.schema_errors()
        if errors:
            raise ValidationError(self.schema_name, errors)

    @staticmethod
    def _required(errors: Dict[str, str], field: str, value, message: str) -> bool:
        if is_blank(value):
            errors[field] = message
            return False
        return True

    @classmethod
    def _string(cls, errors: Dict[str, str], field: str, value, message: str) -> bool:
        """Required text field: present, and still text after casting."""
        if value is not None and not isinstance(value, str):
            errors[field] = cast_failed(value, "string", field)
            return False
        return cls._required(errors, field, value, message)

    @staticmethod
    def _boolean(errors: Dict[str, str], field: str, value) -> bool:
        if value is not None and not isinstance(value, bool):
            errors[field] = cast_failed(value, "Boolean", field)
            return False
        return True
