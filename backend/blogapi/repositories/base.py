"""
Blog API Backend — Repository Base
===================================

What:  The storage contract shared by both collections.
How:   A repository wraps one request-scoped AsyncSession. Writes validate
       the entity first, then flush so constraint violations surface inside
       the call that caused them. Commit and rollback belong to the session
       dependency, not to the repository.

Operations:
    insert(entity)          validate → add → flush
    find_all()              every record, oldest first
    find_by_id(id)          record or None; malformed id → InvalidIdError
    update(entity, fields)  overwrite → validate → touch updatedAt → flush
    delete(id)              single DELETE statement; True if a row went away
"""

import logging
import uuid
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from blogapi.exceptions import BlogError, InvalidIdError, StorageError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


class Repository(Generic[ModelT]):
    """Generic CRUD over one mapped model with an `id` UUID primary key."""

    model: Type[ModelT]

    def __init__(self, session: AsyncSession):
        self.session = session

    def parse_id(self, value: Any) -> uuid.UUID:
        if isinstance(value, uuid.UUID):
            return value
        try:
            return uuid.UUID(str(value))
        except ValueError as e:
            raise InvalidIdError(value, model=self.model.schema_name) from e

    async def insert(self, entity: ModelT) -> ModelT:
        entity.validate()
        self.session.add(entity)
        await self._flush()
        logger.debug("Inserted %r", entity)
        return entity

    async def find_all(self) -> List[ModelT]:
        result = await self.session.execute(
            select(self.model).order_by(self.model.created_at)
        )
        return list(result.scalars().all())

    async def find_by_id(self, entity_id: Any) -> Optional[ModelT]:
        return await self.session.get(self.model, self.parse_id(entity_id))

    async def update(self, entity: ModelT, fields: Dict[str, Any]) -> ModelT:
        for name, value in fields.items():
            setattr(entity, name, value)
        entity.validate()
        entity.touch()
        await self._flush()
        logger.debug("Updated %r (%s)", entity, ", ".join(fields))
        return entity

    async def delete(self, entity_id: Any) -> bool:
        pk = self.parse_id(entity_id)
        result = await self.session.execute(
            delete(self.model).where(self.model.id == pk)
        )
        return result.rowcount > 0

    async def _flush(self) -> None:
        try:
            await self.session.flush()
        except IntegrityError as e:
            raise self.conflict_error(e) from e

    def conflict_error(self, exc: IntegrityError) -> BlogError:
        """Translate a constraint violation; subclasses map their unique keys."""
        return StorageError(
            message=str(exc.orig),
            context={"model": self.model.schema_name},
        )
