"""
Blog API Backend — User Service
================================

What:  The five user handlers: list, create, get, update, delete.
How:   Presence checks happen here, before storage is touched. Everything the
       schema enforces (trimming, email shape, password length, uniqueness) is
       left to the model and the database constraint.
Who:   Constructed per request with a UserRepository; called by routes/users.py.

Duplicate emails:
    There is no read-before-write. The insert (or update) itself fails on
    the unique email constraint and UserRepository turns that into
    DuplicateEmailError, so two concurrent creates cannot both succeed.
"""

import logging
from typing import List

from blogapi.exceptions import NotFoundError
from blogapi.models import User
from blogapi.repositories import UserRepository
from blogapi.schemas.common import MessageResponse
from blogapi.schemas.user import UserCreate, UserResponse, UserUpdate
from blogapi.services.fields import FieldSpec, require_fields

logger = logging.getLogger(__name__)

CREATE_FIELDS: FieldSpec = [
    ("first_name", "firstName"),
    ("last_name", "lastName"),
    ("email", "email"),
    ("password", "password"),
]
UPDATE_FIELDS = CREATE_FIELDS[:3]


class UserService:
    """Business logic for the users resource."""

    def __init__(self, repository: UserRepository):
        self.repository = repository

    async def list_users(self) -> List[UserResponse]:
        users = await self.repository.find_all()
        return [UserResponse.model_validate(user) for user in users]

    async def create_user(self, payload: UserCreate) -> UserResponse:
        """
        Create a user.

        Raises:
            MissingFieldError: firstName, lastName, email or password absent (→ 400)
            DuplicateEmailError: email already taken (→ 400)
            ValidationError: schema rule broken, e.g. bad email shape (→ 500)
        """
        values = require_fields(payload, CREATE_FIELDS)
        user = User(**values)
        if payload.is_active is not None:
            user.is_active = payload.is_active

        await self.repository.insert(user)
        logger.info("User created: %s", user.id)
        return UserResponse.model_validate(user)

    async def get_user(self, user_id: str) -> UserResponse:
        user = await self.repository.find_by_id(user_id)
        if user is None:
            raise NotFoundError(resource="User", resource_id=user_id)
        return UserResponse.model_validate(user)

    async def update_user(self, user_id: str, payload: UserUpdate) -> UserResponse:
        """
        Overwrite firstName, lastName and email. Any other key in the body,
        including password and isActive, is ignored.
        """
        values = require_fields(payload, UPDATE_FIELDS)
        user = await self.repository.find_by_id(user_id)
        if user is None:
            raise NotFoundError(resource="User", resource_id=user_id)

        await self.repository.update(user, values)
        logger.info("User updated: %s", user.id)
        return UserResponse.model_validate(user)

    async def delete_user(self, user_id: str) -> MessageResponse:
        # Posts by this user are left in place
        if not await self.repository.delete(user_id):
            raise NotFoundError(resource="User", resource_id=user_id)
        logger.info("User deleted: %s", user_id)
        return MessageResponse(message="User deleted")
