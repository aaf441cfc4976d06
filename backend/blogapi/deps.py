"""FastAPI dependency providers for the resource services."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from blogapi.database import get_db_session
from blogapi.repositories import PostRepository, UserRepository
from blogapi.services import PostService, UserService


def get_user_service(db: AsyncSession = Depends(get_db_session)) -> UserService:
    """UserService bound to this request's session."""
    return UserService(UserRepository(db))


def get_post_service(db: AsyncSession = Depends(get_db_session)) -> PostService:
    """PostService bound to this request's session."""
    return PostService(PostRepository(db))
