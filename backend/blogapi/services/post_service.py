"""
Blog API Backend — Post Service
================================

What:  The five post handlers: list, create, get, update, delete.
How:   Same shape as UserService. Every post that leaves this service has its
       `userId` populated with the author's projection, or null.
Who:   Constructed per request with a PostRepository; called by routes/posts.py.

The author id is never checked for existence on write. A post pointing at a
missing user is stored as-is and reads back with `userId: null`.
"""

import logging
from typing import List, Optional

from sqlalchemy import Row

from blogapi.exceptions import NotFoundError
from blogapi.models import Post
from blogapi.repositories import PostRepository
from blogapi.schemas.common import MessageResponse
from blogapi.schemas.post import AuthorSummary, PostResponse, PostWrite
from blogapi.services.fields import FieldSpec, require_fields

logger = logging.getLogger(__name__)

WRITE_FIELDS: FieldSpec = [
    ("title", "title"),
    ("content", "content"),
    ("user_id", "userId"),
]


def to_response(post: Post, author: Optional[Row]) -> PostResponse:
    return PostResponse(
        id=post.id,
        title=post.title,
        content=post.content,
        user_id=AuthorSummary.model_validate(author) if author is not None else None,
        created_at=post.created_at,
        updated_at=post.updated_at,
    )


class PostService:
    """Business logic for the posts resource."""

    def __init__(self, repository: PostRepository):
        self.repository = repository

    async def _populated(self, post: Post) -> PostResponse:
        [(post, author)] = await self.repository.populate([post])
        return to_response(post, author)

    async def list_posts(self) -> List[PostResponse]:
        populated = await self.repository.populate(await self.repository.find_all())
        return [to_response(post, author) for post, author in populated]

    async def create_post(self, payload: PostWrite) -> PostResponse:
        """
        Raises:
            MissingFieldError: title, content or userId absent (→ 400)
            ValidationError: blank after trimming, or malformed userId (→ 500)
        """
        values = require_fields(payload, WRITE_FIELDS)
        post = Post(**values)
        await self.repository.insert(post)
        logger.info("Post created: %s (author %s)", post.id, post.user_id)
        return await self._populated(post)

    async def get_post(self, post_id: str) -> PostResponse:
        post = await self.repository.find_by_id(post_id)
        if post is None:
            raise NotFoundError(resource="Post", resource_id=post_id)
        return await self._populated(post)

    async def update_post(self, post_id: str, payload: PostWrite) -> PostResponse:
        values = require_fields(payload, WRITE_FIELDS)
        post = await self.repository.find_by_id(post_id)
        if post is None:
            raise NotFoundError(resource="Post", resource_id=post_id)

        await self.repository.update(post, values)
        logger.info("Post updated: %s", post.id)
        return await self._populated(post)

    async def delete_post(self, post_id: str) -> MessageResponse:
        if not await self.repository.delete(post_id):
            raise NotFoundError(resource="Post", resource_id=post_id)
        logger.info("Post deleted: %s", post_id)
        return MessageResponse(message="Post deleted")
