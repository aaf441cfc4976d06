"""
Blog API Backend — Post Route Handlers
=======================================

What:  GET/POST /posts and GET/PUT/DELETE /posts/{post_id}.
How:   Thin wrappers over PostService. Every post in a response carries its
       author under `userId` ({id, firstName, lastName, email}) or null.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends

from blogapi.deps import get_post_service
from blogapi.schemas.common import ErrorResponse, MessageResponse, ServerErrorResponse
from blogapi.schemas.post import PostResponse, PostWrite
from blogapi.services import PostService

router = APIRouter(prefix="/posts", tags=["Posts"])

SERVER_ERROR = {500: {"description": "Server error", "model": ServerErrorResponse}}
BAD_REQUEST = {400: {"description": "Missing fields", "model": ErrorResponse}}
NOT_FOUND = {404: {"description": "Post not found", "model": ErrorResponse}}


@router.get(
    "",
    response_model=List[PostResponse],
    responses={**SERVER_ERROR},
    summary="List all posts with their authors",
)
async def list_posts(service: PostService = Depends(get_post_service)) -> List[PostResponse]:
    return await service.list_posts()


@router.post(
    "",
    response_model=PostResponse,
    responses={**BAD_REQUEST, **SERVER_ERROR},
    summary="Create a post",
    description=(
        "Requires title, content and userId. The author is not checked for "
        "existence; an unknown userId reads back as null."
    ),
)
async def create_post(
    payload: Optional[PostWrite] = None,
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    return await service.create_post(payload or PostWrite())


@router.get(
    "/{post_id}",
    response_model=PostResponse,
    responses={**NOT_FOUND, **SERVER_ERROR},
    summary="Get a post by id",
)
async def get_post(
    post_id: str,
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    return await service.get_post(post_id)


@router.put(
    "/{post_id}",
    response_model=PostResponse,
    responses={**BAD_REQUEST, **NOT_FOUND, **SERVER_ERROR},
    summary="Replace a post's title, content and author",
)
async def update_post(
    post_id: str,
    payload: Optional[PostWrite] = None,
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    return await service.update_post(post_id, payload or PostWrite())


@router.delete(
    "/{post_id}",
    response_model=MessageResponse,
    responses={**NOT_FOUND, **SERVER_ERROR},
    summary="Delete a post",
)
async def delete_post(
    post_id: str,
    service: PostService = Depends(get_post_service),
) -> MessageResponse:
    return await service.delete_post(post_id)
