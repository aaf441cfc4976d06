"""
Blog API Backend — User Route Handlers
=======================================

What:  GET/POST /users and GET/PUT/DELETE /users/{user_id}.
How:   Each route pulls a UserService from the dependency provider and returns
       its result. Errors are raised by the service and turned into JSON by
       the handlers registered in main.py.

`user_id` is taken as a plain string. A malformed id is reported by the
storage layer as InvalidIdError (500), not as a FastAPI 422.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends

from blogapi.deps import get_user_service
from blogapi.schemas.common import ErrorResponse, MessageResponse, ServerErrorResponse
from blogapi.schemas.user import UserCreate, UserResponse, UserUpdate
from blogapi.services import UserService

router = APIRouter(prefix="/users", tags=["Users"])

SERVER_ERROR = {500: {"description": "Server error", "model": ServerErrorResponse}}
BAD_REQUEST = {400: {"description": "Missing fields or duplicate email", "model": ErrorResponse}}
NOT_FOUND = {404: {"description": "User not found", "model": ErrorResponse}}


@router.get(
    "",
    response_model=List[UserResponse],
    responses={**SERVER_ERROR},
    summary="List all users",
)
async def list_users(service: UserService = Depends(get_user_service)) -> List[UserResponse]:
    return await service.list_users()


@router.post(
    "",
    response_model=UserResponse,
    responses={**BAD_REQUEST, **SERVER_ERROR},
    summary="Create a user",
    description=(
        "Requires firstName, lastName, email and password; isActive defaults to true. "
        "Fails with 400 if the email is already registered."
    ),
)
async def create_user(
    payload: Optional[UserCreate] = None,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    return await service.create_user(payload or UserCreate())


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses={**NOT_FOUND, **SERVER_ERROR},
    summary="Get a user by id",
)
async def get_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    return await service.get_user(user_id)


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    responses={**BAD_REQUEST, **NOT_FOUND, **SERVER_ERROR},
    summary="Update a user's name and email",
    description="Overwrites firstName, lastName and email. Other fields in the body are ignored.",
)
async def update_user(
    user_id: str,
    payload: Optional[UserUpdate] = None,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    return await service.update_user(user_id, payload or UserUpdate())


@router.delete(
    "/{user_id}",
    response_model=MessageResponse,
    responses={**NOT_FOUND, **SERVER_ERROR},
    summary="Delete a user",
)
async def delete_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> MessageResponse:
    return await service.delete_user(user_id)
