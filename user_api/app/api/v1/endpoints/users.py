"""
User endpoints for API v1.

List, create, update and delete users held in memory.  Request bodies
are form encoded (``multipart/form-data`` or
``application/x-www-form-urlencoded``) with a single ``name`` field;
responses use the ``success`` envelopes from ``schemas.user``.

A missing ``name`` is treated as an empty string and rejected by the
service with ``400 Invalid name``.  Path ids must be non‑negative
integers; anything else fails request validation before the service is
called.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, Form, Path, Request, status

from user_api.app.schemas.user import FailedResponse, UserListResponse, UserResponse
from user_api.app.services.user_service import UserService

router = APIRouter()


def get_user_service(request: Request) -> UserService:
    """Return the ``UserService`` owned by the running application."""
    return request.app.state.user_service


@router.get(
    "/",
    response_model=UserListResponse,
    description="Get all users",
)
async def list_users(service: UserService = Depends(get_user_service)) -> UserListResponse:
    """Return every user in insertion order."""
    return UserListResponse(users=service.list_users())


@router.post(
    "/",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    description="Create new user",
    responses={
        status.HTTP_201_CREATED: {"description": "New user created successfully"},
        status.HTTP_400_BAD_REQUEST: {"model": FailedResponse, "description": "Name not valid"},
    },
)
async def create_user(
    name: str = Form(""),
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    user = service.create_user(name)
    return UserResponse(user=user)


@router.put(
    "/{id}",
    response_model=UserResponse,
    description="Update user",
    responses={
        status.HTTP_200_OK: {"description": "User updated successfully"},
        status.HTTP_400_BAD_REQUEST: {"model": FailedResponse, "description": "Invalid name or malformed id"},
        status.HTTP_404_NOT_FOUND: {
            "model": FailedResponse,
            "description": "User not found (only when strict updates are enabled)",
        },
    },
)
async def update_user(
    id: int = Path(..., ge=0),
    name: str = Form(""),
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Rename a user.

    Unknown ids are echoed back as if the update had applied, unless
    the service runs with strict updates.
    """
    user = service.update_user(id, name)
    return UserResponse(user=user)


@router.delete(
    "/{id}",
    responses={
        status.HTTP_200_OK: {"description": "User deleted successfully"},
        status.HTTP_400_BAD_REQUEST: {"model": FailedResponse, "description": "Malformed id"},
    },
)
async def delete_user(
    id: int = Path(..., ge=0),
    service: UserService = Depends(get_user_service),
) -> Dict[str, Any]:
    service.delete_user(id)
    return {}
