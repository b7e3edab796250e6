"""
Pydantic models for user data and the response envelopes.

Successful responses carry ``success: true`` next to the payload;
failed ones carry ``success: false`` and a human readable ``message``.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: int = Field(..., examples=[1717171717171])
    name: str = Field(..., min_length=1, examples=["Alice"])


class SuccessResponse(BaseModel):
    """Base of every successful envelope."""

    success: bool = True


class UserListResponse(SuccessResponse):
    """Envelope returned by ``GET /``."""

    users: List[UserRead] = Field(default_factory=list)


class UserResponse(SuccessResponse):
    """Envelope returned when a single user is created or updated."""

    user: UserRead


class FailedResponse(BaseModel):
    """Envelope returned for every failed request."""

    success: bool = False
    message: str = Field(..., examples=["Invalid name"])
    # Only sent when the request itself failed validation, e.g. a path
    # id that is not a non-negative integer.
    errors: Optional[List[Dict[str, Any]]] = None
