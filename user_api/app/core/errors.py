"""
Error types and the JSON error envelope.

Every failure the API reports has the same shape::

    {"success": false, "message": "..."}

Business rule violations are raised from the service layer as
``UserAPIError`` subclasses and converted to responses by the handlers
registered in ``register_exception_handlers``.  Framework errors
(unknown routes, malformed path parameters) are mapped onto the same
envelope.
"""

import logging
from typing import Any, Dict

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class UserAPIError(Exception):
    """Base class for errors reported to API clients."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInputError(UserAPIError):
    """Raised when a user name is empty."""

    status_code = status.HTTP_400_BAD_REQUEST


class UserNotFoundError(UserAPIError):
    """Raised by strict updates when no user has the requested id."""

    status_code = status.HTTP_404_NOT_FOUND


def failure(message: str, status_code: int, **extra: Any) -> JSONResponse:
    content: Dict[str, Any] = {"success": False, "message": message}
    content.update(extra)
    return JSONResponse(status_code=status_code, content=content)


async def user_api_error_handler(request: Request, exc: UserAPIError) -> JSONResponse:
    return failure(exc.message, exc.status_code)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return failure(
        "Invalid request",
        status.HTTP_400_BAD_REQUEST,
        errors=jsonable_encoder(exc.errors()),
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Unknown paths and unsupported methods on known paths look the same
    # to clients.
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return failure("Not found", status.HTTP_404_NOT_FOUND)
    return failure(str(exc.detail), exc.status_code)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error envelope handlers to ``app``."""
    app.add_exception_handler(UserAPIError, user_api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
