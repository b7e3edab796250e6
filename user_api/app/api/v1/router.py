"""
Top‑level router for version 1 of the API.

The user routes are the whole surface of this version.  The router is
included by ``create_app`` under ``settings.api_prefix``, which is the
service root unless configured otherwise.

Every client error the API sends uses the ``FailedResponse`` envelope,
including request validation failures, which are reported as 400
rather than FastAPI's default 422.  Declaring the ``4XX`` range here
documents that envelope on every route and keeps FastAPI from adding
its own ``422 HTTPValidationError`` entry to the OpenAPI document.
"""

from fastapi import APIRouter

from user_api.app.schemas.user import FailedResponse

from .endpoints import users

router = APIRouter()

router.include_router(
    users.router,
    tags=["user"],
    responses={"4XX": {"model": FailedResponse, "description": "Request rejected"}},
)
