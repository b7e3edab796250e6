"""
Main entrypoint for the User API.

This module assembles the FastAPI application, sets up logging,
registers the error envelope handlers and includes the versioned
router.  The OpenAPI document is served at ``/doc`` and the Swagger UI
explorer at ``/ui``; both are derived from the same route declarations
and Pydantic models that validate requests.

The ``create_app`` function builds and configures the app, which is
then instantiated at module import time as ``app``, e.g.::

    uvicorn user_api.app.main:app --port 3000
"""

from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .services.user_service import UserService


def create_app(
    settings: Optional[Settings] = None,
    service: Optional[UserService] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module level settings
        read from the environment.
    service : Optional[UserService]
        User store the handlers operate on.  A fresh, empty service is
        created when omitted, so every app owns its own collection.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so the modules below can
    # safely log messages.
    setup_logging(settings)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        openapi_url="/doc",
        docs_url="/ui",
        redoc_url=None,
    )
    app.state.settings = settings
    if service is None:
        service = UserService(strict_updates=settings.strict_updates)
    app.state.user_service = service

    register_exception_handlers(app)
    app.include_router(v1_router, prefix=settings.api_prefix)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
