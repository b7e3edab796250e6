"""Entry point for the User API server.

Serves ``user_api.app.main:app`` with Uvicorn.  Host and port are read
from the ``HOST`` and ``PORT`` environment variables (defaults
``0.0.0.0`` and ``3000``); see ``user_api.app.core.config`` for the
other supported variables.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from user_api.app.core.config import settings
from user_api.app.main import app

# Under the package logger so the handlers from setup_logging apply.
logger = logging.getLogger("user_api.server")


async def main() -> None:
    """Start the API server and serve until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logger.info("Server is running on port %s", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
