"""
Logging setup for the User API.

Log records of the ``user_api`` package go to a console handler and,
when ``settings.log_file`` is set, to a file as well.  Only the package
logger is configured, so the server (uvicorn) and the host application
keep control of the root logger; records still propagate to it.

Handlers are named, so calling ``setup_logging`` again (every
``create_app`` call does) only adjusts the level and adds a file
handler that is not attached yet.
"""

import logging
from pathlib import Path

from .config import Settings

LOGGER_NAME = "user_api"
CONSOLE_HANDLER = "user_api.console"
FILE_HANDLER = "user_api.file"

LOG_FORMAT = "%(asctime)s [%(levelname)s] {project} %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _level(settings: Settings) -> int:
    if settings.debug:
        return logging.DEBUG
    return getattr(logging, settings.log_level.upper(), logging.INFO)


def setup_logging(settings: Settings) -> logging.Logger:
    """Configure and return the ``user_api`` package logger.

    ``DEBUG`` mode forces the ``DEBUG`` level, otherwise
    ``settings.log_level`` is used (unknown names fall back to
    ``INFO``).  Messages are prefixed with ``settings.project_name``.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(_level(settings))

    formatter = logging.Formatter(
        fmt=LOG_FORMAT.format(project=settings.project_name),
        datefmt=DATE_FORMAT,
    )
    attached = {handler.get_name() for handler in logger.handlers}

    if CONSOLE_HANDLER not in attached:
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if settings.log_file and FILE_HANDLER not in attached:
        log_path = Path(settings.log_file).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.set_name(FILE_HANDLER)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
