"""
Tests for environment driven settings and logging setup.
"""

import logging

import pytest

from user_api.app.core.config import Settings
from user_api.app.core.logging_config import setup_logging


def test_defaults(monkeypatch):
    for name in ("PORT", "HOST", "API_PREFIX", "STRICT_UPDATES", "PROJECT_NAME", "DEBUG"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings()
    assert settings.port == 3000
    assert settings.host == "0.0.0.0"
    assert settings.api_prefix == ""
    assert settings.strict_updates is False
    assert settings.debug is False
    assert settings.project_name == "User API"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("API_PREFIX", "/users/")
    monkeypatch.setenv("STRICT_UPDATES", "yes")
    monkeypatch.setenv("DEBUG", "1")
    settings = Settings()
    assert settings.port == 8080
    assert settings.api_prefix == "/users"
    assert settings.strict_updates is True
    assert settings.debug is True


@pytest.fixture
def package_logger():
    """The ``user_api`` logger with its handlers and level restored afterwards."""
    logger = logging.getLogger("user_api")
    saved_handlers, saved_level = logger.handlers[:], logger.level
    logger.handlers.clear()
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)


def test_setup_logging_with_file(tmp_path, package_logger):
    root = logging.getLogger()
    root_handlers = root.handlers[:]
    logfile = tmp_path / "logs" / "api.log"
    settings = Settings(project_name="Demo API", log_level="info", debug=False, log_file=str(logfile))

    assert setup_logging(settings) is package_logger

    assert package_logger.level == logging.INFO
    assert [h.get_name() for h in package_logger.handlers] == ["user_api.console", "user_api.file"]
    assert root.handlers == root_handlers

    logging.getLogger("user_api.app.services.user_service").info("hello")
    package_logger.handlers[1].flush()
    line = logfile.read_text(encoding="utf-8")
    assert "[INFO] Demo API user_api.app.services.user_service: hello" in line


def test_debug_forces_debug_level(package_logger):
    setup_logging(Settings(log_level="WARNING", debug=True, log_file=""))
    assert package_logger.level == logging.DEBUG


def test_unknown_level_falls_back_to_info(package_logger):
    setup_logging(Settings(log_level="chatty", debug=False, log_file=""))
    assert package_logger.level == logging.INFO


def test_repeated_setup_does_not_duplicate_handlers(tmp_path, package_logger):
    setup_logging(Settings(log_level="INFO", debug=False, log_file=""))
    settings = Settings(log_level="ERROR", debug=False, log_file=str(tmp_path / "api.log"))
    setup_logging(settings)
    setup_logging(settings)

    names = [h.get_name() for h in package_logger.handlers]
    assert names == ["user_api.console", "user_api.file"]
    assert package_logger.level == logging.ERROR
