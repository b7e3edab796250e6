"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all: it listens on port 3000
and serves the user routes from the root path.
"""

import os
from dataclasses import dataclass, field


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "User API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "v1"))
    debug: bool = field(default_factory=lambda: _env_flag("DEBUG"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    # Optional path of a log file.  Leave empty to log to the console only.
    log_file: str = field(default_factory=lambda: os.getenv("LOG_FILE", ""))

    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "3000")))

    # Prefix the user routes are mounted under.  Empty means the routes
    # live at the service root (``GET /``, ``PUT /{id}`` and so on).
    api_prefix: str = field(default_factory=lambda: os.getenv("API_PREFIX", "").rstrip("/"))

    # When enabled, updating a user id that is not in the collection
    # returns 404 instead of echoing the payload back.
    strict_updates: bool = field(default_factory=lambda: _env_flag("STRICT_UPDATES"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module; tests construct their
# own ``Settings`` instead.
settings = Settings()
