"""
Application package initializer.

The project is split into small pieces: ``schemas`` for the Pydantic
payload models, ``services`` for the in‑memory user collection,
``api`` for the versioned routers and ``core`` for configuration,
logging and error handling.
"""

from .main import app, create_app  # noqa: F401
