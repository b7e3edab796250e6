"""Shared fixtures: a fresh service and application per test."""

import pytest
from fastapi.testclient import TestClient

from user_api.app.core.config import Settings
from user_api.app.main import create_app
from user_api.app.services.user_service import UserService


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, now: int = 1_700_000_000_000):
        self.now = now

    def __call__(self) -> int:
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def service():
    return UserService()


@pytest.fixture
def settings():
    return Settings(log_level="WARNING", debug=False, log_file="", api_prefix="", strict_updates=False)


@pytest.fixture
def app(settings, service):
    return create_app(settings=settings, service=service)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
