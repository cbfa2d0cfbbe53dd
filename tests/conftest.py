"""Shared pytest fixtures for users service tests."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from users_service.app import create_app
from users_service.config import Settings
from users_service.core.store import UserStore

AUTH_HEADERS = {"Authorization": "Bearer demo-token"}


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def store() -> UserStore:
    """A fresh store holding the two seed users."""
    return UserStore()


@pytest.fixture
def app(settings: Settings, store: UserStore) -> FastAPI:
    """A users service app backed by the ``store`` fixture."""
    return create_app(settings, store=store)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """TestClient for the ``app`` fixture, without credentials."""
    return TestClient(app)


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Headers carrying the default bearer token."""
    return dict(AUTH_HEADERS)
