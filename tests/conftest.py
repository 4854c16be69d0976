"""
pytest configuration and fixtures.

Every test gets a freshly built application, so each one starts with an
empty user store and ids counting from 1.
"""

from typing import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from users_api.app.core.config import Settings
from users_api.app.main import create_app
from users_api.app.services.user_store import UserStore

AUTH_HEADERS = {"Authorization": "Bearer test-token"}


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="development", log_body_limit=0, api_prefix="")


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def store(app: FastAPI) -> UserStore:
    return app.state.user_store


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    """Client that sends a valid Authorization header."""
    with TestClient(app, headers=AUTH_HEADERS) as test_client:
        yield test_client


@pytest.fixture
def anonymous_client(app: FastAPI) -> Iterator[TestClient]:
    """Client without an Authorization header."""
    with TestClient(app) as test_client:
        yield test_client
