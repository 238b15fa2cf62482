"""Shared fixtures: an application wired to the in-memory repository."""

from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from users_api.application.services.user_service import UserService
from users_api.core.config import Settings
from users_api.di.container import DIContainer
from users_api.domain.repositories.user_repository import UserRepository
from users_api.main import create_application


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Settings:
    """Settings for the in-memory backend with no static directory."""
    monkeypatch.setenv("USER_REPOSITORY", "inmemory")
    monkeypatch.setenv("SEED_ON_STARTUP", "true")
    monkeypatch.setenv("STATIC_DIRECTORY", str(tmp_path / "missing"))
    return Settings()


@pytest.fixture
def container(settings: Settings) -> DIContainer:
    return DIContainer(settings)


@pytest.fixture
def repository(container: DIContainer) -> UserRepository:
    return container.get(UserRepository)


@pytest.fixture
def service(container: DIContainer) -> UserService:
    return container.get(UserService)


@pytest.fixture
def client(settings: Settings, container: DIContainer) -> Iterator[TestClient]:
    """Test client for a started application (startup seeds ten users)."""
    app = create_application(settings, container)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def jane_payload() -> dict:
    return {
        "firstName": "Jane",
        "lastName": "Doe",
        "email": "jane.doe@example.com",
        "age": 31,
        "password": "secret",
        "role": "user",
    }
