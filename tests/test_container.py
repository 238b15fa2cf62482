"""Tests for dependency container wiring and settings."""

from unittest.mock import MagicMock

import pytest

from users_api.application.services.user_service import UserService
from users_api.application.use_cases.seed_users import SeedUsersUseCase
from users_api.core.config import Settings
from users_api.di.base_container import BaseContainer
from users_api.di.container import DIContainer
from users_api.domain.repositories.user_repository import UserRepository
from users_api.infrastructure.db import mongo_connection
from users_api.infrastructure.db.in_memory_user_repository import InMemoryUserRepository
from users_api.infrastructure.db.mongo_connection import MongoClientManager
from users_api.infrastructure.db.mongo_user_repository import MongoUserRepository


def test_settings_defaults(monkeypatch):
    for name in ("PORT", "MONGO_URI", "DB_NAME", "USERS_COLLECTION", "USER_REPOSITORY", "SEED_ON_STARTUP"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.port == 3000
    assert settings.mongo_uri == "mongodb://localhost:27017"
    assert settings.mongo_database_name == "mtec"
    assert settings.users_collection == "users"
    assert settings.user_repository == "mongodb"
    assert settings.seed_on_startup is True


def test_inmemory_wiring(container: DIContainer):
    repository = container.get(UserRepository)

    assert isinstance(repository, InMemoryUserRepository)
    assert container.get(UserService) is container.get(UserService)
    assert isinstance(container.get(SeedUsersUseCase), SeedUsersUseCase)
    assert not container.has(MongoClientManager)


def test_each_container_has_its_own_store(settings: Settings):
    first = DIContainer(settings).get(UserRepository)
    second = DIContainer(settings).get(UserRepository)

    first.create({"firstName": "A", "lastName": "B", "email": "a@b.c", "age": 1})

    assert second.count() == 0


def test_mongodb_wiring(monkeypatch):
    fake_client = MagicMock()
    monkeypatch.setattr(mongo_connection, "MongoClient", MagicMock(return_value=fake_client))
    monkeypatch.setenv("USER_REPOSITORY", "mongodb")
    monkeypatch.setenv("MONGO_URI", "mongodb://db.example:27017")
    monkeypatch.setenv("DB_NAME", "testdb")
    monkeypatch.setenv("USERS_COLLECTION", "people")

    container = DIContainer(Settings())

    assert isinstance(container.get(UserRepository), MongoUserRepository)
    mongo_connection.MongoClient.assert_called_once_with("mongodb://db.example:27017")
    fake_client.__getitem__.assert_called_once_with("testdb")
    fake_client.__getitem__.return_value.__getitem__.assert_called_once_with("people")

    container.close()

    fake_client.close.assert_called_once()


def test_unknown_backend(monkeypatch):
    monkeypatch.setenv("USER_REPOSITORY", "postgres")

    with pytest.raises(ValueError, match="USER_REPOSITORY"):
        DIContainer(Settings())


def test_base_container_lookup():
    container = BaseContainer()
    marker = object()
    container.register_singleton("marker", marker)

    assert container.has("marker")
    assert container.get("marker") is marker
    with pytest.raises(LookupError):
        container.get("missing")
