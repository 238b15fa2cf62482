from typing import TYPE_CHECKING
from ...core.config import Settings
from ...domain.repositories.user_repository import UserRepository
from ...infrastructure.db.in_memory_user_repository import InMemoryUserRepository
from ...infrastructure.db.mongo_connection import MongoClientManager
from ...infrastructure.db.mongo_user_repository import MongoUserRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer", settings: Settings) -> None:
        """
        Register the user repository selected by USER_REPOSITORY.

        Raises:
            ValueError: If the backend name is unknown
        """
        backend = settings.user_repository

        if backend == "mongodb":
            repository: UserRepository = MongoUserRepository(
                container.get(MongoClientManager),
                collection_name=settings.users_collection,
            )
        elif backend == "inmemory":
            repository = InMemoryUserRepository()
        else:
            raise ValueError(
                f"Invalid USER_REPOSITORY value: {backend}. "
                "Expected 'mongodb' or 'inmemory'"
            )

        container.register_singleton(UserRepository, repository)
