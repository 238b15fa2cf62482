from typing import TYPE_CHECKING
from ...core.config import Settings
from ...infrastructure.db.mongo_connection import MongoClientManager

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "BaseContainer", settings: Settings) -> None:
        """
        Register the MongoDB client manager when the MongoDB backend is selected.
        The in-memory backend needs no connection.
        """
        if settings.user_repository != "mongodb":
            return

        container.register_singleton(
            MongoClientManager,
            MongoClientManager(settings.mongo_uri, settings.mongo_database_name),
        )
