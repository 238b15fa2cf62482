# Local application imports
from typing import Optional

from ..core.config import Settings, get_settings
from ..infrastructure.db.mongo_connection import MongoClientManager
from .base_container import BaseContainer
from .providers import (
    DatabaseProvider,
    RepositoryProvider,
    UserProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Database connections (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Services (UserProvider) - depend on repositories

    The container is built explicitly from Settings and handed to the
    application; there is no process-wide instance.
    """

    def __init__(self, settings: Settings) -> None:
        super().__init__()
        self.settings = settings
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → services
        """
        DatabaseProvider.register(self, self.settings)
        RepositoryProvider.register(self, self.settings)
        UserProvider.register(self)

    def close(self) -> None:
        """Release database connections."""
        if self.has(MongoClientManager):
            self.get(MongoClientManager).close()


def build_container(settings: Optional[Settings] = None) -> DIContainer:
    """Build a container from the given (or environment) settings."""
    if settings is None:
        settings = get_settings()
    return DIContainer(settings)
