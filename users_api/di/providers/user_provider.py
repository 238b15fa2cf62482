from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...application.services.user_service import UserService
from ...application.use_cases.seed_users import SeedUsersUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UserProvider:
    """User service provider - registers user-related services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register user service and the seed use case.
        Both share the repository from the container.
        """
        repository = container.get(UserRepository)
        container.register_singleton(UserService, UserService(user_repository=repository))
        container.register_singleton(SeedUsersUseCase, SeedUsersUseCase(repository))
