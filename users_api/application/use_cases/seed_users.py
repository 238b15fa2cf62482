"""
Seed Users Use Case
===================

Inserts the default user set when the collection is empty.
"""
import logging
from typing import Any, Dict, List

from users_api.domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


DEFAULT_USERS: List[Dict[str, Any]] = [
    {"firstName": "John", "lastName": "Doe", "email": "john.doe@example.com", "age": 25, "password": "pass123", "role": "user"},
    {"firstName": "Jane", "lastName": "Smith", "email": "jane.smith@example.com", "age": 30, "password": "pass456", "role": "admin"},
    {"firstName": "Alice", "lastName": "Johnson", "email": "alice.johnson@example.com", "age": 28, "password": "pass789", "role": "user"},
    {"firstName": "Bob", "lastName": "Williams", "email": "bob.williams@example.com", "age": 35, "password": "pass012", "role": "user"},
    {"firstName": "Charlie", "lastName": "Brown", "email": "charlie.brown@example.com", "age": 22, "password": "pass345", "role": "user"},
    {"firstName": "Diana", "lastName": "Miller", "email": "diana.miller@example.com", "age": 27, "password": "pass678", "role": "moderator"},
    {"firstName": "Edward", "lastName": "Davis", "email": "edward.davis@example.com", "age": 40, "password": "pass901", "role": "user"},
    {"firstName": "Fiona", "lastName": "Garcia", "email": "fiona.garcia@example.com", "age": 33, "password": "pass234", "role": "user"},
    {"firstName": "George", "lastName": "Martinez", "email": "george.martinez@example.com", "age": 29, "password": "pass567", "role": "admin"},
    {"firstName": "Hannah", "lastName": "Rodriguez", "email": "hannah.rodriguez@example.com", "age": 26, "password": "pass890", "role": "user"},
]


class SeedUsersUseCase:
    """
    Use case for seeding the user collection.

    Re-running it against a non-empty collection does nothing.
    """

    def __init__(self, user_repository: UserRepository):
        """
        Initialize use case with repository.

        Args:
            user_repository: Repository for user persistence
        """
        self._repository = user_repository

    def execute(self) -> int:
        """
        Execute the seed use case.

        Errors are logged and never raised, so startup continues even when
        the database is unavailable.

        Returns:
            Number of users inserted (0 when skipped or failed)
        """
        try:
            count = self._repository.count()
            if count > 0:
                logger.info("Skipping seed: collection already holds %d users", count)
                return 0

            created = self._repository.create_many([dict(user) for user in DEFAULT_USERS])
            logger.info("Database seeded with %d default users", len(created))
            return len(created)
        except Exception:
            logger.exception("Error seeding database")
            return 0
