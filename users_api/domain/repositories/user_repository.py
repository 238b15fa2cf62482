"""
User Repository Interface
=========================

Abstract interface for user data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from bson import ObjectId

from users_api.domain.constants.user_fields import UserFields
from users_api.domain.exceptions import InvalidIdentifierError
from users_api.domain.models.user import User


def parse_object_id(user_id: str) -> ObjectId:
    """
    Convert a string identifier into an ObjectId.

    Raises:
        InvalidIdentifierError: If the string is not a 24-hex ObjectId
    """
    if not isinstance(user_id, str) or not ObjectId.is_valid(user_id):
        raise InvalidIdentifierError(str(user_id))
    return ObjectId(user_id)


def resolve_sort_key(sort_by: str) -> str:
    """Map the public "id" sort key onto the stored "_id" field."""
    if sort_by in ("id", UserFields.MONGO_ID):
        return UserFields.MONGO_ID
    return sort_by


class UserRepository(ABC):
    """
    Abstract repository for user persistence operations.

    This interface defines the contract for user data access.
    Concrete implementations should be in the infrastructure layer.
    """

    @abstractmethod
    def find_all(
        self,
        search: Optional[str] = None,
        sort_by: Optional[str] = None,
        order: Optional[str] = None,
    ) -> List[User]:
        """
        Find users, optionally filtered and sorted.

        Args:
            search: Case-insensitive substring matched against firstName or lastName
            sort_by: Field to sort on; store-native order when omitted
            order: "desc" for descending, anything else ascending

        Returns:
            List of user entities

        Raises:
            StorageError: If the store is unreachable
        """
        pass

    @abstractmethod
    def find_by_id(self, user_id: str) -> User:
        """
        Find a user by its identifier.

        Raises:
            UserNotFoundError: If no user has this identifier
            InvalidIdentifierError: If the identifier is malformed
        """
        pass

    @abstractmethod
    def create(self, fields: Dict[str, Any]) -> User:
        """
        Insert a validated user and assign its identifier.

        Returns:
            Created user entity
        """
        pass

    @abstractmethod
    def create_many(self, records: List[Dict[str, Any]]) -> List[User]:
        """Insert several validated users at once."""
        pass

    @abstractmethod
    def update(self, user_id: str, fields: Dict[str, Any]) -> User:
        """
        Apply a partial update and return the post-update user.

        Raises:
            UserNotFoundError: If no user has this identifier
            InvalidIdentifierError: If the identifier is malformed
        """
        pass

    @abstractmethod
    def delete(self, user_id: str) -> None:
        """
        Remove a user.

        Raises:
            UserNotFoundError: If no user has this identifier
            InvalidIdentifierError: If the identifier is malformed
        """
        pass

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored users."""
        pass
