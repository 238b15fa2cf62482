"""
User Service
============

Application service that coordinates user-related operations.
Payloads are validated against the DTO schemas before reaching the repository.
"""
import logging
from typing import Any, Dict, List, Optional, Type

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from users_api.application.dto.user_dto import UserCreateRequest, UserUpdateRequest
from users_api.domain.constants.user_fields import UserFields
from users_api.domain.exceptions import ValidationError
from users_api.domain.models.user import User
from users_api.domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


def _validate(schema: Type[BaseModel], payload: Any) -> BaseModel:
    """
    Validate a raw payload against a schema.

    Raises:
        ValidationError: Naming the first failing field
    """
    if not isinstance(payload, dict):
        raise ValidationError("body", "Request body must be a JSON object")
    try:
        return schema.model_validate(payload)
    except PydanticValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ())) or "body"
        raise ValidationError(field, first.get("msg", "Invalid value")) from e


class UserService:
    """
    Application service for user operations.

    This service provides a high-level interface for user management
    on top of a UserRepository.
    """

    def __init__(self, user_repository: UserRepository):
        """
        Initialize service with repository.

        Args:
            user_repository: Repository for user persistence
        """
        self._repository = user_repository

    def list_users(
        self,
        search: Optional[str] = None,
        sort_by: Optional[str] = None,
        order: Optional[str] = None,
    ) -> List[User]:
        """
        List users with optional search and sort.

        Args:
            search: Case-insensitive substring of firstName or lastName
            sort_by: Field to sort by
            order: "desc" for descending, ascending otherwise

        Returns:
            List of user entities
        """
        return self._repository.find_all(search=search, sort_by=sort_by, order=order)

    def get_user(self, user_id: str) -> User:
        return self._repository.find_by_id(user_id)

    def create_user(self, payload: Dict[str, Any]) -> User:
        """
        Validate and create a user.

        Args:
            payload: Raw request body

        Returns:
            Created user entity with its new identifier

        Raises:
            ValidationError: If a required field is missing or has the wrong type
        """
        request = _validate(UserCreateRequest, payload)
        user = self._repository.create(request.model_dump(exclude_unset=True))
        logger.info("Created user %s (%s)", user.id, user.full_name())
        return user

    def update_user(self, user_id: str, payload: Dict[str, Any]) -> User:
        """
        Apply a partial update to a user.

        Only fields present in the payload are changed. Required fields may be
        replaced but not cleared.

        Raises:
            ValidationError: If a supplied field is invalid
            UserNotFoundError: If the user does not exist
        """
        request = _validate(UserUpdateRequest, payload)
        fields = request.model_dump(exclude_unset=True)
        for field in UserFields.REQUIRED:
            if field in fields and fields[field] is None:
                raise ValidationError(field, "Field required")

        user = self._repository.update(user_id, fields)
        logger.info("Updated user %s (fields: %s)", user.id, ", ".join(sorted(fields)) or "none")
        return user

    def delete_user(self, user_id: str) -> None:
        self._repository.delete(user_id)
        logger.info("Deleted user %s", user_id)
