"""User domain exceptions."""


class UserDomainError(Exception):
    """Base exception for User domain errors."""

    pass


class ValidationError(UserDomainError):
    """A user payload failed schema validation."""

    def __init__(self, field: str, message: str):
        """Initialize with the failing field.

        Args:
            field: Name of the first field that failed validation
            message: Human readable cause
        """
        self.field = field
        self.message = message
        super().__init__(f"User validation failed: {field}: {message}")


class UserNotFoundError(UserDomainError):
    """User was not found in the repository."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__("User not found")


class InvalidIdentifierError(UserDomainError):
    """Identifier is not a valid store identifier."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"Invalid user identifier: '{user_id}'")


class StorageError(UserDomainError):
    """The underlying store failed (connectivity, driver error)."""

    pass
