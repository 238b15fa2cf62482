"""
User Model
==========

Domain model representing a user record.
This is a pure domain object with no infrastructure dependencies.
"""
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from users_api.domain.constants.user_fields import UserFields


@dataclass
class User:
    """
    User domain model.

    The identifier is assigned by the store on insertion and never changes.
    Email and role are free-form strings; the password is stored as given.
    """
    id: str
    firstName: str
    lastName: str
    email: str
    age: int
    password: Optional[str] = None
    role: Optional[str] = None

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "User":
        """Build a User from a stored document (``_id`` plus fields)."""
        return cls(
            id=str(doc[UserFields.MONGO_ID]),
            firstName=doc[UserFields.FIRST_NAME],
            lastName=doc[UserFields.LAST_NAME],
            email=doc[UserFields.EMAIL],
            age=doc[UserFields.AGE],
            password=doc.get(UserFields.PASSWORD),
            role=doc.get(UserFields.ROLE),
        )

    def fields(self) -> Dict[str, Any]:
        """Return the record fields without the identifier."""
        data = asdict(self)
        data.pop("id")
        return data

    def full_name(self) -> str:
        return f"{self.firstName} {self.lastName}"
