"""In-memory User Repository for testing and local runs."""

import threading
from typing import Any, Dict, List, Optional, Tuple

from bson import ObjectId

from users_api.domain.constants.user_fields import UserFields
from users_api.domain.exceptions import UserNotFoundError
from users_api.domain.models.user import User
from users_api.domain.repositories.user_repository import (
    UserRepository,
    parse_object_id,
    resolve_sort_key,
)


def _sort_value(doc: Dict[str, Any], key: str) -> Tuple[int, Any]:
    # Missing and null values sort first, as in MongoDB
    value = doc.get(key)
    if value is None:
        return (0, 0)
    return (1, value)


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of User repository.

    Stores documents keyed by ObjectId in insertion order, so list results
    without a sort key come back in the same "natural" order MongoDB uses.
    Useful for unit tests and local runs without MongoDB.

    Examples:
        >>> repo = InMemoryUserRepository()
        >>> user = repo.create({"firstName": "Jane", "lastName": "Smith",
        ...                     "email": "jane@example.com", "age": 30})
        >>> repo.find_by_id(user.id).firstName
        'Jane'
    """

    def __init__(self) -> None:
        """Initialize empty in-memory storage."""
        self._documents: Dict[ObjectId, Dict[str, Any]] = {}
        self._lock = threading.Lock()

    def find_all(
        self,
        search: Optional[str] = None,
        sort_by: Optional[str] = None,
        order: Optional[str] = None,
    ) -> List[User]:
        with self._lock:
            docs = [dict(doc) for doc in self._documents.values()]

        if search:
            needle = search.lower()
            docs = [
                doc for doc in docs
                if any(needle in str(doc.get(field, "")).lower() for field in UserFields.SEARCHABLE)
            ]

        if sort_by:
            key = resolve_sort_key(sort_by)
            docs.sort(key=lambda doc: _sort_value(doc, key), reverse=order == "desc")

        return [User.from_document(doc) for doc in docs]

    def find_by_id(self, user_id: str) -> User:
        object_id = parse_object_id(user_id)
        with self._lock:
            doc = self._documents.get(object_id)
        if doc is None:
            raise UserNotFoundError(user_id)
        return User.from_document(doc)

    def create(self, fields: Dict[str, Any]) -> User:
        doc = dict(fields)
        doc[UserFields.MONGO_ID] = ObjectId()
        with self._lock:
            self._documents[doc[UserFields.MONGO_ID]] = doc
        return User.from_document(doc)

    def create_many(self, records: List[Dict[str, Any]]) -> List[User]:
        return [self.create(record) for record in records]

    def update(self, user_id: str, fields: Dict[str, Any]) -> User:
        object_id = parse_object_id(user_id)
        with self._lock:
            doc = self._documents.get(object_id)
            if doc is None:
                raise UserNotFoundError(user_id)
            doc.update(fields)
            return User.from_document(doc)

    def delete(self, user_id: str) -> None:
        object_id = parse_object_id(user_id)
        with self._lock:
            if object_id not in self._documents:
                raise UserNotFoundError(user_id)
            del self._documents[object_id]

    def count(self) -> int:
        with self._lock:
            return len(self._documents)

    def clear(self) -> None:
        """Clear all users from memory.

        Useful for test cleanup.
        """
        with self._lock:
            self._documents.clear()
