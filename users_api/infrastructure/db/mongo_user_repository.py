"""
MongoDB User Repository
=======================

Concrete implementation of UserRepository using MongoDB.
"""
import logging
import re
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

from pymongo import ASCENDING, DESCENDING, ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from users_api.domain.constants.user_fields import UserFields
from users_api.domain.exceptions import StorageError, UserNotFoundError
from users_api.domain.models.user import User
from users_api.domain.repositories.user_repository import (
    UserRepository,
    parse_object_id,
    resolve_sort_key,
)
from users_api.infrastructure.db.mongo_connection import MongoClientManager

logger = logging.getLogger(__name__)


@contextmanager
def _storage_errors(operation: str) -> Iterator[None]:
    """Re-raise driver failures as StorageError."""
    try:
        yield
    except PyMongoError as e:
        logger.error("MongoDB %s failed: %s", operation, e)
        raise StorageError(str(e)) from e


def build_search_query(search: Optional[str]) -> Dict[str, Any]:
    """Build the firstName/lastName substring filter (empty when no search)."""
    if not search:
        return {}
    pattern = re.escape(search)
    return {
        "$or": [
            {field: {"$regex": pattern, "$options": "i"}}
            for field in UserFields.SEARCHABLE
        ]
    }


class MongoUserRepository(UserRepository):
    """
    MongoDB implementation of UserRepository.

    Handles all user persistence operations using MongoDB.
    """

    COLLECTION_NAME = "users"

    def __init__(self, client: MongoClientManager, collection_name: Optional[str] = None):
        """Initialize repository with a MongoDB client manager."""
        self._client = client
        self._collection: Collection = client.get_collection(collection_name or self.COLLECTION_NAME)

    def find_all(
        self,
        search: Optional[str] = None,
        sort_by: Optional[str] = None,
        order: Optional[str] = None,
    ) -> List[User]:
        """Find users matching the search, sorted when a key is given."""
        with _storage_errors("find"):
            cursor = self._collection.find(build_search_query(search))
            if sort_by:
                direction = DESCENDING if order == "desc" else ASCENDING
                cursor = cursor.sort(resolve_sort_key(sort_by), direction)
            docs = list(cursor)
        return [User.from_document(doc) for doc in docs]

    def find_by_id(self, user_id: str) -> User:
        """Find a user by its ID."""
        object_id = parse_object_id(user_id)
        with _storage_errors("find_one"):
            doc = self._collection.find_one({UserFields.MONGO_ID: object_id})
        if not doc:
            raise UserNotFoundError(user_id)
        return User.from_document(doc)

    def create(self, fields: Dict[str, Any]) -> User:
        """Create a new user."""
        doc = dict(fields)
        with _storage_errors("insert_one"):
            result = self._collection.insert_one(doc)
        doc[UserFields.MONGO_ID] = result.inserted_id
        return User.from_document(doc)

    def create_many(self, records: List[Dict[str, Any]]) -> List[User]:
        """Create several users with one insert_many call."""
        docs = [dict(record) for record in records]
        with _storage_errors("insert_many"):
            result = self._collection.insert_many(docs)
        for doc, inserted_id in zip(docs, result.inserted_ids):
            doc[UserFields.MONGO_ID] = inserted_id
        return [User.from_document(doc) for doc in docs]

    def update(self, user_id: str, fields: Dict[str, Any]) -> User:
        """Update an existing user and return the stored result."""
        object_id = parse_object_id(user_id)
        if not fields:
            return self.find_by_id(user_id)

        with _storage_errors("find_one_and_update"):
            doc = self._collection.find_one_and_update(
                {UserFields.MONGO_ID: object_id},
                {"$set": fields},
                return_document=ReturnDocument.AFTER,
            )
        if not doc:
            raise UserNotFoundError(user_id)
        return User.from_document(doc)

    def delete(self, user_id: str) -> None:
        """Delete a user."""
        object_id = parse_object_id(user_id)
        with _storage_errors("find_one_and_delete"):
            doc = self._collection.find_one_and_delete({UserFields.MONGO_ID: object_id})
        if not doc:
            raise UserNotFoundError(user_id)

    def count(self) -> int:
        """Count all users."""
        with _storage_errors("count_documents"):
            return self._collection.count_documents({})
