"""
Unit tests for the MongoDB user repository.

Uses MagicMock for the pymongo collection to avoid real DB dependencies.
"""

from unittest.mock import MagicMock

import pytest
from bson import ObjectId
from pymongo import ASCENDING, DESCENDING, ReturnDocument
from pymongo.errors import ServerSelectionTimeoutError

from users_api.domain.exceptions import (
    InvalidIdentifierError,
    StorageError,
    UserNotFoundError,
)
from users_api.infrastructure.db.mongo_user_repository import (
    MongoUserRepository,
    build_search_query,
)


def make_doc(**overrides) -> dict:
    doc = {
        "_id": ObjectId(),
        "firstName": "Jane",
        "lastName": "Smith",
        "email": "jane.smith@example.com",
        "age": 30,
        "password": "pass456",
        "role": "admin",
    }
    doc.update(overrides)
    return doc


@pytest.fixture
def mock_collection() -> MagicMock:
    return MagicMock()


@pytest.fixture
def repository(mock_collection: MagicMock) -> MongoUserRepository:
    client = MagicMock()
    client.get_collection.return_value = mock_collection
    return MongoUserRepository(client, collection_name="users")


class TestQueryBuilding:
    def test_no_search_matches_everything(self):
        assert build_search_query(None) == {}
        assert build_search_query("") == {}

    def test_search_is_escaped_or_of_both_names(self):
        query = build_search_query("a.b")

        assert query == {
            "$or": [
                {"firstName": {"$regex": r"a\.b", "$options": "i"}},
                {"lastName": {"$regex": r"a\.b", "$options": "i"}},
            ]
        }


class TestFindAll:
    def test_find_without_sort(self, repository, mock_collection):
        doc = make_doc()
        mock_collection.find.return_value = [doc]

        users = repository.find_all()

        mock_collection.find.assert_called_once_with({})
        assert users[0].id == str(doc["_id"])
        assert users[0].firstName == "Jane"

    def test_find_sorted_descending(self, repository, mock_collection):
        cursor = MagicMock()
        cursor.sort.return_value = [make_doc(age=40), make_doc(age=22)]
        mock_collection.find.return_value = cursor

        users = repository.find_all(search="jane", sort_by="age", order="desc")

        mock_collection.find.assert_called_once_with(build_search_query("jane"))
        cursor.sort.assert_called_once_with("age", DESCENDING)
        assert [u.age for u in users] == [40, 22]

    def test_sort_by_id_uses_mongo_id(self, repository, mock_collection):
        cursor = MagicMock()
        cursor.sort.return_value = []
        mock_collection.find.return_value = cursor

        repository.find_all(sort_by="id")

        cursor.sort.assert_called_once_with("_id", ASCENDING)

    def test_driver_error_becomes_storage_error(self, repository, mock_collection):
        mock_collection.find.side_effect = ServerSelectionTimeoutError("no servers")

        with pytest.raises(StorageError):
            repository.find_all()


class TestFindById:
    def test_found(self, repository, mock_collection):
        doc = make_doc()
        mock_collection.find_one.return_value = doc

        user = repository.find_by_id(str(doc["_id"]))

        mock_collection.find_one.assert_called_once_with({"_id": doc["_id"]})
        assert user.email == doc["email"]

    def test_not_found(self, repository, mock_collection):
        mock_collection.find_one.return_value = None

        with pytest.raises(UserNotFoundError):
            repository.find_by_id(str(ObjectId()))

    def test_malformed_id_never_reaches_store(self, repository, mock_collection):
        with pytest.raises(InvalidIdentifierError):
            repository.find_by_id("not-an-object-id")

        mock_collection.find_one.assert_not_called()


class TestWrites:
    def test_create_assigns_inserted_id(self, repository, mock_collection):
        new_id = ObjectId()
        mock_collection.insert_one.return_value = MagicMock(inserted_id=new_id)
        fields = {"firstName": "Ann", "lastName": "Lee", "email": "ann@example.com", "age": 40}

        user = repository.create(fields)

        assert user.id == str(new_id)
        assert user.fields() == dict(fields, password=None, role=None)
        assert "_id" not in fields

    def test_create_many(self, repository, mock_collection):
        ids = [ObjectId(), ObjectId()]
        mock_collection.insert_many.return_value = MagicMock(inserted_ids=ids)
        records = [make_doc(), make_doc(firstName="Bob")]
        for record in records:
            del record["_id"]

        users = repository.create_many(records)

        assert [u.id for u in users] == [str(i) for i in ids]
        assert users[1].firstName == "Bob"

    def test_update_sets_fields_and_returns_after(self, repository, mock_collection):
        doc = make_doc(age=31)
        mock_collection.find_one_and_update.return_value = doc

        user = repository.update(str(doc["_id"]), {"age": 31})

        mock_collection.find_one_and_update.assert_called_once_with(
            {"_id": doc["_id"]},
            {"$set": {"age": 31}},
            return_document=ReturnDocument.AFTER,
        )
        assert user.age == 31

    def test_update_missing(self, repository, mock_collection):
        mock_collection.find_one_and_update.return_value = None

        with pytest.raises(UserNotFoundError):
            repository.update(str(ObjectId()), {"age": 31})

    def test_empty_update_reads_current_record(self, repository, mock_collection):
        doc = make_doc()
        mock_collection.find_one.return_value = doc

        user = repository.update(str(doc["_id"]), {})

        mock_collection.find_one_and_update.assert_not_called()
        assert user.id == str(doc["_id"])

    def test_delete(self, repository, mock_collection):
        doc = make_doc()
        mock_collection.find_one_and_delete.return_value = doc

        repository.delete(str(doc["_id"]))

        mock_collection.find_one_and_delete.assert_called_once_with({"_id": doc["_id"]})

    def test_delete_missing(self, repository, mock_collection):
        mock_collection.find_one_and_delete.return_value = None

        with pytest.raises(UserNotFoundError):
            repository.delete(str(ObjectId()))

    def test_count(self, repository, mock_collection):
        mock_collection.count_documents.return_value = 7

        assert repository.count() == 7
        mock_collection.count_documents.assert_called_once_with({})
