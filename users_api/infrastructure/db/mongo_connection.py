"""
MongoDB Connection
==================

MongoDB client manager for database connections.
Constructed explicitly and handed to repositories through the DI container.
"""
import logging
from typing import Optional

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

logger = logging.getLogger(__name__)


class MongoClientManager:
    """
    MongoDB client manager.

    Manages a MongoDB connection and provides access to collections.
    """

    def __init__(self, mongo_uri: str, database_name: str):
        if not mongo_uri:
            raise RuntimeError("MONGO_URI not set. Please configure it in your .env file.")
        self._mongo_uri = mongo_uri
        self._database_name = database_name
        self._client: Optional[MongoClient] = None
        self._database: Optional[Database] = None

    def _initialize_client(self) -> None:
        """Initialize MongoDB client connection."""
        if self._client is not None:
            return  # Already initialized

        self._client = MongoClient(self._mongo_uri)
        self._database = self._client[self._database_name]
        logger.info("Connected to MongoDB database '%s'", self._database_name)

    def get_database(self) -> Database:
        """Get MongoDB database instance."""
        if self._database is None:
            self._initialize_client()
        return self._database

    def get_collection(self, collection_name: str) -> Collection:
        """
        Get a MongoDB collection.

        Args:
            collection_name: Name of the collection

        Returns:
            MongoDB Collection object
        """
        database = self.get_database()
        return database[collection_name]

    def close(self) -> None:
        """Close MongoDB connection."""
        if self._client:
            self._client.close()
            self._client = None
            self._database = None
            logger.info("MongoDB connection closed")
