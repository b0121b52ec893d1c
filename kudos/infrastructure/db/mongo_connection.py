"""
MongoDB Connection
==================

Async MongoDB client for database connections.
One instance is created by the DatabaseProvider and closed on shutdown.
"""
import logging
from typing import Optional

from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase

from kudos.core.config import Settings

logger = logging.getLogger(__name__)


class MongoConnection:
    """
    MongoDB connection manager.

    Manages the async client and provides access to collections.
    The client connects lazily on the first operation.
    """

    def __init__(self, settings: Settings):
        self._settings = settings
        self._client: Optional[AsyncMongoClient] = None
        self._database: Optional[AsyncDatabase] = None

    def _initialize_client(self) -> None:
        """Initialize MongoDB client."""
        if self._client is not None:
            return

        self._client = AsyncMongoClient(self._settings.mongo_uri, tz_aware=True, connect=False)
        self._database = self._client[self._settings.mongo_database_name]
        logger.info("MongoDB client created for database '%s'", self._settings.mongo_database_name)

    def get_database(self) -> AsyncDatabase:
        """Get MongoDB database instance."""
        if self._database is None:
            self._initialize_client()
        return self._database

    def get_collection(self, collection_name: str) -> AsyncCollection:
        """
        Get a MongoDB collection.

        Args:
            collection_name: Name of the collection

        Returns:
            MongoDB AsyncCollection object
        """
        return self.get_database()[collection_name]

    async def close(self) -> None:
        """Close MongoDB connection."""
        if self._client is not None:
            await self._client.close()
            self._client = None
            self._database = None
            logger.info("MongoDB client closed")
