"""
Database configuration and connection handling
The MongoDB client is created on first use and reused for the process lifetime.
"""
import asyncio
import logging
import os
from typing import Optional

from dotenv import load_dotenv
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection

load_dotenv()

MONGODB_URI = os.getenv("MONGODB_URI")
DB_NAME = os.getenv("DB_NAME", "jadwal-pjr")
HOLIDAYS_COLLECTION = os.getenv("HOLIDAYS_COLLECTION", "holidays")
MONGO_TIMEOUT_MS = int(os.getenv("MONGO_TIMEOUT_MS", 5000))

logger = logging.getLogger(__name__)


class DatabaseConnectionError(Exception):
    """The document store is not configured or could not be reached."""


class MongoConnection:
    """Lazily-initialized handle on the holidays collection.

    One instance is created per process and shared by every request. The
    first caller of ``get_collection`` connects; everyone else waits on the
    lock and reuses the result. A failed first connection is remembered and
    re-raised on every later call.
    """

    def __init__(
        self,
        uri: Optional[str] = MONGODB_URI,
        db_name: str = DB_NAME,
        collection_name: str = HOLIDAYS_COLLECTION,
        timeout_ms: int = MONGO_TIMEOUT_MS,
    ):
        self.uri = uri
        self.db_name = db_name
        self.collection_name = collection_name
        self.timeout_ms = timeout_ms
        self._client: Optional[AsyncIOMotorClient] = None
        self._error: Optional[DatabaseConnectionError] = None
        self._lock = asyncio.Lock()

    async def get_collection(self) -> AsyncIOMotorCollection:
        client = await self._get_client()
        return client[self.db_name][self.collection_name]

    async def _get_client(self) -> AsyncIOMotorClient:
        if self._client is not None:
            return self._client
        if self._error is not None:
            raise self._error

        async with self._lock:
            # Another request may have finished connecting while we waited
            if self._client is not None:
                return self._client
            if self._error is not None:
                raise self._error

            try:
                self._client = await self._connect()
            except DatabaseConnectionError as e:
                self._error = e
                raise
            return self._client

    async def _connect(self) -> AsyncIOMotorClient:
        if not self.uri:
            logger.error("MONGODB_URI is not set")
            raise DatabaseConnectionError("MONGODB_URI environment variable is not set")

        client = None
        try:
            # A malformed URI fails here, before any network traffic
            client = AsyncIOMotorClient(self.uri, serverSelectionTimeoutMS=self.timeout_ms)
            await client.admin.command("ping")
        except Exception as e:
            if client is not None:
                client.close()
            logger.error(f"Failed to connect to MongoDB: {str(e)}")
            raise DatabaseConnectionError(str(e)) from e

        logger.info("Connected to MongoDB database %s", self.db_name)
        return client

    def is_connected(self) -> bool:
        return self._client is not None

    def close(self) -> None:
        """Close the client if one was created."""
        if self._client is not None:
            self._client.close()
            self._client = None
            logger.info("MongoDB connection closed")
