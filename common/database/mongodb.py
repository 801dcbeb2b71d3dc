"""
Generic MongoDB connection manager using Motor.

This module provides async MongoDB connectivity that works with any database.
Collections are accessed raw; schemas live in the application's Pydantic
models rather than in the connection layer.

Example:
    from common.database import MongoDB

    db = MongoDB()
    await db.connect(
        uri="mongodb://localhost:27017",
        database_name="myapp",
    )
    users = db.db["users"]
"""

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

logger = logging.getLogger(__name__)


def mask_uri(uri: str) -> str:
    """Hide credentials in a connection string for logging."""
    return uri.split("@")[-1] if "@" in uri else uri


class MongoDB:
    """Generic MongoDB connection manager - works with any database."""

    def __init__(self):
        self._client: Optional[AsyncIOMotorClient] = None
        self._database_name: Optional[str] = None
        self._initialized: bool = False

    async def connect(self, uri: str, database_name: str) -> None:
        """
        Connect to MongoDB and verify the server is reachable.

        Args:
            uri: MongoDB connection string
            database_name: Name of the database to use
        """
        logger.info(f"Connecting to MongoDB: {mask_uri(uri)}")
        logger.debug(f"Database name: {database_name}")

        try:
            self._client = AsyncIOMotorClient(uri)
            self._database_name = database_name
            await self._client.admin.command("ping")
            self._initialized = True
            logger.info(f"Successfully connected to MongoDB database: {database_name}")
        except Exception as e:
            logger.error(f"Failed to connect to MongoDB: {e}")
            raise

    async def disconnect(self) -> None:
        """Close the MongoDB connection."""
        if self._client:
            logger.info(f"Disconnecting from MongoDB database: {self._database_name}")
            self._client.close()
            self._client = None
            self._database_name = None
            self._initialized = False
            logger.debug("MongoDB connection closed")

    @property
    def is_connected(self) -> bool:
        """Check if database is connected and initialized."""
        return self._initialized

    @property
    def db(self) -> AsyncIOMotorDatabase:
        """Get the underlying Motor database instance."""
        if not self._client or not self._database_name:
            raise RuntimeError("Database not connected")
        return self._client[self._database_name]
