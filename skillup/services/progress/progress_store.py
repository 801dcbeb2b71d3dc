"""
Saved roadmap progress, one snapshot per user.

The snapshot lives in the ``roadmapProgress`` field of the user's document
and is always written whole; other fields of the document are never touched.
"""

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pydantic import ValidationError
from pymongo.errors import PyMongoError

from skillup.schemas.progress import RoadmapProgressData

logger = logging.getLogger(__name__)

PROGRESS_FIELD = "roadmapProgress"


class ProgressStoreError(Exception):
    """A read, write or delete of saved progress was rejected."""

    LOAD_MESSAGE = "Could not retrieve your saved progress."
    SAVE_MESSAGE = "Could not save your progress to the cloud."
    DELETE_MESSAGE = "Could not delete your progress. Please try again."

    def __init__(self, message: str, operation: str):
        super().__init__(message)
        self.message = message
        self.operation = operation


class ProgressStore:
    """
    Handles the per-user roadmap progress snapshot.

    Saves overwrite the previous snapshot (last write wins); there is no
    version check between concurrent writers.
    """

    def __init__(self, db: AsyncIOMotorDatabase, collection_name: str = "users"):
        """
        Initialize ProgressStore.

        Args:
            db: MongoDB database connection
            collection_name: Collection holding one document per user id
        """
        self._db = db
        self._collection = db[collection_name]

    async def load(self, user_id: str) -> Optional[RoadmapProgressData]:
        """
        Get the saved snapshot for a user.

        Args:
            user_id: Auth provider user id (document ``_id``)

        Returns:
            The snapshot, or None if the user has no saved progress

        Raises:
            ProgressStoreError: If the read fails
        """
        try:
            doc = await self._collection.find_one(
                {"_id": user_id},
                {PROGRESS_FIELD: 1},
            )
        except PyMongoError as e:
            logger.error(f"Failed to load progress for user {user_id}: {e}")
            raise ProgressStoreError(ProgressStoreError.LOAD_MESSAGE, "load") from e

        if not doc:
            return None

        stored = doc.get(PROGRESS_FIELD)
        if not stored or stored.get("roadmap") is None:
            return None

        try:
            return RoadmapProgressData.model_validate(stored)
        except ValidationError as e:
            logger.error(f"Stored progress for user {user_id} is malformed: {e}")
            raise ProgressStoreError(ProgressStoreError.LOAD_MESSAGE, "load") from e

    async def save(self, user_id: str, progress: RoadmapProgressData) -> None:
        """
        Replace the user's snapshot with ``progress``.

        Creates the user document if it does not exist yet.

        Raises:
            ProgressStoreError: If the write fails
        """
        try:
            await self._collection.update_one(
                {"_id": user_id},
                {"$set": {PROGRESS_FIELD: progress.model_dump()}},
                upsert=True,
            )
        except PyMongoError as e:
            logger.error(f"Failed to save progress for user {user_id}: {e}")
            raise ProgressStoreError(ProgressStoreError.SAVE_MESSAGE, "save") from e

        logger.info(
            f"Saved progress for user {user_id}: {len(progress.roadmap)} steps, "
            f"{len(progress.checkedItems)} item states"
        )

    async def delete(self, user_id: str) -> None:
        """
        Remove the user's snapshot, leaving the rest of the document as is.

        Raises:
            ProgressStoreError: If the write fails
        """
        try:
            await self._collection.update_one(
                {"_id": user_id},
                {"$unset": {PROGRESS_FIELD: ""}},
            )
        except PyMongoError as e:
            logger.error(f"Failed to delete progress for user {user_id}: {e}")
            raise ProgressStoreError(ProgressStoreError.DELETE_MESSAGE, "delete") from e

        logger.info(f"Deleted progress for user {user_id}")
