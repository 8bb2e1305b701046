"""
MongoDB Key-Value Store - Infrastructure Layer

Implements the opaque key-value store as one document per key:
``{"key": <key>, "value": <string>, "updated_at": <datetime>}``.
"""

from datetime import datetime, timezone
from typing import Optional

from pymongo.errors import PyMongoError

from sunrise_alarm.domain.entities.errors import StorageError
from sunrise_alarm.domain.repositories.key_value_store import IKeyValueStore
from sunrise_alarm.infrastructure.database import MongoDatabase
from sunrise_alarm.shared import get_logger

logger = get_logger(__name__)


class MongoKeyValueStore(IKeyValueStore):
    """MongoDB implementation of the key-value store."""

    def __init__(
        self, mongo_database: MongoDatabase, collection_name: str = "kv_store"
    ):
        """
        Initialize the store.

        Args:
            mongo_database: MongoDB database client
            collection_name: Collection holding one document per key
        """
        self.db = mongo_database
        self.collection_name = collection_name

    async def get(self, key: str) -> Optional[str]:
        try:
            document = await self.db.find_one(self.collection_name, {"key": key})
        except PyMongoError as e:
            logger.error("kv_store.get.failed", key=key, error=str(e))
            raise StorageError(f"Failed to read key {key!r}: {str(e)}") from e

        if not document:
            return None
        value = document.get("value")
        return value if isinstance(value, str) else None

    async def set(self, key: str, value: str) -> None:
        document = {
            "key": key,
            "value": value,
            "updated_at": datetime.now(timezone.utc),
        }
        try:
            await self.db.upsert_one(self.collection_name, {"key": key}, document)
        except PyMongoError as e:
            logger.error("kv_store.set.failed", key=key, error=str(e))
            raise StorageError(f"Failed to write key {key!r}: {str(e)}") from e

    async def remove(self, key: str) -> None:
        try:
            await self.db.delete_one(
                self.collection_name, {"key": key}, missing_ok=True
            )
        except PyMongoError as e:
            logger.error("kv_store.remove.failed", key=key, error=str(e))
            raise StorageError(f"Failed to remove key {key!r}: {str(e)}") from e
