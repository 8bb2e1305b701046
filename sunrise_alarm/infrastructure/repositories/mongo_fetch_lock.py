"""
MongoDB Fetch Lock - Infrastructure Layer

Lease over a single document ``{"_id": <name>, "owner": ..., "expires_at": ...}``
shared by the API process and the Celery worker. Taking the lease is one
atomic ``find_one_and_update``: it matches only an expired lease or one
this owner already holds, and the upsert collides on ``_id`` otherwise.
"""

import uuid
from datetime import timedelta
from typing import Optional

from pymongo.errors import DuplicateKeyError, PyMongoError

from sunrise_alarm.domain.entities.errors import StorageError
from sunrise_alarm.domain.ports.clock import IClock
from sunrise_alarm.domain.repositories.fetch_lock import IFetchLock
from sunrise_alarm.infrastructure.database import MongoDatabase
from sunrise_alarm.shared import get_logger

logger = get_logger(__name__)

DEFAULT_LOCK_NAME = "sunrise_fetch"


class MongoFetchLock(IFetchLock):
    """MongoDB implementation of the fetch lease."""

    def __init__(
        self,
        mongo_database: MongoDatabase,
        clock: IClock,
        ttl: timedelta = timedelta(minutes=2),
        name: str = DEFAULT_LOCK_NAME,
        collection_name: str = "locks",
        owner: Optional[str] = None,
    ):
        """
        Initialize the lock.

        Args:
            mongo_database: MongoDB database client
            clock: Wall clock used to stamp and expire the lease
            ttl: Lease duration, after which a crashed holder is ignored
            name: ``_id`` of the lease document
            collection_name: Collection holding lease documents
            owner: Identity of this holder, random when omitted
        """
        self.db = mongo_database
        self.clock = clock
        self.ttl = ttl
        self.name = name
        self.collection_name = collection_name
        self.owner = owner or uuid.uuid4().hex

    async def acquire(self) -> bool:
        now = self.clock.now()
        query = {
            "_id": self.name,
            "$or": [{"expires_at": {"$lte": now}}, {"owner": self.owner}],
        }
        update = {"$set": {"owner": self.owner, "expires_at": now + self.ttl}}
        try:
            await self.db.find_one_and_update(
                self.collection_name, query, update, upsert=True
            )
        except DuplicateKeyError:
            logger.info("fetch_lock.busy", name=self.name, owner=self.owner)
            return False
        except PyMongoError as e:
            logger.error("fetch_lock.acquire.failed", name=self.name, error=str(e))
            raise StorageError(f"Failed to take lease {self.name!r}: {str(e)}") from e

        logger.debug("fetch_lock.acquired", name=self.name, owner=self.owner)
        return True

    async def release(self) -> None:
        try:
            await self.db.delete_one(
                self.collection_name,
                {"_id": self.name, "owner": self.owner},
                missing_ok=True,
            )
        except PyMongoError as e:
            # The lease still expires after its TTL
            logger.warning("fetch_lock.release.failed", name=self.name, error=str(e))
            return
        logger.debug("fetch_lock.released", name=self.name, owner=self.owner)
