"""
MongoDB Database - Infrastructure Layer

This module provides a MongoDB database client for interacting with MongoDB.
It handles connection, collections, and the few document operations the
key-value store needs.
"""

from typing import Any, Dict, Optional

import pymongo.errors
from pymongo import MongoClient, ReturnDocument
from pymongo.collection import Collection
from pymongo.database import Database

from sunrise_alarm.shared import get_logger

logger = get_logger(__name__)


class MongoDatabase:
    """MongoDB database client."""

    def __init__(self, mongo_uri: str, db_name: str):
        """
        Initialize the MongoDB database client.

        Args:
            mongo_uri: MongoDB connection URI
            db_name: Name of the database to use
        """
        self.client: MongoClient = MongoClient(mongo_uri)
        self.db: Database = self.client[db_name]

    def get_collection(self, collection_name: str) -> Collection:
        """
        Get a collection from the database.

        Args:
            collection_name: Name of the collection

        Returns:
            MongoDB collection
        """
        return self.db[collection_name]

    async def find_one(
        self, collection_name: str, query: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        """
        Find a single document in a collection.

        Args:
            collection_name: Name of the collection
            query: Query to match documents

        Returns:
            The document if found, None otherwise
        """
        return self.db[collection_name].find_one(query)

    async def upsert_one(
        self, collection_name: str, query: Dict[str, Any], document: Dict[str, Any]
    ) -> Dict[str, Any]:
        """
        Replace the document matching ``query``, inserting it when absent.

        Args:
            collection_name: Name of the collection
            query: Query to match the document to replace
            document: New document

        Returns:
            The new document

        Raises:
            Exception: If the write is not acknowledged
        """
        result = self.db[collection_name].replace_one(query, document, upsert=True)
        if not result.acknowledged:
            raise Exception(f"Failed to upsert document in {collection_name}")
        return document

    async def find_one_and_update(
        self,
        collection_name: str,
        query: Dict[str, Any],
        update: Dict[str, Any],
        upsert: bool = False,
    ) -> Optional[Dict[str, Any]]:
        """
        Atomically update the first document matching ``query``.

        Args:
            collection_name: Name of the collection
            query: Query to match the document to update
            update: Update operators to apply
            upsert: Insert a document when nothing matches

        Returns:
            The updated document, None when nothing matched and no upsert

        Raises:
            DuplicateKeyError: When an upsert collides with an existing _id
        """
        return self.db[collection_name].find_one_and_update(
            query, update, upsert=upsert, return_document=ReturnDocument.AFTER
        )

    async def delete_one(
        self, collection_name: str, query: Dict[str, Any], missing_ok: bool = False
    ) -> None:
        """
        Delete a document from a collection.

        Args:
            collection_name: Name of the collection
            query: Query to match document to delete
            missing_ok: Do not fail when nothing matches

        Raises:
            Exception: If the document does not exist (unless ``missing_ok``)
                or the delete fails
        """
        result = self.db[collection_name].delete_one(query)
        if result.deleted_count == 0 and not missing_ok:
            raise Exception(f"Document not found in {collection_name}")
        if not result.acknowledged:
            raise Exception(f"Failed to delete document in {collection_name}")

    def close(self) -> None:
        """Close the database connection."""
        self.client.close()

    async def create_indexes(self, collection_name: str) -> None:
        """
        Create the unique key index of the key-value collection.
        This is an async method to be called during application startup.
        """
        try:
            self.db[collection_name].create_index(
                "key", name="key_unique_idx", unique=True
            )
        except pymongo.errors.OperationFailure as e:
            logger.warning(
                "mongo.create_indexes.failed",
                collection=collection_name,
                error=str(e),
            )
