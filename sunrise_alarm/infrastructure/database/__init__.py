"""
Database Package

MongoDB client used by the key-value store.
"""

from .mongo_database import MongoDatabase

__all__ = ["MongoDatabase"]
