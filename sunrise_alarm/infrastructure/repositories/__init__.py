"""
Repositories Package

Key-value store, fetch lease and repository implementations.
"""

from .mongo_fetch_lock import MongoFetchLock
from .mongo_key_value_store import MongoKeyValueStore
from .settings_repository import SettingsRepository
from .sunrise_repository import SunriseRepository

__all__ = [
    "MongoFetchLock",
    "MongoKeyValueStore",
    "SettingsRepository",
    "SunriseRepository",
]
