"""
Repositories Package

Contracts for data access. Specific implementations are provided by
the infrastructure layer.
"""

from .fetch_lock import IFetchLock
from .key_value_store import IKeyValueStore
from .settings_repository import ISettingsRepository
from .sunrise_repository import ISunriseRepository

__all__ = [
    "IFetchLock",
    "IKeyValueStore",
    "ISettingsRepository",
    "ISunriseRepository",
]
