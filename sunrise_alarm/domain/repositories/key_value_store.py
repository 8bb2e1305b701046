"""
Key-Value Store Interface

Opaque persistent store holding string values under stable keys. Used
for the schedule settings and the single-slot forecast cache.
"""

from abc import ABC, abstractmethod
from typing import Optional


class IKeyValueStore(ABC):
    """Interface for key-value store implementations."""

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """
        Read the value stored under ``key``.

        Returns:
            The stored string, or None when the key is absent

        Raises:
            StorageError: When the store cannot be read
        """
        pass

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """
        Store ``value`` under ``key``, replacing any previous value.

        Raises:
            StorageError: When the store cannot be written
        """
        pass

    @abstractmethod
    async def remove(self, key: str) -> None:
        """
        Remove ``key``. Removing an absent key is a no-op.

        Raises:
            StorageError: When the store cannot be written
        """
        pass
