"""
Fetch Lock Interface

Lease shared by every process that talks to the rate-limited sunrise
service, so at most one paced fetch runs at a time.
"""

from abc import ABC, abstractmethod


class IFetchLock(ABC):
    """Interface for cross-process fetch leases."""

    @abstractmethod
    async def acquire(self) -> bool:
        """
        Take the lease unless another holder owns an unexpired one.

        Returns:
            True when the lease is now held by this instance

        Raises:
            StorageError: When the lease store cannot be reached
        """
        pass

    @abstractmethod
    async def release(self) -> None:
        """Give the lease back. Releasing a lease not held is a no-op."""
        pass
