"""
Sunrise Repository Interface

Access to the seven-day sunrise forecast of a coordinate, backed by the
remote service and a single-slot cache.
"""

from abc import ABC, abstractmethod
from typing import Optional

from sunrise_alarm.domain.entities.location import Coordinate
from sunrise_alarm.domain.entities.sunrise import SunriseForecast


class ISunriseRepository(ABC):
    """Interface for sunrise forecast repositories."""

    @abstractmethod
    async def fetch(
        self, coordinate: Coordinate, force_refresh: bool = False
    ) -> Optional[SunriseForecast]:
        """
        Return the forecast for ``coordinate``.

        A cached forecast younger than the TTL and recorded for a coordinate
        within the drift threshold is returned without network access unless
        ``force_refresh`` is set.

        Args:
            coordinate: Location to fetch
            force_refresh: Skip the cache and always hit the remote service

        Returns:
            The forecast, or None when another fetch is already in flight
            in this process or holds the shared fetch lease

        Raises:
            InvalidInputError: When the coordinate is missing or not numeric
            NetworkError: When a request fails at the transport level
            InvalidResponseError: When a response is malformed or not "OK"
            StorageError: When the shared fetch lease cannot be checked
        """
        pass

    @abstractmethod
    async def invalidate(self) -> None:
        """Drop the cached forecast."""
        pass
