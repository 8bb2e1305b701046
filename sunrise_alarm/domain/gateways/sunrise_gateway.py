"""
Domain Gateway - Sunrise Service

Interface for the remote service answering one sunrise query per date.
"""

from abc import ABC, abstractmethod
from datetime import date

from sunrise_alarm.domain.entities.location import Coordinate
from sunrise_alarm.domain.entities.sunrise import DailySunrise


class ISunriseGateway(ABC):
    """Interface for the remote sunrise service."""

    @abstractmethod
    async def get_daily_sunrise(
        self, coordinate: Coordinate, day: date
    ) -> DailySunrise:
        """
        Retrieve the sunrise time for one calendar date.

        Args:
            coordinate: Location to query
            day: Calendar date to query

        Returns:
            The raw record and the timezone reported by the service

        Raises:
            NetworkError: When the transport fails or the status is not 2xx
            InvalidResponseError: When the body is malformed or its status is not "OK"
        """
        pass
