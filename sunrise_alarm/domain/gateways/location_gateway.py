"""
Domain Gateway - Location Capability
"""

from abc import ABC, abstractmethod

from sunrise_alarm.domain.entities.location import Coordinate


class ILocationGateway(ABC):
    """Interface for acquiring the current position."""

    @abstractmethod
    async def get_current_coordinate(self) -> Coordinate:
        """
        Acquire the current coordinate.

        Raises:
            LocationPermissionDeniedError: When access to the position is refused
            LocationUnavailableError: When no position can be acquired
        """
        pass
