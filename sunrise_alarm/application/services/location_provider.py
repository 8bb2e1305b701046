"""
Location Provider - Application Layer

Resolves the device coordinate, falling back to a default coordinate
when the location capability refuses or fails.
"""

from sunrise_alarm.domain.entities.errors import (
    InvalidInputError,
    LocationPermissionDeniedError,
    LocationUnavailableError,
)
from sunrise_alarm.domain.entities.location import Coordinate
from sunrise_alarm.domain.gateways.location_gateway import ILocationGateway
from sunrise_alarm.shared import get_logger

logger = get_logger(__name__)


class LocationProvider:
    """Current or default coordinate."""

    def __init__(
        self, location_gateway: ILocationGateway, default_location: Coordinate
    ):
        self.location_gateway = location_gateway
        self.default_location = default_location

    def is_default(self, coordinate: Coordinate) -> bool:
        return coordinate == self.default_location

    async def resolve(self) -> Coordinate:
        """
        Acquire the current coordinate.

        Returns:
            The device coordinate, or the default coordinate when permission
            is denied, no position is available or the position is invalid
        """
        try:
            coordinate = await self.location_gateway.get_current_coordinate()
        except LocationPermissionDeniedError as e:
            logger.warning("location.permission_denied", error=e.message)
            return self.default_location
        except (LocationUnavailableError, InvalidInputError) as e:
            logger.warning("location.unavailable", error=e.message)
            return self.default_location

        logger.info(
            "location.resolved",
            latitude=coordinate.latitude,
            longitude=coordinate.longitude,
        )
        return coordinate
