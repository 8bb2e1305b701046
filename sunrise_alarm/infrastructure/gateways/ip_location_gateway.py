"""
Infrastructure Gateway - IP Geolocation Implementation

Approximates the current coordinate from the public IP address.
"""

from typing import Any, Dict

import httpx

from sunrise_alarm.domain.entities.errors import (
    InvalidInputError,
    LocationPermissionDeniedError,
    LocationUnavailableError,
)
from sunrise_alarm.domain.entities.location import Coordinate
from sunrise_alarm.domain.gateways.location_gateway import ILocationGateway
from sunrise_alarm.shared import get_logger

logger = get_logger(__name__)

PERMISSION_DENIED_STATUSES = (httpx.codes.UNAUTHORIZED, httpx.codes.FORBIDDEN)


class IpLocationGateway(ILocationGateway):
    """HTTP client for an IP geolocation service."""

    def __init__(self, lookup_url: str, timeout: float = 5.0):
        self.lookup_url = lookup_url
        self.timeout = timeout

    async def get_current_coordinate(self) -> Coordinate:
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(self.lookup_url)
                response.raise_for_status()
                payload = response.json()

        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.warning(
                "location_lookup.http_error",
                status_code=status_code,
                url=self.lookup_url,
            )
            if status_code in PERMISSION_DENIED_STATUSES:
                raise LocationPermissionDeniedError(
                    "Location lookup was refused",
                    details={"status_code": status_code},
                ) from e
            raise LocationUnavailableError(
                f"Location lookup returned HTTP {status_code}",
                details={"status_code": status_code},
            ) from e

        except httpx.RequestError as e:
            logger.warning(
                "location_lookup.request_error", error=str(e), url=self.lookup_url
            )
            raise LocationUnavailableError(f"Location lookup failed: {str(e)}") from e

        except ValueError as e:
            raise LocationUnavailableError(
                "Location lookup returned a body that is not JSON"
            ) from e

        return self._to_domain(payload)

    def _to_domain(self, payload: Any) -> Coordinate:
        if not isinstance(payload, dict):
            raise LocationUnavailableError(
                "Location lookup returned an unexpected body"
            )

        data: Dict[str, Any] = {
            "latitude": payload.get("latitude", payload.get("lat")),
            "longitude": payload.get("longitude", payload.get("lon")),
        }
        try:
            return Coordinate.parse(data)
        except InvalidInputError as e:
            raise LocationUnavailableError(
                f"Location lookup returned an invalid coordinate: {e.message}",
                details=e.details,
            ) from e
