"""
Infrastructure Gateway - SunriseSunset.io Implementation

Queries the public sunrise service one calendar date at a time.
"""

from datetime import date
from typing import Any, Dict

import httpx

from sunrise_alarm.domain.entities.errors import InvalidResponseError, NetworkError
from sunrise_alarm.domain.entities.location import Coordinate
from sunrise_alarm.domain.entities.sunrise import DailySunrise, RawSunriseRecord
from sunrise_alarm.domain.gateways.sunrise_gateway import ISunriseGateway
from sunrise_alarm.shared import get_logger

logger = get_logger(__name__)

STATUS_OK = "OK"


class SunriseSunsetGateway(ISunriseGateway):
    """HTTP client for the sunrise service."""

    def __init__(self, base_url: str, timeout: float = 10.0):
        """
        Initialize the sunrise gateway.

        Args:
            base_url: Service endpoint, e.g. "https://api.sunrisesunset.io/json"
            timeout: Request timeout in seconds
        """
        self.base_url = base_url
        self.timeout = timeout

    async def get_daily_sunrise(
        self, coordinate: Coordinate, day: date
    ) -> DailySunrise:
        params = {
            "lat": str(coordinate.latitude),
            "lng": str(coordinate.longitude),
            "date": day.isoformat(),
        }
        logger.debug("sunrise_api.request", url=self.base_url, params=params)

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(self.base_url, params=params)
                response.raise_for_status()
                payload = response.json()

        except httpx.HTTPStatusError as e:
            logger.error(
                "sunrise_api.http_error",
                status_code=e.response.status_code,
                response_text=e.response.text,
                day=day.isoformat(),
            )
            raise NetworkError(
                f"Sunrise service returned HTTP {e.response.status_code}",
                details={"day": day.isoformat(), "status_code": e.response.status_code},
            ) from e

        except httpx.RequestError as e:
            logger.error("sunrise_api.request_error", error=str(e), day=day.isoformat())
            raise NetworkError(
                f"Failed to reach sunrise service: {str(e)}",
                details={"day": day.isoformat()},
            ) from e

        except ValueError as e:
            logger.error("sunrise_api.invalid_json", error=str(e), day=day.isoformat())
            raise InvalidResponseError(
                "Sunrise service returned a body that is not JSON",
                details={"day": day.isoformat()},
            ) from e

        return self._to_domain(payload, day)

    def _to_domain(self, payload: Any, day: date) -> DailySunrise:
        if not isinstance(payload, dict):
            raise InvalidResponseError(
                "Sunrise service returned an unexpected body",
                details={"day": day.isoformat()},
            )

        status = payload.get("status")
        if status != STATUS_OK:
            logger.error(
                "sunrise_api.status_not_ok", status=status, day=day.isoformat()
            )
            raise InvalidResponseError(
                f"Sunrise service answered with status {status!r}",
                details={"day": day.isoformat(), "status": status},
            )

        results: Dict[str, Any] = payload.get("results") or {}
        sunrise = results.get("sunrise")
        if not isinstance(sunrise, str) or not sunrise:
            raise InvalidResponseError(
                "Sunrise service response is missing the sunrise time",
                details={"day": day.isoformat()},
            )

        record_date = results.get("date")
        if not isinstance(record_date, str) or not record_date:
            record_date = day.isoformat()

        timezone = results.get("timezone")
        return DailySunrise(
            record=RawSunriseRecord(date=record_date, sunrise_time=sunrise),
            timezone=timezone if isinstance(timezone, str) and timezone else None,
        )
