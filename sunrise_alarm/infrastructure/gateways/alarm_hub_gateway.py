"""
Infrastructure Gateway - Alarm Hub Implementation

Registers weekly alarms with the platform alarm bridge over HTTP. Each
alarm lives at ``/alarms/{weekday}/{label}`` so a PUT to the same path
overwrites the previous alarm instead of adding a new one.
"""

from urllib.parse import quote

import httpx

from sunrise_alarm.domain.entities.errors import AlarmArmError
from sunrise_alarm.domain.gateways.alarm_gateway import IAlarmGateway
from sunrise_alarm.shared import get_logger

logger = get_logger(__name__)


class AlarmHubGateway(IAlarmGateway):
    """HTTP client for the alarm bridge."""

    def __init__(self, hub_url: str, timeout: float = 10.0):
        """
        Initialize the alarm gateway.

        Args:
            hub_url: Base URL of the alarm bridge
            timeout: Request timeout in seconds
        """
        self.hub_url = hub_url.rstrip("/")
        self.timeout = timeout

    def _alarm_url(self, weekday: int, label: str) -> str:
        return f"{self.hub_url}/alarms/{weekday}/{quote(label, safe='')}"

    async def arm_weekly_alarm(
        self, hour: int, minute: int, weekday: int, label: str
    ) -> None:
        url = self._alarm_url(weekday, label)
        payload = {
            "hour": hour,
            "minute": minute,
            "weekday": weekday,
            "label": label,
            "recurring": "weekly",
        }
        logger.info("alarm_hub.arm.request", url=url, hour=hour, minute=minute)

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.put(url, json=payload)
                response.raise_for_status()

        except httpx.HTTPStatusError as e:
            logger.error(
                "alarm_hub.arm.http_error",
                status_code=e.response.status_code,
                response_text=e.response.text,
                url=url,
            )
            raise AlarmArmError(
                weekday,
                label,
                f"alarm bridge returned HTTP {e.response.status_code}",
                details={"status_code": e.response.status_code},
            ) from e

        except httpx.RequestError as e:
            logger.error("alarm_hub.arm.request_error", error=str(e), url=url)
            raise AlarmArmError(weekday, label, str(e)) from e

    async def dismiss_alarm(self, weekday: int, label: str) -> None:
        url = self._alarm_url(weekday, label)
        logger.info("alarm_hub.dismiss.request", url=url)

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.delete(url)
                if response.status_code == httpx.codes.NOT_FOUND:
                    return
                response.raise_for_status()

        except httpx.HTTPStatusError as e:
            logger.error(
                "alarm_hub.dismiss.http_error",
                status_code=e.response.status_code,
                response_text=e.response.text,
                url=url,
            )
            raise AlarmArmError(
                weekday,
                label,
                f"alarm bridge returned HTTP {e.response.status_code}",
                details={"status_code": e.response.status_code},
            ) from e

        except httpx.RequestError as e:
            logger.error("alarm_hub.dismiss.request_error", error=str(e), url=url)
            raise AlarmArmError(weekday, label, str(e)) from e
