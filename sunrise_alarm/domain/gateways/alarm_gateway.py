"""
Domain Gateway - Alarm Capability

Interface for the platform alarm clock. Implementations must key alarms
by (weekday, label) so that re-arming overwrites instead of duplicating.
"""

from abc import ABC, abstractmethod


class IAlarmGateway(ABC):
    """Interface for registering recurring weekly alarms."""

    @abstractmethod
    async def arm_weekly_alarm(
        self, hour: int, minute: int, weekday: int, label: str
    ) -> None:
        """
        Register or overwrite a weekly alarm.

        Args:
            hour: Hour of day, 0..23
            minute: Minute, 0..59
            weekday: Day of week, 1..7 with Sunday=1
            label: Human readable label, part of the alarm identity

        Raises:
            AlarmArmError: When the platform rejects the alarm
        """
        pass

    @abstractmethod
    async def dismiss_alarm(self, weekday: int, label: str) -> None:
        """
        Remove a previously armed alarm. Missing alarms are not an error.

        Raises:
            AlarmArmError: When the platform rejects the dismissal
        """
        pass
