"""Domain entities for user schedule settings, alarm slots and notifications."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from sunrise_alarm.domain.entities.errors import InvalidInputError
from sunrise_alarm.domain.entities.location import Coordinate
from sunrise_alarm.shared.consts import EnumNotificationLevel


@dataclass(slots=True)
class ScheduleSettings:
    """User controlled state: minute offset and the selected location."""

    offset_minutes: int = 0
    location: Optional[Coordinate] = None


@dataclass(frozen=True, slots=True)
class AlarmSlot:
    """A weekly alarm handed to the platform alarm capability.

    Weekdays are numbered 1..7 starting on Sunday.
    """

    weekday: int
    hour: int
    minute: int
    label: str

    def __post_init__(self) -> None:
        if not 1 <= self.weekday <= 7:
            raise InvalidInputError(f"Invalid weekday: {self.weekday}")
        if not 0 <= self.hour <= 23:
            raise InvalidInputError(f"Invalid hour: {self.hour}")
        if not 0 <= self.minute <= 59:
            raise InvalidInputError(f"Invalid minute: {self.minute}")

    def as_tuple(self) -> tuple[int, int, int, str]:
        return (self.weekday, self.hour, self.minute, self.label)


@dataclass(frozen=True, slots=True)
class Notification:
    """A title/body pair surfaced to the user."""

    title: str
    body: str
    level: EnumNotificationLevel = EnumNotificationLevel.INFO
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
