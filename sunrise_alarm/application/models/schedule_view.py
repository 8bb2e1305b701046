"""Read models describing the current sunrise schedule."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List, Optional

from sunrise_alarm.domain.entities.location import Coordinate


@dataclass(frozen=True)
class ScheduleEntry:
    """One adjusted sunrise as presented to the user."""

    index: int
    weekday: int
    weekday_name: str
    source_date: date
    display_date: str
    alarm_time: str
    adjusted_at: datetime
    is_today: bool


@dataclass(frozen=True)
class ScheduleView:
    """Current schedule along with the settings it was computed from."""

    entries: List[ScheduleEntry]
    offset_minutes: int
    timezone: str
    location: Optional[Coordinate]
    fetched_at: Optional[datetime] = None


@dataclass(frozen=True)
class RefreshOutcome:
    """Result of a refresh request."""

    refreshed: bool
    reason: Optional[str] = None
    record_count: int = 0
    dropped_records: List[str] = field(default_factory=list)
