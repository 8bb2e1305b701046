"""Domain entities for sunrise forecasts."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional, Tuple

from sunrise_alarm.domain.entities.errors import InvalidResponseError
from sunrise_alarm.domain.entities.location import (
    DRIFT_THRESHOLD_DEGREES,
    Coordinate,
)
from sunrise_alarm.shared.consts import FORECAST_DAYS

UNKNOWN_TIMEZONE = "unknown"


@dataclass(frozen=True, slots=True)
class RawSunriseRecord:
    """One day of the forecast exactly as the remote service reported it."""

    date: str  # "YYYY-MM-DD", a trailing "T..." part is tolerated
    sunrise_time: str  # "HH:MM[:SS]" local civil time


@dataclass(frozen=True, slots=True)
class DailySunrise:
    """Result of a single per-day request to the sunrise service."""

    record: RawSunriseRecord
    timezone: Optional[str] = None


@dataclass(frozen=True, slots=True)
class SunriseForecast:
    """Seven consecutive days of sunrise times for one coordinate."""

    records: Tuple[RawSunriseRecord, ...]
    timezone: str
    coordinate: Coordinate
    fetched_at: datetime

    def __post_init__(self) -> None:
        if len(self.records) != FORECAST_DAYS:
            raise InvalidResponseError(
                f"Forecast must contain {FORECAST_DAYS} records",
                details={"record_count": len(self.records)},
            )

    def age(self, now: datetime) -> timedelta:
        return now - self.fetched_at

    def is_fresh(self, now: datetime, ttl: timedelta) -> bool:
        age = self.age(now)
        return timedelta(0) <= age < ttl

    def matches(
        self, coordinate: Coordinate, threshold: float = DRIFT_THRESHOLD_DEGREES
    ) -> bool:
        return self.coordinate.is_within(coordinate, threshold)


@dataclass(frozen=True, slots=True)
class AdjustedSunrise:
    """A parsed sunrise timestamp, possibly shifted by the user offset."""

    absolute_time: datetime
    source_date: date
