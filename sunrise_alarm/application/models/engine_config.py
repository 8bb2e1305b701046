"""Lightweight configuration structures consumed by the schedule engine."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from sunrise_alarm.domain.entities.location import DRIFT_THRESHOLD_DEGREES, Coordinate


@dataclass(frozen=True)
class EngineConfig:
    """Subset of the settings required by ``ScheduleEngine``."""

    default_location: Coordinate
    drift_threshold: float = DRIFT_THRESHOLD_DEGREES
    offset_step_minutes: int = 5
    forecast_max_age: timedelta = timedelta(hours=24)
