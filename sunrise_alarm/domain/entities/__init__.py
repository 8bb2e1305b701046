"""
Domain Entities Package

Core value objects and errors of the sunrise schedule engine.
"""

from .errors import (
    AlarmArmError,
    DomainError,
    ForecastNotAvailableError,
    InvalidInputError,
    InvalidResponseError,
    LocationPermissionDeniedError,
    LocationUnavailableError,
    NetworkError,
    StorageError,
)
from .location import DRIFT_THRESHOLD_DEGREES, Coordinate
from .schedule import AlarmSlot, Notification, ScheduleSettings
from .sunrise import (
    UNKNOWN_TIMEZONE,
    AdjustedSunrise,
    DailySunrise,
    RawSunriseRecord,
    SunriseForecast,
)

__all__ = [
    "AdjustedSunrise",
    "AlarmArmError",
    "AlarmSlot",
    "Coordinate",
    "DailySunrise",
    "DomainError",
    "DRIFT_THRESHOLD_DEGREES",
    "ForecastNotAvailableError",
    "InvalidInputError",
    "InvalidResponseError",
    "LocationPermissionDeniedError",
    "LocationUnavailableError",
    "NetworkError",
    "Notification",
    "RawSunriseRecord",
    "ScheduleSettings",
    "StorageError",
    "SunriseForecast",
    "UNKNOWN_TIMEZONE",
]
