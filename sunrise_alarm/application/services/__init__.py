"""Application services package."""

from .alarm_scheduler import AlarmScheduler
from .location_provider import LocationProvider

__all__ = ["AlarmScheduler", "LocationProvider"]
