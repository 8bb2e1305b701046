"""Celery task implementations for infrastructure services."""

from .base import CallbackTask, logger
from .rearm import rearm_sunrise_alarms

__all__ = ["CallbackTask", "logger", "rearm_sunrise_alarms"]
