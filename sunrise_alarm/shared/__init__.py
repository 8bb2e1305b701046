"""
Shared module - Cross-cutting concerns

Constants, enums, logging and pacing helpers used by every layer.
This package must not depend on Infrastructure or Frameworks.
"""

from .consts import (
    FORECAST_CACHE_KEY,
    FORECAST_DAYS,
    SETTINGS_KEY,
    EnumEnvironment,
    EnumLogLevel,
    EnumNotificationLevel,
)
from .logging import configure_logging, get_logger, update_logging_from_settings
from .pacing import PacingPolicy

__all__ = [
    "EnumEnvironment",
    "EnumLogLevel",
    "EnumNotificationLevel",
    "FORECAST_CACHE_KEY",
    "FORECAST_DAYS",
    "SETTINGS_KEY",
    "PacingPolicy",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
