"""
Domain Errors

Error taxonomy for the sunrise schedule engine. Every error carries a
human readable message and an optional ``details`` mapping used for
structured logging.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidInputError(DomainError):
    """Raised for malformed coordinates, offsets or parse failures."""


class NetworkError(DomainError):
    """Raised when the transport fails or the remote answers with a non-2xx status."""


class InvalidResponseError(DomainError):
    """Raised when the remote service answers with a non-OK status or bad body."""


class StorageError(DomainError):
    """Raised when the key-value store cannot be read or written."""


class ForecastNotAvailableError(DomainError):
    """Raised when alarms are requested without a current forecast."""

    def __init__(
        self,
        message: str = "No sunrise forecast loaded yet",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)


class AlarmArmError(DomainError):
    """Raised when the platform alarm capability rejects an arm or dismiss call."""

    def __init__(
        self,
        weekday: int,
        label: str,
        reason: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.weekday = weekday
        self.label = label
        message = f"Alarm for weekday {weekday} ({label}) failed: {reason}"
        super().__init__(message, details)


class LocationPermissionDeniedError(DomainError):
    """Raised when the location capability refuses to share a position."""


class LocationUnavailableError(DomainError):
    """Raised when no position could be acquired."""
