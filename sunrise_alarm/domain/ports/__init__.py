"""Domain ports package."""

from .clock import IClock
from .notifications import INotificationSink

__all__ = ["IClock", "INotificationSink"]
