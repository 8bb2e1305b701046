"""Infrastructure services package."""

from . import tasks
from .celery_config import celery_app, create_celery_app
from .notification_sink import InMemoryNotificationSink
from .system_clock import SystemClock

__all__ = [
    "InMemoryNotificationSink",
    "SystemClock",
    "celery_app",
    "create_celery_app",
    "tasks",
]
