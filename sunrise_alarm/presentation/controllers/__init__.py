"""
Controllers Package - Presentation Layer

FastAPI routers exposing the user commands of the schedule engine.
Controllers validate input, map domain errors to HTTP errors and
convert results into DTOs.
"""

from .alarms_controller import router as alarms_router
from .notifications_controller import router as notifications_router
from .schedule_controller import router as schedule_router
from .settings_controller import router as settings_router

__all__ = [
    "alarms_router",
    "notifications_router",
    "schedule_router",
    "settings_router",
]
