"""Application use cases package."""

from .schedule_engine_use_case import ScheduleEngine

__all__ = ["ScheduleEngine"]
