"""
Application Layer Package

Orchestrates the domain: the schedule engine, the alarm scheduler and
location provider services, read models and API DTOs.
"""

from sunrise_alarm.application import dtos, models, services, use_cases

__all__ = ["dtos", "models", "services", "use_cases"]
