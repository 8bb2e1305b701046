"""
DTOs Package

Data Transfer Objects used by the API layer.
"""

from .notification_dto import NotificationDTO, NotificationsResponseDTO
from .schedule_dto import (
    AlarmSlotDTO,
    ArmAlarmsResponseDTO,
    CancelAlarmsResponseDTO,
    CoordinateDTO,
    OffsetUpdateRequestDTO,
    RefreshResponseDTO,
    ScheduleResponseDTO,
    SettingsResponseDTO,
    SunriseEntryDTO,
)

__all__ = [
    "AlarmSlotDTO",
    "ArmAlarmsResponseDTO",
    "CancelAlarmsResponseDTO",
    "CoordinateDTO",
    "NotificationDTO",
    "NotificationsResponseDTO",
    "OffsetUpdateRequestDTO",
    "RefreshResponseDTO",
    "ScheduleResponseDTO",
    "SettingsResponseDTO",
    "SunriseEntryDTO",
]
