"""
Schedule DTOs - Application Layer

Data Transfer Objects exchanged between the schedule engine and the
presentation layer (API).
"""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from sunrise_alarm.application.models import RefreshOutcome, ScheduleEntry, ScheduleView
from sunrise_alarm.domain.entities.location import Coordinate
from sunrise_alarm.domain.entities.schedule import AlarmSlot, ScheduleSettings


class CoordinateDTO(BaseModel):
    """Latitude/longitude pair in decimal degrees."""

    latitude: float = Field(..., description="Latitude in decimal degrees")
    longitude: float = Field(..., description="Longitude in decimal degrees")

    model_config = {
        "json_schema_extra": {"example": {"latitude": 51.5, "longitude": 0.0}}
    }

    @classmethod
    def from_domain(cls, coordinate: Coordinate) -> "CoordinateDTO":
        return cls(latitude=coordinate.latitude, longitude=coordinate.longitude)


class SunriseEntryDTO(BaseModel):
    """One adjusted sunrise of the weekly schedule."""

    index: int = Field(..., description="Position in the circular week, 0 is today")
    weekday: int = Field(..., description="Weekday the alarm is armed on (Sunday=1)")
    weekday_name: str
    source_date: date = Field(..., description="Calendar date of the sunrise")
    display_date: str = Field(..., description="Human readable date")
    alarm_time: str = Field(..., description="Adjusted alarm time as HH:MM")
    adjusted_at: datetime
    is_today: bool

    @classmethod
    def from_domain(cls, entry: ScheduleEntry) -> "SunriseEntryDTO":
        return cls(
            index=entry.index,
            weekday=entry.weekday,
            weekday_name=entry.weekday_name,
            source_date=entry.source_date,
            display_date=entry.display_date,
            alarm_time=entry.alarm_time,
            adjusted_at=entry.adjusted_at,
            is_today=entry.is_today,
        )


class ScheduleResponseDTO(BaseModel):
    """Current schedule together with the settings it derives from."""

    entries: List[SunriseEntryDTO] = Field(default_factory=list)
    offset_minutes: int
    timezone: str
    location: Optional[CoordinateDTO] = None
    fetched_at: Optional[datetime] = None

    model_config = {
        "json_schema_extra": {
            "example": {
                "entries": [
                    {
                        "index": 0,
                        "weekday": 7,
                        "weekday_name": "Saturday",
                        "source_date": "2024-06-01",
                        "display_date": "June 1, 2024",
                        "alarm_time": "06:08",
                        "adjusted_at": "2024-06-01T06:08:00+01:00",
                        "is_today": True,
                    }
                ],
                "offset_minutes": 10,
                "timezone": "Europe/London",
                "location": {"latitude": 51.5, "longitude": 0.0},
                "fetched_at": "2024-06-01T04:00:00+01:00",
            }
        }
    }

    @classmethod
    def from_domain(cls, view: ScheduleView) -> "ScheduleResponseDTO":
        return cls(
            entries=[SunriseEntryDTO.from_domain(entry) for entry in view.entries],
            offset_minutes=view.offset_minutes,
            timezone=view.timezone,
            location=(
                CoordinateDTO.from_domain(view.location) if view.location else None
            ),
            fetched_at=view.fetched_at,
        )


class RefreshResponseDTO(BaseModel):
    """Result of a refresh command."""

    refreshed: bool
    reason: Optional[str] = Field(None, description="Why nothing was fetched")
    record_count: int = 0
    dropped_records: List[str] = Field(
        default_factory=list, description="Dates of records that could not be parsed"
    )

    @classmethod
    def from_domain(cls, outcome: RefreshOutcome) -> "RefreshResponseDTO":
        return cls(
            refreshed=outcome.refreshed,
            reason=outcome.reason,
            record_count=outcome.record_count,
            dropped_records=list(outcome.dropped_records),
        )


class AlarmSlotDTO(BaseModel):
    """A weekly alarm handed to the alarm capability."""

    weekday: int = Field(..., ge=1, le=7, description="Day of week, Sunday=1")
    hour: int = Field(..., ge=0, le=23)
    minute: int = Field(..., ge=0, le=59)
    label: str

    @classmethod
    def from_domain(cls, slot: AlarmSlot) -> "AlarmSlotDTO":
        return cls(
            weekday=slot.weekday, hour=slot.hour, minute=slot.minute, label=slot.label
        )


class ArmAlarmsResponseDTO(BaseModel):
    """Alarms armed by an arm command."""

    alarms: List[AlarmSlotDTO] = Field(default_factory=list)

    model_config = {
        "json_schema_extra": {
            "example": {
                "alarms": [
                    {
                        "weekday": 7,
                        "hour": 6,
                        "minute": 8,
                        "label": "Sunrise Alarm Saturday",
                    }
                ]
            }
        }
    }


class CancelAlarmsResponseDTO(BaseModel):
    """Weekdays whose alarm was dismissed."""

    weekdays: List[int] = Field(default_factory=list)


class SettingsResponseDTO(BaseModel):
    """User settings."""

    offset_minutes: int
    location: Optional[CoordinateDTO] = None

    @classmethod
    def from_domain(cls, settings: ScheduleSettings) -> "SettingsResponseDTO":
        return cls(
            offset_minutes=settings.offset_minutes,
            location=(
                CoordinateDTO.from_domain(settings.location)
                if settings.location
                else None
            ),
        )


class OffsetUpdateRequestDTO(BaseModel):
    """New signed minute offset."""

    minutes: int = Field(..., strict=True, description="Signed offset in minutes")

    model_config = {"json_schema_extra": {"example": {"minutes": -15}}}
