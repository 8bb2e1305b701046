"""
Settings Router - Presentation Layer

This module defines the FastAPI router for the alarm offset and the
location settings.
"""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends

from sunrise_alarm.application.dtos import (
    CoordinateDTO,
    OffsetUpdateRequestDTO,
    SettingsResponseDTO,
)
from sunrise_alarm.application.use_cases import ScheduleEngine
from sunrise_alarm.domain.entities.errors import DomainError
from sunrise_alarm.shared import get_logger

from .error_mapping import to_http_exception

logger = get_logger(__name__)

router = APIRouter(prefix="/settings", tags=["Settings"])


@router.get("", response_model=SettingsResponseDTO)
@inject
async def get_settings(
    engine: ScheduleEngine = Depends(Provide["schedule_engine"]),
) -> SettingsResponseDTO:
    """Get the current offset and location."""
    return SettingsResponseDTO.from_domain(engine.settings)


@router.put("/offset", response_model=SettingsResponseDTO)
@inject
async def set_offset(
    request: OffsetUpdateRequestDTO,
    engine: ScheduleEngine = Depends(Provide["schedule_engine"]),
) -> SettingsResponseDTO:
    """
    Set the signed offset, in minutes, applied to every sunrise time.

    Already armed alarms keep their time until they are armed again.
    """
    try:
        settings = await engine.set_offset(request.minutes)
    except DomainError as e:
        logger.error("settings.offset_failed", error=e.message)
        raise to_http_exception(e)

    return SettingsResponseDTO.from_domain(settings)


@router.post("/offset/increment", response_model=SettingsResponseDTO)
@inject
async def increment_offset(
    engine: ScheduleEngine = Depends(Provide["schedule_engine"]),
) -> SettingsResponseDTO:
    """Move the offset one step later."""
    try:
        settings = await engine.increment_offset()
    except DomainError as e:
        raise to_http_exception(e)

    return SettingsResponseDTO.from_domain(settings)


@router.post("/offset/decrement", response_model=SettingsResponseDTO)
@inject
async def decrement_offset(
    engine: ScheduleEngine = Depends(Provide["schedule_engine"]),
) -> SettingsResponseDTO:
    """Move the offset one step earlier."""
    try:
        settings = await engine.decrement_offset()
    except DomainError as e:
        raise to_http_exception(e)

    return SettingsResponseDTO.from_domain(settings)


@router.put("/location", response_model=SettingsResponseDTO)
@inject
async def set_location(
    coordinate: CoordinateDTO,
    engine: ScheduleEngine = Depends(Provide["schedule_engine"]),
) -> SettingsResponseDTO:
    """
    Set the location. Moving further than the drift threshold discards the
    cached forecast and fetches a new one.
    """
    try:
        settings = await engine.set_location(coordinate.model_dump())
    except DomainError as e:
        logger.error("settings.location_failed", error=e.message)
        raise to_http_exception(e)

    return SettingsResponseDTO.from_domain(settings)


@router.post("/location/detect", response_model=SettingsResponseDTO)
@inject
async def detect_location(
    engine: ScheduleEngine = Depends(Provide["schedule_engine"]),
) -> SettingsResponseDTO:
    """Replace the location with the detected device position."""
    try:
        settings = await engine.update_location_from_device()
    except DomainError as e:
        logger.error("settings.location_detect_failed", error=e.message)
        raise to_http_exception(e)

    return SettingsResponseDTO.from_domain(settings)
