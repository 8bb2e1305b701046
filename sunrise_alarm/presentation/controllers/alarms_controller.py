"""
Alarms Router - Presentation Layer

This module defines the FastAPI router for arming and cancelling the
weekly sunrise alarms.
"""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Path

from sunrise_alarm.application.dtos import (
    AlarmSlotDTO,
    ArmAlarmsResponseDTO,
    CancelAlarmsResponseDTO,
)
from sunrise_alarm.application.use_cases import ScheduleEngine
from sunrise_alarm.domain.entities.errors import DomainError
from sunrise_alarm.shared import get_logger

from .error_mapping import to_http_exception

logger = get_logger(__name__)

router = APIRouter(prefix="/alarms", tags=["Alarms"])


@router.post("", response_model=ArmAlarmsResponseDTO)
@inject
async def arm_all_alarms(
    engine: ScheduleEngine = Depends(Provide["schedule_engine"]),
) -> ArmAlarmsResponseDTO:
    """
    Arm one weekly alarm per day of the schedule.

    Alarms armed before a failure stay armed; calling again overwrites them.
    """
    try:
        slots = await engine.arm_all_alarms()
    except DomainError as e:
        logger.error("alarms.arm_all_failed", error=e.message)
        raise to_http_exception(e)

    return ArmAlarmsResponseDTO(alarms=[AlarmSlotDTO.from_domain(s) for s in slots])


@router.post("/{index}", response_model=AlarmSlotDTO)
@inject
async def arm_alarm(
    index: int = Path(..., ge=0, le=6, description="Schedule entry, 0 is today"),
    engine: ScheduleEngine = Depends(Provide["schedule_engine"]),
) -> AlarmSlotDTO:
    """Arm the alarm of a single schedule entry."""
    try:
        slot = await engine.arm_alarm(index)
    except DomainError as e:
        logger.error("alarms.arm_failed", index=index, error=e.message)
        raise to_http_exception(e)

    return AlarmSlotDTO.from_domain(slot)


@router.delete("", response_model=CancelAlarmsResponseDTO)
@inject
async def cancel_all_alarms(
    engine: ScheduleEngine = Depends(Provide["schedule_engine"]),
) -> CancelAlarmsResponseDTO:
    """Dismiss the seven weekly sunrise alarms."""
    try:
        weekdays = await engine.cancel_all_alarms()
    except DomainError as e:
        logger.error("alarms.cancel_failed", error=e.message)
        raise to_http_exception(e)

    return CancelAlarmsResponseDTO(weekdays=weekdays)
