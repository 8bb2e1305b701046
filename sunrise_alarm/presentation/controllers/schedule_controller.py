"""
Schedule Router - Presentation Layer

This module defines the FastAPI router for reading and refreshing the
weekly sunrise schedule.
"""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, Query

from sunrise_alarm.application.dtos import RefreshResponseDTO, ScheduleResponseDTO
from sunrise_alarm.application.use_cases import ScheduleEngine
from sunrise_alarm.domain.entities.errors import DomainError
from sunrise_alarm.shared import get_logger

from .error_mapping import to_http_exception

logger = get_logger(__name__)

router = APIRouter(prefix="/schedule", tags=["Schedule"])


@router.get("", response_model=ScheduleResponseDTO)
@inject
async def get_schedule(
    engine: ScheduleEngine = Depends(Provide["schedule_engine"]),
) -> ScheduleResponseDTO:
    """
    Get the adjusted sunrise schedule, ordered from today onwards.

    The schedule is empty until a forecast has been loaded.
    """
    return ScheduleResponseDTO.from_domain(engine.get_schedule())


@router.post("/refresh", response_model=RefreshResponseDTO)
@inject
async def refresh_schedule(
    force: bool = Query(False, description="Bypass the cached forecast"),
    engine: ScheduleEngine = Depends(Provide["schedule_engine"]),
) -> RefreshResponseDTO:
    """
    Fetch the seven-day forecast for the current location.

    A cached forecast younger than 24 hours for the same location is reused
    unless ``force`` is set.
    """
    try:
        outcome = await engine.refresh(force_refresh=force)
    except DomainError as e:
        logger.error("schedule.refresh_failed", error=e.message)
        raise to_http_exception(e)
    except Exception as e:
        logger.error("schedule.refresh_unexpected_error", error=str(e))
        raise HTTPException(status_code=500, detail="Internal server error")

    return RefreshResponseDTO.from_domain(outcome)
