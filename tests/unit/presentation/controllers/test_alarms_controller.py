from __future__ import annotations

import pytest
from fastapi import HTTPException

from sunrise_alarm.domain.entities.errors import (
    AlarmArmError,
    DomainError,
    ForecastNotAvailableError,
    InvalidInputError,
)
from sunrise_alarm.domain.entities.schedule import AlarmSlot
from sunrise_alarm.presentation.controllers.alarms_controller import (
    arm_alarm,
    arm_all_alarms,
    cancel_all_alarms,
)


class _StubEngine:
    def __init__(self, error: DomainError | None = None) -> None:
        self.error = error

    async def arm_all_alarms(self) -> list[AlarmSlot]:
        if self.error is not None:
            raise self.error
        return [AlarmSlot(7, 6, 8, "Sunrise Alarm Saturday")]

    async def arm_alarm(self, index: int) -> AlarmSlot:
        if self.error is not None:
            raise self.error
        return AlarmSlot(1, 5, 41, "Sunrise Alarm Sunday")

    async def cancel_all_alarms(self) -> list[int]:
        if self.error is not None:
            raise self.error
        return [1, 2, 3, 4, 5, 6, 7]


@pytest.mark.asyncio
async def test_arm_all_alarms_returns_slots() -> None:
    dto = await arm_all_alarms(engine=_StubEngine())

    assert dto.alarms[0].label == "Sunrise Alarm Saturday"
    assert dto.alarms[0].hour == 6


@pytest.mark.asyncio
async def test_arm_alarm_returns_slot() -> None:
    dto = await arm_alarm(index=1, engine=_StubEngine())

    assert (dto.weekday, dto.hour, dto.minute) == (1, 5, 41)


@pytest.mark.asyncio
async def test_cancel_all_alarms_returns_weekdays() -> None:
    dto = await cancel_all_alarms(engine=_StubEngine())

    assert dto.weekdays == [1, 2, 3, 4, 5, 6, 7]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("error", "status_code"),
    [
        (ForecastNotAvailableError(), 409),
        (AlarmArmError(2, "Sunrise Alarm Monday", "rejected"), 502),
        (InvalidInputError("Alarm index out of range: 6"), 422),
    ],
)
async def test_arm_errors_are_mapped(error: DomainError, status_code: int) -> None:
    with pytest.raises(HTTPException) as exc_info:
        await arm_all_alarms(engine=_StubEngine(error))
    assert exc_info.value.status_code == status_code

    with pytest.raises(HTTPException) as exc_info:
        await arm_alarm(index=6, engine=_StubEngine(error))
    assert exc_info.value.status_code == status_code


@pytest.mark.asyncio
async def test_cancel_failure_is_mapped() -> None:
    error = AlarmArmError(3, "Sunrise Alarm Tuesday", "rejected")

    with pytest.raises(HTTPException) as exc_info:
        await cancel_all_alarms(engine=_StubEngine(error))

    assert exc_info.value.status_code == 502
    assert "weekday 3" in exc_info.value.detail
