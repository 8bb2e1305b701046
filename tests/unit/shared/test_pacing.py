from __future__ import annotations

import pytest
from conftest import RecordingSleep

from sunrise_alarm.shared.pacing import PacingPolicy


async def _drain(policy: PacingPolicy, items) -> list:
    return [item async for item in policy.paced(items)]


@pytest.mark.asyncio
async def test_paced_sleeps_between_items_only() -> None:
    sleep = RecordingSleep()
    policy = PacingPolicy(1.0, sleep=sleep)

    items = await _drain(policy, range(7))

    assert items == list(range(7))
    assert sleep.calls == [1.0] * 6


@pytest.mark.asyncio
async def test_paced_single_item_and_zero_interval() -> None:
    sleep = RecordingSleep()

    assert await _drain(PacingPolicy(0.5, sleep=sleep), ["only"]) == ["only"]
    assert await _drain(PacingPolicy(0, sleep=sleep), [1, 2, 3]) == [1, 2, 3]
    assert sleep.calls == []


@pytest.mark.asyncio
async def test_next_item_waits_for_previous_body() -> None:
    events = []

    async def sleep(seconds: float) -> None:
        events.append("sleep")

    async for item in PacingPolicy(1.0, sleep=sleep).paced(["a", "b"]):
        events.append(f"call-{item}")

    assert events == ["call-a", "sleep", "call-b"]


def test_negative_interval_is_rejected() -> None:
    with pytest.raises(ValueError):
        PacingPolicy(-1)
