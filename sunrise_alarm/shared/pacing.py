"""Minimum-interval pacing for strictly sequential remote calls."""

from __future__ import annotations

import asyncio
from typing import AsyncIterator, Awaitable, Callable, Iterable, TypeVar

T = TypeVar("T")

SleepFunc = Callable[[float], Awaitable[None]]


class PacingPolicy:
    """Yield items one by one, waiting ``min_interval_seconds`` between them.

    No wait happens before the first item or after the last one. Callers
    perform their call inside the ``async for`` body, so the next item is
    only released once the previous call has completed.
    """

    def __init__(
        self,
        min_interval_seconds: float,
        sleep: SleepFunc = asyncio.sleep,
    ) -> None:
        if min_interval_seconds < 0:
            raise ValueError("min_interval_seconds must be non-negative")
        self.min_interval_seconds = float(min_interval_seconds)
        self._sleep = sleep

    async def paced(self, items: Iterable[T]) -> AsyncIterator[T]:
        for index, item in enumerate(items):
            if index and self.min_interval_seconds:
                await self._sleep(self.min_interval_seconds)
            yield item
