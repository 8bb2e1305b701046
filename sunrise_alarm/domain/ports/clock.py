"""Domain port for reading the local wall clock."""

from __future__ import annotations

from datetime import date, datetime
from typing import Protocol


class IClock(Protocol):
    """Source of the current time."""

    def now(self) -> datetime:
        """Current timezone-aware local time."""
        ...

    def today(self) -> date:
        """Current local calendar date."""
        ...
