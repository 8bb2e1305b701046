"""Weekday numbering helpers.

Weekdays are numbered 1..7 starting on Sunday. Every weekday number in
the engine is produced here.
"""

from datetime import date
from typing import Tuple

WEEKDAY_NAMES: Tuple[str, ...] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

MONTH_NAMES: Tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def weekday_number(day: date) -> int:
    """Return the 1..7 weekday (Sunday=1) of ``day``."""
    # isoweekday: Monday=1 .. Sunday=7
    return day.isoweekday() % 7 + 1


def weekday_name(weekday: int) -> str:
    if not 1 <= weekday <= 7:
        raise ValueError(f"Weekday must be within 1..7, got {weekday}")
    return WEEKDAY_NAMES[weekday - 1]


def weekday_for_index(current_weekday: int, index: int) -> int:
    """Weekday of the ``index``-th entry of a week anchored at ``current_weekday``."""
    if not 1 <= current_weekday <= 7:
        raise ValueError(f"Weekday must be within 1..7, got {current_weekday}")
    return (current_weekday - 1 + index) % 7 + 1


def format_long_date(day: date) -> str:
    """Format ``day`` as ``June 1, 2024``."""
    return f"{MONTH_NAMES[day.month - 1]} {day.day}, {day.year}"
