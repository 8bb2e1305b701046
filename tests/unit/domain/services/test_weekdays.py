from __future__ import annotations

from datetime import date, timedelta

import pytest

from sunrise_alarm.domain.services.weekdays import (
    format_long_date,
    weekday_for_index,
    weekday_name,
    weekday_number,
)


def test_weekday_number_starts_on_sunday() -> None:
    sunday = date(2024, 6, 2)

    numbers = [weekday_number(sunday + timedelta(days=i)) for i in range(7)]

    assert numbers == [1, 2, 3, 4, 5, 6, 7]
    assert weekday_number(date(2024, 6, 1)) == 7


def test_weekday_for_index_wraps_after_saturday() -> None:
    assert [weekday_for_index(7, i) for i in range(7)] == [7, 1, 2, 3, 4, 5, 6]
    assert [weekday_for_index(1, i) for i in range(7)] == [1, 2, 3, 4, 5, 6, 7]


def test_weekday_name_and_validation() -> None:
    assert weekday_name(1) == "Sunday"
    assert weekday_name(7) == "Saturday"
    with pytest.raises(ValueError):
        weekday_name(0)
    with pytest.raises(ValueError):
        weekday_for_index(8, 0)


def test_format_long_date() -> None:
    assert format_long_date(date(2024, 6, 1)) == "June 1, 2024"
