"""Pure helpers turning raw sunrise records into ordered, offset timestamps.

Nothing in this module performs I/O. Records that cannot be parsed are
dropped from the batch and reported through the optional ``on_invalid``
callback.
"""

import re
from dataclasses import replace
from datetime import date, datetime, time, timedelta, tzinfo
from typing import Callable, Iterable, List, Optional, Sequence

from sunrise_alarm.domain.entities.sunrise import AdjustedSunrise, RawSunriseRecord

InvalidRecordCallback = Callable[[RawSunriseRecord, str], None]

_DATE_PATTERN = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})$")
_TIME_PATTERN = re.compile(
    r"^(\d{1,2}):(\d{1,2})(?::(\d{1,2}))?(?:\s*([AaPp][Mm]))?$"
)

ONE_WEEK = timedelta(days=7)


class RecordParseError(ValueError):
    """Raised by ``parse_record_strict`` for a record that cannot be parsed."""


def _parse_date(raw: str) -> date:
    # Only the calendar part of "YYYY-MM-DDTHH:MM" is relevant.
    match = _DATE_PATTERN.match(raw.split("T", 1)[0].strip())
    if not match:
        raise RecordParseError(f"Invalid date: {raw!r}")
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError as e:
        raise RecordParseError(f"Invalid date: {raw!r}") from e


def _parse_time(raw: str) -> time:
    match = _TIME_PATTERN.match(raw.strip())
    if not match:
        raise RecordParseError(f"Invalid time: {raw!r}")
    hour, minute = int(match.group(1)), int(match.group(2))
    second = int(match.group(3) or 0)
    meridiem = (match.group(4) or "").upper()

    if meridiem:
        if not 1 <= hour <= 12:
            raise RecordParseError(f"Invalid time: {raw!r}")
        hour = hour % 12 + (12 if meridiem == "PM" else 0)

    try:
        return time(hour, minute, second)
    except ValueError as e:
        raise RecordParseError(f"Invalid time: {raw!r}") from e


def parse_record_strict(
    record: RawSunriseRecord, tz: Optional[tzinfo] = None
) -> datetime:
    """Combine a record's date and sunrise time into a local timestamp.

    Raises:
        RecordParseError: When either component is malformed or impossible.
    """
    if not isinstance(record.date, str) or not isinstance(record.sunrise_time, str):
        raise RecordParseError("Record fields must be strings")
    return datetime.combine(
        _parse_date(record.date), _parse_time(record.sunrise_time), tzinfo=tz
    )


def parse_record(
    record: RawSunriseRecord, tz: Optional[tzinfo] = None
) -> Optional[datetime]:
    """Like ``parse_record_strict`` but returns None for an unparseable record."""
    try:
        return parse_record_strict(record, tz)
    except RecordParseError:
        return None


def normalize(
    records: Iterable[RawSunriseRecord],
    *,
    today: date,
    tz: Optional[tzinfo] = None,
    on_invalid: Optional[InvalidRecordCallback] = None,
) -> List[AdjustedSunrise]:
    """Parse ``records`` and order them in a circular week anchored at ``today``.

    Entries dated before ``today`` sort after every entry from ``today``
    onwards, as if they occurred one week later. Only the ordering is
    affected, the timestamps themselves are kept as parsed.
    """
    start_of_today = datetime.combine(today, time.min, tzinfo=tz)
    parsed: List[AdjustedSunrise] = []

    for record in records:
        try:
            timestamp = parse_record_strict(record, tz)
        except RecordParseError as e:
            if on_invalid is not None:
                on_invalid(record, str(e))
            continue
        parsed.append(
            AdjustedSunrise(absolute_time=timestamp, source_date=timestamp.date())
        )

    def _days_until(entry: AdjustedSunrise) -> timedelta:
        delta = entry.absolute_time - start_of_today
        if delta < timedelta(0):
            delta += ONE_WEEK
        return delta

    return sorted(parsed, key=_days_until)


def apply_offset(
    sunrises: Sequence[AdjustedSunrise], offset_minutes: int
) -> List[AdjustedSunrise]:
    """Shift every timestamp by ``offset_minutes``, keeping order and source dates."""
    offset = timedelta(minutes=offset_minutes)
    return [
        replace(sunrise, absolute_time=sunrise.absolute_time + offset)
        for sunrise in sunrises
    ]
