"""Pure domain services."""

from .schedule_computer import (
    RecordParseError,
    apply_offset,
    normalize,
    parse_record,
    parse_record_strict,
)
from .weekdays import (
    WEEKDAY_NAMES,
    format_long_date,
    weekday_for_index,
    weekday_name,
    weekday_number,
)

__all__ = [
    "RecordParseError",
    "WEEKDAY_NAMES",
    "apply_offset",
    "format_long_date",
    "normalize",
    "parse_record",
    "parse_record_strict",
    "weekday_for_index",
    "weekday_name",
    "weekday_number",
]
