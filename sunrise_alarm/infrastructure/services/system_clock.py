"""Wall clock backed by the system time."""

from datetime import date, datetime, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo


class SystemClock:
    """Local time of the host, or of an explicit IANA timezone."""

    def __init__(self, timezone_name: Optional[str] = None):
        self._tz: Optional[tzinfo] = ZoneInfo(timezone_name) if timezone_name else None

    def now(self) -> datetime:
        if self._tz is not None:
            return datetime.now(self._tz)
        return datetime.now().astimezone()

    def today(self) -> date:
        return self.now().date()
