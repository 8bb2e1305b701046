from __future__ import annotations

import sys
from datetime import date, datetime, timedelta, timezone
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Dict, List, Optional, Sequence, Tuple

import pytest

from sunrise_alarm.domain.entities.errors import (
    AlarmArmError,
    DomainError,
    StorageError,
)
from sunrise_alarm.domain.entities.location import Coordinate
from sunrise_alarm.domain.entities.sunrise import DailySunrise, RawSunriseRecord
from sunrise_alarm.domain.gateways.alarm_gateway import IAlarmGateway
from sunrise_alarm.domain.gateways.location_gateway import ILocationGateway
from sunrise_alarm.domain.gateways.sunrise_gateway import ISunriseGateway
from sunrise_alarm.domain.repositories.key_value_store import IKeyValueStore
from sunrise_alarm.shared import PacingPolicy

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Saturday, June 1, 2024
SATURDAY = datetime(2024, 6, 1, 4, 0, tzinfo=timezone.utc)
GREENWICH = Coordinate(latitude=51.4769, longitude=0.0005)
LONDON = Coordinate(latitude=51.5, longitude=0.0)


def make_records(
    start: date, times: Optional[Sequence[str]] = None
) -> List[RawSunriseRecord]:
    times = times or [f"05:{50 + offset:02d}" for offset in range(7)]
    return [
        RawSunriseRecord(
            date=(start + timedelta(days=offset)).isoformat(), sunrise_time=value
        )
        for offset, value in enumerate(times)
    ]


class FakeClock:
    def __init__(self, now: datetime = SATURDAY):
        self.current = now

    def now(self) -> datetime:
        return self.current

    def today(self) -> date:
        return self.current.date()

    def advance(self, delta: timedelta) -> None:
        self.current = self.current + delta


class RecordingSleep:
    def __init__(self) -> None:
        self.calls: List[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


class FakeKeyValueStore(IKeyValueStore):
    def __init__(self) -> None:
        self.values: Dict[str, str] = {}
        self.fail_get = False
        self.fail_set = False
        self.fail_remove = False
        self.set_calls: List[Tuple[str, str]] = []

    async def get(self, key: str) -> Optional[str]:
        if self.fail_get:
            raise StorageError("store down")
        return self.values.get(key)

    async def set(self, key: str, value: str) -> None:
        if self.fail_set:
            raise StorageError("store down")
        self.set_calls.append((key, value))
        self.values[key] = value

    async def remove(self, key: str) -> None:
        if self.fail_remove:
            raise StorageError("store down")
        self.values.pop(key, None)


class FakeSunriseGateway(ISunriseGateway):
    def __init__(self, timezone_name: Optional[str] = "Europe/London") -> None:
        self.timezone_name = timezone_name
        self.calls: List[Tuple[Coordinate, date]] = []
        self.failures: Dict[int, DomainError] = {}
        self.times: Dict[date, str] = {}

    async def get_daily_sunrise(
        self, coordinate: Coordinate, day: date
    ) -> DailySunrise:
        index = len(self.calls)
        self.calls.append((coordinate, day))
        if index in self.failures:
            raise self.failures[index]
        sunrise = self.times.get(day, f"05:{40 + index:02d}")
        return DailySunrise(
            record=RawSunriseRecord(date=day.isoformat(), sunrise_time=sunrise),
            timezone=self.timezone_name if index == 0 else "ignored/Zone",
        )


class FakeAlarmGateway(IAlarmGateway):
    def __init__(self) -> None:
        self.armed: Dict[Tuple[int, str], Tuple[int, int]] = {}
        self.calls: List[Tuple[int, int, int, str]] = []
        self.dismissed: List[Tuple[int, str]] = []
        self.fail_weekday: Optional[int] = None

    async def arm_weekly_alarm(
        self, hour: int, minute: int, weekday: int, label: str
    ) -> None:
        self.calls.append((weekday, hour, minute, label))
        if weekday == self.fail_weekday:
            raise AlarmArmError(weekday, label, "rejected")
        self.armed[(weekday, label)] = (hour, minute)

    async def dismiss_alarm(self, weekday: int, label: str) -> None:
        if weekday == self.fail_weekday:
            raise AlarmArmError(weekday, label, "rejected")
        self.dismissed.append((weekday, label))
        self.armed.pop((weekday, label), None)


class FakeLocationGateway(ILocationGateway):
    def __init__(
        self,
        coordinate: Optional[Coordinate] = LONDON,
        error: Optional[DomainError] = None,
    ) -> None:
        self.coordinate = coordinate
        self.error = error
        self.calls = 0

    async def get_current_coordinate(self) -> Coordinate:
        self.calls += 1
        if self.error is not None:
            raise self.error
        assert self.coordinate is not None
        return self.coordinate


class FakeCollection:
    def __init__(self) -> None:
        self.documents: Dict[str, Dict[str, Any]] = {}
        self.last_query: Dict[str, Any] | None = None
        self.created_indexes: List[tuple[Any, ...]] = []
        self.last_update: tuple[Any, ...] | None = None

    def find_one(self, query: Dict[str, Any]) -> Dict[str, Any] | None:
        self.last_query = query
        key = query.get("key")
        if not isinstance(key, str):
            return None
        return self.documents.get(key)

    def replace_one(
        self, query: Dict[str, Any], document: Dict[str, Any], upsert: bool = False
    ) -> Any:
        key = query.get("key")
        if not isinstance(key, str) or (key not in self.documents and not upsert):
            return SimpleNamespace(matched_count=0, acknowledged=True)
        matched = 1 if key in self.documents else 0
        self.documents[key] = document
        return SimpleNamespace(matched_count=matched, acknowledged=True)

    def find_one_and_update(
        self,
        query: Dict[str, Any],
        update: Dict[str, Any],
        upsert: bool = False,
        return_document: Any = None,
    ) -> Dict[str, Any] | None:
        self.last_update = (query, update, upsert, return_document)
        key = query.get("_id")
        document = self.documents.get(key)
        if document is None:
            if not upsert:
                return None
            document = self.documents[key] = {"_id": key}
        document.update(update.get("$set", {}))
        return document

    def delete_one(self, query: Dict[str, Any]) -> Any:
        key = query.get("key")
        if isinstance(key, str) and key in self.documents:
            del self.documents[key]
            return SimpleNamespace(deleted_count=1, acknowledged=True)
        return SimpleNamespace(deleted_count=0, acknowledged=True)

    def create_index(self, keys: Any, name: str | None = None, **kwargs: Any) -> Any:
        self.created_indexes.append((keys, name, kwargs))
        return name or keys


class FakeMongoDatabase:
    def __init__(self) -> None:
        self.collections: Dict[str, FakeCollection] = {}
        self.closed = False

    def get_collection(self, name: str) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection())

    async def find_one(self, collection_name: str, query: Dict[str, Any]) -> Any:
        return self.get_collection(collection_name).find_one(query)

    async def upsert_one(
        self, collection_name: str, query: Dict[str, Any], document: Dict[str, Any]
    ) -> Any:
        self.get_collection(collection_name).replace_one(query, document, upsert=True)
        return document

    async def delete_one(
        self, collection_name: str, query: Dict[str, Any], missing_ok: bool = False
    ) -> None:
        result = self.get_collection(collection_name).delete_one(query)
        if result.deleted_count == 0 and not missing_ok:
            raise Exception(f"Document not found in {collection_name}")

    async def create_indexes(self, collection_name: str) -> None:
        self.get_collection(collection_name).create_index(
            "key", name="key_unique_idx", unique=True
        )

    def close(self) -> None:
        self.closed = True


@pytest.fixture()
def fake_mongo_database() -> FakeMongoDatabase:
    return FakeMongoDatabase()


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture()
def request_pacing(recording_sleep: RecordingSleep) -> PacingPolicy:
    return PacingPolicy(1.0, sleep=recording_sleep)


@pytest.fixture()
def alarm_pacing(recording_sleep: RecordingSleep) -> PacingPolicy:
    return PacingPolicy(0.5, sleep=recording_sleep)


@pytest.fixture()
def kv_store() -> FakeKeyValueStore:
    return FakeKeyValueStore()


@pytest.fixture()
def sunrise_gateway() -> FakeSunriseGateway:
    return FakeSunriseGateway()


@pytest.fixture()
def alarm_gateway() -> FakeAlarmGateway:
    return FakeAlarmGateway()


@pytest.fixture()
def location_gateway() -> FakeLocationGateway:
    return FakeLocationGateway()
