from __future__ import annotations

import json

import pytest
from conftest import LONDON, FakeKeyValueStore

from sunrise_alarm.domain.entities.errors import StorageError
from sunrise_alarm.domain.entities.schedule import ScheduleSettings
from sunrise_alarm.infrastructure.repositories.settings_repository import (
    SettingsRepository,
)
from sunrise_alarm.shared import SETTINGS_KEY


@pytest.mark.asyncio
async def test_load_defaults_when_nothing_saved(kv_store: FakeKeyValueStore) -> None:
    settings = await SettingsRepository(kv_store).load()

    assert settings == ScheduleSettings(offset_minutes=0, location=None)


@pytest.mark.asyncio
async def test_save_then_load(kv_store: FakeKeyValueStore) -> None:
    repository = SettingsRepository(kv_store)

    await repository.save(ScheduleSettings(offset_minutes=-15, location=LONDON))

    assert json.loads(kv_store.values[SETTINGS_KEY]) == {
        "offset_minutes": -15,
        "location": {"latitude": 51.5, "longitude": 0.0},
    }
    assert await repository.load() == ScheduleSettings(-15, LONDON)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "raw",
    [
        "not json",
        json.dumps({"offset_minutes": "ten", "location": None}),
        json.dumps({"offset_minutes": 5, "location": {"latitude": 99, "longitude": 0}}),
        json.dumps([1, 2, 3]),
    ],
)
async def test_malformed_value_loads_defaults(
    kv_store: FakeKeyValueStore, raw: str
) -> None:
    kv_store.values[SETTINGS_KEY] = raw

    assert await SettingsRepository(kv_store).load() == ScheduleSettings()


@pytest.mark.asyncio
async def test_storage_errors_propagate(kv_store: FakeKeyValueStore) -> None:
    repository = SettingsRepository(kv_store)
    kv_store.fail_get = True
    kv_store.fail_set = True

    with pytest.raises(StorageError):
        await repository.load()
    with pytest.raises(StorageError):
        await repository.save(ScheduleSettings(offset_minutes=5))
