from __future__ import annotations

import pytest
from conftest import FakeMongoDatabase
from pymongo.errors import ServerSelectionTimeoutError

from sunrise_alarm.domain.entities.errors import StorageError
from sunrise_alarm.infrastructure.repositories.mongo_key_value_store import (
    MongoKeyValueStore,
)


@pytest.mark.asyncio
async def test_set_get_and_remove(fake_mongo_database: FakeMongoDatabase) -> None:
    store = MongoKeyValueStore(fake_mongo_database, collection_name="kv_store")

    assert await store.get("schedule_settings") is None

    await store.set("schedule_settings", '{"offset_minutes": 5}')
    await store.set("schedule_settings", '{"offset_minutes": 10}')

    assert await store.get("schedule_settings") == '{"offset_minutes": 10}'
    document = fake_mongo_database.get_collection("kv_store").documents[
        "schedule_settings"
    ]
    assert document["updated_at"].tzinfo is not None

    await store.remove("schedule_settings")
    await store.remove("schedule_settings")

    assert await store.get("schedule_settings") is None


@pytest.mark.asyncio
async def test_non_string_value_reads_as_missing(
    fake_mongo_database: FakeMongoDatabase,
) -> None:
    fake_mongo_database.get_collection("kv_store").documents["broken"] = {
        "key": "broken",
        "value": 42,
    }

    assert await MongoKeyValueStore(fake_mongo_database).get("broken") is None


@pytest.mark.asyncio
async def test_driver_errors_become_storage_errors(
    fake_mongo_database: FakeMongoDatabase, monkeypatch
) -> None:
    async def _unreachable(*args, **kwargs):
        raise ServerSelectionTimeoutError("no servers available")

    monkeypatch.setattr(fake_mongo_database, "find_one", _unreachable)
    monkeypatch.setattr(fake_mongo_database, "upsert_one", _unreachable)
    monkeypatch.setattr(fake_mongo_database, "delete_one", _unreachable)
    store = MongoKeyValueStore(fake_mongo_database)

    with pytest.raises(StorageError):
        await store.get("key")
    with pytest.raises(StorageError):
        await store.set("key", "value")
    with pytest.raises(StorageError):
        await store.remove("key")
