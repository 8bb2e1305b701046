from __future__ import annotations

from typing import Dict

import pymongo.errors
import pytest
from conftest import FakeCollection
from pymongo import ReturnDocument

from sunrise_alarm.infrastructure.database.mongo_database import MongoDatabase


class _StubMongoClient:
    def __init__(self, uri: str) -> None:
        self.uri = uri
        self.databases: Dict[str, _StubDatabase] = {}
        self.closed = False

    def __getitem__(self, name: str) -> "_StubDatabase":
        return self.databases.setdefault(name, _StubDatabase())

    def close(self) -> None:
        self.closed = True


class _StubDatabase:
    def __init__(self) -> None:
        self.collections: Dict[str, FakeCollection] = {}

    def __getitem__(self, name: str) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection())


@pytest.fixture(autouse=True)
def patch_mongo_client(monkeypatch) -> None:
    monkeypatch.setattr(
        "sunrise_alarm.infrastructure.database.mongo_database.MongoClient",
        _StubMongoClient,
    )


@pytest.mark.asyncio
async def test_upsert_and_find_document() -> None:
    database = MongoDatabase("mongodb://localhost:27017", "sunrise_alarm")

    document = {"key": "schedule_settings", "value": "{}"}
    await database.upsert_one("kv_store", {"key": "schedule_settings"}, document)

    assert await database.find_one("kv_store", {"key": "schedule_settings"}) == document


@pytest.mark.asyncio
async def test_upsert_replaces_existing_document() -> None:
    database = MongoDatabase("mongodb://localhost:27017", "sunrise_alarm")
    query = {"key": "sunrise_forecast"}

    await database.upsert_one("kv_store", query, {"key": "sunrise_forecast", "v": 1})
    await database.upsert_one("kv_store", query, {"key": "sunrise_forecast", "v": 2})

    result = await database.find_one("kv_store", query)
    assert result is not None and result["v"] == 2


@pytest.mark.asyncio
async def test_find_one_and_update_returns_updated_document() -> None:
    database = MongoDatabase("mongodb://localhost:27017", "sunrise_alarm")
    update = {"$set": {"owner": "api"}}

    assert await database.find_one_and_update("locks", {"_id": "lease"}, update) is None

    result = await database.find_one_and_update(
        "locks", {"_id": "lease"}, update, upsert=True
    )

    assert result == {"_id": "lease", "owner": "api"}
    last_update = database.get_collection("locks").last_update
    assert last_update is not None
    assert last_update[2:] == (True, ReturnDocument.AFTER)


@pytest.mark.asyncio
async def test_delete_missing_document() -> None:
    database = MongoDatabase("mongodb://localhost:27017", "sunrise_alarm")

    with pytest.raises(Exception, match="Document not found"):
        await database.delete_one("kv_store", {"key": "missing"})

    await database.delete_one("kv_store", {"key": "missing"}, missing_ok=True)


@pytest.mark.asyncio
async def test_create_indexes_adds_unique_key_index() -> None:
    database = MongoDatabase("mongodb://localhost:27017", "sunrise_alarm")

    await database.create_indexes("kv_store")

    collection = database.get_collection("kv_store")
    assert collection.created_indexes == [
        ("key", "key_unique_idx", {"unique": True})
    ]


@pytest.mark.asyncio
async def test_create_indexes_tolerates_operation_failure(monkeypatch) -> None:
    database = MongoDatabase("mongodb://localhost:27017", "sunrise_alarm")

    def _fail(*args, **kwargs):
        raise pymongo.errors.OperationFailure("index exists with different options")

    monkeypatch.setattr(database.get_collection("kv_store"), "create_index", _fail)

    await database.create_indexes("kv_store")


def test_close_closes_client() -> None:
    database = MongoDatabase("mongodb://localhost:27017", "sunrise_alarm")

    database.close()

    assert database.client.closed
