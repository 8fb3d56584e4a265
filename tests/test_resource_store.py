import json
from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
import redis
from sqlalchemy.exc import OperationalError

from app.models.storage_entry import StorageEntry
from app.schemas.resource import Resource
from app.services.resource_store import (
    RedisResourceStore,
    ResourceStoreError,
    ResourceStoreUnavailable,
    SqlResourceStore,
    StoredDataError,
    serialize_resources,
)


def make_resource(n: int, **overrides) -> Resource:
    data = {
        "id": f"res-{n}",
        "name": f"Resource {n}",
        "quantity": n,
        "unit": "boxes",
        "last_updated": datetime(2026, 10, 17, 9, 0, n, tzinfo=timezone.utc),
    }
    data.update(overrides)
    return Resource(**data)


@pytest.fixture(params=["sql", "redis"])
def store(request, sql_store, redis_store):
    return sql_store if request.param == "sql" else redis_store


def test_load_returns_empty_list_when_nothing_stored(store):
    assert store.load() == []


def test_save_then_load_round_trips_in_insertion_order(store):
    resources = [
        make_resource(3),
        make_resource(1, conditions=["clean", "sealed"], expiry_date="2027-01-01"),
        make_resource(2, status="depleted", type="shelter"),
    ]

    store.save(resources)

    assert store.load() == resources
    assert [r.id for r in store.load()] == ["res-3", "res-1", "res-2"]


def test_save_overwrites_whole_collection(store):
    store.save([make_resource(1), make_resource(2)])
    store.save([make_resource(3)])

    assert [r.id for r in store.load()] == ["res-3"]


def test_sql_store_writes_json_array_under_key(sql_store, db_session):
    sql_store.save([make_resource(1)])

    entry = db_session.get(StorageEntry, "resources")
    stored = json.loads(entry.value)
    assert isinstance(stored, list)
    assert stored[0]["id"] == "res-1"
    assert stored[0]["organizationId"] == ""
    assert "expiryDate" not in stored[0]
    assert "conditions" not in stored[0]


def test_redis_store_writes_json_array_under_key(redis_store, redis_client):
    redis_store.save([make_resource(1), make_resource(2)])

    stored = json.loads(redis_client.get("resources"))
    assert [item["id"] for item in stored] == ["res-1", "res-2"]


def test_custom_storage_key(db_session):
    store = SqlResourceStore(db_session, key="resources-staging")
    store.save([make_resource(1)])

    assert db_session.get(StorageEntry, "resources-staging") is not None
    assert SqlResourceStore(db_session).load() == []


def test_malformed_json_raises_stored_data_error(redis_store, redis_client):
    redis_client.set("resources", "{not json")

    with pytest.raises(StoredDataError):
        redis_store.load()


def test_wrong_shape_raises_stored_data_error(sql_store, db_session):
    db_session.add(StorageEntry(key="resources", value=json.dumps({"id": "x"})))
    db_session.commit()

    with pytest.raises(StoredDataError):
        sql_store.load()


def test_loads_records_written_by_the_browser_page(redis_store, redis_client):
    legacy = [
        {
            "id": "k3j2h1x9a",
            "name": "Blankets",
            "type": "shelter",
            "quantity": 120,
            "unit": "pieces",
            "location": {"lat": 0, "lng": 0},
            "status": "allocated",
            "organizationId": "",
            "expiryDate": "",
            "conditions": [],
            "lastUpdated": "2024-12-28T10:30:00.000Z",
        }
    ]
    redis_client.set("resources", json.dumps(legacy))

    (resource,) = redis_store.load()

    assert resource.id == "k3j2h1x9a"
    assert resource.expiry_date is None
    assert resource.conditions is None
    assert resource.last_updated == datetime(2024, 12, 28, 10, 30, tzinfo=timezone.utc)


def test_serialize_resources_matches_storage_dict():
    resource = make_resource(1, conditions=["sterile"])

    assert json.loads(serialize_resources([resource])) == [resource.to_storage_dict()]


def test_redis_errors_raise_unavailable():
    client = MagicMock()
    client.get.side_effect = redis.ConnectionError("down")
    client.set.side_effect = redis.ConnectionError("down")
    store = RedisResourceStore(client)

    with pytest.raises(ResourceStoreUnavailable):
        store.load()
    with pytest.raises(ResourceStoreUnavailable):
        store.save([make_resource(1)])


def test_sql_save_failure_rolls_back():
    db = MagicMock()
    db.get.return_value = None
    db.commit.side_effect = OperationalError("INSERT", {}, Exception("disk full"))
    store = SqlResourceStore(db)

    with pytest.raises(ResourceStoreError):
        store.save([make_resource(1)])

    db.rollback.assert_called_once()
