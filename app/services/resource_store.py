# app/services/resource_store.py
"""
Persistence for the resource collection.

The collection is stored as a single JSON array under one key and is
rewritten in full on every save. Callers get a store injected (see
app.dependencies.storage) and only ever use load() and save().
"""

import logging
from abc import ABC, abstractmethod
from typing import Iterable

import redis
from pydantic import TypeAdapter, ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.storage_entry import StorageEntry
from app.schemas.resource import Resource

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "resources"

_resource_list_adapter = TypeAdapter(list[Resource])


class ResourceStoreError(Exception):
    """Raised when the resource collection cannot be read or written."""


class StoredDataError(ResourceStoreError):
    """Raised when the stored document is not a valid resource array."""


class ResourceStoreUnavailable(ResourceStoreError):
    """Raised when the backing service cannot be reached."""


def serialize_resources(resources: Iterable[Resource]) -> str:
    return _resource_list_adapter.dump_json(
        list(resources), by_alias=True, exclude_none=True
    ).decode("utf-8")


def deserialize_resources(raw: str | bytes, key: str = DEFAULT_STORAGE_KEY) -> list[Resource]:
    try:
        return _resource_list_adapter.validate_json(raw)
    except ValidationError as e:
        raise StoredDataError(
            f"Stored value under '{key}' is not a valid resource list: {e.error_count()} error(s)"
        ) from e


class ResourceStore(ABC):
    def __init__(self, key: str = DEFAULT_STORAGE_KEY) -> None:
        self.key = key

    @abstractmethod
    def load(self) -> list[Resource]:
        """Return the stored collection in insertion order ([] when nothing is stored)."""

    @abstractmethod
    def save(self, resources: Iterable[Resource]) -> None:
        """Overwrite the stored collection."""


class SqlResourceStore(ResourceStore):
    """Keeps the collection in the storage_entries table."""

    def __init__(self, db: Session, key: str = DEFAULT_STORAGE_KEY) -> None:
        super().__init__(key)
        self.db = db

    def load(self) -> list[Resource]:
        try:
            entry = self.db.get(StorageEntry, self.key)
        except SQLAlchemyError as e:
            logger.exception("Failed to read storage entry key=%s", self.key)
            raise ResourceStoreError("Failed to load resources.") from e

        if entry is None:
            return []
        return deserialize_resources(entry.value, self.key)

    def save(self, resources: Iterable[Resource]) -> None:
        payload = serialize_resources(resources)
        try:
            entry = self.db.get(StorageEntry, self.key)
            if entry is None:
                self.db.add(StorageEntry(key=self.key, value=payload))
            else:
                entry.value = payload
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Failed to write storage entry key=%s", self.key)
            raise ResourceStoreError("Failed to save resources.") from e


class RedisResourceStore(ResourceStore):
    """Keeps the collection as a plain string value in Redis."""

    def __init__(self, client: redis.Redis, key: str = DEFAULT_STORAGE_KEY) -> None:
        super().__init__(key)
        self.client = client

    def load(self) -> list[Resource]:
        try:
            raw = self.client.get(self.key)
        except redis.RedisError as e:
            logger.warning(f"Redis GET error for key '{self.key}': {e}")
            raise ResourceStoreUnavailable("Resource store is unavailable.") from e

        if raw is None:
            return []
        return deserialize_resources(raw, self.key)

    def save(self, resources: Iterable[Resource]) -> None:
        payload = serialize_resources(resources)
        try:
            self.client.set(self.key, payload)
        except redis.RedisError as e:
            logger.warning(f"Redis SET error for key '{self.key}': {e}")
            raise ResourceStoreUnavailable("Resource store is unavailable.") from e
