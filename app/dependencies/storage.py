# app/dependencies/storage.py
from fastapi import Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.core.config import Settings, get_settings
from app.core.database import get_db
from app.core.redis import get_redis_client
from app.services.resource_store import (
    RedisResourceStore,
    ResourceStore,
    ResourceStoreError,
    ResourceStoreUnavailable,
    SqlResourceStore,
    StoredDataError,
)


def get_resource_store(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> ResourceStore:
    """
    FastAPI dependency that picks the resource store backend from settings.

    Tests (or another backend) swap it out via app.dependency_overrides.
    """
    if settings.resource_store_backend == "redis":
        client = get_redis_client()
        if client is None:
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Resource store is unavailable.",
            )
        return RedisResourceStore(client, settings.resource_storage_key)

    return SqlResourceStore(db, settings.resource_storage_key)


def store_error_to_http(exc: ResourceStoreError) -> HTTPException:
    """Map a store failure onto the HTTP error returned to the caller."""
    if isinstance(exc, ResourceStoreUnavailable):
        return HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Resource store is unavailable.",
        )
    if isinstance(exc, StoredDataError):
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Stored resources could not be read.",
        )
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=str(exc) or "Resource store error.",
    )
