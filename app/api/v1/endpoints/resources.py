# app/api/v1/endpoints/resources.py
from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.dependencies.storage import get_resource_store, store_error_to_http
from app.models.resource import ResourceStatus, ResourceType
from app.schemas.resource import Resource, ResourceDraft
from app.services.resource_service import create_resource, list_resources
from app.services.resource_store import ResourceStore, ResourceStoreError

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("", response_model=list[Resource], tags=["resources"])
def list_resources_endpoint(
    status_filter: Optional[ResourceStatus] = Query(
        None, alias="status", description="Filter by status (available, allocated or depleted)"
    ),
    type: Optional[ResourceType] = Query(
        None, description="Filter by type (food, medicine, shelter or equipment)"
    ),
    store: ResourceStore = Depends(get_resource_store),
) -> list[Resource]:
    """
    List resources in insertion order.
    """
    try:
        return list_resources(store, status=status_filter, type=type)
    except ResourceStoreError as e:
        logger.exception("Error loading resources key=%s", store.key)
        raise store_error_to_http(e) from e


@router.post(
    "",
    response_model=Resource,
    status_code=status.HTTP_201_CREATED,
    tags=["resources"],
)
def create_resource_endpoint(
    payload: ResourceDraft,
    store: ResourceStore = Depends(get_resource_store),
) -> Resource:
    """
    Create a resource. The id and lastUpdated are always generated here.
    """
    try:
        return create_resource(store, payload)
    except ResourceStoreError as e:
        logger.exception("Error adding resource key=%s", store.key)
        raise store_error_to_http(e) from e


@router.get("/{resource_id}", response_model=Resource, tags=["resources"])
def get_resource_endpoint(
    resource_id: str,
    store: ResourceStore = Depends(get_resource_store),
) -> Resource:
    """
    Get a single resource by ID.
    """
    try:
        resources = list_resources(store)
    except ResourceStoreError as e:
        logger.exception("Error loading resources key=%s", store.key)
        raise store_error_to_http(e) from e

    for resource in resources:
        if resource.id == resource_id:
            return resource
    raise HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Resource not found.",
    )
