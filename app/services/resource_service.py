# app/services/resource_service.py
import logging

from app.models.resource import ResourceStatus, ResourceType
from app.schemas.resource import Resource, ResourceDraft
from app.services.resource_store import ResourceStore
from app.utils.datetime_utils import truncate_to_milliseconds, utc_now
from app.utils.id_generators import generate_resource_id

logger = logging.getLogger(__name__)


def list_resources(
    store: ResourceStore,
    status: ResourceStatus | None = None,
    type: ResourceType | None = None,
) -> list[Resource]:
    """
    Load the collection in insertion order, optionally narrowed by
    status and/or type. Filtering never touches storage.
    """
    resources = store.load()
    if status is not None:
        resources = [r for r in resources if r.status == status]
    if type is not None:
        resources = [r for r in resources if r.type == type]
    return resources


def build_resource(draft: ResourceDraft) -> Resource:
    """
    Complete a draft with a fresh identifier and the current timestamp.

    The timestamp is cut to the millisecond precision it is stored with,
    so the returned record equals what a later load() gives back.
    """
    return Resource(
        **draft.model_dump(),
        id=generate_resource_id(),
        last_updated=truncate_to_milliseconds(utc_now()),
    )


def add_resource(store: ResourceStore, resource: Resource) -> list[Resource]:
    """
    Append a resource and write the whole collection back.
    Returns the new collection.
    """
    resources = [*store.load(), resource]
    store.save(resources)
    logger.info(
        "Resource added id=%s name=%s total=%d", resource.id, resource.name, len(resources)
    )
    return resources


def create_resource(store: ResourceStore, draft: ResourceDraft) -> Resource:
    resource = build_resource(draft)
    add_resource(store, resource)
    return resource
