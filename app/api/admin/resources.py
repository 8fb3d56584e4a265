# app/api/admin/resources.py
"""
Server-rendered Resource Management page.

GET  /admin/resources              -> list of resource cards
GET  /admin/resources?dialog=add   -> same page with the creation dialog open
POST /admin/resources              -> create, then redirect (dialog closed)

The dialog always opens with a fresh draft; after a successful submit the
browser is redirected, so the next opening starts from the defaults again.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, TypeVar

from fastapi import APIRouter, Depends, Form, Query, status
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError

from app.dependencies.storage import get_resource_store, store_error_to_http
from app.models.resource import ResourceStatus, ResourceType
from app.schemas.resource import ResourceDraft
from app.services.resource_service import add_resource, build_resource, list_resources
from app.services.resource_store import ResourceStore, ResourceStoreError
from app.utils.resource_page import PAGE_PATH, render_resources_page

router = APIRouter()
logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

FIELD_LABELS = {
    "name": "Name",
    "type": "Type",
    "quantity": "Quantity",
    "unit": "Unit",
    "status": "Status",
    "expiryDate": "Expiry date",
    "conditions": "Conditions",
}


def _parse_filter(enum_cls: type[E], value: Optional[str]) -> Optional[E]:
    """Blank or unknown filter values mean "no filter"."""
    if not value:
        return None
    try:
        return enum_cls(value)
    except ValueError:
        return None


def _error_messages(exc: ValidationError) -> list[str]:
    messages: list[str] = []
    seen: set[str] = set()
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else ""
        if field in seen:
            continue
        seen.add(field)

        label = FIELD_LABELS.get(field, field)
        if error["type"] in ("missing", "string_too_short"):
            messages.append(f"{label} is required")
        elif field == "quantity":
            messages.append("Quantity must be a number")
        else:
            messages.append(f"{label}: {error['msg']}")
    return messages


@router.get("", response_class=HTMLResponse, tags=["admin"])
def resources_page(
    dialog: Optional[str] = Query(None, description="'add' opens the creation dialog"),
    status_filter: Optional[str] = Query(None, alias="status"),
    type_filter: Optional[str] = Query(None, alias="type"),
    store: ResourceStore = Depends(get_resource_store),
) -> HTMLResponse:
    """
    Render the resource list.
    """
    selected_status = _parse_filter(ResourceStatus, status_filter)
    selected_type = _parse_filter(ResourceType, type_filter)

    try:
        resources = list_resources(store, status=selected_status, type=selected_type)
    except ResourceStoreError as e:
        logger.exception("Error loading resources key=%s", store.key)
        raise store_error_to_http(e) from e

    return HTMLResponse(
        render_resources_page(
            resources,
            dialog_open=dialog == "add",
            status_filter=selected_status,
            type_filter=selected_type,
        )
    )


@router.post("", response_class=HTMLResponse, tags=["admin"])
def submit_resource_form(
    name: str = Form(""),
    type: str = Form(ResourceType.FOOD.value),
    quantity: str = Form(""),
    unit: str = Form(""),
    status_value: str = Form(ResourceStatus.AVAILABLE.value, alias="status"),
    expiry_date: str = Form(""),
    conditions: str = Form(""),
    store: ResourceStore = Depends(get_resource_store),
):
    """
    Handle the "Add New Resource" dialog submit.
    """
    form_values = {
        "name": name,
        "type": type,
        "quantity": quantity,
        "unit": unit,
        "status": status_value,
        "expiry_date": expiry_date,
        "conditions": conditions,
    }

    try:
        draft = ResourceDraft.model_validate(
            {
                "name": name,
                "type": type,
                "quantity": quantity,
                "unit": unit,
                "status": status_value,
                "expiryDate": expiry_date,
                "conditions": conditions,
            }
        )
    except ValidationError as e:
        try:
            resources = list_resources(store)
        except ResourceStoreError as store_exc:
            logger.exception("Error loading resources key=%s", store.key)
            raise store_error_to_http(store_exc) from store_exc

        return HTMLResponse(
            render_resources_page(
                resources,
                dialog_open=True,
                form_values=form_values,
                errors=_error_messages(e),
            ),
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        )

    try:
        add_resource(store, build_resource(draft))
    except ResourceStoreError as e:
        logger.exception("Error adding resource key=%s", store.key)
        raise store_error_to_http(e) from e

    return RedirectResponse(url=PAGE_PATH, status_code=status.HTTP_303_SEE_OTHER)
