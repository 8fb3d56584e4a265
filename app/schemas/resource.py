# schemas/resource.py
from __future__ import annotations

from datetime import date, datetime
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StringConstraints,
    field_serializer,
    field_validator,
)
from pydantic.alias_generators import to_camel

from app.models.resource import ResourceStatus, ResourceType
from app.utils.conditions import parse_conditions
from app.utils.datetime_utils import to_iso_string

NameStr = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1),
]

UnitStr = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1),
]


class Location(BaseModel):
    lat: float = 0.0
    lng: float = 0.0

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)


class ResourceDraft(BaseModel):
    """
    Everything a resource carries except its identifier and timestamp.

    - JSON keys are camelCase (organizationId, expiryDate); snake_case
      field names are accepted too.
    - Empty strings from the UI are normalized to None for optional fields.
    - Conditions may be given as a list or as comma-separated text.
    """

    type: ResourceType = ResourceType.FOOD
    name: NameStr
    quantity: int | float = 0
    unit: UnitStr
    location: Location = Field(default_factory=Location)
    status: ResourceStatus = ResourceStatus.AVAILABLE
    organization_id: str = ""
    expiry_date: date | None = None
    conditions: list[str] | None = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        allow_inf_nan=False,
    )

    @field_validator("expiry_date", mode="before")
    @classmethod
    def empty_str_to_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("conditions", mode="before")
    @classmethod
    def normalize_conditions(cls, v: Any) -> Any:
        if isinstance(v, str):
            return parse_conditions(v)
        if isinstance(v, (list, tuple)):
            cleaned = [c.strip() for c in v if isinstance(c, str) and c.strip()]
            return cleaned or None
        return v


class Resource(ResourceDraft):
    """
    A stored resource. Immutable once created; lastUpdated is the
    creation time.
    """

    id: str = Field(min_length=1)
    last_updated: datetime

    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_serializer("last_updated")
    def serialize_last_updated(self, v: datetime) -> str:
        return to_iso_string(v)

    def to_storage_dict(self) -> dict[str, Any]:
        """JSON-ready dict with camelCase keys and absent optionals dropped."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
