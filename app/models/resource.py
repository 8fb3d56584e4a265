# app/models/resource.py
from enum import Enum as PyEnum


class ResourceType(str, PyEnum):
    FOOD = "food"
    MEDICINE = "medicine"
    SHELTER = "shelter"
    EQUIPMENT = "equipment"


class ResourceStatus(str, PyEnum):
    AVAILABLE = "available"
    ALLOCATED = "allocated"
    DEPLETED = "depleted"

    @property
    def label(self) -> str:
        """Display label, e.g. "Available"."""
        return self.value.capitalize()


# Resources are not mapped to their own table: the whole collection is
# persisted as one JSON document in storage_entries (see app.services.resource_store).
