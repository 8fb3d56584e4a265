#!/usr/bin/env python3
# scripts/seed_demo_resources.py
"""
Seed demo relief resources into the configured resource store.

Resources are appended through the same service the admin page uses, so
every record gets a fresh id and timestamp and the whole collection is
written back after each addition.

Examples:
  # Append the demo set
  python -m scripts.seed_demo_resources

  # Clear the stored collection first
  python -m scripts.seed_demo_resources --reset
"""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError
from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.core.database import SessionLocal, engine
from app.core.redis import get_redis_client
from app.models.base import Base
from app.models.resource import ResourceStatus, ResourceType
from app.schemas.resource import ResourceDraft
from app.services.resource_service import create_resource
from app.services.resource_store import (
    RedisResourceStore,
    ResourceStore,
    ResourceStoreError,
    SqlResourceStore,
)

logger = logging.getLogger(__name__)

DEMO_RESOURCES: list[dict] = [
    {
        "name": "Water Bottles",
        "type": ResourceType.FOOD,
        "quantity": 500,
        "unit": "bottles",
        "status": ResourceStatus.AVAILABLE,
        "conditions": "clean, sealed",
    },
    {
        "name": "Rice",
        "type": ResourceType.FOOD,
        "quantity": 1200,
        "unit": "kg",
        "status": ResourceStatus.ALLOCATED,
        "expiryDate": "2027-03-31",
    },
    {
        "name": "First Aid Kits",
        "type": ResourceType.MEDICINE,
        "quantity": 80,
        "unit": "boxes",
        "status": ResourceStatus.AVAILABLE,
        "expiryDate": "2028-01-15",
        "conditions": "sterile",
    },
    {
        "name": "Family Tents",
        "type": ResourceType.SHELTER,
        "quantity": 40,
        "unit": "tents",
        "status": ResourceStatus.DEPLETED,
    },
    {
        "name": "Diesel Generators",
        "type": ResourceType.EQUIPMENT,
        "quantity": 6,
        "unit": "units",
        "status": ResourceStatus.ALLOCATED,
        "conditions": "serviced, fuelled",
    },
]


def build_store(db: Session) -> ResourceStore:
    settings = get_settings()
    if settings.resource_store_backend == "redis":
        client = get_redis_client()
        if client is None:
            raise SystemExit("✗ Redis store selected but Redis is not reachable (check REDIS_URL).")
        return RedisResourceStore(client, settings.resource_storage_key)

    Base.metadata.create_all(bind=engine)
    return SqlResourceStore(db, settings.resource_storage_key)


def seed_resources(store: ResourceStore, reset: bool = False) -> int:
    """Append the demo set. Returns the number of resources added."""
    if reset:
        store.save([])
        print(f"Cleared stored resources under '{store.key}'")

    added = 0
    for data in DEMO_RESOURCES:
        resource = create_resource(store, ResourceDraft.model_validate(data))
        print(f"Added {resource.name} ({resource.id})")
        added += 1
    return added


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Seed demo relief resources")
    p.add_argument("--reset", action="store_true", help="Clear the stored collection first")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=get_settings().log_level.upper())

    db: Session = SessionLocal()
    try:
        store = build_store(db)
        added = seed_resources(store, reset=args.reset)
    except (ResourceStoreError, ValidationError):
        logger.exception("Seeding demo resources failed")
        sys.exit(1)
    finally:
        db.close()

    print(f"Seeded {added} demo resources")


if __name__ == "__main__":
    main()
