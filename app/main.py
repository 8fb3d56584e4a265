import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.core.config import get_settings
from app.core.database import engine
from app.api.admin.resources import router as admin_resources_router
from app.api.v1.router import api_router
from app.models.base import Base
from app.models import storage_entry  # noqa: F401  (registers the table)

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def ensure_db_ready() -> None:
    """Create tables that are missing (Alembic remains the source of migrations)."""
    Base.metadata.create_all(bind=engine)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.resource_store_backend == "sql":
        ensure_db_ready()
    logger.info(
        "Resource store backend=%s key=%s",
        settings.resource_store_backend,
        settings.resource_storage_key,
    )
    yield


app = FastAPI(
    title="Relief Resources Admin",
    lifespan=lifespan,
)


@app.get("/health", tags=["health"])
async def root_health() -> dict:
    """
    Global health check endpoint.
    """
    return {"status": "ok"}


# Mount versioned API router
app.include_router(api_router, prefix=settings.api_v1_prefix)

# Server-rendered admin pages
app.include_router(admin_resources_router, prefix="/admin/resources")
