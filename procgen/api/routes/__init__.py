"""Versioned API route modules."""

from fastapi import APIRouter

from procgen.api.routes.config import router as config_router
from procgen.api.routes.galaxy import router as galaxy_router
from procgen.api.routes.metadata import router as metadata_router
from procgen.api.routes.seeds import router as seeds_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(config_router, tags=["Config"])
api_router.include_router(seeds_router, tags=["Seeds"])
api_router.include_router(galaxy_router, tags=["Galaxy"])
api_router.include_router(metadata_router)

__all__ = ["api_router"]
