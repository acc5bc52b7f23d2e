"""Main API router aggregation."""

from fastapi import APIRouter

from release_catalog.api.releases import public_router, v1_router

# Main API router
api_router = APIRouter(prefix="/api")

# Include both endpoint families
api_router.include_router(public_router)
api_router.include_router(v1_router)
