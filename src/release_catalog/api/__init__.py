"""API routers."""

from release_catalog.api.router import api_router

__all__ = ["api_router"]
