"""Catalog business logic: filtering, pagination, queries and serialization."""

from release_catalog.services.errors import CatalogError, NotFoundError, UnauthorizedError
from release_catalog.services.filters import ReleaseFilters, get_today
from release_catalog.services.pagination import PageInfo, PageRequest
from release_catalog.services.repository import ReleaseRepository, get_release_repository
from release_catalog.services.serializer import ReleaseSerializer, render_error

__all__ = [
    "CatalogError",
    "NotFoundError",
    "UnauthorizedError",
    "ReleaseFilters",
    "get_today",
    "PageInfo",
    "PageRequest",
    "ReleaseRepository",
    "get_release_repository",
    "ReleaseSerializer",
    "render_error",
]
