"""Pydantic schemas for request/response validation."""

from release_catalog.schemas.common import CallerTier, ResponseShape
from release_catalog.schemas.jsonapi import (
    ErrorDocument,
    ErrorObject,
    ListDocument,
    Relationship,
    Resource,
    ResourceIdentifier,
    SingleDocument,
)
from release_catalog.schemas.release import (
    AlbumOut,
    ArtistOut,
    ErrorResponse,
    PaginationOut,
    ReleaseDetailResponse,
    ReleaseListResponse,
    ReleaseOut,
)

__all__ = [
    "CallerTier",
    "ResponseShape",
    # Flat shape
    "AlbumOut",
    "ArtistOut",
    "ReleaseOut",
    "PaginationOut",
    "ReleaseListResponse",
    "ReleaseDetailResponse",
    "ErrorResponse",
    # Resource documents
    "ResourceIdentifier",
    "Relationship",
    "Resource",
    "ListDocument",
    "SingleDocument",
    "ErrorObject",
    "ErrorDocument",
]
