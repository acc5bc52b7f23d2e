"""Pydantic schemas for the flat release response shape.

Fields only visible to authenticated callers default to None and are left
unset for anonymous callers; responses are dumped with ``exclude_unset`` so
redacted fields are absent rather than null.
"""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field


class AlbumOut(BaseModel):
    """Album nested in a release."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="Album ID")
    title: str = Field(description="Album title")
    release_date: date | None = Field(default=None, description="Album release date")
    genre: str | None = Field(default=None, description="Genre")
    total_tracks: int = Field(description="Number of tracks")
    duration_seconds: int = Field(description="Total running time in seconds")


class ArtistOut(BaseModel):
    """Artist credited on a release."""

    id: int = Field(description="Artist ID")
    name: str = Field(description="Artist name")
    country: str | None = Field(default=None, description="Country (authenticated only)")
    role: str | None = Field(
        default=None, description="Role on this release, e.g. primary (authenticated only)"
    )


class ReleaseOut(BaseModel):
    """A release in the flat shape."""

    id: int = Field(description="Release ID")
    title: str = Field(description="Release title")
    release_date: date = Field(description="Release date")
    release_type: str = Field(description="Release type (album, single, ...)")
    label: str = Field(description="Record label")
    artists: list[ArtistOut] = Field(default_factory=list, description="Credited artists")
    catalog_number: str | None = Field(
        default=None, description="Catalog number (authenticated only)"
    )
    created_at: datetime | None = Field(default=None, description="Created (authenticated only)")
    updated_at: datetime | None = Field(default=None, description="Updated (authenticated only)")
    albums: list[AlbumOut] | None = Field(default=None, description="Albums (authenticated only)")


class PaginationOut(BaseModel):
    """Pagination metadata for a flat release listing."""

    current_page: int = Field(description="Current page number")
    per_page: int = Field(description="Number of items per page")
    total_pages: int = Field(description="Total number of pages")
    total_count: int = Field(description="Total number of matching releases")
    has_next_page: bool = Field(description="Whether a following page exists")
    has_prev_page: bool = Field(description="Whether a preceding page exists")


class ReleaseListResponse(BaseModel):
    """Paginated flat listing of releases."""

    releases: list[ReleaseOut] = Field(default_factory=list, description="Release results")
    pagination: PaginationOut = Field(description="Pagination metadata")
    is_private: bool = Field(description="Whether the caller is authenticated")


class ReleaseDetailResponse(BaseModel):
    """A single release in the flat shape."""

    release: ReleaseOut = Field(description="Release details")
    is_private: bool = Field(description="Whether the caller is authenticated")


class ErrorResponse(BaseModel):
    """Error body for the flat shape."""

    error: str = Field(description="Error message")
