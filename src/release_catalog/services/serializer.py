"""Render releases in the flat or resource-document shape.

A single serializer is configured by a (shape, tier) pair. The tier decides
which fields are visible, identically for both shapes:

- releases always expose title, release_date, release_type, label and their
  artists; catalog_number, created_at, updated_at and albums are added for
  authenticated callers.
- artists always expose id and name; country and the role from the
  release credit are added for authenticated callers.
- albums are fully visible, but only reachable through the authenticated
  albums relation.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from release_catalog.models.album import Album
from release_catalog.models.artist import ArtistRelease
from release_catalog.models.release import Release
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
from release_catalog.services.pagination import PageInfo

RELEASES = "releases"
ARTISTS = "artists"
ALBUMS = "albums"


def _dump(model: BaseModel) -> dict[str, Any]:
    return model.model_dump(mode="json", exclude_unset=True)


def render_error(shape: ResponseShape, status_code: int, title: str, detail: str) -> dict[str, Any]:
    """Render an error body in the given shape."""
    if shape is ResponseShape.FLAT:
        return _dump(ErrorResponse(error=detail))
    return _dump(
        ErrorDocument(errors=[ErrorObject(status=str(status_code), title=title, detail=detail)])
    )


class IncludedResources:
    """Ordered collection of related resources, unique by (type, id).

    The first resource added for a key wins; later duplicates are dropped.
    """

    def __init__(self) -> None:
        self._resources: dict[tuple[str, str], Resource] = {}

    def add(self, resource: Resource) -> None:
        self._resources.setdefault(resource.key, resource)

    def to_list(self) -> list[Resource]:
        return list(self._resources.values())


@dataclass(frozen=True)
class ReleaseSerializer:
    """Release-to-view transform for one request."""

    shape: ResponseShape
    tier: CallerTier
    collection_url: str = ""

    @property
    def authenticated(self) -> bool:
        return self.tier.is_authenticated

    # Visibility

    def release_fields(self, release: Release) -> dict[str, Any]:
        """Scalar release fields visible to the caller."""
        fields: dict[str, Any] = {
            "title": release.title,
            "release_date": release.release_date,
            "release_type": release.release_type,
            "label": release.label,
        }
        if self.authenticated:
            fields["catalog_number"] = release.catalog_number
            fields["created_at"] = release.created_at
            fields["updated_at"] = release.updated_at
        return fields

    def artist_fields(self, credit: ArtistRelease) -> dict[str, Any]:
        """Artist fields visible to the caller, excluding the credit role."""
        fields: dict[str, Any] = {"name": credit.artist.name}
        if self.authenticated:
            fields["country"] = credit.artist.country
        return fields

    def visible_albums(self, release: Release) -> list[Album]:
        return list(release.albums) if self.authenticated else []

    # Flat shape

    def flat_release(self, release: Release) -> ReleaseOut:
        artists = []
        for credit in release.artist_releases:
            artist = ArtistOut(id=credit.artist.id, **self.artist_fields(credit))
            if self.authenticated:
                artist.role = credit.role
            artists.append(artist)

        data = ReleaseOut(id=release.id, artists=artists, **self.release_fields(release))
        if self.authenticated:
            data.albums = [AlbumOut.model_validate(album) for album in release.albums]
        return data

    # Resource-document shape

    def release_url(self, release: Release) -> str:
        return f"{self.collection_url.rstrip('/')}/{release.id}"

    def release_resource(self, release: Release) -> Resource:
        relationships = {
            ARTISTS: Relationship(
                data=[
                    ResourceIdentifier(type=ARTISTS, id=str(credit.artist.id))
                    for credit in release.artist_releases
                ]
            )
        }
        if self.authenticated:
            relationships[ALBUMS] = Relationship(
                data=[
                    ResourceIdentifier(type=ALBUMS, id=str(album.id))
                    for album in release.albums
                ]
            )

        return Resource(
            type=RELEASES,
            id=str(release.id),
            attributes=self.release_fields(release),
            relationships=relationships,
            links={"self": self.release_url(release)},
        )

    def artist_resource(self, credit: ArtistRelease) -> Resource:
        resource = Resource(
            type=ARTISTS,
            id=str(credit.artist.id),
            attributes=self.artist_fields(credit),
        )
        if self.authenticated:
            resource.meta = {"role": credit.role}
        return resource

    @staticmethod
    def album_resource(album: Album) -> Resource:
        return Resource(
            type=ALBUMS,
            id=str(album.id),
            attributes={
                "title": album.title,
                "release_date": album.release_date,
                "genre": album.genre,
                "total_tracks": album.total_tracks,
                "duration_seconds": album.duration_seconds,
            },
        )

    def collect_included(self, releases: Iterable[Release]) -> list[Resource]:
        """Gather the artists and visible albums related to a page of releases.

        Ordered by release, then each release's artists followed by its albums.
        """
        included = IncludedResources()
        for release in releases:
            for credit in release.artist_releases:
                included.add(self.artist_resource(credit))
            for album in self.visible_albums(release):
                included.add(self.album_resource(album))
        return included.to_list()

    # Responses

    def render_list(
        self, releases: Sequence[Release], page: PageInfo, request_url: str
    ) -> dict[str, Any]:
        """Render a page of releases with its pagination metadata."""
        if self.shape is ResponseShape.FLAT:
            return _dump(
                ReleaseListResponse(
                    releases=[self.flat_release(release) for release in releases],
                    pagination=PaginationOut(
                        current_page=page.page,
                        per_page=page.per_page,
                        total_pages=page.total_pages,
                        total_count=page.total_count,
                        has_next_page=page.has_next,
                        has_prev_page=page.has_prev,
                    ),
                    is_private=self.authenticated,
                )
            )

        return _dump(
            ListDocument(
                links=page.links(request_url),
                data=[self.release_resource(release) for release in releases],
                included=self.collect_included(releases),
                meta={
                    "authenticated": self.authenticated,
                    "current_page": page.page,
                    "per_page": page.per_page,
                    "total_pages": page.total_pages,
                    "total_count": page.total_count,
                },
            )
        )

    def render_one(self, release: Release) -> dict[str, Any]:
        """Render a single release."""
        if self.shape is ResponseShape.FLAT:
            return _dump(
                ReleaseDetailResponse(
                    release=self.flat_release(release),
                    is_private=self.authenticated,
                )
            )

        return _dump(
            SingleDocument(
                links={"self": self.release_url(release)},
                data=self.release_resource(release),
                included=self.collect_included([release]),
                meta={"authenticated": self.authenticated},
            )
        )
