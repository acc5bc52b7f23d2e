"""SQLAlchemy ORM models."""

from release_catalog.models.album import Album
from release_catalog.models.artist import Artist, ArtistRelease
from release_catalog.models.release import Release
from release_catalog.models.user import User

__all__ = [
    "Album",
    "Artist",
    "ArtistRelease",
    "Release",
    "User",
]
