"""Release ORM model."""

from __future__ import annotations

from datetime import UTC, date, datetime
from typing import TYPE_CHECKING

from sqlalchemy import Date, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from release_catalog.database import Base

if TYPE_CHECKING:
    from release_catalog.models.album import Album
    from release_catalog.models.artist import ArtistRelease


def _utcnow() -> datetime:
    return datetime.now(UTC)


class Release(Base):
    """A published musical work (album, single, EP...)."""

    __tablename__ = "releases"

    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(String(255))
    release_date: Mapped[date] = mapped_column(Date, index=True)
    release_type: Mapped[str] = mapped_column(String(50), index=True)  # album, single, ...
    label: Mapped[str] = mapped_column(String(255), index=True)
    catalog_number: Mapped[str] = mapped_column(String(100))
    created_at: Mapped[datetime] = mapped_column(default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(default=_utcnow, onupdate=_utcnow)

    # Relationships
    albums: Mapped[list[Album]] = relationship(
        back_populates="release", cascade="all, delete-orphan", order_by="Album.id"
    )
    artist_releases: Mapped[list[ArtistRelease]] = relationship(
        back_populates="release", cascade="all, delete-orphan", order_by="ArtistRelease.id"
    )
