"""Artist and release credits ORM models."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from release_catalog.database import Base

if TYPE_CHECKING:
    from release_catalog.models.release import Release


class Artist(Base):
    """A performer credited on one or more releases."""

    __tablename__ = "artists"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255), index=True)
    country: Mapped[str | None] = mapped_column(String(100), nullable=True)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    formed_year: Mapped[int | None] = mapped_column(nullable=True)

    # Relationships
    release_credits: Mapped[list[ArtistRelease]] = relationship(
        back_populates="artist", cascade="all, delete-orphan"
    )


class ArtistRelease(Base):
    """Association between an artist and a release."""

    __tablename__ = "artist_releases"
    __table_args__ = (UniqueConstraint("artist_id", "release_id", name="uq_artist_release"),)

    id: Mapped[int] = mapped_column(primary_key=True)
    artist_id: Mapped[int] = mapped_column(ForeignKey("artists.id", ondelete="CASCADE"), index=True)
    release_id: Mapped[int] = mapped_column(
        ForeignKey("releases.id", ondelete="CASCADE"), index=True
    )
    role: Mapped[str | None] = mapped_column(String(50), nullable=True)  # e.g., "primary"

    # Relationships
    artist: Mapped[Artist] = relationship(back_populates="release_credits")
    release: Mapped[Release] = relationship(back_populates="artist_releases")
