"""Album ORM model."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, Date, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from release_catalog.database import Base

if TYPE_CHECKING:
    from release_catalog.models.release import Release


class Album(Base):
    """Track collection belonging to exactly one release."""

    __tablename__ = "albums"
    __table_args__ = (
        CheckConstraint("total_tracks >= 0", name="ck_album_total_tracks_positive"),
        CheckConstraint("duration_seconds >= 0", name="ck_album_duration_positive"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    release_id: Mapped[int] = mapped_column(
        ForeignKey("releases.id", ondelete="CASCADE"), index=True
    )
    title: Mapped[str] = mapped_column(String(255))
    release_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    genre: Mapped[str | None] = mapped_column(String(100), nullable=True)
    total_tracks: Mapped[int] = mapped_column(default=0)
    duration_seconds: Mapped[int] = mapped_column(default=0)

    # Relationships
    release: Mapped[Release] = relationship(back_populates="albums")
