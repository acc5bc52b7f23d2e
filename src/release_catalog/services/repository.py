"""Release queries against the catalog database."""

from collections.abc import Sequence

from fastapi import Depends
from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from release_catalog.database import get_db
from release_catalog.models.artist import ArtistRelease
from release_catalog.models.release import Release
from release_catalog.services.filters import ReleaseFilters


class ReleaseRepository:
    """Read access to releases with their albums and artist credits."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    @staticmethod
    def _filtered(filters: ReleaseFilters) -> Select[tuple[Release]]:
        return select(Release).where(*filters.clauses())

    @staticmethod
    def _with_relations(query: Select[tuple[Release]]) -> Select[tuple[Release]]:
        return query.options(
            selectinload(Release.albums),
            selectinload(Release.artist_releases).selectinload(ArtistRelease.artist),
        )

    async def filtered_count(self, filters: ReleaseFilters) -> int:
        """Count releases matching the filters."""
        base_query = self._filtered(filters)
        count_query = select(func.count()).select_from(base_query.subquery())
        result = await self.db.execute(count_query)
        return result.scalar_one()

    async def fetch_page(
        self, filters: ReleaseFilters, offset: int, limit: int
    ) -> Sequence[Release]:
        """Fetch one page of matching releases, newest first."""
        query = (
            self._with_relations(self._filtered(filters))
            .order_by(Release.release_date.desc(), Release.id.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self.db.execute(query)
        return result.scalars().all()

    async def find_by_id(self, release_id: int) -> Release | None:
        """Look up a single release, or None if it does not exist."""
        query = self._with_relations(select(Release).where(Release.id == release_id))
        result = await self.db.execute(query)
        return result.scalar_one_or_none()


def get_release_repository(db: AsyncSession = Depends(get_db)) -> ReleaseRepository:
    """Dependency that provides a release repository bound to the request session."""
    return ReleaseRepository(db)
