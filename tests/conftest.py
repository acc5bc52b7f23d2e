"""Pytest fixtures and configuration."""

import os
from collections.abc import AsyncGenerator
from dataclasses import dataclass
from datetime import date
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

# Set test environment variables before importing the app
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-testing-at-least-32-characters-long")
os.environ.setdefault("DEBUG", "true")

from release_catalog.database import get_db, init_db
from release_catalog.main import app
from release_catalog.models import Album, Artist, ArtistRelease, Release, User
from release_catalog.services.filters import get_today
from release_catalog.utils.security import create_access_token

# Pinned "today" for every date-relative filter in the tests
TODAY = date(2025, 6, 15)


@dataclass
class Catalog:
    """Handles on the seeded catalog rows."""

    user: User
    inactive_user: User
    radiohead: Artist
    daft_punk: Artist
    pharrell: Artist
    kraftwerk: Artist
    ok_computer: Release
    kid_a: Release
    random_access_memories: Release
    get_lucky: Release
    today_release: Release
    future_release: Release

    @property
    def releases(self) -> list[Release]:
        return [
            self.ok_computer,
            self.kid_a,
            self.random_access_memories,
            self.get_lucky,
            self.today_release,
            self.future_release,
        ]


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio as the async backend for tests."""
    return "asyncio"


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient]:
    """Async HTTP client for testing FastAPI endpoints."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def db_engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine]:
    """Engine bound to a throwaway SQLite database with all tables created."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}")
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory for the test database."""
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession]:
    """Session on the test database."""
    async with session_factory() as session:
        yield session


@pytest.fixture
async def catalog(db_session: AsyncSession) -> Catalog:
    """Seed a small catalog: past, today's and upcoming releases with credits."""
    user = User()
    inactive_user = User(is_active=False)

    radiohead = Artist(name="Radiohead", country="UK", formed_year=1985)
    daft_punk = Artist(name="Daft Punk", country="France", formed_year=1993)
    pharrell = Artist(name="Pharrell Williams", country="USA")
    kraftwerk = Artist(name="Kraftwerk", country="Germany", formed_year=1970)

    ok_computer = Release(
        title="OK Computer",
        release_date=date(1997, 5, 21),
        release_type="album",
        label="Parlophone",
        catalog_number="7243 8 55229 2 8",
        albums=[
            Album(
                title="OK Computer",
                release_date=date(1997, 5, 21),
                genre="Alternative Rock",
                total_tracks=12,
                duration_seconds=3325,
            )
        ],
        artist_releases=[ArtistRelease(artist=radiohead, role="primary")],
    )
    kid_a = Release(
        title="Kid A",
        release_date=date(2000, 10, 2),
        release_type="album",
        label="Parlophone",
        catalog_number="7243 5 27753 2 3",
        albums=[
            Album(
                title="Kid A",
                release_date=date(2000, 10, 2),
                genre="Electronic/Experimental",
                total_tracks=10,
                duration_seconds=2981,
            )
        ],
        artist_releases=[ArtistRelease(artist=radiohead, role="primary")],
    )
    random_access_memories = Release(
        title="Random Access Memories",
        release_date=date(2013, 5, 17),
        release_type="album",
        label="Columbia",
        catalog_number="88883716862",
        albums=[
            Album(
                title="Random Access Memories",
                release_date=date(2013, 5, 17),
                genre="Electronic/Disco",
                total_tracks=13,
                duration_seconds=4476,
            )
        ],
        artist_releases=[ArtistRelease(artist=daft_punk, role="primary")],
    )
    get_lucky = Release(
        title="Get Lucky",
        release_date=date(2013, 4, 19),
        release_type="single",
        label="Columbia",
        catalog_number="88883713442",
        artist_releases=[
            ArtistRelease(artist=daft_punk, role="primary"),
            ArtistRelease(artist=pharrell, role="featured"),
        ],
    )
    today_release = Release(
        title="Today Release",
        release_date=TODAY,
        release_type="album",
        label="Today Records",
        catalog_number="TODAY-001",
        artist_releases=[ArtistRelease(artist=kraftwerk, role=None)],
    )
    future_release = Release(
        title="Future Sounds Vol. 1",
        release_date=date(2025, 7, 15),
        release_type="album",
        label="Future Records",
        catalog_number="FUT-2025-001",
    )

    db_session.add_all(
        [
            user,
            inactive_user,
            ok_computer,
            kid_a,
            random_access_memories,
            get_lucky,
            today_release,
            future_release,
        ]
    )
    await db_session.commit()

    return Catalog(
        user=user,
        inactive_user=inactive_user,
        radiohead=radiohead,
        daft_punk=daft_punk,
        pharrell=pharrell,
        kraftwerk=kraftwerk,
        ok_computer=ok_computer,
        kid_a=kid_a,
        random_access_memories=random_access_memories,
        get_lucky=get_lucky,
        today_release=today_release,
        future_release=future_release,
    )


@pytest.fixture
async def api_db(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[None]:
    """Point the app at the test database and pin today's date."""

    async def override_get_db() -> AsyncGenerator[AsyncSession]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_today] = lambda: TODAY
    try:
        yield
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(catalog: Catalog) -> dict[str, str]:
    """Authorization header carrying a valid token for the active test user."""
    token = create_access_token(data={"sub": str(catalog.user.id)})
    return {"Authorization": f"Bearer {token}"}
