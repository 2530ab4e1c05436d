"""
Test configuration and shared fixtures.
Uses an in-memory SQLite database, recreated for every test.
"""
from __future__ import annotations

import os

# Must be set before the application (and its settings) are imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ["RATE_LIMIT_ENABLED"] = "false"

from collections.abc import AsyncGenerator, Callable, Generator
from dataclasses import dataclass

import pytest
import pytest_asyncio
from fastapi import Request
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from teamdesk.core.config import settings
from teamdesk.core.dependencies import get_db, get_identity_resolver
from teamdesk.crud.team import crud_team
from teamdesk.crud.user import crud_user
from teamdesk.db.base import Base
from teamdesk.main import app
from teamdesk.models.team import Team
from teamdesk.models.user import User

# ── Test database ─────────────────────────────────────────────────────────────
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def db() -> AsyncGenerator[AsyncSession, None]:
    """A session on a fresh in-memory database with all tables created."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
    async with session_factory() as session:
        try:
            yield session
            await session.rollback()
        finally:
            await session.close()
    await engine.dispose()


@pytest.fixture(autouse=True)
def upload_dir(tmp_path, monkeypatch) -> str:
    """Redirect uploaded files into the test's temporary directory."""
    path = str(tmp_path / "uploads")
    monkeypatch.setattr(settings, "UPLOAD_DIR", path)
    return path


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Provide an async HTTP test client with the test DB injected."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


# ── Identity helpers ──────────────────────────────────────────────────────────

@dataclass
class StaticUserResolver:
    """Resolves every request to a fixed user (or to nobody)."""

    user: User | None

    async def resolve_acting_user(
        self, request: Request, db: AsyncSession
    ) -> User | None:
        return self.user


@pytest.fixture
def act_as() -> Generator[Callable[[User | None], None], None, None]:
    """Route subsequent requests through the given user instead of the system user."""

    def _act_as(user: User | None) -> None:
        resolver = StaticUserResolver(user)
        app.dependency_overrides[get_identity_resolver] = lambda: resolver

    yield _act_as
    app.dependency_overrides.pop(get_identity_resolver, None)


# ── Helper fixtures ───────────────────────────────────────────────────────────

@pytest_asyncio.fixture
async def default_teams(client: AsyncClient) -> list[dict]:
    """Run first-use setup for the system user and return the created teams."""
    response = await client.post("/api/setup")
    assert response.status_code == 200, response.text
    teams = response.json()["teams"]
    assert len(teams) == 4
    return teams


@pytest_asyncio.fixture
async def current_team(default_teams: list[dict]) -> dict:
    """The team selected by setup ("Personal Lines")."""
    return default_teams[0]


@pytest_asyncio.fixture
async def outsider(db: AsyncSession) -> tuple[User, Team]:
    """A second user with a team of their own, unrelated to the system user."""
    user = await crud_user.create_user(
        db, email="outsider@example.com", first_name="Olive", last_name="Outsider"
    )
    team = await crud_team.create_team(db, name="Outside Agency", description="Not ours")
    await crud_team.add_member(db, team_id=team.id, user_id=user.id)
    await crud_user.set_current_team(db, user=user, team_id=team.id)
    return user, team
