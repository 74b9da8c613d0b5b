"""Shared test fixtures — one in-memory DB and a temp upload dir per test."""
from __future__ import annotations

from contextlib import asynccontextmanager

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

# Shared-cache in-memory SQLite behind a StaticPool, so every session sees the same DB.
from sqlalchemy.pool import StaticPool

from src.db.engine import get_session
from src.db.tables import Base
from src.services.storage import MediaStorage, get_storage

TEST_DB_URL = "sqlite+aiosqlite:///file:test?mode=memory&cache=shared&uri=true"

test_engine = create_async_engine(
    TEST_DB_URL,
    echo=False,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestSession = async_sessionmaker(test_engine, expire_on_commit=False, class_=AsyncSession)


async def override_get_session():
    async with TestSession() as session:
        yield session


# Import app and override BEFORE any test module imports app
from src.api.main import app, import_tables  # noqa: E402

app.dependency_overrides[get_session] = override_get_session


@asynccontextmanager
async def get_test_session():
    """Context manager for seeding data in tests."""
    async with TestSession() as session:
        yield session


@pytest.fixture
def storage(tmp_path) -> MediaStorage:
    """Upload storage rooted in a temp dir, capped at 1 MB."""
    return MediaStorage(tmp_path / "uploads", max_bytes=1024 * 1024)


@pytest_asyncio.fixture(autouse=True)
async def setup_db(storage):
    """Create tables before each test, drop after."""
    import_tables()
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    app.dependency_overrides[get_storage] = lambda: storage

    yield

    app.dependency_overrides.pop(get_storage, None)
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest_asyncio.fixture
async def client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def make_user(client):
    """Factory: register a user through the API and return its JSON."""
    async def _make(username: str = "alice", email: str | None = None, password: str = "secret1"):
        resp = await client.post("/api/register", json={
            "username": username,
            "email": email or f"{username}@mail.com",
            "password": password,
            "name": username.title(),
        })
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _make
