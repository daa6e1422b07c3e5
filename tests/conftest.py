"""
Journal — Test Configuration (conftest.py)
===========================================

What:  Shared pytest fixtures for the test suite.
How:   Environment is pointed at a throwaway SQLite database before any
       journal module is imported; API tests run the real app in-process
       over httpx's ASGITransport.

Fixtures:
    ├── mock_db_session: AsyncMock session for service unit tests
    ├── db_engine:       fresh SQLite database (aiosqlite) with the schema
    ├── app:             create_app() with the session dependency pointed at db_engine
    ├── test_client:     httpx AsyncClient talking to `app`
    └── api:             EntriesClient wrapping test_client
"""

import os
import tempfile

# Must run before journal.config builds its Settings singleton
os.environ["DATABASE_URL"] = (
    f"sqlite+aiosqlite:///{tempfile.mkdtemp(prefix='journal_test_')}/journal.db"
)
os.environ["LOG_LEVEL"] = "WARNING"

from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from journal.client.api import EntriesClient
from journal.database import Base, get_db_session
from journal.main import create_app
from journal.models.entry import Entry  # noqa: F401


# ══════════════════════════════════════════════════════════════════════════
# Unit-test fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    A MagicMock standing in for AsyncSession.

    Usage:
        mock_db_session.execute.return_value.scalar_one_or_none.return_value = entry
        result = await entry_service.get_entry(mock_db_session, "1")
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def sample_entry_data():
    return {
        "title": "Trip",
        "notes": "Fun",
        "photoUrl": "http://x/y.jpg",
    }


# ══════════════════════════════════════════════════════════════════════════
# In-process API fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine(tmp_path):
    """
    A fresh SQLite database with the entries table, one per test.

    NullPool keeps connections from outliving the test's event loop.
    """
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'journal.db'}",
        poolclass=NullPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def app(db_engine):
    """create_app() with get_db_session bound to the test database."""
    factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)

    async def override_session() -> AsyncGenerator[AsyncSession, None]:
        async with factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    application = create_app()
    application.dependency_overrides[get_db_session] = override_session
    return application


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient routed straight into the app.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/api/entries")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def api(test_client):
    """EntriesClient sharing the in-process transport."""
    async with EntriesClient(http_client=test_client) as client:
        yield client
