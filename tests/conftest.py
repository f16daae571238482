"""
Noteful API — Test Configuration (conftest.py)
==============================================

What:  Shared pytest fixtures for the entire test suite.
How:   Endpoint tests run the real FastAPI app through HTTPX's ASGITransport
       against a fresh SQLite database per test; unit tests use a mocked
       AsyncSession.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── db_engine:        Async engine on a temp SQLite file, tables created
    ├── session_factory:  async_sessionmaker bound to db_engine
    ├── test_client:      HTTPX AsyncClient wired to the app, with
    │                     get_db_session overridden to use db_engine
    └── mock_db_session:  Mock AsyncSession (no database at all)
"""

import os
import tempfile
from typing import Iterable, Mapping
from unittest.mock import AsyncMock, MagicMock

# Override settings BEFORE any noteful import builds the module-level engine
os.environ["DATABASE_URL"] = (
    "sqlite+aiosqlite:///" + os.path.join(tempfile.mkdtemp(prefix="noteful_test_"), "app.db")
)
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from noteful.database import Base, build_engine, get_db_session
from noteful.models.folder import Folder
from noteful.models.note import Note


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine(tmp_path):
    """Fresh database with both tables for every test."""
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'noteful.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def seed(session_factory):
    """
    Insert folders and notes directly, bypassing the API.

    Usage:
        await seed(folders=make_folders_array(), notes=make_notes_array())
    """

    async def _seed(
        folders: Iterable[Mapping] = (),
        notes: Iterable[Mapping] = (),
    ) -> None:
        async with session_factory() as session:
            session.add_all([Folder(**folder) for folder in folders])
            await session.flush()
            session.add_all([Note(**note) for note in notes])
            await session.commit()

    return _seed


# ══════════════════════════════════════════════════════════════════════════
# HTTP Client
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def test_client(session_factory):
    """
    HTTPX AsyncClient talking to the app over ASGI.

    raise_app_exceptions=False: the 500 handler's response is returned to the
    test instead of the re-raised exception.
    """
    from noteful.main import app

    async def _override_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = _override_session
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


# ══════════════════════════════════════════════════════════════════════════
# Unit Test Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        mock_db_session.execute.return_value.scalar_one_or_none.return_value = note
        result = await NoteStore(mock_db_session).get_by_id(1)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session
