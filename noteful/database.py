"""
Noteful API — Database Session Management
=========================================

What:  Async SQLAlchemy engine, session factory, declarative base and the
       per-request session dependency.
How:   `build_engine()` creates an async engine for any supported URL;
       `get_db_session()` yields one session per request, commits on success
       and rolls back on error.
Who:   Stores receive the session through FastAPI's dependency injection.
       Tests build their own engine with `build_engine()` and override
       `get_db_session`.

SQLite note:
    SQLite does not enforce foreign keys unless asked to on every connection.
    `build_engine()` turns `PRAGMA foreign_keys` on so a note can never point
    at a missing folder, and folder deletes cascade to notes, exactly as on
    PostgreSQL.
"""

from typing import AsyncGenerator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from noteful.config import settings


def build_engine(database_url: str) -> AsyncEngine:
    """
    Create an async engine for `database_url`.

    Pool settings only apply to server databases; SQLite drivers use their
    own pool classes which reject pool sizing arguments.
    """
    if database_url.startswith("sqlite"):
        engine = create_async_engine(
            database_url,
            echo=settings.log_level == "DEBUG",
        )

        @event.listens_for(engine.sync_engine, "connect")
        def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return engine

    return create_async_engine(
        database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=settings.db_pool_pre_ping,
        pool_recycle=3600,
        echo=settings.log_level == "DEBUG",
    )


# ── Engine & Session Factory ──────────────────────────────────────────────
engine = build_engine(settings.database_url)

# expire_on_commit=False: attributes stay readable after commit without a
# lazy reload, which async sessions cannot do implicitly.
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """Base class for all ORM models; its metadata drives Alembic."""
    pass


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the store built for the route handler
        3. On success: commits the transaction
        4. On error: rolls back and re-raises for the global error handler
        5. Always: closes the session (returns connection to pool)
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def dispose_engine() -> None:
    """Closes all pooled connections. Called on application shutdown."""
    await engine.dispose()
