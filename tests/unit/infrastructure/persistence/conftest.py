"""
Pytest fixtures for infrastructure persistence tests.

Each test gets a fresh in-memory SQLite database. The engine is built with
the application's own factory so savepoints behave as in production.
"""

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from userbase.infrastructure.persistence.sqlalchemy import (
    create_engine,
    create_tables,
)

SQLITE_MEMORY_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def async_engine():
    """In-memory SQLite engine with the schema created."""
    engine = create_engine(SQLITE_MEMORY_URL, poolclass=StaticPool)
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_maker(async_engine):
    return async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest_asyncio.fixture
async def db_session(session_maker):
    """
    Provide a session for one test.

    Uncommitted changes are rolled back after the test.
    """
    async with session_maker() as session:
        yield session
        await session.rollback()
