"""
Testcontainers-based PostgreSQL fixtures for integration tests.

Provides an isolated, ephemeral Postgres instance for the test session.
Each test starts from freshly created tables.
"""

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import NullPool
from testcontainers.postgres import PostgresContainer

from userbase.infrastructure.persistence.sqlalchemy import (
    create_engine,
    create_tables,
    drop_tables,
)

# Use same Postgres version as production
POSTGRES_IMAGE = "postgres:18-alpine"


@pytest.fixture(scope="session")
def postgres_container():
    """
    Start a PostgreSQL container for the test session.

    The container is automatically cleaned up when the session ends.
    """
    with PostgresContainer(POSTGRES_IMAGE) as postgres:
        yield postgres


@pytest.fixture(scope="session")
def database_url(postgres_container) -> str:
    """Container URL in asyncpg form."""
    connection_url = postgres_container.get_connection_url()
    # Testcontainers may return postgresql+psycopg2:// or postgresql://
    async_url = connection_url.replace(
        "postgresql+psycopg2://", "postgresql+asyncpg://"
    )
    return async_url.replace("postgresql://", "postgresql+asyncpg://")


@pytest_asyncio.fixture
async def async_engine(database_url):
    """Engine with a clean schema; NullPool avoids cross-loop connections."""
    engine = create_engine(database_url, poolclass=NullPool)
    await drop_tables(engine)
    await create_tables(engine)
    yield engine
    await drop_tables(engine)
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
    """Provide an isolated database session for each test."""
    async with session_maker() as session:
        yield session
        await session.rollback()
