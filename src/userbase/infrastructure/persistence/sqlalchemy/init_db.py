"""Schema management for the userbase tables."""

import logging

from sqlalchemy.ext.asyncio import AsyncEngine

# Registers UserModel on Base.metadata
import userbase.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from userbase.infrastructure.persistence.sqlalchemy.engine import create_engine
from userbase.infrastructure.persistence.sqlalchemy.models.base import Base

logger = logging.getLogger(__name__)


async def create_tables(engine: AsyncEngine) -> None:
    """Create missing tables; existing tables and rows are left alone."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Schema ready: %s", ", ".join(Base.metadata.tables))


async def drop_tables(engine: AsyncEngine) -> None:
    logger.warning("Dropping tables: %s", ", ".join(Base.metadata.tables))
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


async def init_database(database_url: str, reset: bool = False) -> None:
    """Create the schema for ``database_url``, optionally dropping it first."""
    engine = create_engine(database_url)
    try:
        if reset:
            await drop_tables(engine)
        await create_tables(engine)
    finally:
        await engine.dispose()
