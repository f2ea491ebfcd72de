"""Async engine construction."""

import logging
from pathlib import Path
from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

logger = logging.getLogger(__name__)


def _enable_sqlite_savepoints(engine: AsyncEngine) -> None:
    """Let SQLAlchemy emit BEGIN itself so SAVEPOINT works on pysqlite.

    Without this the driver defers BEGIN and a released outer savepoint
    would commit on its own.
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _do_connect(dbapi_connection, _connection_record):  # noqa: ANN001
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _do_begin(conn):  # noqa: ANN001
        conn.exec_driver_sql("BEGIN")


def create_engine(url: str, **kwargs: Any) -> AsyncEngine:
    """Create an async engine for ``url``.

    SQLite file databases get their parent directory created and all SQLite
    engines get working savepoints.
    """
    is_sqlite = url.startswith("sqlite")

    if is_sqlite:
        db_path = url.split("///")[-1]
        if db_path and db_path != ":memory:":
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    else:
        kwargs.setdefault("pool_pre_ping", True)  # Verify connections before use

    engine = create_async_engine(url, echo=False, **kwargs)

    if is_sqlite:
        _enable_sqlite_savepoints(engine)

    logger.debug("Created engine for %s", engine.url.render_as_string())
    return engine
