"""SQLite adapter for local and test benchmark runs.

Provides an async SQLAlchemy engine backed by ``aiosqlite`` that uses the
same ORM table definitions as the PostgreSQL backend, so a benchmark can be
seeded and sampled without any external database.

Key differences from the PostgreSQL backend:

* No connection pooling for files (SQLite is single-writer).
* ``:memory:`` databases share one connection so every session sees the
  same data.
* Foreign keys are enforced through a per-connection PRAGMA.
"""

from __future__ import annotations

import logging
from pathlib import Path

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)


def get_local_engine(
    db_path: Path | str = ".lineage_bench/metadata.db",
) -> AsyncEngine:
    """Create an async SQLAlchemy engine backed by SQLite via aiosqlite.

    Parameters
    ----------
    db_path:
        Path to the SQLite database file.  Parent directories are
        created automatically.  Use ``:memory:`` for ephemeral
        in-memory databases (useful for testing).

    Returns
    -------
    AsyncEngine
        A configured async engine ready for session creation.
    """
    if str(db_path) == ":memory:":
        engine = create_async_engine(
            "sqlite+aiosqlite:///:memory:",
            echo=False,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    else:
        path = Path(db_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        engine = create_async_engine(
            f"sqlite+aiosqlite:///{path}",
            echo=False,
            connect_args={"check_same_thread": False},
        )

    # Enable WAL mode and foreign keys for every connection.
    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragmas(dbapi_conn: object, _: object) -> None:
        cursor = dbapi_conn.cursor()  # type: ignore[attr-defined]
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.execute("PRAGMA synchronous=NORMAL")
        cursor.close()

    logger.info("Created SQLite engine: %s", engine.url)
    return engine
