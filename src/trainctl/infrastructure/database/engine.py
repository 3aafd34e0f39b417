"""SQLite engine factory for the persistent training store.

Trainings live in ``{data_dir}/trainctl.db``. Repositories talk to it
through SQLAlchemy Core and exchange frozen ``Training`` snapshots.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine

from trainctl.infrastructure.database.schema import metadata

DB_FILENAME = "trainctl.db"


def create_db_engine(db_path: Path) -> Engine:
    """Return an engine for *db_path*; every connection switches to WAL journaling."""
    engine = create_engine(f"sqlite:///{db_path}", echo=False)

    @event.listens_for(engine, "connect")
    def _enable_wal(dbapi_conn: Any, _record: Any) -> None:
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    return engine


def init_database(data_dir: Path) -> Engine:
    """Open (creating if needed) the store under *data_dir* and ensure its tables exist."""
    data_dir.mkdir(parents=True, exist_ok=True)
    engine = create_db_engine(data_dir / DB_FILENAME)
    metadata.create_all(engine)
    return engine
