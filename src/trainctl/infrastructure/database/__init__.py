"""SQLite database engine and schema via SQLAlchemy Core."""

from trainctl.infrastructure.database.engine import create_db_engine, init_database
from trainctl.infrastructure.database.schema import metadata, trainings

__all__ = [
    "create_db_engine",
    "init_database",
    "metadata",
    "trainings",
]
