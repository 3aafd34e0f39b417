"""SQLAlchemy Core table definitions for the trainctl database.

Timestamps are stored as ISO 8601 text with offset. The status variant is
stored twice: ``status`` holds the discriminator for filtering, and
``status_data`` holds the full variant payload as JSON.
"""

from __future__ import annotations

from sqlalchemy import Column, Index, Integer, MetaData, Table, Text

metadata = MetaData()

trainings = Table(
    "trainings",
    metadata,
    Column("id", Text, primary_key=True),
    Column("title", Text, nullable=False),
    Column("description", Text, nullable=False),
    Column("date_time", Text, nullable=False),
    Column("location", Text, nullable=False),
    Column("capacity", Integer, nullable=False),
    Column("registered_count", Integer, nullable=False, default=0, server_default="0"),
    Column("status", Text, nullable=False),
    Column("status_data", Text, nullable=False),  # JSON object
    Column("created_at", Text, nullable=False),
    Column("updated_at", Text, nullable=False),
)

Index("ix_trainings_status", trainings.c.status)
