"""SQLite-backed repository using SQLAlchemy Core."""

from __future__ import annotations

import asyncio
from datetime import datetime
from typing import Any

from pydantic import TypeAdapter
from sqlalchemy import literal_column, select
from sqlalchemy.dialects.sqlite import insert
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from trainctl.config.logging import get_logger
from trainctl.domain.errors import AppResult, DomainError
from trainctl.domain.ids import TrainingId
from trainctl.domain.result import Ok
from trainctl.domain.training import Training, TrainingStatus
from trainctl.infrastructure.database.schema import trainings
from trainctl.infrastructure.repositories.interfaces import TrainingRepository

logger = get_logger(__name__)

_STATUS_ADAPTER: TypeAdapter[Any] = TypeAdapter(TrainingStatus)


def training_to_row(training: Training) -> dict[str, Any]:
    """Flatten a snapshot into a ``trainings`` row."""
    return {
        "id": training.id,
        "title": training.title,
        "description": training.description,
        "date_time": training.date_time.isoformat(),
        "location": training.location,
        "capacity": training.capacity,
        "registered_count": training.registered_count,
        "status": training.status.type,
        "status_data": training.status.model_dump_json(),
        "created_at": training.created_at.isoformat(),
        "updated_at": training.updated_at.isoformat(),
    }


def row_to_training(row: Any) -> Training:
    """Rebuild a snapshot from a ``trainings`` row mapping."""
    return Training(
        id=TrainingId(row["id"]),
        title=row["title"],
        description=row["description"],
        date_time=datetime.fromisoformat(row["date_time"]),
        location=row["location"],
        capacity=row["capacity"],
        registered_count=row["registered_count"],
        status=_STATUS_ADAPTER.validate_json(row["status_data"]),
        created_at=datetime.fromisoformat(row["created_at"]),
        updated_at=datetime.fromisoformat(row["updated_at"]),
    )


class SqlTrainingRepository(TrainingRepository):
    """Encapsulates SQL for training persistence.

    SQLAlchemy calls block, so each coroutine runs its statements in a
    worker thread via :func:`asyncio.to_thread`. Driver errors come back
    as ``DomainError``.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    async def save(self, training: Training) -> AppResult[Training]:
        return await asyncio.to_thread(self._save, training)

    async def find_by_id(self, training_id: TrainingId) -> AppResult[Training | None]:
        return await asyncio.to_thread(self._find_by_id, training_id)

    async def find_all(self) -> AppResult[list[Training]]:
        return await asyncio.to_thread(self._find_all)

    def _save(self, training: Training) -> AppResult[Training]:
        row = training_to_row(training)
        stmt = insert(trainings).values(**row)
        # Upsert keeps the original rowid, so find_all stays in insertion order.
        stmt = stmt.on_conflict_do_update(
            index_elements=[trainings.c.id],
            set_={k: v for k, v in row.items() if k != "id"},
        )
        try:
            with self._engine.begin() as conn:
                conn.execute(stmt)
        except SQLAlchemyError as exc:
            logger.warning("storage.save_failed", training_id=training.id, exc_info=True)
            return DomainError(f"storage failure: {exc.__class__.__name__}")
        return Ok(training)

    def _find_by_id(self, training_id: TrainingId) -> AppResult[Training | None]:
        stmt = select(trainings).where(trainings.c.id == training_id)
        try:
            with self._engine.connect() as conn:
                row = conn.execute(stmt).mappings().first()
        except SQLAlchemyError as exc:
            logger.warning("storage.lookup_failed", training_id=training_id, exc_info=True)
            return DomainError(f"storage failure: {exc.__class__.__name__}")
        return Ok(row_to_training(row) if row is not None else None)

    def _find_all(self) -> AppResult[list[Training]]:
        stmt = select(trainings).order_by(literal_column("rowid"))
        try:
            with self._engine.connect() as conn:
                rows = conn.execute(stmt).mappings().all()
        except SQLAlchemyError as exc:
            logger.warning("storage.list_failed", exc_info=True)
            return DomainError(f"storage failure: {exc.__class__.__name__}")
        return Ok([row_to_training(row) for row in rows])
