"""Repository interface consumed by the command pipeline.

Repositories must be swappable and return domain snapshots. Every method
is a coroutine: storage is the only suspension point in a pipeline run.
Failures come back as ``AppError`` values; implementations should not
let exceptions escape, though the pipeline guards against it anyway.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from trainctl.domain.errors import AppResult
from trainctl.domain.ids import TrainingId
from trainctl.domain.training import Training


class TrainingRepository(ABC):
    """Key-value storage for training snapshots, keyed by id."""

    @abstractmethod
    async def save(self, training: Training) -> AppResult[Training]:
        """Store *training*, replacing any snapshot with the same id.

        Idempotent for an identical id and payload.
        """
        ...

    @abstractmethod
    async def find_by_id(self, training_id: TrainingId) -> AppResult[Training | None]:
        """Return the training with *training_id*, or ``Ok(None)`` if absent."""
        ...

    @abstractmethod
    async def find_all(self) -> AppResult[list[Training]]:
        """Return every stored training. Callers must not rely on the order."""
        ...
