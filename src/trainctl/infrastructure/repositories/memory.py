"""In-process repository backed by a dict."""

from __future__ import annotations

from trainctl.domain.errors import AppResult
from trainctl.domain.ids import TrainingId
from trainctl.domain.result import Ok
from trainctl.domain.training import Training
from trainctl.infrastructure.repositories.interfaces import TrainingRepository


class InMemoryTrainingRepository(TrainingRepository):
    """Keeps snapshots in insertion order for the lifetime of the object."""

    def __init__(self) -> None:
        self._trainings: dict[str, Training] = {}

    async def save(self, training: Training) -> AppResult[Training]:
        self._trainings[training.id] = training
        return Ok(training)

    async def find_by_id(self, training_id: TrainingId) -> AppResult[Training | None]:
        return Ok(self._trainings.get(training_id))

    async def find_all(self) -> AppResult[list[Training]]:
        return Ok(list(self._trainings.values()))

    # Test helpers

    def clear(self) -> None:
        self._trainings.clear()

    def size(self) -> int:
        return len(self._trainings)
