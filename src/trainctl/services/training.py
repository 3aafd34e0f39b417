"""TrainingService — ServiceResult adapter over the command pipeline.

The pipeline speaks ``AppResult``; the CLI speaks ``ServiceResult``. This
service runs one pipeline handler per call and translates the outcome,
validating the payload against :mod:`trainctl.services.contracts`.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from trainctl.config.models import LifecycleConfig
from trainctl.domain.errors import AppResult
from trainctl.domain.result import Ok
from trainctl.domain.training import Training
from trainctl.domain.types import TrainingStatusKind
from trainctl.infrastructure.repositories.interfaces import TrainingRepository
from trainctl.services.contracts import TrainingItem, TrainingListData, dump_validated
from trainctl.services.pipeline import CreateTrainingCommand, TrainingPipeline
from trainctl.services.result import ServiceResult, failure


def training_payload(training: Training) -> dict[str, Any]:
    """Serialize a training for ServiceResult.data."""
    data = training.model_dump(mode="json")
    data["seats_left"] = training.seats_left
    return dump_validated(TrainingItem, data)


def _single(op: str, outcome: AppResult[Training]) -> ServiceResult:
    if not isinstance(outcome, Ok):
        return failure(op, outcome)
    return ServiceResult(ok=True, op=op, data=training_payload(outcome.value))


class TrainingService:
    """CLI-facing operations on trainings."""

    def __init__(
        self,
        repository: TrainingRepository,
        *,
        lifecycle_config: LifecycleConfig | None = None,
    ) -> None:
        self._pipeline = TrainingPipeline(repository, lifecycle_config=lifecycle_config)

    async def create(
        self,
        *,
        title: str,
        description: str,
        date_time: datetime | str,
        location: str,
        capacity: int,
    ) -> ServiceResult:
        command = CreateTrainingCommand(
            title=title,
            description=description,
            date_time=date_time,
            location=location,
            capacity=capacity,
        )
        return _single("create_training", await self._pipeline.create_training(command))

    async def show(self, training_id: str) -> ServiceResult:
        return _single("show_training", await self._pipeline.get_training(training_id))

    async def list_all(self, *, status: TrainingStatusKind | None = None) -> ServiceResult:
        op = "list_trainings"
        outcome = await self._pipeline.list_trainings(status=status)
        if not isinstance(outcome, Ok):
            return failure(op, outcome)
        items = [training_payload(t) for t in outcome.value]
        data = dump_validated(TrainingListData, {"count": len(items), "items": items})
        warnings = [] if items else ["No trainings found"]
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    async def publish(self, training_id: str) -> ServiceResult:
        return _single("publish_training", await self._pipeline.publish_training(training_id))

    async def complete(self, training_id: str) -> ServiceResult:
        return _single("complete_training", await self._pipeline.complete_training(training_id))

    async def cancel(self, training_id: str, reason: str) -> ServiceResult:
        return _single(
            "cancel_training", await self._pipeline.cancel_training(training_id, reason)
        )

    async def update(self, training_id: str, changes: dict[str, Any]) -> ServiceResult:
        return _single(
            "update_training", await self._pipeline.update_training(training_id, changes)
        )

    async def register(self, training_id: str) -> ServiceResult:
        return _single(
            "register_participant", await self._pipeline.register_participant(training_id)
        )

    async def unregister(self, training_id: str) -> ServiceResult:
        return _single(
            "unregister_participant", await self._pipeline.unregister_participant(training_id)
        )
