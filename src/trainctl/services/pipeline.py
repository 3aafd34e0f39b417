"""TrainingPipeline — async command handlers over a storage collaborator.

Each handler is a strictly sequential chain of fallible steps::

    create:      VALIDATE → CONSTRUCT → SAVE → RESPOND
    transitions: PARSE ID → LOAD → TRANSITION → SAVE → RESPOND

A step either yields ``Ok(value)`` for the next step or an ``AppError``
that is returned to the caller unchanged. Synchronous domain failures
(``Err``) are lifted with :func:`~trainctl.domain.errors.to_app_error`.

INVARIANT: a failed validation never reaches the repository.
INVARIANT: repository exceptions never escape; they become ``DomainError``.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict

from trainctl.config.logging import get_logger
from trainctl.config.models import LifecycleConfig
from trainctl.domain import lifecycle
from trainctl.domain.errors import AppResult, DomainError, to_app_error
from trainctl.domain.ids import TrainingId, parse_training_id
from trainctl.domain.result import Err, Ok, Result
from trainctl.domain.training import Training
from trainctl.domain.types import TrainingStatusKind
from trainctl.infrastructure.repositories.interfaces import TrainingRepository

logger = get_logger(__name__)


class CreateTrainingCommand(BaseModel):
    """Raw input for creating a training. Validation happens downstream."""

    model_config = ConfigDict(frozen=True)

    title: Any
    description: Any
    date_time: Any
    location: Any
    capacity: Any


def lift[T](result: Result[T]) -> AppResult[T]:
    """Move a synchronous domain result into the pipeline's error channel."""
    if isinstance(result, Err):
        return to_app_error(result)
    return result


async def guarded[T](step: str, call: Callable[[], Awaitable[AppResult[T]]]) -> AppResult[T]:
    """Await a repository call, mapping any exception it raises to ``DomainError``."""
    try:
        return await call()
    except Exception as exc:
        logger.warning("storage.fault", step=step, error=repr(exc), exc_info=True)
        return DomainError(f"storage failure during {step}: {exc}")


class TrainingPipeline:
    """Orchestrates validation, lifecycle transitions, and storage.

    *clock* is an optional time source forwarded to every domain call,
    so tests can pin the time a whole pipeline sees.
    """

    def __init__(
        self,
        repository: TrainingRepository,
        *,
        lifecycle_config: LifecycleConfig | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._repository = repository
        self._config = lifecycle_config or LifecycleConfig()
        self._clock = clock

    def _now(self) -> datetime | None:
        return self._clock() if self._clock is not None else None

    # ------------------------------------------------------------------
    # Create / read
    # ------------------------------------------------------------------

    async def create_training(self, command: CreateTrainingCommand) -> AppResult[Training]:
        """Validate *command*, build a draft training, and save it."""
        logger.debug("command.received", command="create_training")

        # ── VALIDATE + CONSTRUCT ─────────────────────────────────
        built = lift(lifecycle.create(command, now=self._now()))
        if not isinstance(built, Ok):
            logger.info("command.rejected", command="create_training", reason=built.message)
            return built

        # ── SAVE ─────────────────────────────────────────────────
        training = built.value
        return await guarded("save", lambda: self._repository.save(training))

    async def get_training(self, raw_id: str) -> AppResult[Training]:
        """Load one training; absence is a ``DomainError``."""
        parsed = lift(parse_training_id(raw_id))
        if not isinstance(parsed, Ok):
            return parsed
        return await self._load(parsed.value)

    async def list_trainings(
        self, *, status: TrainingStatusKind | None = None
    ) -> AppResult[list[Training]]:
        """Return all trainings, optionally only those in *status*."""
        found = await guarded("find_all", self._repository.find_all)
        if not isinstance(found, Ok) or status is None:
            return found
        return Ok([t for t in found.value if t.status_kind == status])

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    async def publish_training(self, raw_id: str) -> AppResult[Training]:
        return await self._transition(
            "publish_training", raw_id, lambda t: lifecycle.publish(t, now=self._now())
        )

    async def complete_training(self, raw_id: str) -> AppResult[Training]:
        return await self._transition(
            "complete_training", raw_id, lambda t: lifecycle.complete(t, now=self._now())
        )

    async def cancel_training(self, raw_id: str, reason: str) -> AppResult[Training]:
        return await self._transition(
            "cancel_training",
            raw_id,
            lambda t: lifecycle.cancel(
                t,
                reason,
                now=self._now(),
                min_reason_length=self._config.cancel_reason_min_length,
            ),
        )

    async def register_participant(self, raw_id: str) -> AppResult[Training]:
        return await self._transition(
            "register_participant", raw_id, lambda t: lifecycle.register(t, now=self._now())
        )

    async def unregister_participant(self, raw_id: str) -> AppResult[Training]:
        return await self._transition(
            "unregister_participant", raw_id, lambda t: lifecycle.unregister(t, now=self._now())
        )

    async def update_training(self, raw_id: str, changes: dict[str, Any]) -> AppResult[Training]:
        """Re-validate and apply field *changes*.

        Refused for trainings whose status is not in
        ``LifecycleConfig.editable_statuses``.
        """

        def apply(training: Training) -> Result[Training]:
            if training.status_kind not in self._config.editable_statuses:
                return lifecycle.not_allowed(training)
            return lifecycle.update(training, changes, now=self._now())

        return await self._transition("update_training", raw_id, apply)

    # ------------------------------------------------------------------
    # Shared steps (private)
    # ------------------------------------------------------------------

    async def _load(self, training_id: TrainingId) -> AppResult[Training]:
        found = await guarded("find_by_id", lambda: self._repository.find_by_id(training_id))
        if not isinstance(found, Ok):
            return found
        if found.value is None:
            return DomainError(f"training not found: {training_id}")
        return Ok(found.value)

    async def _transition(
        self,
        command: str,
        raw_id: str,
        step: Callable[[Training], Result[Training]],
    ) -> AppResult[Training]:
        """PARSE ID → LOAD → TRANSITION → SAVE."""
        logger.debug("command.received", command=command, training_id=raw_id)

        # ── PARSE ID ─────────────────────────────────────────────
        parsed = lift(parse_training_id(raw_id))
        if not isinstance(parsed, Ok):
            return parsed

        # ── LOAD ─────────────────────────────────────────────────
        loaded = await self._load(parsed.value)
        if not isinstance(loaded, Ok):
            return loaded

        # ── TRANSITION ───────────────────────────────────────────
        changed = lift(step(loaded.value))
        if not isinstance(changed, Ok):
            logger.info("command.rejected", command=command, reason=changed.message)
            return changed

        # ── SAVE ─────────────────────────────────────────────────
        training = changed.value
        return await guarded("save", lambda: self._repository.save(training))
