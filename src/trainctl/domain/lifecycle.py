"""Training lifecycle: status transitions and the operations tied to them.

State machine::

    draft ──► published ──► completed
      │           │
      └──► cancelled ◄──┘

Every operation is pure. It takes a ``Training`` snapshot and returns a
``Result`` holding a new snapshot with ``updated_at`` refreshed; the
input is never modified. Wrong-state calls fail with a DOMAIN ``Err``,
bad input fails with a VALIDATION ``Err``.

``update`` is allowed from every state here. Whether a cancelled or
completed training may still be edited is an orchestration policy (see
``LifecycleConfig.editable_statuses``).
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

import pydantic

from trainctl.domain.ids import new_training_id
from trainctl.domain.result import Err, Ok, Result, domain_err
from trainctl.domain.timestamps import resolve_now
from trainctl.domain.training import (
    CancelledStatus,
    CompletedStatus,
    DraftStatus,
    PublishedStatus,
    Training,
    TrainingStatus,
)
from trainctl.domain.types import TrainingStatusKind
from trainctl.domain.validation import TrainingFields, first_error_message, validate_fields

# --- Transition map ---

TRAINING_TRANSITIONS: dict[str, list[str]] = {
    "draft": ["published", "cancelled"],
    "published": ["completed", "cancelled"],
    "completed": [],
    "cancelled": [],
}

MIN_CANCEL_REASON_LENGTH = 5


def is_valid_transition(current: str, target: str) -> bool:
    """Check if transitioning from *current* to *target* is allowed."""
    return target in TRAINING_TRANSITIONS.get(current, [])


def not_allowed(training: Training) -> Err:
    """Failure for an operation invoked from the wrong state."""
    return domain_err(f"operation not allowed in current state: {training.status_kind}")


def _replace(training: Training, **changes: Any) -> Result[Training]:
    """Build a new snapshot from *training* with *changes*, re-checking invariants."""
    payload = {**training.model_dump(), **changes}
    try:
        return Ok(Training.model_validate(payload))
    except pydantic.ValidationError as exc:
        return Err(first_error_message(exc))


def _move(training: Training, target: TrainingStatus, now: datetime) -> Result[Training]:
    if not is_valid_transition(training.status_kind, target.type):
        return not_allowed(training)
    return _replace(training, status=target, updated_at=now)


# --- Construction ---


def create(
    fields: Mapping[str, Any] | pydantic.BaseModel,
    *,
    now: datetime | None = None,
) -> Result[Training]:
    """Validate *fields* and build a new training in ``draft``."""
    now = resolve_now(now)
    return validate_fields(fields, now=now).map(
        lambda valid: Training(
            id=new_training_id(),
            **valid.model_dump(),
            registered_count=0,
            status=DraftStatus(created_at=now),
            created_at=now,
            updated_at=now,
        )
    )


def update(
    training: Training,
    changes: Mapping[str, Any],
    *,
    now: datetime | None = None,
) -> Result[Training]:
    """Apply *changes* to the editable fields, re-validated exactly as on create.

    Keeps id, status, created_at, and registered_count. A capacity below
    the number of registered participants is a DOMAIN failure.
    """
    now = resolve_now(now)

    def apply(fields: TrainingFields) -> Result[Training]:
        if fields.capacity < training.registered_count:
            return domain_err(
                f"capacity cannot be less than registered count ({training.registered_count})"
            )
        return _replace(training, **fields.model_dump(), updated_at=now)

    merged = {**training.editable_fields(), **changes}
    return validate_fields(merged, now=now).bind(apply)


# --- Status transitions ---


def publish(training: Training, *, now: datetime | None = None) -> Result[Training]:
    """Open a draft training for registration."""
    now = resolve_now(now)
    return _move(training, PublishedStatus(published_at=now), now)


def complete(training: Training, *, now: datetime | None = None) -> Result[Training]:
    """Mark a published training as having taken place."""
    now = resolve_now(now)
    return _move(training, CompletedStatus(completed_at=now), now)


def cancel(
    training: Training,
    reason: str,
    *,
    now: datetime | None = None,
    min_reason_length: int = MIN_CANCEL_REASON_LENGTH,
) -> Result[Training]:
    """Call off a draft or published training.

    The reason is stripped of surrounding whitespace and must still have
    at least *min_reason_length* characters.
    """
    now = resolve_now(now)
    if not is_valid_transition(training.status_kind, TrainingStatusKind.CANCELLED):
        return not_allowed(training)
    reason = reason.strip()
    if len(reason) < min_reason_length:
        return Err(f"cancellation reason must be at least {min_reason_length} characters")
    return _move(training, CancelledStatus(cancelled_at=now, reason=reason), now)


# --- Registration ---


def register(training: Training, *, now: datetime | None = None) -> Result[Training]:
    """Take one seat on a published training."""
    if training.status_kind is not TrainingStatusKind.PUBLISHED:
        return not_allowed(training)
    if training.seats_left <= 0:
        return domain_err(f"training is full ({training.capacity} seats)")
    return _replace(
        training,
        registered_count=training.registered_count + 1,
        updated_at=resolve_now(now),
    )


def unregister(training: Training, *, now: datetime | None = None) -> Result[Training]:
    """Release one seat on a published training."""
    if training.status_kind is not TrainingStatusKind.PUBLISHED:
        return not_allowed(training)
    if training.registered_count == 0:
        return domain_err("training has no registered participants")
    return _replace(
        training,
        registered_count=training.registered_count - 1,
        updated_at=resolve_now(now),
    )
