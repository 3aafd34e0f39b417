"""Training model and its status variants.

``TrainingStatus`` is a closed, discriminated union on ``type``. Each
variant carries the timestamp of the transition that produced it, and
``Cancelled`` also carries the reason. A ``Training`` is a frozen
snapshot: transitions in :mod:`trainctl.domain.lifecycle` build a new one
instead of mutating fields.

Field bounds live here as module constants so the validation engine,
the CLI help text, and the storage schema agree on them.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Literal, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from trainctl.domain.ids import ID_PATTERN, TrainingId
from trainctl.domain.timestamps import ensure_utc
from trainctl.domain.types import TrainingStatusKind

TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 1000
LOCATION_MAX_LENGTH = 100
CAPACITY_MIN = 1
CAPACITY_MAX = 1000


# --- Status variants ---


class DraftStatus(BaseModel):
    """Initial state; not yet open for registration."""

    model_config = ConfigDict(frozen=True)

    type: Literal["draft"] = "draft"
    created_at: datetime


class PublishedStatus(BaseModel):
    """Open for registration."""

    model_config = ConfigDict(frozen=True)

    type: Literal["published"] = "published"
    published_at: datetime


class CompletedStatus(BaseModel):
    """The session took place."""

    model_config = ConfigDict(frozen=True)

    type: Literal["completed"] = "completed"
    completed_at: datetime


class CancelledStatus(BaseModel):
    """Called off, with a mandatory reason."""

    model_config = ConfigDict(frozen=True)

    type: Literal["cancelled"] = "cancelled"
    cancelled_at: datetime
    reason: str = Field(min_length=1)


TrainingStatus = Annotated[
    DraftStatus | PublishedStatus | CompletedStatus | CancelledStatus,
    Field(discriminator="type"),
]


# --- Training ---


class Training(BaseModel):
    """A scheduled training session.

    Construct through :func:`trainctl.domain.lifecycle.create`, never
    directly from user input: the model enforces structural invariants
    but not the future-date rule, which only applies at creation time.
    """

    model_config = ConfigDict(frozen=True)

    id: TrainingId = Field(pattern=ID_PATTERN.pattern)
    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)
    description: str = Field(min_length=1, max_length=DESCRIPTION_MAX_LENGTH)
    date_time: datetime
    location: str = Field(min_length=1, max_length=LOCATION_MAX_LENGTH)
    capacity: int = Field(ge=CAPACITY_MIN, le=CAPACITY_MAX)
    registered_count: int = Field(default=0, ge=0)
    status: TrainingStatus
    created_at: datetime
    updated_at: datetime

    @field_validator("date_time", "created_at", "updated_at", mode="after")
    @classmethod
    def _aware(cls, value: datetime) -> datetime:
        return ensure_utc(value)

    @model_validator(mode="after")
    def _check_invariants(self) -> Self:
        if self.registered_count > self.capacity:
            msg = (
                f"registered count ({self.registered_count}) "
                f"cannot exceed capacity ({self.capacity})"
            )
            raise ValueError(msg)
        if self.updated_at < self.created_at:
            raise ValueError("updated_at cannot be earlier than created_at")
        return self

    @property
    def status_kind(self) -> TrainingStatusKind:
        return TrainingStatusKind(self.status.type)

    @property
    def seats_left(self) -> int:
        return self.capacity - self.registered_count

    def editable_fields(self) -> dict[str, object]:
        """The caller-supplied fields, as accepted by ``create``/``update``."""
        return {
            "title": self.title,
            "description": self.description,
            "date_time": self.date_time,
            "location": self.location,
            "capacity": self.capacity,
        }
