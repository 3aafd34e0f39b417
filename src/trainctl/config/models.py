"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, trainctl.toml only contains
overrides. An empty (or missing) trainctl.toml is a valid configuration.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from trainctl.domain.lifecycle import MIN_CANCEL_REASON_LENGTH
from trainctl.domain.types import TrainingStatusKind


class StorageConfig(BaseModel):
    """[storage] section."""

    model_config = {"frozen": True}

    backend: Literal["sqlite", "memory"] = "sqlite"
    data_dir: str = ".trainctl"


class LifecycleConfig(BaseModel):
    """[lifecycle] section."""

    model_config = {"frozen": True}

    cancel_reason_min_length: int = Field(default=MIN_CANCEL_REASON_LENGTH, ge=1)
    editable_statuses: list[TrainingStatusKind] = Field(
        default_factory=lambda: [TrainingStatusKind.DRAFT, TrainingStatusKind.PUBLISHED]
    )
