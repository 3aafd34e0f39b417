"""Typed payload contracts for the service/CLI boundary.

These models validate payload shapes before they leave the service
layer so key regressions fail fast in tests.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


def dump_validated[T: BaseModel](model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a JSON-ready payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="json")


class StatusItem(BaseModel):
    """Status variant as exposed to CLI consumers."""

    model_config = ConfigDict(extra="allow")

    type: str


class TrainingItem(BaseModel):
    """One training row."""

    id: str
    title: str
    description: str
    date_time: str
    location: str
    capacity: int
    registered_count: int
    seats_left: int
    status: StatusItem
    created_at: str
    updated_at: str


class TrainingListData(BaseModel):
    """Payload contract for ``TrainingService.list_all``."""

    count: int
    items: list[TrainingItem]
