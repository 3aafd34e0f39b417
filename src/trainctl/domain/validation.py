"""Validation engine for caller-supplied training fields.

Rules (checked in field order; only the first failure is reported):

- title: 1..100 characters
- description: 1..1000 characters
- date_time: strictly later than *now*
- location: 1..100 characters
- capacity: integer in 1..1000

*now* is handed to pydantic as validation context at call time rather
than captured when the schema is built, so every call compares against
the clock as it is when the call happens and tests can pin it.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

import pydantic
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from trainctl.domain.result import Err, Ok, Result
from trainctl.domain.timestamps import ensure_utc, resolve_now
from trainctl.domain.training import (
    CAPACITY_MAX,
    CAPACITY_MIN,
    DESCRIPTION_MAX_LENGTH,
    LOCATION_MAX_LENGTH,
    TITLE_MAX_LENGTH,
)

MSG_DATE_IN_PAST = "date_time cannot be in the past"

# pydantic error type -> message template for failures that never reach
# our own validators (missing keys, wrong Python types).
_TYPE_MESSAGES: dict[str, str] = {
    "missing": "{field} is required",
    "string_type": "{field} must be a string",
    "int_type": "{field} must be an integer",
    "int_parsing": "{field} must be an integer",
    "int_from_float": "{field} must be an integer",
    "datetime_type": "{field} must be a valid datetime",
    "datetime_parsing": "{field} must be a valid datetime",
    "datetime_from_date_parsing": "{field} must be a valid datetime",
    "extra_forbidden": "{field} is not an editable field",
}


def _check_length(field: str, value: str, maximum: int) -> str:
    if len(value) < 1:
        raise ValueError(f"{field} is required")
    if len(value) > maximum:
        raise ValueError(f"{field} must be {maximum} characters or fewer")
    return value


class TrainingFields(BaseModel):
    """The five caller-supplied fields of a training, validated."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    title: str
    description: str
    date_time: datetime
    location: str
    capacity: int = Field(strict=True)

    @field_validator("title")
    @classmethod
    def _title(cls, value: str) -> str:
        return _check_length("title", value, TITLE_MAX_LENGTH)

    @field_validator("description")
    @classmethod
    def _description(cls, value: str) -> str:
        return _check_length("description", value, DESCRIPTION_MAX_LENGTH)

    @field_validator("date_time")
    @classmethod
    def _future(cls, value: datetime, info: ValidationInfo) -> datetime:
        value = ensure_utc(value)
        context = info.context or {}
        now = resolve_now(context.get("now"))
        if value <= now:
            raise ValueError(MSG_DATE_IN_PAST)
        return value

    @field_validator("location")
    @classmethod
    def _location(cls, value: str) -> str:
        return _check_length("location", value, LOCATION_MAX_LENGTH)

    @field_validator("capacity")
    @classmethod
    def _capacity(cls, value: int) -> int:
        if value < CAPACITY_MIN:
            raise ValueError(f"capacity must be at least {CAPACITY_MIN}")
        if value > CAPACITY_MAX:
            raise ValueError(f"capacity must be at most {CAPACITY_MAX}")
        return value


def first_error_message(exc: pydantic.ValidationError) -> str:
    """Render the first error of *exc* as a short, field-prefixed message."""
    errors = exc.errors()
    if not errors:
        return "invalid training"
    first = errors[0]
    field = ".".join(str(part) for part in first["loc"]) or "training"
    if first["type"] == "value_error":
        return str(first.get("ctx", {}).get("error", first["msg"]))
    template = _TYPE_MESSAGES.get(first["type"])
    if template is not None:
        return template.format(field=field)
    return f"{field}: {first['msg']}"


def validate_fields(
    data: Mapping[str, Any] | BaseModel,
    *,
    now: datetime | None = None,
) -> Result[TrainingFields]:
    """Validate caller-supplied training fields against the current time.

    Accepts a mapping or any pydantic model with the same field names.
    Never raises; returns ``Err`` with the first failing rule's message.
    """
    raw = data.model_dump() if isinstance(data, BaseModel) else dict(data)
    try:
        fields = TrainingFields.model_validate(raw, context={"now": resolve_now(now)})
    except pydantic.ValidationError as exc:
        return Err(first_error_message(exc))
    return Ok(fields)
