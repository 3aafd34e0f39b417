"""Training identifiers: generation, validation, and parsing.

Identifiers are random UUID4 values rendered in the canonical lowercase
``8-4-4-4-12`` hex layout. ``TrainingId`` is a ``NewType`` over ``str`` so a
type checker rejects a raw string (or another kind of id) where a
training id is expected. The only sanctioned conversions are
:func:`new_training_id` and :func:`parse_training_id`.

INVARIANT: uniqueness comes from randomness; ids are never checked
against existing records.
"""

from __future__ import annotations

import re
import uuid
from typing import NewType

from trainctl.domain.result import Err, Ok, Result

TrainingId = NewType("TrainingId", str)

ID_PATTERN: re.Pattern[str] = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$"
)


def new_training_id() -> TrainingId:
    """Generate a fresh training id."""
    return TrainingId(str(uuid.uuid4()))


def is_valid_training_id(value: str) -> bool:
    """Check whether *value* is in canonical training id form."""
    return ID_PATTERN.match(value) is not None


def parse_training_id(value: str) -> Result[TrainingId]:
    """Convert a raw string into a :data:`TrainingId`.

    Surrounding whitespace is stripped and hex digits are lowercased
    before matching, so ids copied from other tools still resolve.
    """
    candidate = value.strip().lower()
    if not is_valid_training_id(candidate):
        return Err(f"invalid training id: {value!r}")
    return Ok(TrainingId(candidate))
