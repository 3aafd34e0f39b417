"""AppError — tagged failure values for the effectful command pipeline.

Two categories only:

- :class:`ValidationError`: malformed or out-of-range input, detected
  before any domain state exists. The caller should fix the input.
- :class:`DomainError`: a structurally valid request that violates a
  business rule (wrong-state transition, missing record, storage fault).
  The caller should change the workflow state.

These are values, not exceptions. The pipeline returns them alongside
:class:`~trainctl.domain.result.Ok` as ``AppResult[T]``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from trainctl.domain.result import Err, Ok
from trainctl.domain.types import FailureKind


@dataclass(frozen=True, slots=True)
class ValidationError:
    """Input failed field-level validation."""

    message: str
    type: Literal["ValidationError"] = "ValidationError"

    def __str__(self) -> str:
        return f"{self.type}: {self.message}"


@dataclass(frozen=True, slots=True)
class DomainError:
    """Request violated a business rule."""

    message: str
    type: Literal["DomainError"] = "DomainError"

    def __str__(self) -> str:
        return f"{self.type}: {self.message}"


type AppError = ValidationError | DomainError

type AppResult[T] = Ok[T] | AppError


def to_app_error(err: Err) -> AppError:
    """Lift a synchronous domain failure into the pipeline error channel."""
    if err.kind is FailureKind.DOMAIN:
        return DomainError(err.error)
    return ValidationError(err.error)
