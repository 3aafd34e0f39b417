"""Result — the synchronous success/failure container for pure domain code.

Domain functions never raise for bad input. They return ``Ok(value)`` or
``Err(error)`` and callers branch with ``isinstance`` or ``match``::

    match create(fields):
        case Ok(training):
            ...
        case Err(error=message):
            ...

Once execution crosses into the command pipeline, an ``Err`` is lifted
into a tagged :mod:`~trainctl.domain.errors` value.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from trainctl.domain.types import FailureKind


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Successful outcome holding *value*."""

    value: T

    def map[U](self, fn: Callable[[T], U]) -> Ok[U]:
        return Ok(fn(self.value))

    def bind[U](self, fn: Callable[[T], Result[U]]) -> Result[U]:
        return fn(self.value)


@dataclass(frozen=True, slots=True)
class Err:
    """Failed outcome holding a human-readable *error* message."""

    error: str
    kind: FailureKind = FailureKind.VALIDATION

    def map(self, fn: Callable[..., object]) -> Err:
        return self

    def bind(self, fn: Callable[..., object]) -> Err:
        return self


type Result[T] = Ok[T] | Err


def domain_err(message: str) -> Err:
    """Shorthand for a business-rule failure."""
    return Err(message, kind=FailureKind.DOMAIN)
