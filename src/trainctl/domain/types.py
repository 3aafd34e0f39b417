"""Classification enums for training sessions."""

from __future__ import annotations

from enum import StrEnum


class TrainingStatusKind(StrEnum):
    """Discriminator values for the training status variants."""

    DRAFT = "draft"
    PUBLISHED = "published"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class FailureKind(StrEnum):
    """Category carried by a failed :class:`~trainctl.domain.result.Err`.

    ``VALIDATION`` covers malformed or out-of-range input. ``DOMAIN`` covers
    structurally valid requests that break a business rule, such as a
    transition from the wrong state.
    """

    VALIDATION = "validation"
    DOMAIN = "domain"
