"""ServiceResult — what every CLI-facing service method returns.

The command layer only ever sees this envelope. Pipeline outcomes
(``Ok`` or an ``AppError``) are folded into it by the service, and the
output layer renders it as text, ids, or JSON.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from trainctl.domain.errors import AppError

ERROR_CODES: dict[str, str] = {
    "ValidationError": "VALIDATION_ERROR",
    "DomainError": "DOMAIN_ERROR",
}


class ServiceError(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    message: str


class ServiceResult(BaseModel):
    """Outcome of one operation.

    ``op`` names the operation (``"publish_training"``). On success
    ``data`` holds its payload and ``warnings`` any non-fatal notes; on
    failure ``error`` is set and ``data`` is empty.
    """

    model_config = ConfigDict(frozen=True)

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None


def failure(op: str, error: AppError) -> ServiceResult:
    """Failed ServiceResult for a pipeline error, coded by its tag."""
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=ERROR_CODES[error.type], message=error.message),
    )
