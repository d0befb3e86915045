"""ServiceResult and ServiceError: the contract between services and the CLI.

INVARIANT: service operations return ServiceResult; they never raise the
scaffolding error taxonomy past their own boundary.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from create_clean_arch.domain.errors import ScaffoldError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: ScaffoldError) -> ServiceError:
        return cls(code=exc.code, message=exc.message, detail=dict(exc.detail))


class ServiceResult(BaseModel):
    """Universal return type for service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"create_project"``).
        data: Operation-specific payload. On failure it may still carry
            what was produced before the error.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
