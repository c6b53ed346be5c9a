"""ServiceResult and ServiceError — what CLI operations hand to the output layer.

The engine itself returns ``ResolvedTarget | None``; commands wrap that
outcome (or a manifest failure) in a ServiceResult so human and JSON
output, warnings, and exit codes are handled in one place.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why an operation failed: a stable ``code`` plus a readable message."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one CLI operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (``"resolve"``, ``"declarations"``, ``"clean"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered along the way.
        error: Populated when ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def success(cls, op: str, data: dict[str, Any], **kwargs: Any) -> ServiceResult:
        return cls(ok=True, op=op, data=data, **kwargs)

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))
