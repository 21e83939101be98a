"""ServiceResult and ServiceError — the universal service contract.

INVARIANT: All service-layer methods return ServiceResult.
The CLI renders it; tests assert on it.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Machine-readable failure: a stable ``code``, a human ``message``, and a payload."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for every service operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name (``"check"``, ``"validate"``, ...); selects the renderer.
        data: Operation payload. Batches keep their items here even on failure.
        warnings: Non-fatal notes, e.g. inputs skipped by fail-fast.
        error: Set exactly when ``ok`` is False.
        meta: Optional extra metadata.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def success(cls, op: str, data: dict[str, Any], **kwargs: Any) -> ServiceResult:
        return cls(ok=True, op=op, data=data, **kwargs)

    @classmethod
    def failure(cls, op: str, error: ServiceError, **kwargs: Any) -> ServiceResult:
        return cls(ok=False, op=op, error=error, **kwargs)
