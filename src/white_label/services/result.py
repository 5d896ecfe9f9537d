"""ServiceResult and ServiceError — the universal service contract.

INVARIANT: All service-layer methods return ServiceResult. A failed
resolution is reported as ``ok=False`` and never carries a value; turning
that into a failed build is the caller's job.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult.

    ``code`` is one of ``CONFIG_MISSING``, ``SYNTAX_ERROR``, ``NO_MATCH``,
    ``INVALID_NAME``, ``RESOLVE_FAILED`` (several constants failed in
    different ways), ``NO_MANIFEST``, ``NO_CONSTANTS``, ``READ_FAILED`` or
    ``WRITE_FAILED``.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"resolve"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
