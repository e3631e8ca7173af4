"""ServiceResult and ServiceError, the return type of every service call.

Rejected names come back as ``ok=False`` results carrying a validation
code, never as exceptions, so the CLI can route them to stderr with exit
code 1 and a library caller can inspect ``error.code``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why an operation was refused.

    ``code`` is a stable identifier such as ``NAME_TOO_SHORT``; ``detail``
    holds the offending values and, for name checks, every issue found.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: ``"destiny"``, ``"destiny_both"`` or ``"strokes"``.
        data: The operation payload; empty on failure.
        warnings: Things worth telling the user that did not stop the run,
            such as characters with no stroke value.
        error: Set when ``ok`` is False.
        meta: Span tree under ``"telemetry"`` when ``--verbose`` is on.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
