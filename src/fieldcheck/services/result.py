"""What a CLI-facing check produces: a ServiceResult the output layer renders.

Validators return ``Valid | Invalid``; CheckService wraps those, and its own
step/rule lookup failures, into a ServiceResult with an :class:`ErrorCode`
so ``--json`` consumers can tell a rejected value from a bad invocation.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    """Why a check did not succeed."""

    INVALID = "INVALID"
    INVALID_STEP = "INVALID_STEP"
    UNKNOWN_RULE = "UNKNOWN_RULE"
    NO_STEPS = "NO_STEPS"


class ServiceError(BaseModel):
    """The failure message plus the step labels or rule name involved."""

    model_config = {"frozen": True}

    code: ErrorCode
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service call.

    Attributes:
        ok: True when the value passed (or a listing succeeded).
        op: ``"check"``, ``"list_rules"`` or ``"list_steps"``.
        data: The accepted value and steps, or the listed items.
        warnings: Notes for stderr, such as a ``--number`` fallback to text.
        error: Set exactly when ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def failure(
        cls,
        op: str,
        code: ErrorCode,
        message: str,
        *,
        warnings: list[str] | None = None,
        **detail: Any,
    ) -> ServiceResult:
        """Build a failed result carrying *code*, *message* and *detail*."""
        return cls(
            ok=False,
            op=op,
            warnings=warnings or [],
            error=ServiceError(code=code, message=message, detail=detail),
        )
