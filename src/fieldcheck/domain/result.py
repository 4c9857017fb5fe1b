"""Valid and Invalid: the universal validator return type.

INVARIANT: Every validator returns ``Valid | Invalid`` and never raises.
Callers branch on ``result.valid`` before touching ``value`` or ``error``.
"""

from __future__ import annotations

from typing import Generic, Literal, TypeVar, Union

from pydantic import BaseModel

T = TypeVar("T")


class Valid(BaseModel, Generic[T]):
    """Successful validation, carrying the (possibly normalized) value."""

    model_config = {"frozen": True}

    valid: Literal[True] = True
    value: T


class Invalid(BaseModel):
    """Failed validation, carrying a human-readable message."""

    model_config = {"frozen": True}

    valid: Literal[False] = False
    error: str


# Signatures spell out the payload type as ``Valid[str] | Invalid``.
ValidationResult = Union[Valid, Invalid]
