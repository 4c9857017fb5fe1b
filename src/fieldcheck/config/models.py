"""Pydantic configuration models for ``fieldcheck.toml``.

Sparse TOML contract: the file only holds named rules. A rule is a field
label plus an ordered list of steps, each written either as step text
(``"length:3:20"``) or as a table (``{ name = "pattern", regex = "..." }``).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from fieldcheck.domain.steps import RuleStep, coerce_step


class RuleConfig(BaseModel):
    """[rules.<name>] section."""

    model_config = {"frozen": True}

    field: str | None = None
    number: bool = False
    steps: list[RuleStep] = Field(min_length=1)

    @field_validator("steps", mode="before")
    @classmethod
    def parse_step_text(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [coerce_step(item) for item in value]
        return value

