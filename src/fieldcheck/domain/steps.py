"""Named validation steps: parsing ``name[:arg[:arg]]`` and building validators.

A step is the serializable form of one validator call. Steps come from the
CLI (``-s length:3:20``) or from ``[rules.*]`` tables in ``fieldcheck.toml``,
and :func:`build_validator` turns each into a one-argument callable that
:func:`~fieldcheck.domain.chain.validate_all` can sequence.
"""

from __future__ import annotations

import re
from enum import StrEnum
from functools import partial
from typing import Any

from pydantic import BaseModel, Field, model_validator

from fieldcheck.domain.chain import Validator
from fieldcheck.domain.numbers import validate_number_range, validate_positive_integer
from fieldcheck.domain.strings import (
    DEFAULT_FIELD,
    validate_email,
    validate_length,
    validate_max_length,
    validate_min_length,
    validate_non_empty,
    validate_one_of,
    validate_pattern,
    validate_url,
)


class StepName(StrEnum):
    """Validators addressable by name."""

    NON_EMPTY = "non_empty"
    MIN_LENGTH = "min_length"
    MAX_LENGTH = "max_length"
    LENGTH = "length"
    EMAIL = "email"
    URL = "url"
    ONE_OF = "one_of"
    NUMBER_RANGE = "number_range"
    POSITIVE_INTEGER = "positive_integer"
    PATTERN = "pattern"


STEP_USAGE: dict[StepName, str] = {
    StepName.NON_EMPTY: "non_empty",
    StepName.MIN_LENGTH: "min_length:N",
    StepName.MAX_LENGTH: "max_length:N",
    StepName.LENGTH: "length:MIN:MAX",
    StepName.EMAIL: "email",
    StepName.URL: "url",
    StepName.ONE_OF: "one_of:a,b,c",
    StepName.NUMBER_RANGE: "number_range:MIN:MAX",
    StepName.POSITIVE_INTEGER: "positive_integer",
    StepName.PATTERN: "pattern:REGEX",
}

_LENGTH_STEPS = {StepName.MIN_LENGTH, StepName.MAX_LENGTH, StepName.LENGTH}


class RuleStep(BaseModel):
    """One parameterised validator call.

    Attributes:
        name: Which validator to run.
        min: Lower bound for ``min_length``, ``length`` and ``number_range``.
        max: Upper bound for ``max_length``, ``length`` and ``number_range``.
        options: Allowed values for ``one_of``, in message order.
        regex: Pattern searched by ``pattern``.
        message: Failure message for ``pattern``.
    """

    model_config = {"frozen": True}

    name: StepName
    min: float | None = None
    max: float | None = None
    options: tuple[str, ...] = Field(default_factory=tuple)
    regex: str | None = None
    message: str | None = None

    @model_validator(mode="after")
    def check_arguments(self) -> RuleStep:
        needs_min = {StepName.MIN_LENGTH, StepName.LENGTH, StepName.NUMBER_RANGE}
        needs_max = {StepName.MAX_LENGTH, StepName.LENGTH, StepName.NUMBER_RANGE}
        if self.name in needs_min and self.min is None:
            msg = f"Step '{self.name}' requires a minimum"
            raise ValueError(msg)
        if self.name in needs_max and self.max is None:
            msg = f"Step '{self.name}' requires a maximum"
            raise ValueError(msg)
        if self.name in _LENGTH_STEPS:
            for bound in (self.min, self.max):
                if bound is not None and not float(bound).is_integer():
                    msg = f"Step '{self.name}' bounds must be whole numbers"
                    raise ValueError(msg)
        if self.name == StepName.ONE_OF and not self.options:
            msg = "Step 'one_of' requires at least one option"
            raise ValueError(msg)
        if self.name == StepName.PATTERN:
            if not self.regex:
                msg = "Step 'pattern' requires a regex"
                raise ValueError(msg)
            try:
                re.compile(self.regex)
            except re.error as exc:
                msg = f"Step 'pattern' has an invalid regex: {exc}"
                raise ValueError(msg) from exc
        return self

    def label(self) -> str:
        """Render the step back in ``name[:arg[:arg]]`` form."""
        if self.name == StepName.MIN_LENGTH:
            return f"{self.name}:{int(self.min)}"
        if self.name == StepName.MAX_LENGTH:
            return f"{self.name}:{int(self.max)}"
        if self.name == StepName.LENGTH:
            return f"{self.name}:{int(self.min)}:{int(self.max)}"
        if self.name == StepName.NUMBER_RANGE:
            return f"{self.name}:{_plain(self.min)}:{_plain(self.max)}"
        if self.name == StepName.ONE_OF:
            return f"{self.name}:{','.join(self.options)}"
        if self.name == StepName.PATTERN:
            return f"{self.name}:{self.regex}"
        return str(self.name)


def _plain(number: float | None) -> str:
    if number is not None and float(number).is_integer():
        return str(int(number))
    return str(number)


def _parse_bound(raw: str, step: str) -> float:
    try:
        return float(raw)
    except ValueError:
        msg = f"Step '{step}' expects a number, got '{raw}'"
        raise ValueError(msg) from None


def parse_step(text: str) -> RuleStep:
    """Parse ``name[:arg[:arg]]`` into a :class:`RuleStep`.

    ``pattern`` takes the whole remainder as its regex, so the regex may
    itself contain colons.

    Raises:
        ValueError: Unknown step name, wrong argument count, or a
            non-numeric bound.

    Examples:
        >>> parse_step("length:3:20").label()
        'length:3:20'
        >>> parse_step("pattern:^a:b$").regex
        '^a:b$'
    """
    raw_name, _, rest = text.strip().partition(":")
    try:
        name = StepName(raw_name)
    except ValueError:
        known = ", ".join(s.value for s in StepName)
        msg = f"Unknown step '{raw_name}' (expected one of: {known})"
        raise ValueError(msg) from None

    if name == StepName.PATTERN:
        return RuleStep(name=name, regex=rest or None)

    args = rest.split(":") if rest else []
    expected = {
        StepName.MIN_LENGTH: 1,
        StepName.MAX_LENGTH: 1,
        StepName.LENGTH: 2,
        StepName.NUMBER_RANGE: 2,
        StepName.ONE_OF: 1,
    }.get(name, 0)
    if len(args) != expected:
        msg = f"Step '{name}' takes {expected} argument(s), got {len(args)}: use {STEP_USAGE[name]}"
        raise ValueError(msg)

    if name == StepName.MIN_LENGTH:
        return RuleStep(name=name, min=_parse_bound(args[0], name))
    if name == StepName.MAX_LENGTH:
        return RuleStep(name=name, max=_parse_bound(args[0], name))
    if name in (StepName.LENGTH, StepName.NUMBER_RANGE):
        return RuleStep(
            name=name,
            min=_parse_bound(args[0], name),
            max=_parse_bound(args[1], name),
        )
    if name == StepName.ONE_OF:
        options = tuple(option.strip() for option in args[0].split(",") if option.strip())
        return RuleStep(name=name, options=options)
    return RuleStep(name=name)


def coerce_step(raw: Any) -> Any:
    """Accept either step text or a step table; text is parsed."""
    if isinstance(raw, str):
        return parse_step(raw)
    return raw


def build_validator(step: RuleStep, field_name: str | None = None) -> Validator:
    """Bind *step*'s arguments (and *field_name*, if given) to its validator."""
    named: dict[str, Any] = {"field_name": field_name} if field_name else {}

    if step.name == StepName.NON_EMPTY:
        return partial(validate_non_empty, **named)
    if step.name == StepName.MIN_LENGTH:
        return partial(validate_min_length, min_length=int(step.min), **named)
    if step.name == StepName.MAX_LENGTH:
        return partial(validate_max_length, max_length=int(step.max), **named)
    if step.name == StepName.LENGTH:
        return partial(
            validate_length, min_length=int(step.min), max_length=int(step.max), **named
        )
    if step.name == StepName.EMAIL:
        return partial(validate_email, **named)
    if step.name == StepName.URL:
        return partial(validate_url, **named)
    if step.name == StepName.ONE_OF:
        return partial(validate_one_of, options=step.options, **named)
    if step.name == StepName.NUMBER_RANGE:
        return partial(validate_number_range, minimum=step.min, maximum=step.max, **named)
    if step.name == StepName.POSITIVE_INTEGER:
        return partial(validate_positive_integer, **named)

    message = step.message or f"{field_name or DEFAULT_FIELD} has an invalid format"
    return partial(validate_pattern, pattern=step.regex, error_message=message)
