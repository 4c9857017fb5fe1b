"""CheckService: run validation steps or named rules against a value."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import ValidationError

from fieldcheck.config.models import RuleConfig
from fieldcheck.domain.chain import validate_all
from fieldcheck.domain.steps import STEP_USAGE, RuleStep, build_validator, parse_step
from fieldcheck.services.result import ErrorCode, ServiceResult

logger = logging.getLogger(__name__)


def coerce_number(text: str) -> int | float | None:
    """Read *text* as an int, then as a float; None if it is neither.

    ``"nan"`` and ``"inf"`` parse as floats so range checks can reject them.
    """
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return None


def _step_error_message(exc: ValueError) -> str:
    if isinstance(exc, ValidationError):
        return "; ".join(err["msg"].removeprefix("Value error, ") for err in exc.errors())
    return str(exc)


class CheckService:
    """Validate values with ad-hoc steps or rules from ``fieldcheck.toml``."""

    def __init__(self, rules: Mapping[str, RuleConfig] | None = None) -> None:
        self._rules: Mapping[str, RuleConfig] = rules or {}

    def check(
        self,
        value: Any,
        steps: Sequence[str | RuleStep],
        *,
        field_name: str | None = None,
        number: bool = False,
    ) -> ServiceResult:
        """Run *steps* in order against *value*, stopping at the first failure.

        String steps are parsed with :func:`parse_step`. When *number* is
        set and *value* is text, it is read as a number first; text that is
        not numeric is checked as-is with a warning.
        """
        op = "check"
        if not steps:
            return ServiceResult.failure(op, ErrorCode.NO_STEPS, "No validation steps given")

        parsed: list[RuleStep] = []
        for step in steps:
            if isinstance(step, RuleStep):
                parsed.append(step)
                continue
            try:
                parsed.append(parse_step(step))
            except ValueError as exc:
                return ServiceResult.failure(
                    op, ErrorCode.INVALID_STEP, _step_error_message(exc), step=step
                )

        warnings: list[str] = []
        if number and isinstance(value, str):
            coerced = coerce_number(value)
            if coerced is None:
                warnings.append(f"'{value}' is not numeric; checking it as text")
            else:
                value = coerced

        labels = [step.label() for step in parsed]
        logger.debug("Checking value against steps: %s", ", ".join(labels))
        validators = [build_validator(step, field_name) for step in parsed]
        result = validate_all(value, validators)

        if not result.valid:
            return ServiceResult.failure(
                op,
                ErrorCode.INVALID,
                result.error,
                warnings=warnings,
                value=value,
                steps=labels,
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={"value": result.value, "steps": labels},
            warnings=warnings,
        )

    def check_rule(self, value: Any, rule_name: str) -> ServiceResult:
        """Run the configured rule *rule_name* against *value*."""
        rule = self._rules.get(rule_name)
        if rule is None:
            known = ", ".join(sorted(self._rules)) or "none configured"
            return ServiceResult.failure(
                "check",
                ErrorCode.UNKNOWN_RULE,
                f"Unknown rule '{rule_name}' (known: {known})",
                rule=rule_name,
            )
        logger.debug("Running rule %s", rule_name)
        result = self.check(value, rule.steps, field_name=rule.field, number=rule.number)
        if result.ok:
            return result.model_copy(update={"data": {"rule": rule_name, **result.data}})
        return result

    def list_rules(self) -> ServiceResult:
        """List configured rules with their steps in ``name:args`` form."""
        items = [
            {
                "name": name,
                "field": rule.field or "",
                "number": rule.number,
                "steps": [step.label() for step in rule.steps],
            }
            for name, rule in sorted(self._rules.items())
        ]
        return ServiceResult(ok=True, op="list_rules", data={"items": items, "count": len(items)})

    def list_steps(self) -> ServiceResult:
        """List every step name with its usage form."""
        items = [{"name": str(name), "usage": usage} for name, usage in STEP_USAGE.items()]
        return ServiceResult(ok=True, op="list_steps", data={"items": items, "count": len(items)})
