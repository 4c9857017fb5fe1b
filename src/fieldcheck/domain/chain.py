"""Validator sequencing with short-circuit on the first failure."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from fieldcheck.domain.result import Invalid, Valid

logger = logging.getLogger(__name__)

Validator = Callable[[Any], "Valid[Any] | Invalid"]


def validate_all(value: Any, validators: Sequence[Validator]) -> Valid[Any] | Invalid:
    """Run *validators* in order, feeding each the previous result's value.

    The first ``Invalid`` is returned as-is and later validators never run.
    An empty sequence returns ``Valid(value=value)`` unchanged.

    When every validator passes, the last one is invoked once more on the
    final working value and its value is returned if that call is valid;
    otherwise the working value is returned. Non-idempotent validators can
    observe this second call.
    """
    for index, validator in enumerate(validators):
        result = validator(value)
        if not result.valid:
            logger.debug("Validation chain stopped at step %d: %s", index, result.error)
            return result
        value = result.value

    if not validators:
        return Valid(value=value)
    last_result = validators[-1](value)
    if last_result.valid:
        return Valid(value=last_result.value)
    return Valid(value=value)
