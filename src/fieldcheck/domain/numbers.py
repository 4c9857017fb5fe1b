"""Numeric validators: finite ranges and positive integers.

``bool`` is never accepted as a number even though it subclasses ``int``.
Integral floats (``3.0``) count as integers.
"""

from __future__ import annotations

import math

from fieldcheck.domain.result import Invalid, Valid

DEFAULT_NUMBER_FIELD = "Number"


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_finite(value: object) -> bool:
    if not _is_number(value):
        return False
    if isinstance(value, int):
        return True
    return math.isfinite(value)


def _is_integer(value: object) -> bool:
    if not _is_number(value):
        return False
    if isinstance(value, int):
        return True
    return value.is_integer()


def format_number(number: float) -> str:
    """Render a number the way it reads in a message.

    Examples:
        >>> format_number(10.0)
        '10'
        >>> format_number(2.5)
        '2.5'
        >>> format_number(float("-inf"))
        '-Infinity'
    """
    if isinstance(number, float):
        if math.isnan(number):
            return "NaN"
        if math.isinf(number):
            return "Infinity" if number > 0 else "-Infinity"
        if number.is_integer() and abs(number) < 1e21:
            return str(int(number))
        return repr(number)
    return str(number)


def validate_number_range(
    value: object,
    minimum: float,
    maximum: float,
    field_name: str = DEFAULT_NUMBER_FIELD,
) -> Valid[float] | Invalid:
    """Check that *value* is a finite number within ``[minimum, maximum]``."""
    if not _is_finite(value):
        return Invalid(error=f"{field_name} must be a finite number")
    if value < minimum or value > maximum:
        return Invalid(
            error=(
                f"{field_name} must be between "
                f"{format_number(minimum)} and {format_number(maximum)}"
            )
        )
    return Valid(value=value)


def validate_positive_integer(
    value: object,
    field_name: str = DEFAULT_NUMBER_FIELD,
) -> Valid[float] | Invalid:
    """Check that *value* is an integer greater than zero.

    The integer check runs first, so ``1.5`` reports "must be an integer"
    and ``0`` reports "must be a positive integer".
    """
    if not _is_integer(value):
        return Invalid(error=f"{field_name} must be an integer")
    if value <= 0:
        return Invalid(error=f"{field_name} must be a positive integer")
    return Valid(value=value)
