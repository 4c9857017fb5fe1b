"""String validators: emptiness, length bounds, patterns, email, URL, options.

Every function is total: non-string input yields an ``Invalid`` result with
a type message, never an exception. Only ``validate_non_empty`` normalizes
its value (strips surrounding whitespace and byte-order marks); the rest
return the input as-is.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from pydantic import AnyUrl, TypeAdapter, ValidationError

from fieldcheck.domain.result import Invalid, Valid

DEFAULT_FIELD = "Field"
DEFAULT_EMAIL_FIELD = "Email"
DEFAULT_URL_FIELD = "URL"

# Basic shape only: something@something.something, no whitespace or extra @.
# \Z rather than $ so a trailing newline never matches.
EMAIL_PATTERN: re.Pattern[str] = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+\Z")

_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)

# Unicode whitespace plus the byte-order mark, which str.strip() keeps.
_EDGE_WHITESPACE: re.Pattern[str] = re.compile(r"\A[\s\ufeff]+|[\s\ufeff]+\Z")


def _characters(count: int) -> str:
    return "character" if count == 1 else "characters"


def _not_a_string(field_name: str) -> Invalid:
    return Invalid(error=f"{field_name} must be a string")


def validate_non_empty(value: object, field_name: str = DEFAULT_FIELD) -> Valid[str] | Invalid:
    """Check that *value* is a string with content after stripping.

    On success the stripped string is returned, so chained validators
    see the normalized value.
    """
    if not isinstance(value, str):
        return _not_a_string(field_name)
    stripped = _EDGE_WHITESPACE.sub("", value)
    if not stripped:
        return Invalid(error=f"{field_name} cannot be empty")
    return Valid(value=stripped)


def validate_pattern(
    value: object,
    pattern: str | re.Pattern[str],
    error_message: str,
) -> Valid[str] | Invalid:
    """Check that *pattern* is found in *value*.

    The pattern is searched, not fully matched: anchor it with ``^`` and
    ``$`` when the whole string must conform. Both a non-string value and
    a failed search produce *error_message* verbatim.
    """
    if not isinstance(value, str):
        return Invalid(error=error_message)
    if re.search(pattern, value) is None:
        return Invalid(error=error_message)
    return Valid(value=value)


def validate_min_length(
    value: object,
    min_length: int,
    field_name: str = DEFAULT_FIELD,
) -> Valid[str] | Invalid:
    """Check that *value* has at least *min_length* characters."""
    if not isinstance(value, str):
        return _not_a_string(field_name)
    if len(value) < min_length:
        return Invalid(
            error=f"{field_name} must be at least {min_length} {_characters(min_length)}"
        )
    return Valid(value=value)


def validate_max_length(
    value: object,
    max_length: int,
    field_name: str = DEFAULT_FIELD,
) -> Valid[str] | Invalid:
    """Check that *value* has at most *max_length* characters."""
    if not isinstance(value, str):
        return _not_a_string(field_name)
    if len(value) > max_length:
        return Invalid(
            error=f"{field_name} must be at most {max_length} {_characters(max_length)}"
        )
    return Valid(value=value)


def validate_length(
    value: object,
    min_length: int,
    max_length: int,
    field_name: str = DEFAULT_FIELD,
) -> Valid[str] | Invalid:
    """Check both length bounds; the minimum is checked first.

    Examples:
        >>> validate_length("hi", 3, 5).error
        'Field must be at least 3 characters'
    """
    min_result = validate_min_length(value, min_length, field_name)
    if not min_result.valid:
        return min_result
    return validate_max_length(min_result.value, max_length, field_name)


def validate_email(value: object, field_name: str = DEFAULT_EMAIL_FIELD) -> Valid[str] | Invalid:
    """Check for a basic email shape (not RFC 5322)."""
    return validate_pattern(value, EMAIL_PATTERN, f"{field_name} must be a valid email address")


def validate_url(value: object, field_name: str = DEFAULT_URL_FIELD) -> Valid[str] | Invalid:
    """Check that *value* parses as an absolute URL.

    Parsing follows the WHATWG URL rules as implemented by pydantic, so a
    scheme is required (``example.com`` is rejected). The original string
    is returned, not the normalized URL.
    """
    if not isinstance(value, str):
        return _not_a_string(field_name)
    try:
        _URL_ADAPTER.validate_python(value)
    except ValidationError:
        return Invalid(error=f"{field_name} must be a valid URL")
    return Valid(value=value)


def validate_one_of(
    value: object,
    options: Sequence[str],
    field_name: str = DEFAULT_FIELD,
) -> Valid[str] | Invalid:
    """Check that *value* is one of *options*.

    The failure message lists the options quoted, in the order given.
    """
    if not isinstance(value, str):
        return _not_a_string(field_name)
    if value not in options:
        options_list = ", ".join(f'"{option}"' for option in options)
        return Invalid(error=f"{field_name} must be one of: {options_list}")
    return Valid(value=value)
