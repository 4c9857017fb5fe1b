"""fieldcheck: small, pure validators for strings and numbers."""

from __future__ import annotations

from fieldcheck.domain.chain import validate_all
from fieldcheck.domain.numbers import validate_number_range, validate_positive_integer
from fieldcheck.domain.result import Invalid, Valid, ValidationResult
from fieldcheck.domain.strings import (
    validate_email,
    validate_length,
    validate_max_length,
    validate_min_length,
    validate_non_empty,
    validate_one_of,
    validate_pattern,
    validate_url,
)

__version__ = "0.1.0"

__all__ = [
    "Invalid",
    "Valid",
    "ValidationResult",
    "__version__",
    "validate_all",
    "validate_email",
    "validate_length",
    "validate_max_length",
    "validate_min_length",
    "validate_non_empty",
    "validate_number_range",
    "validate_one_of",
    "validate_pattern",
    "validate_positive_integer",
    "validate_url",
]
