"""Tests for the numeric validators and number formatting."""

from __future__ import annotations

import math

import pytest

from fieldcheck.domain.numbers import (
    format_number,
    validate_number_range,
    validate_positive_integer,
)
from fieldcheck.domain.result import Invalid, Valid


class TestValidateNumberRange:
    @pytest.mark.parametrize("value", [5, 1, 10, 2.5])
    def test_accepts_inclusive_range(self, value: float) -> None:
        assert validate_number_range(value, 1, 10) == Valid(value=value)

    @pytest.mark.parametrize("value", [0, 11, 0.999, 10.001])
    def test_rejects_outside_range(self, value: float) -> None:
        assert validate_number_range(value, 1, 10) == Invalid(
            error="Number must be between 1 and 10"
        )

    @pytest.mark.parametrize(
        "value",
        ["5", None, [5], float("nan"), float("inf"), float("-inf"), True, False],
    )
    def test_rejects_non_finite_and_non_numbers(self, value: object) -> None:
        assert validate_number_range(value, 1, 10) == Invalid(
            error="Number must be a finite number"
        )

    def test_float_bounds_render_like_integers(self) -> None:
        assert validate_number_range(20, 1.0, 10.0) == Invalid(
            error="Number must be between 1 and 10"
        )

    def test_fractional_bounds(self) -> None:
        assert validate_number_range(1, 0.5, 0.75, "Ratio") == Invalid(
            error="Ratio must be between 0.5 and 0.75"
        )

    def test_infinite_bound(self) -> None:
        assert validate_number_range(-5, 0, math.inf) == Invalid(
            error="Number must be between 0 and Infinity"
        )
        assert validate_number_range(10**6, 0, math.inf) == Valid(value=10**6)

    def test_large_int_is_finite(self) -> None:
        assert validate_number_range(10**400, 0, 1) == Invalid(
            error="Number must be between 0 and 1"
        )


class TestValidatePositiveInteger:
    @pytest.mark.parametrize("value", [1, 100, 3.0])
    def test_accepts_positive_integers(self, value: float) -> None:
        assert validate_positive_integer(value) == Valid(value=value)

    @pytest.mark.parametrize("value", [0, -1, -3.0])
    def test_rejects_non_positive(self, value: float) -> None:
        assert validate_positive_integer(value) == Invalid(
            error="Number must be a positive integer"
        )

    @pytest.mark.parametrize("value", [1.5, "1", None, float("nan"), float("inf"), True])
    def test_rejects_non_integers(self, value: object) -> None:
        assert validate_positive_integer(value) == Invalid(error="Number must be an integer")

    def test_integer_check_runs_before_positivity(self) -> None:
        assert validate_positive_integer(-1.5).error == "Number must be an integer"

    def test_custom_field_name(self) -> None:
        assert validate_positive_integer(0, "Quantity") == Invalid(
            error="Quantity must be a positive integer"
        )


class TestFormatNumber:
    @pytest.mark.parametrize(
        "number,expected",
        [
            (10, "10"),
            (10.0, "10"),
            (-0.0, "0"),
            (2.5, "2.5"),
            (float("inf"), "Infinity"),
            (float("-inf"), "-Infinity"),
            (float("nan"), "NaN"),
            (1e21, "1e+21"),
        ],
    )
    def test_renders(self, number: float, expected: str) -> None:
        assert format_number(number) == expected
