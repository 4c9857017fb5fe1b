"""Tests for validate_all sequencing."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from fieldcheck.domain.chain import validate_all
from fieldcheck.domain.result import Invalid, Valid
from fieldcheck.domain.strings import (
    validate_max_length,
    validate_min_length,
    validate_non_empty,
)


class TestValidateAll:
    def test_passes_when_all_pass(self) -> None:
        result = validate_all(
            "hello",
            [validate_non_empty, lambda v: validate_min_length(v, 3)],
        )
        assert result == Valid(value="hello")

    def test_stops_at_first_failure(self) -> None:
        result = validate_all(
            "hi",
            [
                validate_non_empty,
                lambda v: validate_min_length(v, 5),
                lambda v: validate_max_length(v, 10),
            ],
        )
        assert result == Invalid(error="Field must be at least 5 characters")

    def test_empty_sequence_is_identity(self) -> None:
        sentinel = object()
        result = validate_all(sentinel, [])
        assert result.valid
        assert result.value is sentinel

    def test_normalized_value_flows_forward(self) -> None:
        """Trimming by non_empty is seen by the length check."""
        result = validate_all("   ab   ", [validate_non_empty, lambda v: validate_max_length(v, 2)])
        assert result == Valid(value="ab")

    def test_later_validators_not_called_after_failure(self) -> None:
        calls: list[Any] = []

        def spy(value: Any) -> Valid[Any]:
            calls.append(value)
            return Valid(value=value)

        validate_all(123, [validate_non_empty, spy])
        assert calls == []

    def test_last_validator_is_invoked_twice(self) -> None:
        calls: list[Any] = []

        def spy(value: Any) -> Valid[Any]:
            calls.append(value)
            return Valid(value=value)

        validate_all("x", [validate_non_empty, spy])
        assert calls == ["x", "x"]

    def test_returns_value_from_reinvocation(self) -> None:
        counter = {"n": 0}

        def counting(value: Any) -> Valid[Any]:
            counter["n"] += 1
            return Valid(value=f"{value}{counter['n']}")

        # First call yields "a1"; the re-invocation sees "a1" and yields "a12".
        assert validate_all("a", [counting]) == Valid(value="a12")

    def test_failed_reinvocation_keeps_working_value(self) -> None:
        state = {"calls": 0}

        def flaky(value: Any) -> Valid[Any] | Invalid:
            state["calls"] += 1
            if state["calls"] == 1:
                return Valid(value=value.upper())
            return Invalid(error="second call fails")

        assert validate_all("abc", [flaky]) == Valid(value="ABC")

    def test_logs_short_circuit(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="fieldcheck"):
            validate_all("", [validate_non_empty])
        assert "stopped at step 0" in caplog.text
