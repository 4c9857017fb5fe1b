"""Shared pytest fixtures for fieldcheck tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

SAMPLE_CONFIG = """\
[rules.username]
field = "Username"
steps = [
    "non_empty",
    "length:3:12",
    { name = "pattern", regex = "^[a-z0-9_]+$", message = "Username may only use a-z, 0-9 and _" },
]

[rules.age]
field = "Age"
number = true
steps = ["positive_integer", "number_range:1:130"]

[rules.colour]
steps = ["one_of:red,green,blue"]
"""


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every test from an empty directory with no config env vars set."""
    monkeypatch.chdir(tmp_path)
    for var in (
        "FIELDCHECK_CONFIG",
        "FIELDCHECK_JSON_OUTPUT",
        "FIELDCHECK_QUIET",
        "FIELDCHECK_VERBOSE",
        "FIELDCHECK_LOG_JSON",
    ):
        monkeypatch.delenv(var, raising=False)
    return tmp_path


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo handler and level changes made by configure_logging."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("fieldcheck")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """A fieldcheck.toml with username, age and colour rules in the test cwd."""
    path = tmp_path / "fieldcheck.toml"
    path.write_text(SAMPLE_CONFIG, encoding="utf-8")
    return path
