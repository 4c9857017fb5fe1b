"""The validator library stays independent of the CLI layer."""

from __future__ import annotations

import ast
from pathlib import Path

import pytest

import fieldcheck

PACKAGE_DIR = Path(fieldcheck.__file__).parent
LIBRARY_FILES = [PACKAGE_DIR / "__init__.py", *sorted((PACKAGE_DIR / "domain").glob("*.py"))]
CLI_LAYER = (
    "fieldcheck.cli",
    "fieldcheck.commands",
    "fieldcheck.config",
    "fieldcheck.output",
    "fieldcheck.services",
    "click",
    "pydantic_settings",
    "os",
)


def _imported_modules(path: Path) -> set[str]:
    tree = ast.parse(path.read_text(encoding="utf-8"))
    names: set[str] = set()
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            names.update(alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.module:
            names.add(node.module)
    return names


@pytest.mark.parametrize("path", LIBRARY_FILES, ids=lambda p: p.name)
def test_library_module_avoids_cli_layer(path: Path) -> None:
    for module in _imported_modules(path):
        assert not any(
            module == banned or module.startswith(f"{banned}.") for banned in CLI_LAYER
        ), f"{path.name} imports {module}"


def test_validators_ignore_fieldcheck_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FIELDCHECK_CONFIG", "/nonexistent/fieldcheck.toml")
    monkeypatch.setenv("FIELDCHECK_QUIET", "true")
    assert fieldcheck.validate_non_empty("  a ") == fieldcheck.Valid(value="a")
    assert fieldcheck.validate_all("x", []) == fieldcheck.Valid(value="x")
