"""Unified settings: CLI flags, env vars, and rules from fieldcheck.toml.

Priority chain (highest to lowest):
  1. Init kwargs  (CLI flags passed by Click)
  2. Env vars     (``FIELDCHECK_*`` prefix)
  3. TOML file    (the ``[rules]`` tables of ``fieldcheck.toml``)
  4. Code defaults

The TOML file is the one named by ``--config``, else the one named by
``FIELDCHECK_CONFIG``, else the nearest ``fieldcheck.toml`` found walking
up from the working directory.
"""

from __future__ import annotations

import os
import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from fieldcheck.config.models import RuleConfig

CONFIG_FILENAME = "fieldcheck.toml"
CONFIG_ENV_VAR = "FIELDCHECK_CONFIG"


def locate_config(explicit: str | None = None, start: Path | None = None) -> Path | None:
    """Return the rules file to load, or None when there is none.

    A file named explicitly (*explicit*, then ``FIELDCHECK_CONFIG``) must
    exist. The walk-up search from *start* (default: cwd) may find nothing.

    Raises:
        click.ClickException: An explicitly named file does not exist.
    """
    named = explicit or os.environ.get(CONFIG_ENV_VAR)
    if named:
        path = Path(named)
        if not path.is_file():
            msg = f"Config file not found: {path}"
            raise click.ClickException(msg)
        return path

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


class RulesFileSource(PydanticBaseSettingsSource):
    """Supply the ``rules`` field from a fieldcheck.toml file.

    Only the ``[rules]`` table is read; other top-level keys are ignored so
    output flags stay a matter of CLI and environment.
    """

    def __init__(self, settings_cls: type[BaseSettings], path: Path | None) -> None:
        super().__init__(settings_cls)
        self._rules: dict[str, Any] | None = None
        if path is None:
            return
        try:
            data = tomllib.loads(path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {path}: {exc}"
            raise click.ClickException(msg) from exc
        rules = data.get("rules")
        if rules is not None and not isinstance(rules, dict):
            msg = f"Invalid configuration in {path}: [rules] must be a table"
            raise click.ClickException(msg)
        self._rules = rules

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        if field_name == "rules" and self._rules is not None:
            return self._rules, field_name, True
        return None, field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return ``{"rules": ...}`` when the file defines any."""
        return {} if self._rules is None else {"rules": self._rules}


# The rules file chosen by from_cli, visible to settings_customise_sources.
_tls = threading.local()


class FieldcheckSettings(BaseSettings):
    """Settings for one fieldcheck CLI invocation.

    Attributes:
        config_path: The rules file in effect, or None if none was found.
        rules: Named validation rules from ``[rules.<name>]`` tables.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "FIELDCHECK_",
        "extra": "ignore",
    }

    config_path: Path | None = None

    # --- output flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    rules: dict[str, RuleConfig] = Field(default_factory=dict)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Read init kwargs, then env vars, then the rules file."""
        return (
            init_settings,
            env_settings,
            RulesFileSource(settings_cls, getattr(_tls, "rules_path", None)),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> FieldcheckSettings:
        """Build settings for a CLI run.

        Flags left unset (falsy) fall back to ``FIELDCHECK_*`` env vars.

        Raises:
            click.ClickException: The rules file is missing, is not valid
                TOML, or defines a rule that does not validate.
        """
        path = locate_config(config_path, start)
        overrides = {key: value for key, value in cli_flags.items() if value}
        _tls.rules_path = path
        try:
            return cls(config_path=path, **overrides)
        except ValueError as exc:
            msg = f"Invalid configuration in {path}: {exc}"
            raise click.ClickException(msg) from exc
        finally:
            _tls.rules_path = None
