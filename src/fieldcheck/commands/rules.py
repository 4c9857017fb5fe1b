"""Commands: list configured rules and available steps."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from fieldcheck.commands._context import AppContext


@click.command(
    epilog="""\
\b
Examples:
  fieldcheck rules
  fieldcheck -c ./forms/fieldcheck.toml rules
  fieldcheck --json rules""",
)
@click.pass_obj
def rules(app: AppContext) -> None:
    """List rules defined in fieldcheck.toml."""
    app.emit(app.checks.list_rules())


@click.command(
    epilog="""\
\b
Examples:
  fieldcheck steps
  fieldcheck -q steps""",
)
@click.pass_obj
def steps(app: AppContext) -> None:
    """List available validation steps."""
    app.emit(app.checks.list_steps())
