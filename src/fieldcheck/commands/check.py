"""Command: validate a single value."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from fieldcheck.commands._context import AppContext


@click.command(
    epilog="""\
\b
Examples:
  fieldcheck check "  alice  " -s non_empty -s length:3:20 --field Username
  fieldcheck check alice@example.com -s email
  fieldcheck check https://example.com -s url
  fieldcheck check green -s one_of:red,green,blue --field Colour
  fieldcheck check 42 --number -s positive_integer -s number_range:1:130
  fieldcheck check --number -s number_range:-10:10 -- -5
  fieldcheck check "abc_123" -s 'pattern:^[a-z0-9_]+$'
  fieldcheck check alice --rule username
  fieldcheck --json check bob -s min_length:5

Put -- before a VALUE that starts with a dash.""",
)
@click.argument("value")
@click.option(
    "-s",
    "--step",
    "step_specs",
    multiple=True,
    help="Validation step as name[:arg[:arg]]; repeat to chain.",
)
@click.option("-r", "--rule", "rule_name", default=None, help="Run a rule from fieldcheck.toml.")
@click.option("--field", "field_name", default=None, help="Field name used in messages.")
@click.option("--number", is_flag=True, help="Read VALUE as a number before checking.")
@click.pass_obj
def check(
    app: AppContext,
    value: str,
    step_specs: tuple[str, ...],
    rule_name: str | None,
    field_name: str | None,
    number: bool,
) -> None:
    """Validate VALUE with chained steps or a configured rule."""
    if rule_name and step_specs:
        raise click.UsageError("Use either --rule or --step, not both.")
    if rule_name:
        app.emit(app.checks.check_rule(value, rule_name))
    else:
        app.emit(app.checks.check(value, step_specs, field_name=field_name, number=number))
