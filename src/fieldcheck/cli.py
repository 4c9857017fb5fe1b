"""The ``fieldcheck`` command: global output flags plus check/rules/steps."""

from __future__ import annotations

import click

from fieldcheck import __version__
from fieldcheck.commands._context import AppContext
from fieldcheck.commands.check import check
from fieldcheck.commands.rules import rules, steps
from fieldcheck.config.settings import FieldcheckSettings


@click.group(
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(version=__version__, prog_name="fieldcheck")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only OK/ERROR lines or names.")
@click.option("-v", "--verbose", is_flag=True, help="Show failure detail and debug logs.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON.")
@click.option(
    "-c",
    "--config",
    "config_path",
    default=None,
    help="Rules file to use instead of the nearest fieldcheck.toml.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """fieldcheck: validate strings and numbers from the command line."""
    settings = FieldcheckSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(check)
cli.add_command(rules)
cli.add_command(steps)
