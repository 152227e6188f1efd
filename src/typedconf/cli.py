"""Root CLI group for typedconf with global flags and command registration."""

from __future__ import annotations

import click

from typedconf import __version__
from typedconf.commands import register_commands
from typedconf.commands._base import TypedconfGroup
from typedconf.commands._context import AppContext
from typedconf.config.settings import CliSettings


@click.group(cls=TypedconfGroup, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="typedconf")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
) -> None:
    """typedconf: check and migrate typed YAML configuration files."""
    settings = CliSettings.from_cli(
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
