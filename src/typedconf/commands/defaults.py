"""Command: render the default YAML document for a set of holders."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from typedconf.commands._base import TypedconfCommand
from typedconf.commands._holders import holder_option
from typedconf.errors import TypedconfError
from typedconf.output.result import CommandResult

if TYPE_CHECKING:
    from typedconf.commands._context import AppContext
    from typedconf.configdata.holder import SettingsHolder


@click.command(
    cls=TypedconfCommand,
    examples="""\
  {prog} defaults -H myapp.settings:ServerSettings
  {prog} defaults -H myapp.settings:ServerSettings -o config.yml""",
)
@holder_option
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write to this file instead of stdout.",
)
@click.pass_obj
def defaults(
    app: AppContext,
    holders: tuple[type[SettingsHolder], ...],
    output: Path | None,
) -> None:
    """Print (or write) every property with its default value."""
    from typedconf.configdata.builder import create_configuration
    from typedconf.resource.yaml_file import YamlFileResource, render_properties

    try:
        data = create_configuration(*holders)
    except TypedconfError as exc:
        app.fail("defaults", exc)

    if output is None:
        click.echo(render_properties(data), nl=False)
        return
    YamlFileResource(output).export_properties(data)
    app.emit(
        CommandResult(
            ok=True,
            op="defaults",
            data={"file": str(output), "properties": len(data.properties)},
        )
    )
