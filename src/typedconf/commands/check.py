"""Command: report properties whose stored value is missing or invalid."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from typedconf.commands._base import TypedconfCommand
from typedconf.commands._holders import holder_option
from typedconf.errors import TypedconfError
from typedconf.output.result import CommandError, CommandResult

if TYPE_CHECKING:
    from typedconf.commands._context import AppContext
    from typedconf.configdata.holder import SettingsHolder


@click.command(
    cls=TypedconfCommand,
    examples="""\
  {prog} check config.yml -H myapp.settings:ServerSettings
  {prog} check config.yml -H settings.py:ServerSettings -H settings.py:TitleSettings
  {prog} --json check config.yml -H myapp.settings:ServerSettings""",
)
@click.argument("file", type=click.Path(dir_okay=False, path_type=Path))
@holder_option
@click.pass_obj
def check(app: AppContext, file: Path, holders: tuple[type[SettingsHolder], ...]) -> None:
    """Check FILE against the declared properties without modifying it."""
    from typedconf.configdata.builder import create_configuration
    from typedconf.resource.yaml_file import YamlFileResource

    try:
        data = create_configuration(*holders)
        reader = YamlFileResource(file).create_reader()
    except TypedconfError as exc:
        app.fail("check", exc)

    data.initialize_values(reader)
    needs_rewrite = [prop.path for prop in data.invalid_properties()]
    payload = {
        "file": str(file),
        "properties": len(data.properties),
        "needs_rewrite": needs_rewrite,
    }
    if needs_rewrite:
        error = CommandError(
            code="NEEDS_REWRITE",
            message=f"{len(needs_rewrite)} properties are missing or invalid",
        )
        app.emit(CommandResult(ok=False, op="check", data=payload, error=error))
    else:
        app.emit(CommandResult(ok=True, op="check", data=payload))
