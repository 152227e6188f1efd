"""Command: load a file through the settings manager, rewriting it if needed."""

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
  {prog} migrate config.yml -H myapp.settings:ServerSettings
  {prog} migrate config.yml -H myapp.settings:ServerSettings --no-plugins""",
)
@click.argument("file", type=click.Path(dir_okay=False, path_type=Path))
@holder_option
@click.option("--no-plugins", is_flag=True, help="Skip installed migration plugins.")
@click.pass_obj
def migrate(
    app: AppContext,
    file: Path,
    holders: tuple[type[SettingsHolder], ...],
    no_plugins: bool,
) -> None:
    """Fill in missing values in FILE and drop unusable ones."""
    from typedconf.configdata.builder import create_configuration
    from typedconf.manager import SettingsManagerBuilder
    from typedconf.migration.service import MigrationService

    service = MigrationService()
    if not no_plugins:
        service.load_entrypoints()

    try:
        data = create_configuration(*holders)
        manager = (
            SettingsManagerBuilder.from_path(file)
            .configuration_data(data)
            .migration_service(service)
            .create()
        )
    except TypedconfError as exc:
        app.fail("migrate", exc)

    payload = {
        "file": str(file),
        "properties": len(data.properties),
        "rewritten": manager.last_load_saved,
        "migrations": service.list_migration_names(),
    }
    app.emit(CommandResult(ok=True, op="migrate", data=payload))
