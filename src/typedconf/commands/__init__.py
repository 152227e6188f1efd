"""Subcommand modules for typedconf.

Provides register_commands() which uses deferred imports to keep
``typedconf --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from typedconf.commands.check import check
    from typedconf.commands.defaults import defaults
    from typedconf.commands.migrate import migrate

    cli.add_command(check)
    cli.add_command(migrate)
    cli.add_command(defaults)
