"""AppContext: shared Click context for all commands.

Created once by the root group and passed to subcommands via
``@click.pass_obj``. Owns logging setup and result emission
(stdout/stderr routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import click

from typedconf.errors import ConfigurationError, ResourceError, TypedconfError
from typedconf.output.formatters import format_result
from typedconf.output.result import CommandError, CommandResult

if TYPE_CHECKING:
    from typedconf.config.settings import CliSettings

_ERROR_CODES: dict[type[TypedconfError], str] = {
    ResourceError: "INVALID_RESOURCE",
    ConfigurationError: "INVALID_DECLARATION",
}


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: CliSettings) -> None:
        self.settings = settings

        from typedconf.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def emit(self, result: CommandResult) -> None:
        """Format and output a CommandResult with correct exit semantics.

        * Success: writes to stdout and returns. Warnings go to stderr in
          human mode so they don't pollute piped output.
        * Failure: writes to stderr and exits with code 1.
        """
        output = format_result(
            result, json_output=self.settings.json_output, quiet=self.settings.quiet
        )
        if result.ok:
            click.echo(output)
            if not self.settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

    def fail(self, op: str, exc: TypedconfError) -> NoReturn:
        """Emit *exc* as a failed result for *op* and exit."""
        code = next(
            (code for kind, code in _ERROR_CODES.items() if isinstance(exc, kind)),
            "ERROR",
        )
        self.emit(CommandResult(ok=False, op=op, error=CommandError(code=code, message=str(exc))))
        raise SystemExit(1)
