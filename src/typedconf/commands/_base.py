"""Click base classes carrying an on-demand ``--examples`` flag.

Examples are kept out of ``--help``. They may use ``{prog}`` for the name
the tool was invoked as, so the text stays right under ``python -m`` or an
alias.
"""

from __future__ import annotations

import inspect
from typing import Any

import click


def _show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    command = ctx.command
    text = inspect.cleandoc(getattr(command, "examples", None) or "")
    prog = ctx.find_root().info_name or "typedconf"
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(text.replace("{prog}", prog))
    ctx.exit(0)


EXAMPLES_OPTION = click.Option(
    ["--examples"],
    is_flag=True,
    expose_value=False,
    is_eager=True,
    callback=_show_examples,
    help="Show usage examples and exit.",
)


class _ExamplesMixin:
    """Accepts ``examples=`` and registers :data:`EXAMPLES_OPTION` once."""

    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples and EXAMPLES_OPTION not in self.params:
            self.params.append(EXAMPLES_OPTION)


class TypedconfCommand(_ExamplesMixin, click.Command):
    pass


class TypedconfGroup(_ExamplesMixin, click.Group):
    """Group whose ``@group.command()`` children are :class:`TypedconfCommand`."""

    command_class = TypedconfCommand
