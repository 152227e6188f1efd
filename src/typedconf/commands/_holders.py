"""Click parameter type that loads SettingsHolder classes.

Accepts ``package.module:Holder`` (imported normally) or
``path/to/file.py:Holder`` (loaded from the file).
"""

from __future__ import annotations

import importlib
import importlib.util
import sys
from pathlib import Path
from types import ModuleType
from typing import Any

import click

from typedconf.configdata.holder import SettingsHolder


def _load_file_module(path: Path) -> ModuleType:
    module_name = f"_typedconf_holders_{path.stem}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        msg = f"Cannot load {path}"
        raise ImportError(msg)
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    spec.loader.exec_module(module)
    return module


class HolderParamType(click.ParamType):
    """Resolves ``module:Holder`` references to SettingsHolder subclasses."""

    name = "module:Holder"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> Any:
        if isinstance(value, type):
            return value
        module_ref, sep, attribute = str(value).rpartition(":")
        if not sep or not module_ref or not attribute:
            self.fail(f"{value!r} is not of the form 'module:Holder'", param, ctx)

        try:
            if module_ref.endswith(".py"):
                module = _load_file_module(Path(module_ref))
            else:
                module = importlib.import_module(module_ref)
        except (ImportError, OSError) as exc:
            self.fail(f"Cannot import {module_ref!r}: {exc}", param, ctx)

        holder = getattr(module, attribute, None)
        if not (isinstance(holder, type) and issubclass(holder, SettingsHolder)):
            self.fail(f"{value!r} is not a SettingsHolder subclass", param, ctx)
        return holder


HOLDER = HolderParamType()

holder_option = click.option(
    "-H",
    "--holder",
    "holders",
    type=HOLDER,
    multiple=True,
    required=True,
    help="SettingsHolder to load, as module:Class or file.py:Class. Repeatable.",
)
