"""Human/JSON rendering of CommandResult."""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from typedconf.output.result import CommandResult


def _format_data_human(data: dict[str, Any]) -> str:
    """Format result data as indented key-value pairs; lists one per line."""
    lines: list[str] = []
    for key, value in data.items():
        if isinstance(value, list):
            lines.append(f"  {key}:")
            lines.extend(f"    - {item}" for item in value)
        elif isinstance(value, dict):
            lines.append(f"  {key}: {_json.dumps(value, separators=(',', ':'))}")
        else:
            lines.append(f"  {key}: {value}")
    return "\n".join(lines)


def format_result(result: CommandResult, *, json_output: bool = False, quiet: bool = False) -> str:
    """Format a CommandResult for display.

    Args:
        result: The command result to format.
        json_output: Return JSON instead of human-readable text.
        quiet: Human mode only; drop the data block.
    """
    if json_output:
        return result.model_dump_json(indent=2)
    if result.ok:
        parts = [f"OK: {result.op}"]
        if result.data and not quiet:
            parts.append(_format_data_human(result.data))
        return "\n".join(parts)
    message = result.error.message if result.error else "Unknown error"
    parts = [f"ERROR: {result.op}: {message}"]
    if result.data and not quiet:
        parts.append(_format_data_human(result.data))
    return "\n".join(parts)
