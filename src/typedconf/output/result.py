"""CommandResult and CommandError: what every CLI command emits.

Commands report outcomes by building a CommandResult and handing it to
``AppContext.emit``, which picks human or JSON rendering and the exit code.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class CommandError(BaseModel):
    """Structured error payload within a CommandResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class CommandResult(BaseModel):
    """Outcome of one CLI command.

    Attributes:
        ok: Whether the command succeeded.
        op: Name of the command (e.g. ``"check"``).
        data: Command-specific payload.
        warnings: Non-fatal issues.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: CommandError | None = None
