"""CLI settings: command-line flags and environment variables in one object.

Priority chain (highest to lowest):
  1. Flags passed on the command line (only those actually set)
  2. Env vars     -- ``TYPEDCONF_*`` prefix
  3. Code defaults
"""

from __future__ import annotations

from typing import Any

from pydantic_settings import BaseSettings


class CliSettings(BaseSettings):
    """Global CLI options, frozen after construction.

    Stored on the click context by the root group.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "TYPEDCONF_",
    }

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> CliSettings:
        """Build settings from click flags.

        Unset flags (False/None) are dropped so they don't mask the
        corresponding environment variables.
        """
        overrides = {name: value for name, value in cli_flags.items() if value}
        return cls(**overrides)
