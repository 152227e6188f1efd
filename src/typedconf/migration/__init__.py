"""Migration layer: pluggy hooks that run between loading and saving."""

from typedconf.migration.hookspecs import MigrationHookSpec, hookimpl
from typedconf.migration.service import MigrationService

__all__ = ["MigrationHookSpec", "MigrationService", "hookimpl"]
