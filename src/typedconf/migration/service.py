"""MigrationService: runs migration plugins and decides on a rewrite.

Discovery: plugins registered directly, plus pip-installed ones exposed
through the ``typedconf.migrations`` entry point group.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pluggy

from typedconf.migration.hookspecs import PROJECT_NAME, MigrationHookSpec

if TYPE_CHECKING:
    from typedconf.configdata.data import ConfigurationData
    from typedconf.resource.reader import PropertyReader

ENTRY_POINT_GROUP = "typedconf.migrations"

logger = logging.getLogger(__name__)


class MigrationService:
    """Decides, after each load, whether the resource must be saved.

    A save is needed when any migration plugin asks for one, or when any
    property could not be read fully from the resource.
    """

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(MigrationHookSpec)

    def register(self, plugin: object, name: str | None = None) -> None:
        """Register a migration plugin instance."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered migration: %s", resolved_name)

    def unregister(self, plugin: object) -> None:
        self._pm.unregister(plugin)

    def load_entrypoints(self) -> int:
        """Load migrations published under :data:`ENTRY_POINT_GROUP`."""
        return self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)

    def list_migration_names(self) -> list[str]:
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    def check_and_migrate(
        self,
        reader: PropertyReader,
        configuration_data: ConfigurationData,
    ) -> bool:
        """Run all migrations; return True if the resource should be saved."""
        results = self._pm.hook.typedconf_migrate(
            reader=reader, configuration_data=configuration_data
        )
        if any(results):
            logger.warning("A migration changed the configuration; the resource will be saved")
            return True
        if not configuration_data.are_all_values_valid_in_resource():
            logger.debug("Resource has missing or invalid values; it will be saved")
            return True
        return False
