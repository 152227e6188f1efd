"""SettingsManager: the facade tying resource, properties and migrations.

Usage::

    settings = (
        SettingsManagerBuilder.from_path("config.yml")
        .configuration_data(TitleSettings, ServerSettings)
        .create()
    )
    port = settings.get_property(ServerSettings.port)

Creating a manager loads the resource at once. Missing or invalid values
are replaced by defaults and, through the migration service, written back.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Self, TypeVar

from typedconf.configdata.builder import create_configuration
from typedconf.configdata.data import ConfigurationData
from typedconf.errors import ConfigurationError
from typedconf.migration.service import MigrationService
from typedconf.resource.yaml_file import YamlFileResource

if TYPE_CHECKING:
    from typedconf.configdata.holder import SettingsHolder
    from typedconf.properties.base import BaseProperty
    from typedconf.resource.yaml_file import PropertyResource

T = TypeVar("T")

logger = logging.getLogger(__name__)


class SettingsManager:
    """Looks up and modifies property values of one resource.

    Args:
        resource: Where values are read from and saved to.
        configuration_data: The properties managed here.
        migration_service: Decides whether a load must be followed by a
            save. None disables automatic saving.
    """

    def __init__(
        self,
        resource: PropertyResource,
        configuration_data: ConfigurationData,
        migration_service: MigrationService | None = None,
    ) -> None:
        self._resource = resource
        self._configuration_data = configuration_data
        self._migration_service = migration_service
        self._last_load_saved = False
        self.reload()

    @property
    def configuration_data(self) -> ConfigurationData:
        return self._configuration_data

    @property
    def last_load_saved(self) -> bool:
        """Whether the most recent load ended with a save."""
        return self._last_load_saved

    def get_property(self, prop: BaseProperty[T]) -> T:
        return self._configuration_data.get_value(prop)

    def set_property(self, prop: BaseProperty[T], value: T) -> None:
        """Set *prop* in memory; call :meth:`save` to persist it.

        Raises:
            ValueError: *value* is not valid for *prop*.
        """
        self._configuration_data.set_value(prop, value)

    def reload(self) -> bool:
        """Re-read the resource. Returns True if it was saved afterwards."""
        reader = self._resource.create_reader()
        self._configuration_data.initialize_values(reader)
        saved = False
        if self._migration_service is not None:
            saved = self._migration_service.check_and_migrate(reader, self._configuration_data)
        if saved:
            self.save()
        self._last_load_saved = saved
        return saved

    def save(self) -> None:
        """Write every current value to the resource."""
        self._resource.export_properties(self._configuration_data)
        logger.info("Saved configuration to %r", self._resource)


class SettingsManagerBuilder:
    """Fluent construction of a :class:`SettingsManager`."""

    def __init__(self, resource: PropertyResource) -> None:
        self._resource = resource
        self._configuration_data: ConfigurationData | None = None
        self._migration_service: MigrationService | None = MigrationService()

    @classmethod
    def from_path(cls, path: Path | str) -> Self:
        """Builder for a YAML file at *path*."""
        return cls(YamlFileResource(path))

    @classmethod
    def from_resource(cls, resource: PropertyResource) -> Self:
        return cls(resource)

    def configuration_data(self, *sources: Any) -> Self:
        """Use a ready :class:`ConfigurationData` or settings holder classes."""
        if len(sources) == 1 and isinstance(sources[0], ConfigurationData):
            self._configuration_data = sources[0]
        else:
            holders: tuple[type[SettingsHolder], ...] = sources
            self._configuration_data = create_configuration(*holders)
        return self

    def migration_service(self, service: MigrationService | None) -> Self:
        """Replace the default migration service (None: never auto-save)."""
        self._migration_service = service
        return self

    def create(self) -> SettingsManager:
        if self._configuration_data is None:
            msg = "No configuration data: call configuration_data() before create()"
            raise ConfigurationError(msg)
        return SettingsManager(self._resource, self._configuration_data, self._migration_service)
