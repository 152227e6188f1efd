"""Configuration data: settings holders, discovery, and the value store."""

from typedconf.configdata.builder import (
    PropertyListBuilder,
    create_configuration,
    create_configuration_from_properties,
)
from typedconf.configdata.data import ConfigurationData
from typedconf.configdata.holder import CommentsConfiguration, SettingsHolder

__all__ = [
    "CommentsConfiguration",
    "ConfigurationData",
    "PropertyListBuilder",
    "SettingsHolder",
    "create_configuration",
    "create_configuration_from_properties",
]
