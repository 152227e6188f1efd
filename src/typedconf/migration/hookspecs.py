"""Pluggy hook specifications for resource migrations.

Migrations run after a resource is read and every property resolved,
but before the manager decides whether to rewrite the file. A migration
typically moves values from old paths to new properties via
``configuration_data.set_value``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from typedconf.configdata.data import ConfigurationData
    from typedconf.resource.reader import PropertyReader

PROJECT_NAME = "typedconf"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class MigrationHookSpec:
    """Hook specifications for the typedconf migration system."""

    @hookspec
    def typedconf_migrate(
        self,
        reader: PropertyReader,
        configuration_data: ConfigurationData,
    ) -> bool | None:
        """Migrate old resource content.

        Return True when the resource must be saved afterwards.
        """
