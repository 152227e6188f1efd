"""Discovery: collect properties and comments from settings holders.

Properties are class attributes of :class:`SettingsHolder` subclasses.
Bases are scanned before subclasses and attributes in declaration order,
so the written resource follows the order in which settings were declared.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from typedconf.configdata.data import ConfigurationData
from typedconf.configdata.holder import CommentsConfiguration, SettingsHolder
from typedconf.errors import ConfigurationError
from typedconf.properties.base import BaseProperty
from typedconf.resource.nodes import PATH_SEPARATOR

logger = logging.getLogger(__name__)


class PropertyListBuilder:
    """Collects properties, rejecting duplicate and overlapping paths.

    Two properties cannot share a path, and one property's path cannot be
    the parent of another's (``a.b`` and ``a.b.c``): the resource could not
    hold both a value and a section at ``a.b``.
    """

    def __init__(self) -> None:
        self._properties: dict[str, BaseProperty[Any]] = {}

    def add(self, prop: BaseProperty[Any]) -> None:
        path = prop.path
        if not path:
            msg = f"{prop!r} has no path"
            raise ConfigurationError(msg)
        existing = self._properties.get(path)
        if existing is prop:
            return
        if existing is not None:
            msg = f"Path '{path}' is declared by more than one property"
            raise ConfigurationError(msg)
        for other in self._properties:
            if _is_parent(other, path) or _is_parent(path, other):
                msg = f"Path '{path}' conflicts with '{other}'"
                raise ConfigurationError(msg)
        self._properties[path] = prop

    def create(self) -> list[BaseProperty[Any]]:
        return list(self._properties.values())


def _is_parent(parent: str, child: str) -> bool:
    return child.startswith(parent + PATH_SEPARATOR)


def create_configuration(*holders: type[SettingsHolder]) -> ConfigurationData:
    """Collect the properties and comments declared by *holders*.

    Raises:
        ConfigurationError: A holder is invalid, cannot be instantiated
            without arguments, or declares conflicting paths.
    """
    builder = PropertyListBuilder()
    comments = CommentsConfiguration()
    description: tuple[str, ...] = ()

    for holder in holders:
        _collect_properties(holder, builder, comments)
        _instantiate(holder).register_comments(comments)
        if holder.description:
            description = tuple(holder.description)

    properties = builder.create()
    logger.debug("Collected %d properties from %d holders", len(properties), len(holders))
    return ConfigurationData(properties, comments.all_comments, description)


def create_configuration_from_properties(
    properties: Iterable[BaseProperty[Any]],
    comments: CommentsConfiguration | None = None,
) -> ConfigurationData:
    """Build configuration data from properties that already carry paths."""
    builder = PropertyListBuilder()
    collected = comments or CommentsConfiguration()
    for prop in properties:
        builder.add(prop)
        if prop.comments and not collected.get_comment(prop.path or ""):
            collected.set_comment(prop.path or "", *prop.comments)
    return ConfigurationData(builder.create(), collected.all_comments)


def _collect_properties(
    holder: type[SettingsHolder],
    builder: PropertyListBuilder,
    comments: CommentsConfiguration,
) -> None:
    if not (isinstance(holder, type) and issubclass(holder, SettingsHolder)):
        msg = f"{holder!r} is not a SettingsHolder subclass"
        raise ConfigurationError(msg)
    for klass in reversed(holder.__mro__):
        if not issubclass(klass, SettingsHolder) or klass is SettingsHolder:
            continue
        for attribute, value in vars(klass).items():
            if not isinstance(value, BaseProperty):
                continue
            if value.path is None:
                value.bind_path(klass.path_for(attribute))
            builder.add(value)
            if value.comments:
                comments.set_comment(value.path or "", *value.comments)


def _instantiate(holder: type[SettingsHolder]) -> SettingsHolder:
    try:
        return holder()
    except TypeError as exc:
        msg = f"Expected {holder.__qualname__} to be constructible without arguments"
        raise ConfigurationError(msg) from exc
