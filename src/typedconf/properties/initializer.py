"""Shorthand constructors that pick the property type from the default.

``new_property("title.size", 12)`` is ``IntegerProperty(12, "title.size")``.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any, TypeVar

from typedconf.convert.records import describe, is_record_type
from typedconf.convert.registry import element_list_converter, element_map_converter
from typedconf.errors import ConfigurationError
from typedconf.properties.base import BaseProperty
from typedconf.properties.types import (
    BooleanProperty,
    EnumProperty,
    FloatProperty,
    IntegerProperty,
    ListProperty,
    MapProperty,
    RecordProperty,
    StringListProperty,
    StringProperty,
)

R = TypeVar("R")


def new_property(path: str, default: Any, *, comments: Iterable[str] = ()) -> BaseProperty[Any]:
    """Create a property whose type follows ``type(default)``.

    Raises:
        ConfigurationError: No property type fits the default.
    """
    if isinstance(default, bool):
        return BooleanProperty(default, path, comments=comments)
    if isinstance(default, int):
        return IntegerProperty(default, path, comments=comments)
    if isinstance(default, float):
        return FloatProperty(default, path, comments=comments)
    if isinstance(default, Enum):
        return EnumProperty(type(default), default, path, comments=comments)
    if isinstance(default, str):
        return StringProperty(default, path, comments=comments)
    if isinstance(default, (list, tuple)) and all(isinstance(item, str) for item in default):
        return StringListProperty(default, path, comments=comments)
    if is_record_type(type(default)):
        return RecordProperty(type(default), default, path, comments=comments)
    msg = f"Cannot infer a property type for default {default!r} at '{path}'"
    raise ConfigurationError(msg)


def new_list_property(
    element_type: type[Any], path: str, *values: Any, comments: Iterable[str] = ()
) -> ListProperty[Any]:
    """List property of *element_type* with *values* as the default."""
    converter = element_list_converter(element_type)
    return ListProperty(
        converter.element, values, path, strict=converter.strict, comments=comments
    )


def new_map_property(
    value_type: type[Any],
    path: str,
    default: Mapping[str, Any] | None = None,
    *,
    comments: Iterable[str] = (),
) -> MapProperty[Any]:
    """Map property with values of *value_type*."""
    converter = element_map_converter(value_type)
    return MapProperty(
        converter.value, default, path, strict=converter.strict, comments=comments
    )


def new_record_property(
    record_type: type[R], path: str, default: R | None = None, *, comments: Iterable[str] = ()
) -> RecordProperty[R]:
    """Record property; the default is a fresh instance when omitted.

    Raises:
        RecordConstructionError: *record_type* cannot be built without
            arguments.
        ConfigurationError: The default leaves a field unset (None).
    """
    if default is None:
        default = describe(record_type).new_instance()
    return RecordProperty(record_type, default, path, comments=comments)
