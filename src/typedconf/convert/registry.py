"""Map Python type hints to converters.

Used when deriving record descriptors and by the property initializers.

Element policies for containers:

- ``list[str]`` coerces every scalar element to text.
- Lists and maps of leaves (bool, numbers, enums) are permissive: bad
  elements are dropped and the value is flagged for rewrite.
- Lists and maps of records or nested containers are strict: one bad
  element fails the whole container.
"""

from __future__ import annotations

import types
import typing
from collections.abc import Mapping, MutableMapping, MutableSequence, Sequence
from enum import Enum
from typing import Any, Union

from typedconf.convert.base import Converter
from typedconf.convert.containers import ListConverter, MapConverter
from typedconf.convert.records import RecordConverter, is_record_type
from typedconf.convert.scalars import (
    BooleanConverter,
    EnumConverter,
    FloatConverter,
    IntegerConverter,
    StringConverter,
)
from typedconf.errors import ConfigurationError

_SEQUENCE_ORIGINS = (list, tuple, Sequence, MutableSequence)
_MAPPING_ORIGINS = (dict, Mapping, MutableMapping)


def converter_for(hint: Any) -> Converter[Any]:
    """Return a converter for the type hint *hint*.

    Raises:
        ConfigurationError: The hint has no supported mapping.
    """
    origin = typing.get_origin(hint)
    args = typing.get_args(hint)

    if origin is Union or origin is types.UnionType:
        members = [arg for arg in args if arg is not type(None)]
        if len(members) != 1:
            msg = f"Union types are not supported: {hint!r}"
            raise ConfigurationError(msg)
        return converter_for(members[0])

    if origin is typing.Annotated:
        return converter_for(args[0])

    if hint is bool:
        return BooleanConverter()
    if hint is int:
        return IntegerConverter()
    if hint is float:
        return FloatConverter()
    if hint is str:
        return StringConverter()
    if isinstance(hint, type) and issubclass(hint, Enum):
        return EnumConverter(hint)

    if origin in _SEQUENCE_ORIGINS:
        return element_list_converter(_sequence_element(hint, origin, args))
    if origin in _MAPPING_ORIGINS:
        key_type, value_type = args or (str, Any)
        if key_type is not str:
            msg = f"Mapping keys must be str: {hint!r}"
            raise ConfigurationError(msg)
        return element_map_converter(value_type)

    if is_record_type(hint):
        return RecordConverter(hint)

    msg = f"No converter for type {hint!r}"
    raise ConfigurationError(msg)


def element_list_converter(element_hint: Any) -> ListConverter[Any]:
    """List converter with the element policy for *element_hint*."""
    if element_hint is str:
        return ListConverter(StringConverter(coerce=True))
    element = converter_for(element_hint)
    return ListConverter(element, strict=_is_structured(element))


def element_map_converter(value_hint: Any) -> MapConverter[Any]:
    """Map converter with the value policy for *value_hint*."""
    if value_hint is str:
        return MapConverter(StringConverter(coerce=True))
    value = converter_for(value_hint)
    return MapConverter(value, strict=_is_structured(value))


def _is_structured(converter: Converter[Any]) -> bool:
    return isinstance(converter, (RecordConverter, ListConverter, MapConverter))


def _sequence_element(hint: Any, origin: Any, args: tuple[Any, ...]) -> Any:
    if not args:
        msg = f"Sequence type needs an element type: {hint!r}"
        raise ConfigurationError(msg)
    if origin is tuple and not (len(args) == 2 and args[1] is Ellipsis):
        msg = f"Only homogeneous tuples (tuple[X, ...]) are supported: {hint!r}"
        raise ConfigurationError(msg)
    return args[0]
