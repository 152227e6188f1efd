"""Concrete property types.

Each type fixes the converter for its value so declarations stay short::

    class ServerSettings(SettingsHolder, section="server"):
        host = StringProperty("localhost")
        port = IntegerProperty(8080, min_value=1, max_value=65535)
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import TypeVar

from typedconf.convert.base import Converter
from typedconf.convert.containers import ListConverter, MapConverter
from typedconf.convert.records import RecordConverter, describe
from typedconf.convert.scalars import (
    BooleanConverter,
    EnumConverter,
    FloatConverter,
    IntegerConverter,
    StringConverter,
)
from typedconf.properties.base import BaseProperty

E = TypeVar("E", bound=Enum)
R = TypeVar("R")
V = TypeVar("V")


class TypedProperty(BaseProperty[V]):
    """Property for any converter, e.g. hand-assembled nested containers."""


class BooleanProperty(BaseProperty[bool]):
    def __init__(
        self, default: bool, path: str | None = None, *, comments: Iterable[str] = ()
    ) -> None:
        super().__init__(BooleanConverter(), default, path, comments=comments)


class IntegerProperty(BaseProperty[int]):
    def __init__(
        self,
        default: int,
        path: str | None = None,
        *,
        min_value: int | None = None,
        max_value: int | None = None,
        comments: Iterable[str] = (),
    ) -> None:
        converter = IntegerConverter(min_value=min_value, max_value=max_value)
        super().__init__(converter, default, path, comments=comments)


class FloatProperty(BaseProperty[float]):
    def __init__(
        self, default: float, path: str | None = None, *, comments: Iterable[str] = ()
    ) -> None:
        super().__init__(FloatConverter(), default, path, comments=comments)

    def _normalize_default(self, default: float) -> float:
        return float(default)


class StringProperty(BaseProperty[str]):
    """Text property. Only string scalars are accepted from the resource."""

    def __init__(
        self, default: str, path: str | None = None, *, comments: Iterable[str] = ()
    ) -> None:
        super().__init__(StringConverter(), default, path, comments=comments)


class EnumProperty(BaseProperty[E]):
    """Enum property stored by member name (matched case-insensitively)."""

    def __init__(
        self,
        enum_type: type[E],
        default: E,
        path: str | None = None,
        *,
        comments: Iterable[str] = (),
    ) -> None:
        super().__init__(EnumConverter(enum_type), default, path, comments=comments)


class StringListProperty(BaseProperty[tuple[str, ...]]):
    """List of strings; every scalar element is read as text.

    ``["a", false, 1]`` in the resource resolves to ``("a", "false", "1")``
    and counts as valid.
    """

    def __init__(
        self,
        default: Iterable[str] = (),
        path: str | None = None,
        *,
        comments: Iterable[str] = (),
    ) -> None:
        converter = ListConverter(StringConverter(coerce=True))
        super().__init__(converter, tuple(default), path, comments=comments)


class ListProperty(BaseProperty[tuple[V, ...]]):
    """List of elements handled by *element*.

    With ``strict=False`` (default) unreadable elements are dropped and the
    value is flagged for rewrite. With ``strict=True`` any unreadable
    element makes the whole list fall back to the default.
    """

    def __init__(
        self,
        element: Converter[V],
        default: Iterable[V] = (),
        path: str | None = None,
        *,
        strict: bool = False,
        comments: Iterable[str] = (),
    ) -> None:
        converter = ListConverter(element, strict=strict)
        super().__init__(converter, tuple(default), path, comments=comments)


class MapProperty(BaseProperty[dict[str, V]]):
    """String-keyed map of values handled by *value*."""

    def __init__(
        self,
        value: Converter[V],
        default: Mapping[str, V] | None = None,
        path: str | None = None,
        *,
        strict: bool = False,
        comments: Iterable[str] = (),
    ) -> None:
        converter = MapConverter(value, strict=strict)
        super().__init__(converter, dict(default or {}), path, comments=comments)


class RecordProperty(BaseProperty[R]):
    """Structured record mapped field by field from a mapping node.

    The record type's descriptor is built here, so a type that cannot be
    described or constructed fails at declaration time.
    """

    def __init__(
        self,
        record_type: type[R],
        default: R,
        path: str | None = None,
        *,
        comments: Iterable[str] = (),
    ) -> None:
        describe(record_type)
        self._record_type = record_type
        super().__init__(RecordConverter(record_type), default, path, comments=comments)

    @property
    def record_type(self) -> type[R]:
        return self._record_type
