"""Leaf converters: booleans, numbers, strings and enums.

Coercion rules:

- Booleans are read only from boolean scalars. A boolean is never a number.
- Integers are read from integer scalars, or from float scalars holding an
  integral value (``3.0 -> 3``). Optional bounds reject out-of-range values.
- Floats are read from integer or float scalars.
- Strings are read only from string scalars, unless the converter coerces,
  in which case any scalar is rendered as text (``False -> "false"``).
- Enums are matched by member name: exact first, then case-insensitive.

A scalar that does not fit is "no value". Leaf converters never mark the
recorder: the enclosing converter decides whether a missing leaf is
tolerated.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Generic, TypeVar

from typedconf.convert.base import Converter, Found
from typedconf.resource.nodes import Node, ScalarNode, ScalarValue

if TYPE_CHECKING:
    from typedconf.convert.recorder import ConvertErrorRecorder

E = TypeVar("E", bound=Enum)


def scalar_text(raw: ScalarValue) -> str:
    """Render a scalar the way it reads in a YAML document."""
    if isinstance(raw, bool):
        return "true" if raw else "false"
    return str(raw)


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class BooleanConverter(Converter[bool]):
    def convert(self, node: Node, recorder: ConvertErrorRecorder) -> Found[bool] | None:
        if isinstance(node, ScalarNode) and isinstance(node.raw, bool):
            return Found(node.raw)
        return None

    def to_export(self, value: bool) -> Node:
        return ScalarNode(bool(value))

    def accepts(self, value: object) -> bool:
        return isinstance(value, bool)


class IntegerConverter(Converter[int]):
    """Integral numbers, optionally bounded (inclusive)."""

    def __init__(self, min_value: int | None = None, max_value: int | None = None) -> None:
        self.min_value = min_value
        self.max_value = max_value

    def convert(self, node: Node, recorder: ConvertErrorRecorder) -> Found[int] | None:
        if not isinstance(node, ScalarNode) or not _is_number(node.raw):
            return None
        raw = node.raw
        if isinstance(raw, float):
            if not raw.is_integer():
                return None
            raw = int(raw)
        if not self._in_bounds(raw):
            return None
        return Found(raw)

    def to_export(self, value: int) -> Node:
        return ScalarNode(int(value))

    def accepts(self, value: object) -> bool:
        return isinstance(value, int) and not isinstance(value, bool) and self._in_bounds(value)

    def _in_bounds(self, value: int) -> bool:
        if self.min_value is not None and value < self.min_value:
            return False
        return self.max_value is None or value <= self.max_value

    def __repr__(self) -> str:
        return f"IntegerConverter(min_value={self.min_value}, max_value={self.max_value})"


class FloatConverter(Converter[float]):
    def convert(self, node: Node, recorder: ConvertErrorRecorder) -> Found[float] | None:
        if isinstance(node, ScalarNode) and _is_number(node.raw):
            return Found(float(node.raw))
        return None

    def to_export(self, value: float) -> Node:
        return ScalarNode(float(value))

    def accepts(self, value: object) -> bool:
        return _is_number(value)


class StringConverter(Converter[str]):
    """Text values. With ``coerce=True`` any scalar is accepted as text."""

    def __init__(self, *, coerce: bool = False) -> None:
        self.coerce = coerce

    def convert(self, node: Node, recorder: ConvertErrorRecorder) -> Found[str] | None:
        if not isinstance(node, ScalarNode):
            return None
        if isinstance(node.raw, str):
            return Found(node.raw)
        if self.coerce:
            return Found(scalar_text(node.raw))
        return None

    def to_export(self, value: str) -> Node:
        return ScalarNode(str(value))

    def accepts(self, value: object) -> bool:
        return isinstance(value, str)

    def __repr__(self) -> str:
        return f"StringConverter(coerce={self.coerce})"


class EnumConverter(Converter[E], Generic[E]):
    """Enum members stored by name."""

    def __init__(self, enum_type: type[E]) -> None:
        self.enum_type = enum_type

    def convert(self, node: Node, recorder: ConvertErrorRecorder) -> Found[E] | None:
        if not isinstance(node, ScalarNode) or not isinstance(node.raw, str):
            return None
        members = self.enum_type.__members__
        member = members.get(node.raw)
        if member is not None:
            return Found(member)
        wanted = node.raw.casefold()
        for name, candidate in members.items():
            if name.casefold() == wanted:
                return Found(candidate)
        return None

    def to_export(self, value: E) -> Node:
        return ScalarNode(value.name)

    def accepts(self, value: object) -> bool:
        return isinstance(value, self.enum_type)

    def __repr__(self) -> str:
        return f"EnumConverter({self.enum_type.__name__})"
