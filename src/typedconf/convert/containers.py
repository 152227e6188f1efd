"""Sequence and mapping converters.

Both take a failure policy for their elements:

- ``strict=True``: one unconvertible element makes the whole collection
  "no value" (used for record elements, where a half-read list would
  silently lose structured data).
- ``strict=False``: unconvertible elements are dropped and the recorder is
  marked, so the collection still resolves but the resource gets rewritten.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from typedconf.convert.base import Converter, Found
from typedconf.resource.nodes import MappingNode, Node, SequenceNode

if TYPE_CHECKING:
    from typedconf.convert.recorder import ConvertErrorRecorder

V = TypeVar("V")


class ListConverter(Converter[tuple[V, ...]], Generic[V]):
    """Ordered sequences, resolved as tuples."""

    def __init__(self, element: Converter[V], *, strict: bool = False) -> None:
        self.element = element
        self.strict = strict

    def convert(
        self, node: Node, recorder: ConvertErrorRecorder
    ) -> Found[tuple[V, ...]] | None:
        if not isinstance(node, SequenceNode):
            return None
        values: list[V] = []
        for item in node.items:
            found = self.element.convert(item, recorder)
            if found is None:
                if self.strict:
                    return None
                recorder.mark_error()
                continue
            values.append(found.value)
        return Found(tuple(values))

    def to_export(self, value: tuple[V, ...]) -> Node:
        return SequenceNode(tuple(self.element.to_export(item) for item in value))

    def accepts(self, value: object) -> bool:
        if not isinstance(value, (list, tuple)):
            return False
        return all(self.element.accepts(item) for item in value)

    def __repr__(self) -> str:
        return f"ListConverter({self.element!r}, strict={self.strict})"


class MapConverter(Converter[dict[str, V]], Generic[V]):
    """String-keyed mappings, resolved as dicts in resource order."""

    def __init__(self, value: Converter[V], *, strict: bool = False) -> None:
        self.value = value
        self.strict = strict

    def convert(self, node: Node, recorder: ConvertErrorRecorder) -> Found[dict[str, V]] | None:
        if not isinstance(node, MappingNode):
            return None
        values: dict[str, V] = {}
        for key, child in node.items():
            found = self.value.convert(child, recorder)
            if found is None:
                if self.strict:
                    return None
                recorder.mark_error()
                continue
            values[key] = found.value
        return Found(values)

    def to_export(self, value: Mapping[str, V]) -> Node:
        return MappingNode({str(key): self.value.to_export(item) for key, item in value.items()})

    def accepts(self, value: object) -> bool:
        if not isinstance(value, Mapping):
            return False
        items: Mapping[Any, Any] = value
        return all(isinstance(k, str) and self.value.accepts(v) for k, v in items.items())

    def __repr__(self) -> str:
        return f"MapConverter({self.value!r}, strict={self.strict})"
