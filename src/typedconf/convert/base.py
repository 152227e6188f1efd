"""Converter contract shared by every value type.

A converter knows one target type in both directions:

- ``convert(node, recorder)`` reads a resource node. It returns
  :class:`Found` on success and ``None`` when the node cannot produce a
  value. Wrapping the value keeps a legitimately falsey value (``False``,
  ``0``, ``""``) distinct from "no value".
- ``to_export(value)`` turns a typed value back into a node.
- ``accepts(value)`` tells whether a Python value is exportable by this
  converter; properties use it to guard programmatic assignment.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from typedconf.convert.recorder import ConvertErrorRecorder
    from typedconf.resource.nodes import Node

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Found(Generic[T]):
    """A successfully converted value."""

    value: T


class Converter(ABC, Generic[T]):
    """Resolution and export strategy for one value type."""

    @abstractmethod
    def convert(self, node: Node, recorder: ConvertErrorRecorder) -> Found[T] | None:
        """Convert *node*, or return None if it cannot be used."""

    @abstractmethod
    def to_export(self, value: T) -> Node:
        """Render *value* as a resource node."""

    @abstractmethod
    def accepts(self, value: object) -> bool:
        """Whether *value* is a well-typed value for this converter."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
