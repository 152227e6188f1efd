"""Resource node model: the untyped tree every converter reads from.

A node is one of four shapes:

- :class:`ScalarNode` wrapping a ``bool``, ``int``, ``float`` or ``str``.
- :class:`SequenceNode` holding an ordered tuple of nodes.
- :class:`MappingNode` holding string keys in insertion order.
- :data:`ABSENT`, the single "nothing here" marker.

Nodes are immutable. :func:`from_raw` builds them from parsed YAML (or any
plain ``dict``/``list`` data) and :func:`to_raw` turns them back into
plain Python objects for the writer.
"""

from __future__ import annotations

from collections.abc import Iterator
from collections.abc import Mapping as AbcMapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, TypeAlias

from ruamel.yaml.scalarbool import ScalarBoolean

ScalarValue: TypeAlias = bool | int | float | str

PATH_SEPARATOR = "."


class AbsentNode:
    """Marker for a missing value. Use the :data:`ABSENT` singleton."""

    _instance: AbsentNode | None = None

    def __new__(cls) -> AbsentNode:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = AbsentNode()


@dataclass(frozen=True, slots=True, eq=False)
class ScalarNode:
    """A leaf value.

    Equality is type-strict so that ``ScalarNode(True)`` never equals
    ``ScalarNode(1)``.
    """

    raw: ScalarValue

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScalarNode):
            return NotImplemented
        return type(self.raw) is type(other.raw) and self.raw == other.raw

    def __hash__(self) -> int:
        return hash((type(self.raw), self.raw))


@dataclass(frozen=True, slots=True)
class SequenceNode:
    """An ordered list of nodes."""

    items: tuple[Node, ...] = ()

    def __iter__(self) -> Iterator[Node]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True, eq=False)
class MappingNode:
    """String-keyed nodes in insertion order."""

    entries: AbcMapping[str, Node] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def get(self, key: str) -> Node:
        """Return the node stored under *key*, or :data:`ABSENT`."""
        return self.entries.get(key, ABSENT)

    def keys(self) -> list[str]:
        return list(self.entries)

    def items(self) -> list[tuple[str, Node]]:
        return list(self.entries.items())

    def __len__(self) -> int:
        return len(self.entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MappingNode):
            return NotImplemented
        return list(self.entries.items()) == list(other.entries.items())


Node: TypeAlias = ScalarNode | SequenceNode | MappingNode | AbsentNode

EMPTY_MAPPING = MappingNode()


def from_raw(raw: Any) -> Node:
    """Convert parsed YAML / plain Python data into a node tree.

    ``None`` becomes :data:`ABSENT`. ruamel.yaml scalar subclasses are
    normalised to their plain base types, and mapping keys are stringified.
    Scalars of any other type (dates, timestamps) are kept as their ``str()``
    form.
    """
    if raw is None:
        return ABSENT
    if isinstance(raw, ScalarBoolean):
        return ScalarNode(bool(raw))
    if isinstance(raw, bool):
        return ScalarNode(raw)
    if isinstance(raw, int):
        return ScalarNode(int(raw))
    if isinstance(raw, float):
        return ScalarNode(float(raw))
    if isinstance(raw, str):
        return ScalarNode(str(raw))
    if isinstance(raw, AbcMapping):
        return MappingNode({str(key): from_raw(value) for key, value in raw.items()})
    if isinstance(raw, (list, tuple)):
        return SequenceNode(tuple(from_raw(item) for item in raw))
    return ScalarNode(str(raw))


def to_raw(node: Node) -> Any:
    """Convert a node tree back into plain ``dict``/``list``/scalar data."""
    if isinstance(node, ScalarNode):
        return node.raw
    if isinstance(node, SequenceNode):
        return [to_raw(item) for item in node.items]
    if isinstance(node, MappingNode):
        return {key: to_raw(value) for key, value in node.entries.items()}
    return None


def split_path(path: str) -> list[str]:
    """Split a dotted property path into its segments."""
    if not path:
        return []
    return path.split(PATH_SEPARATOR)


def lookup(root: Node, path: str) -> Node:
    """Walk *root* along the dotted *path*.

    Returns :data:`ABSENT` when a segment is missing or when a non-mapping
    node sits where a mapping is needed. The empty path returns *root*.
    """
    node = root
    for segment in split_path(path):
        if not isinstance(node, MappingNode):
            return ABSENT
        node = node.get(segment)
    return node
