"""PropertyReader: path-addressed access to a loaded resource tree."""

from __future__ import annotations

from typing import Any

from typedconf.resource.nodes import (
    ABSENT,
    EMPTY_MAPPING,
    PATH_SEPARATOR,
    MappingNode,
    Node,
    SequenceNode,
    from_raw,
    lookup,
    to_raw,
)


class PropertyReader:
    """Read-only view over one already-parsed resource tree.

    The reader is the only source of nodes for property resolution. It
    never touches the filesystem itself: resources build it after parsing.
    """

    def __init__(self, root: Node = EMPTY_MAPPING) -> None:
        self._root = root

    @classmethod
    def from_raw(cls, data: Any) -> PropertyReader:
        """Build a reader over plain ``dict``/``list`` data."""
        return cls(from_raw(data))

    @property
    def root(self) -> Node:
        return self._root

    def get_node(self, path: str) -> Node:
        """Return the node at *path* (``ABSENT`` if missing)."""
        return lookup(self._root, path)

    def get_object(self, path: str) -> Any:
        """Return the raw value at *path*, or None."""
        return to_raw(self.get_node(path))

    def get_list(self, path: str) -> list[Any] | None:
        """Return the raw list at *path*, or None if it is not a sequence."""
        node = self.get_node(path)
        if isinstance(node, SequenceNode):
            return to_raw(node)
        return None

    def get_mapping(self, path: str) -> dict[str, Any] | None:
        """Return the raw nested mapping at *path*, or None."""
        node = self.get_node(path)
        if isinstance(node, MappingNode):
            return to_raw(node)
        return None

    def contains(self, path: str) -> bool:
        return self.get_node(path) is not ABSENT

    def keys(self, *, only_leaves: bool = False) -> list[str]:
        """Return every dotted path in the tree, parents before children.

        With *only_leaves*, paths pointing at mappings are left out.
        """
        paths: list[str] = []
        _collect_paths(self._root, "", paths, only_leaves)
        return paths


def _collect_paths(node: Node, prefix: str, out: list[str], only_leaves: bool) -> None:
    if not isinstance(node, MappingNode):
        return
    for key, child in node.items():
        path = f"{prefix}{PATH_SEPARATOR}{key}" if prefix else key
        if not (only_leaves and isinstance(child, MappingNode)):
            out.append(path)
        _collect_paths(child, path, out, only_leaves)
