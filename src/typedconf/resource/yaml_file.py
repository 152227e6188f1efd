"""YAML file resource: reads property trees and writes them back.

Reading uses ruamel.yaml's round-trip loader, so mapping order is kept as
written. Writing rebuilds the whole document from the configuration data:
properties in declaration order, comment lines above their keys, and the
description (if any) as a header.
"""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap, CommentedSeq
from ruamel.yaml.error import YAMLError

from typedconf.errors import ResourceError
from typedconf.resource.nodes import (
    MappingNode,
    Node,
    ScalarNode,
    SequenceNode,
    from_raw,
    split_path,
)
from typedconf.resource.reader import PropertyReader

if TYPE_CHECKING:
    from typedconf.configdata.data import ConfigurationData

logger = logging.getLogger(__name__)

_INDENT = 2


class PropertyResource(Protocol):
    """A backing store that can be read into nodes and rewritten."""

    def create_reader(self) -> PropertyReader: ...

    def export_properties(self, configuration_data: ConfigurationData) -> None: ...


def _new_yaml() -> YAML:
    """Create a fresh round-trip YAML parser.

    ruamel.yaml's YAML object is stateful; a new instance per operation keeps
    a failed dump from leaking broken emitter state into the next one.
    """
    y = YAML()
    y.preserve_quotes = True
    y.default_flow_style = False
    y.indent(mapping=_INDENT, sequence=_INDENT * 2, offset=_INDENT)
    return y


class YamlFileResource:
    """Property resource backed by one YAML file."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def create_reader(self) -> PropertyReader:
        """Parse the file into a reader.

        A missing or empty file reads as an empty mapping.

        Raises:
            ResourceError: The file is not valid YAML, or its top level is
                not a mapping.
        """
        if not self._path.is_file():
            logger.debug("No file at %s; reading as empty", self._path)
            return PropertyReader()
        raw = self._path.read_text(encoding="utf-8")
        try:
            data = _new_yaml().load(raw)
        except YAMLError as exc:
            msg = f"Invalid YAML in {self._path}: {exc}"
            raise ResourceError(msg) from exc
        if data is None:
            return PropertyReader()
        if not isinstance(data, dict):
            msg = f"Expected a mapping at the top of {self._path}, got {type(data).__name__}"
            raise ResourceError(msg)
        return PropertyReader(from_raw(data))

    def export_properties(self, configuration_data: ConfigurationData) -> None:
        """Write all current values to the file, creating parent directories."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(render_properties(configuration_data), encoding="utf-8")
        logger.info("Wrote %d properties to %s", len(configuration_data.properties), self._path)

    def __repr__(self) -> str:
        return f"YamlFileResource('{self._path}')"


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def render_properties(configuration_data: ConfigurationData) -> str:
    """Render the current values of *configuration_data* as a YAML document."""
    root = CommentedMap()
    for prop in configuration_data.properties:
        segments = split_path(prop.path or "")
        parent = _ensure_section(root, segments[:-1])
        node = prop.to_export_value(configuration_data.get_value(prop))
        parent[segments[-1]] = _to_yaml(node)

    for path, lines in configuration_data.comments.items():
        _attach_comment(root, split_path(path), lines)
    if configuration_data.description:
        root.yaml_set_start_comment("\n".join(configuration_data.description))

    buf = StringIO()
    _new_yaml().dump(root, buf)
    return buf.getvalue()


def _ensure_section(root: CommentedMap, segments: list[str]) -> CommentedMap:
    section = root
    for segment in segments:
        child = section.get(segment)
        if not isinstance(child, CommentedMap):
            child = CommentedMap()
            section[segment] = child
        section = child
    return section


def _attach_comment(root: CommentedMap, segments: list[str], lines: tuple[str, ...]) -> None:
    if not segments or not lines:
        return
    section: Any = root
    for segment in segments[:-1]:
        section = section.get(segment)
        if not isinstance(section, CommentedMap):
            return
    key = segments[-1]
    if key in section:
        section.yaml_set_comment_before_after_key(
            key, before="\n".join(lines), indent=_INDENT * (len(segments) - 1)
        )


def _to_yaml(node: Node) -> Any:
    if isinstance(node, ScalarNode):
        return node.raw
    if isinstance(node, SequenceNode):
        return CommentedSeq(_to_yaml(item) for item in node.items)
    if isinstance(node, MappingNode):
        mapping = CommentedMap()
        for key, child in node.items():
            mapping[key] = _to_yaml(child)
        return mapping
    return None
