"""Resource layer: the node model, readers, and the YAML file backend.

This layer depends on stdlib and ruamel.yaml. It knows nothing about
properties beyond the ``PropertyResource`` protocol used by the manager.
"""

from typedconf.resource.nodes import (
    ABSENT,
    MappingNode,
    Node,
    ScalarNode,
    SequenceNode,
    from_raw,
    lookup,
    to_raw,
)
from typedconf.resource.reader import PropertyReader
from typedconf.resource.yaml_file import PropertyResource, YamlFileResource, render_properties

__all__ = [
    "ABSENT",
    "MappingNode",
    "Node",
    "PropertyReader",
    "PropertyResource",
    "ScalarNode",
    "SequenceNode",
    "YamlFileResource",
    "from_raw",
    "lookup",
    "render_properties",
    "to_raw",
]
