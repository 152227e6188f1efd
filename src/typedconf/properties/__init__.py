"""Property layer: typed declarations resolved against resource trees.

Properties depend on the convert and resource layers. They never read
files; readers are handed to them.
"""

from typedconf.properties.base import BaseProperty, freeze
from typedconf.properties.initializer import (
    new_list_property,
    new_map_property,
    new_property,
    new_record_property,
)
from typedconf.properties.result import ResolutionResult
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
    TypedProperty,
)

__all__ = [
    "BaseProperty",
    "BooleanProperty",
    "EnumProperty",
    "FloatProperty",
    "IntegerProperty",
    "ListProperty",
    "MapProperty",
    "RecordProperty",
    "ResolutionResult",
    "StringListProperty",
    "StringProperty",
    "TypedProperty",
    "freeze",
    "new_list_property",
    "new_map_property",
    "new_property",
    "new_record_property",
]
