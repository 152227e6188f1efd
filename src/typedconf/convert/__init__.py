"""Conversion layer: resource nodes to typed values and back.

Depends only on the resource node model, pydantic (record detection) and
the errors module. It never reads files and never touches properties.
"""

from typedconf.convert.base import Converter, Found
from typedconf.convert.containers import ListConverter, MapConverter
from typedconf.convert.recorder import ConvertErrorRecorder
from typedconf.convert.records import (
    FieldDescriptor,
    RecordConverter,
    RecordDescriptor,
    clear_descriptor_cache,
    describe,
    record_field,
    register_record,
)
from typedconf.convert.registry import converter_for
from typedconf.convert.scalars import (
    BooleanConverter,
    EnumConverter,
    FloatConverter,
    IntegerConverter,
    StringConverter,
)

__all__ = [
    "BooleanConverter",
    "ConvertErrorRecorder",
    "Converter",
    "EnumConverter",
    "FieldDescriptor",
    "FloatConverter",
    "Found",
    "IntegerConverter",
    "ListConverter",
    "MapConverter",
    "RecordConverter",
    "RecordDescriptor",
    "StringConverter",
    "clear_descriptor_cache",
    "converter_for",
    "describe",
    "record_field",
    "register_record",
]
