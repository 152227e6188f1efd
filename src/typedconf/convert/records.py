"""Structured records: descriptors and the record converter.

A record type is any class whose instances are built from a mapping node,
one named field at a time. The converter never inspects the type itself:
it works from a :class:`RecordDescriptor` listing each field's name,
resource key and sub-converter.

Descriptors come from two places:

- :func:`register_record` for hand-written descriptors.
- :func:`describe`, which derives one from a dataclass or a pydantic model
  the first time the type is used and memoizes it for the process.

Field defaults follow the "default-constructed instance" rule: a record is
built with its argument-less initializer, and whatever non-``None`` value a
field holds at that point is its default. A field that starts out as
``None`` (and has no explicit descriptor default) is required.
"""

from __future__ import annotations

import copy
import dataclasses
import threading
import typing
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

from typedconf.convert.base import Converter, Found
from typedconf.convert.containers import ListConverter, MapConverter
from typedconf.errors import ConfigurationError, RecordConstructionError
from typedconf.resource.nodes import MappingNode, Node

if TYPE_CHECKING:
    from typedconf.convert.recorder import ConvertErrorRecorder

FIELD_OPTIONS_KEY = "typedconf"


class _NoDefault:
    def __repr__(self) -> str:
        return "NO_DEFAULT"


NO_DEFAULT: Any = _NoDefault()


@dataclass(frozen=True)
class FieldDescriptor:
    """One named field of a record type.

    Attributes:
        name: Attribute name on the record instance.
        converter: Converter for the field's declared type.
        key: Resource key override; defaults to *name*.
        default: Explicit fallback value. When omitted, the value held by a
            freshly constructed instance is used instead.
    """

    name: str
    converter: Converter[Any]
    key: str | None = None
    default: Any = NO_DEFAULT

    @property
    def resource_key(self) -> str:
        return self.key or self.name


@dataclass(frozen=True)
class RecordDescriptor:
    """The declared fields of a record type, in export order."""

    record_type: type
    fields: tuple[FieldDescriptor, ...]
    factory: Callable[[], Any] | None = None

    def new_instance(self) -> Any:
        """Build an empty instance through the argument-less initializer.

        Raises:
            RecordConstructionError: The type cannot be built without
                arguments.
        """
        factory = self.factory or self.record_type
        try:
            return factory()
        except Exception as exc:
            msg = (
                f"Expected {self.record_type.__qualname__} to be constructible "
                f"without arguments: {exc}"
            )
            raise RecordConstructionError(msg) from exc

    def assign(self, instance: Any, name: str, value: Any) -> None:
        try:
            setattr(instance, name, value)
        except (AttributeError, TypeError, ValueError) as exc:
            msg = f"Cannot set field '{name}' on {self.record_type.__qualname__}: {exc}"
            raise RecordConstructionError(msg) from exc

    def apply_default(self, instance: Any, field: FieldDescriptor) -> bool:
        """Put *field*'s default on *instance*; False when it is required."""
        if field.default is not NO_DEFAULT:
            self.assign(instance, field.name, copy.deepcopy(field.default))
            return True
        return getattr(instance, field.name, None) is not None


class RecordConverter(Converter[Any]):
    """Builds record instances from mapping nodes, field by field.

    A field that cannot be read falls back to its default and marks the
    recorder. A required field that cannot be read makes the whole record
    "no value".
    """

    def __init__(self, record_type: type) -> None:
        self.record_type = record_type

    @property
    def descriptor(self) -> RecordDescriptor:
        return describe(self.record_type)

    def convert(self, node: Node, recorder: ConvertErrorRecorder) -> Found[Any] | None:
        if not isinstance(node, MappingNode):
            return None
        descriptor = self.descriptor
        instance = descriptor.new_instance()
        for field in descriptor.fields:
            found = field.converter.convert(node.get(field.resource_key), recorder)
            if found is not None:
                descriptor.assign(instance, field.name, found.value)
            elif descriptor.apply_default(instance, field):
                recorder.mark_error()
            else:
                return None
        return Found(instance)

    def to_export(self, value: Any) -> Node:
        entries: dict[str, Node] = {}
        for field in self.descriptor.fields:
            field_value = getattr(value, field.name, None)
            if field_value is None:
                continue
            entries[field.resource_key] = field.converter.to_export(field_value)
        return MappingNode(entries)

    def accepts(self, value: object) -> bool:
        """Whether *value* can be exported and read back unchanged.

        Every field must hold a non-None value its converter accepts: a
        None field is left out of the export and would not resolve again.
        """
        if not isinstance(value, self.record_type):
            return False
        for field in self.descriptor.fields:
            field_value = getattr(value, field.name, None)
            if field_value is None or not field.converter.accepts(field_value):
                return False
        return True

    def __repr__(self) -> str:
        return f"RecordConverter({self.record_type.__qualname__})"


# ---------------------------------------------------------------------------
# Descriptor registry
# ---------------------------------------------------------------------------

_registered: dict[type, RecordDescriptor] = {}
_derived: dict[type, RecordDescriptor] = {}
_lock = threading.RLock()
_in_progress: set[type] = set()


def register_record(descriptor: RecordDescriptor) -> None:
    """Register a hand-written descriptor, overriding any derived one."""
    with _lock:
        _registered[descriptor.record_type] = descriptor
        _derived.pop(descriptor.record_type, None)
        _describe_nested(descriptor)


def unregister_record(record_type: type) -> None:
    with _lock:
        _registered.pop(record_type, None)
        _derived.pop(record_type, None)


def clear_descriptor_cache() -> None:
    """Forget all derived descriptors. Registered ones are kept."""
    with _lock:
        _derived.clear()


def is_record_type(candidate: object) -> bool:
    """Whether *candidate* can be described as a record."""
    if not isinstance(candidate, type):
        return False
    return (
        candidate in _registered
        or dataclasses.is_dataclass(candidate)
        or issubclass(candidate, BaseModel)
    )


def describe(record_type: type) -> RecordDescriptor:
    """Return the descriptor for *record_type*, deriving it on first use.

    Safe to call from several threads: derivation for a given type happens
    once, under a lock.

    Raises:
        ConfigurationError: The type is not a record type, or a field type
            is not supported.
        RecordConstructionError: The type, or a record type nested in its
            fields, has no argument-less initializer.
    """
    descriptor = _registered.get(record_type) or _derived.get(record_type)
    if descriptor is not None:
        return descriptor
    with _lock:
        descriptor = _registered.get(record_type) or _derived.get(record_type)
        if descriptor is None:
            _in_progress.add(record_type)
            try:
                descriptor = _derive(record_type)
            finally:
                _in_progress.discard(record_type)
            _derived[record_type] = descriptor
    return descriptor


def record_field(
    *,
    key: str | None = None,
    converter: Converter[Any] | None = None,
    **field_kwargs: Any,
) -> Any:
    """``dataclasses.field`` with a resource key or converter override.

    Usage::

        @dataclass
        class Server:
            bind_address: str = record_field(key="bind-address", default="0.0.0.0")
    """
    metadata = dict(field_kwargs.pop("metadata", None) or {})
    metadata[FIELD_OPTIONS_KEY] = {"key": key, "converter": converter}
    return dataclasses.field(metadata=metadata, **field_kwargs)


def _derive(record_type: type) -> RecordDescriptor:
    if dataclasses.is_dataclass(record_type):
        fields = _dataclass_fields(record_type)
    elif isinstance(record_type, type) and issubclass(record_type, BaseModel):
        fields = _pydantic_fields(record_type)
    else:
        msg = (
            f"{getattr(record_type, '__qualname__', record_type)!s} is not a record type; "
            "use a dataclass, a pydantic model, or register a RecordDescriptor"
        )
        raise ConfigurationError(msg)
    descriptor = RecordDescriptor(record_type, tuple(fields))
    # Fail at declaration time rather than on the first reload.
    descriptor.new_instance()
    _describe_nested(descriptor)
    return descriptor


def _describe_nested(descriptor: RecordDescriptor) -> None:
    """Describe every record type reachable through *descriptor*'s fields."""
    for field in descriptor.fields:
        for nested in _record_types(field.converter):
            if nested not in _in_progress:
                describe(nested)


def _record_types(converter: Converter[Any]) -> Iterator[type]:
    if isinstance(converter, RecordConverter):
        yield converter.record_type
    elif isinstance(converter, ListConverter):
        yield from _record_types(converter.element)
    elif isinstance(converter, MapConverter):
        yield from _record_types(converter.value)


def _dataclass_fields(record_type: type) -> list[FieldDescriptor]:
    from typedconf.convert.registry import converter_for

    try:
        hints = typing.get_type_hints(record_type)
    except NameError as exc:
        msg = f"Cannot resolve field types of {record_type.__qualname__}: {exc}"
        raise ConfigurationError(msg) from exc

    fields: list[FieldDescriptor] = []
    for dc_field in dataclasses.fields(record_type):
        options = dc_field.metadata.get(FIELD_OPTIONS_KEY) or {}
        converter = options.get("converter") or converter_for(hints[dc_field.name])
        fields.append(FieldDescriptor(dc_field.name, converter, key=options.get("key")))
    return fields


def _pydantic_fields(record_type: type[BaseModel]) -> list[FieldDescriptor]:
    from typedconf.convert.registry import converter_for

    fields: list[FieldDescriptor] = []
    for name, info in record_type.model_fields.items():
        fields.append(FieldDescriptor(name, converter_for(info.annotation), key=info.alias))
    return fields
