"""BaseProperty: a typed, path-addressed configuration declaration.

A property owns three things: its dotted path, an immutable default and
the converter for its value type. Resolution is stateless: every call to
:meth:`BaseProperty.resolve` creates its own error recorder.

Paths are either passed at construction or bound exactly once later by
settings-holder discovery (see :mod:`typedconf.configdata.builder`).
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable, Mapping
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from typedconf.convert.recorder import ConvertErrorRecorder
from typedconf.errors import ConfigurationError
from typedconf.properties.result import ResolutionResult
from typedconf.resource.nodes import lookup

if TYPE_CHECKING:
    from typedconf.convert.base import Converter
    from typedconf.resource.nodes import Node
    from typedconf.resource.reader import PropertyReader

T = TypeVar("T")

logger = logging.getLogger(__name__)

_IMMUTABLE_SCALARS = (bool, int, float, str, bytes, Enum, type(None))


def freeze(value: Any) -> Any:
    """Snapshot *value* so later mutation of the original has no effect.

    Lists become tuples, sets become frozensets and mappings become
    read-only proxies over a copy. Anything else is deep-copied unless it is
    an immutable scalar.
    """
    if isinstance(value, _IMMUTABLE_SCALARS):
        return value
    if isinstance(value, (list, tuple)):
        return tuple(freeze(item) for item in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(freeze(item) for item in value)
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze(item) for key, item in value.items()})
    return copy.deepcopy(value)


def _snapshot(value: Any) -> Any:
    """Copy the mutable leaves of a frozen value (records inside tuples)."""
    if isinstance(value, _IMMUTABLE_SCALARS):
        return value
    if isinstance(value, tuple):
        return tuple(_snapshot(item) for item in value)
    if isinstance(value, frozenset):
        return value
    if isinstance(value, MappingProxyType):
        if all(isinstance(item, _IMMUTABLE_SCALARS) for item in value.values()):
            return value
        return MappingProxyType({key: _snapshot(item) for key, item in value.items()})
    return copy.deepcopy(value)


class BaseProperty(Generic[T]):
    """Base implementation every property type builds on.

    Interaction is null-safe: the default can never be None, and neither can
    the value returned by :meth:`resolve`.

    Args:
        converter: Converter for the value type.
        default: Default value, captured as an immutable snapshot.
        path: Dotted path in the resource, or None to bind it later.
        comments: Comment lines written above the property's key.
    """

    def __init__(
        self,
        converter: Converter[T],
        default: T,
        path: str | None = None,
        *,
        comments: Iterable[str] = (),
    ) -> None:
        if default is None:
            msg = "A property's default value must not be None"
            raise ConfigurationError(msg)
        if not converter.accepts(default):
            msg = f"Default value {default!r} does not match {converter!r}"
            raise ConfigurationError(msg)
        self._converter = converter
        self._default = freeze(self._normalize_default(default))
        self._path = path
        self._comments = tuple(comments)

    def _normalize_default(self, default: T) -> T:
        """Hook to widen an accepted default (e.g. int to float)."""
        return default

    # --- identity -------------------------------------------------------

    @property
    def path(self) -> str | None:
        return self._path

    def bind_path(self, path: str) -> None:
        """Assign the path once. Re-binding the same path is a no-op.

        Raises:
            ConfigurationError: A different path is already bound.
        """
        if not path:
            msg = "A property path must not be empty"
            raise ConfigurationError(msg)
        if self._path is not None and self._path != path:
            msg = f"{self!r} is already bound; cannot rebind it to '{path}'"
            raise ConfigurationError(msg)
        self._path = path

    @property
    def default_value(self) -> T:
        return _snapshot(self._default)

    @property
    def converter(self) -> Converter[T]:
        return self._converter

    @property
    def comments(self) -> tuple[str, ...]:
        return self._comments

    # --- resolution -----------------------------------------------------

    def resolve(self, root: Node) -> ResolutionResult[T]:
        """Resolve this property against a resource tree.

        A top-level "no value" (missing or wrong-shaped node) yields the
        default with ``is_valid=False`` regardless of what nested converters
        recorded.
        """
        path = self._require_path()
        recorder = ConvertErrorRecorder()
        found = self._converter.convert(lookup(root, path), recorder)
        if found is not None and self.is_valid_value(found.value):
            if not recorder.is_fully_valid():
                logger.debug("Property '%s' resolved with defaulted parts", path)
            return ResolutionResult(value=found.value, is_valid=recorder.is_fully_valid())
        logger.debug("Property '%s' falls back to its default", path)
        return ResolutionResult.with_value_requiring_rewrite(self.default_value)

    def determine_value(self, reader: PropertyReader) -> ResolutionResult[T]:
        """Resolve against the tree held by *reader*."""
        return self.resolve(reader.root)

    def is_valid_value(self, value: object) -> bool:
        """Whether *value* may be stored for this property."""
        return value is not None and self._converter.accepts(value)

    def to_export_value(self, value: T) -> Node:
        """Render *value* as a node for the resource writer."""
        return self._converter.to_export(value)

    def _require_path(self) -> str:
        if not self._path:
            msg = f"{self!r} has no path; declare one or register it in a SettingsHolder"
            raise ConfigurationError(msg)
        return self._path

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self._path or '<unbound>'}')"
