"""ConfigurationData: the properties of one resource and their values."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any, TypeVar

from typedconf.errors import ConfigurationError

if TYPE_CHECKING:
    from typedconf.properties.base import BaseProperty
    from typedconf.resource.reader import PropertyReader

T = TypeVar("T")

logger = logging.getLogger(__name__)


class ConfigurationData:
    """Ordered properties, their comments, and their current values.

    Values start out as the properties' defaults and are replaced by
    :meth:`initialize_values` on every load. Properties whose stored value
    needed a fallback are remembered so the caller can decide to rewrite
    the resource.
    """

    def __init__(
        self,
        properties: Iterable[BaseProperty[Any]],
        comments: Mapping[str, Iterable[str]] | None = None,
        description: Iterable[str] = (),
    ) -> None:
        self._properties = tuple(properties)
        unbound = [prop for prop in self._properties if not prop.path]
        if unbound:
            msg = f"Properties without a path: {unbound!r}"
            raise ConfigurationError(msg)
        self._by_path = {prop.path: prop for prop in self._properties}
        self._comments = {path: tuple(lines) for path, lines in (comments or {}).items()}
        self._description = tuple(description)
        self._values: dict[str, Any] = {}
        self._invalid: list[BaseProperty[Any]] = []

    @property
    def properties(self) -> tuple[BaseProperty[Any], ...]:
        return self._properties

    @property
    def description(self) -> tuple[str, ...]:
        """Header lines written at the top of the resource."""
        return self._description

    @property
    def comments(self) -> dict[str, tuple[str, ...]]:
        return dict(self._comments)

    def get_comments(self, path: str) -> tuple[str, ...]:
        return self._comments.get(path, ())

    def get_property(self, path: str) -> BaseProperty[Any] | None:
        return self._by_path.get(path)

    # --- values ---------------------------------------------------------

    def get_value(self, prop: BaseProperty[T]) -> T:
        """Return the current value of *prop* (its default before loading).

        Raises:
            ConfigurationError: *prop* is not part of this configuration.
        """
        self._require_known(prop)
        if prop.path in self._values:
            return self._values[prop.path]
        return prop.default_value

    def set_value(self, prop: BaseProperty[T], value: T) -> None:
        """Store *value* for *prop*.

        Raises:
            ConfigurationError: *prop* is not part of this configuration.
            ValueError: *value* is not valid for *prop* (e.g. None).
        """
        self._require_known(prop)
        if not prop.is_valid_value(value):
            msg = f"Invalid value for {prop!r}: {value!r}"
            raise ValueError(msg)
        self._values[prop.path] = value

    def initialize_values(self, reader: PropertyReader) -> None:
        """Resolve every property against *reader* and store the results."""
        self._values.clear()
        self._invalid.clear()
        for prop in self._properties:
            result = prop.determine_value(reader)
            self._values[prop.path] = result.value
            if not result.is_valid:
                self._invalid.append(prop)
        if self._invalid:
            logger.debug(
                "%d of %d properties need a rewrite",
                len(self._invalid),
                len(self._properties),
            )

    def are_all_values_valid_in_resource(self) -> bool:
        """Whether the last load read every property without fallback."""
        return not self._invalid

    def invalid_properties(self) -> tuple[BaseProperty[Any], ...]:
        """Properties whose last load needed a default or dropped data."""
        return tuple(self._invalid)

    def _require_known(self, prop: BaseProperty[Any]) -> None:
        if self._by_path.get(prop.path) is not prop:
            msg = f"{prop!r} is not part of this configuration"
            raise ConfigurationError(msg)
