"""Exception hierarchy for typedconf.

Data problems in a resource (missing keys, wrong shapes, unconvertible
scalars) never raise: they surface as ``ResolutionResult.is_valid=False``.
The exceptions below are reserved for definitional mistakes and for
resources that cannot be read at all.
"""

from __future__ import annotations


class TypedconfError(Exception):
    """Base class for all typedconf errors."""


class ConfigurationError(TypedconfError):
    """A property, settings holder or record type is declared incorrectly.

    Raised at startup (declaration, discovery, first resolution) and never
    replaced by a default value.
    """


class RecordConstructionError(ConfigurationError):
    """A record type cannot be instantiated or populated."""


class ResourceError(TypedconfError):
    """The backing resource exists but cannot be parsed."""
