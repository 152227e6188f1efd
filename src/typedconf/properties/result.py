"""ResolutionResult: the outcome of resolving one property.

INVARIANT: ``value`` is always usable. When the resource holds nothing
usable, ``value`` is the property's default and ``is_valid`` is False,
which tells the caller to rewrite the resource.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ResolutionResult(BaseModel, Generic[T]):
    """Resolved value plus whether the resource fully described it.

    Attributes:
        value: The resolved value, or the property's default.
        is_valid: False when any part of the value came from a default or
            was dropped, i.e. the stored resource should be regenerated.
    """

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    value: T
    is_valid: bool

    @classmethod
    def with_valid_value(cls, value: Any) -> ResolutionResult[Any]:
        return cls(value=value, is_valid=True)

    @classmethod
    def with_value_requiring_rewrite(cls, value: Any) -> ResolutionResult[Any]:
        return cls(value=value, is_valid=False)
