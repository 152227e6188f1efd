"""ConvertErrorRecorder: validity flag threaded through one resolution.

INVARIANT: a recorder starts fully valid, and once marked it never
reverts. Exactly one recorder exists per top-level ``resolve`` call.
"""

from __future__ import annotations


class ConvertErrorRecorder:
    """Records whether any part of a converted value needed a fallback.

    Converters call :meth:`mark_error` when they replace a malformed or
    missing sub-value with a default (or drop it) but can still produce an
    overall value. The owning property then reports the value as requiring
    a rewrite of the resource.
    """

    __slots__ = ("_fully_valid",)

    def __init__(self) -> None:
        self._fully_valid = True

    def mark_error(self) -> None:
        self._fully_valid = False

    def is_fully_valid(self) -> bool:
        return self._fully_valid

    def __repr__(self) -> str:
        return f"ConvertErrorRecorder(fully_valid={self._fully_valid})"
