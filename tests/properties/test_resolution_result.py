"""Tests for ResolutionResult."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from typedconf.properties.result import ResolutionResult


class TestResolutionResult:
    def test_with_valid_value(self) -> None:
        result = ResolutionResult.with_valid_value(3)
        assert result.value == 3
        assert result.is_valid

    def test_requiring_rewrite(self) -> None:
        result = ResolutionResult.with_value_requiring_rewrite("x")
        assert result.value == "x"
        assert not result.is_valid

    def test_frozen(self) -> None:
        result = ResolutionResult.with_valid_value(3)
        with pytest.raises(ValidationError):
            result.is_valid = False  # type: ignore[misc]

    def test_equality(self) -> None:
        assert ResolutionResult(value=1, is_valid=True) == ResolutionResult.with_valid_value(1)
