"""Tests for leaf converters."""

from __future__ import annotations

from enum import Enum
from typing import Any

import pytest

from typedconf.convert.base import Converter
from typedconf.convert.recorder import ConvertErrorRecorder
from typedconf.convert.scalars import (
    BooleanConverter,
    EnumConverter,
    FloatConverter,
    IntegerConverter,
    StringConverter,
    scalar_text,
)
from typedconf.resource.nodes import ABSENT, MappingNode, Node, ScalarNode, SequenceNode


class Mode(Enum):
    FAST = 1
    Safe = 2


def _convert(converter: Converter[Any], node: Node) -> Any:
    recorder = ConvertErrorRecorder()
    found = converter.convert(node, recorder)
    assert recorder.is_fully_valid()
    return None if found is None else found.value


class TestBooleanConverter:
    def test_reads_bool(self) -> None:
        assert _convert(BooleanConverter(), ScalarNode(False)) is False

    @pytest.mark.parametrize("node", [ScalarNode(1), ScalarNode("true"), ABSENT, SequenceNode()])
    def test_rejects_other_nodes(self, node: Node) -> None:
        assert _convert(BooleanConverter(), node) is None

    def test_export(self) -> None:
        assert BooleanConverter().to_export(True) == ScalarNode(True)


class TestIntegerConverter:
    def test_reads_int(self) -> None:
        assert _convert(IntegerConverter(), ScalarNode(0)) == 0

    def test_integral_float(self) -> None:
        assert _convert(IntegerConverter(), ScalarNode(3.0)) == 3

    def test_fractional_float_rejected(self) -> None:
        assert _convert(IntegerConverter(), ScalarNode(3.5)) is None

    def test_bool_is_not_a_number(self) -> None:
        assert _convert(IntegerConverter(), ScalarNode(True)) is None
        assert not IntegerConverter().accepts(True)

    def test_bounds(self) -> None:
        converter = IntegerConverter(min_value=1, max_value=10)
        assert _convert(converter, ScalarNode(10)) == 10
        assert _convert(converter, ScalarNode(11)) is None
        assert _convert(converter, ScalarNode(0)) is None
        assert not converter.accepts(0)


class TestFloatConverter:
    def test_widens_int(self) -> None:
        value = _convert(FloatConverter(), ScalarNode(2))
        assert value == 2.0
        assert isinstance(value, float)

    def test_rejects_text(self) -> None:
        assert _convert(FloatConverter(), ScalarNode("2.5")) is None


class TestStringConverter:
    def test_strict_rejects_numbers(self) -> None:
        assert _convert(StringConverter(), ScalarNode(1)) is None

    def test_coerce(self) -> None:
        converter = StringConverter(coerce=True)
        assert _convert(converter, ScalarNode(False)) == "false"
        assert _convert(converter, ScalarNode(1)) == "1"

    def test_coerce_rejects_containers(self) -> None:
        assert _convert(StringConverter(coerce=True), MappingNode()) is None

    def test_empty_string_is_a_value(self) -> None:
        assert _convert(StringConverter(), ScalarNode("")) == ""

    def test_scalar_text(self) -> None:
        assert scalar_text(True) == "true"
        assert scalar_text(1.5) == "1.5"


class TestEnumConverter:
    def test_exact_name(self) -> None:
        assert _convert(EnumConverter(Mode), ScalarNode("FAST")) is Mode.FAST

    def test_case_insensitive(self) -> None:
        assert _convert(EnumConverter(Mode), ScalarNode("fast")) is Mode.FAST
        assert _convert(EnumConverter(Mode), ScalarNode("SAFE")) is Mode.Safe

    def test_unknown_name(self) -> None:
        assert _convert(EnumConverter(Mode), ScalarNode("slow")) is None

    def test_value_is_not_a_name(self) -> None:
        assert _convert(EnumConverter(Mode), ScalarNode(1)) is None

    def test_exports_name(self) -> None:
        assert EnumConverter(Mode).to_export(Mode.Safe) == ScalarNode("Safe")
