"""Tests for list and map converters."""

from __future__ import annotations

from typedconf.convert.containers import ListConverter, MapConverter
from typedconf.convert.recorder import ConvertErrorRecorder
from typedconf.convert.scalars import IntegerConverter, StringConverter
from typedconf.resource.nodes import MappingNode, ScalarNode, SequenceNode, from_raw


class TestListConverter:
    def test_all_elements_valid(self) -> None:
        recorder = ConvertErrorRecorder()
        found = ListConverter(IntegerConverter()).convert(from_raw([1, 2]), recorder)
        assert found is not None
        assert found.value == (1, 2)
        assert recorder.is_fully_valid()

    def test_permissive_drops_and_marks(self) -> None:
        recorder = ConvertErrorRecorder()
        found = ListConverter(IntegerConverter()).convert(from_raw([1, "x", 3]), recorder)
        assert found is not None
        assert found.value == (1, 3)
        assert not recorder.is_fully_valid()

    def test_strict_fails_whole_list(self) -> None:
        recorder = ConvertErrorRecorder()
        converter = ListConverter(IntegerConverter(), strict=True)
        assert converter.convert(from_raw([1, "x"]), recorder) is None

    def test_empty_list_is_a_value(self) -> None:
        found = ListConverter(IntegerConverter()).convert(SequenceNode(), ConvertErrorRecorder())
        assert found is not None
        assert found.value == ()

    def test_not_a_sequence(self) -> None:
        converter = ListConverter(IntegerConverter())
        assert converter.convert(ScalarNode(1), ConvertErrorRecorder()) is None

    def test_export_and_accepts(self) -> None:
        converter = ListConverter(StringConverter())
        assert converter.to_export(("a",)) == SequenceNode((ScalarNode("a"),))
        assert converter.accepts(["a", "b"])
        assert not converter.accepts(["a", 1])
        assert not converter.accepts("ab")


class TestMapConverter:
    def test_keeps_resource_order(self) -> None:
        found = MapConverter(IntegerConverter()).convert(
            from_raw({"b": 2, "a": 1}), ConvertErrorRecorder()
        )
        assert found is not None
        assert list(found.value) == ["b", "a"]

    def test_permissive_drops_and_marks(self) -> None:
        recorder = ConvertErrorRecorder()
        found = MapConverter(IntegerConverter()).convert(from_raw({"a": 1, "b": "x"}), recorder)
        assert found is not None
        assert found.value == {"a": 1}
        assert not recorder.is_fully_valid()

    def test_strict_fails_whole_map(self) -> None:
        converter = MapConverter(IntegerConverter(), strict=True)
        assert converter.convert(from_raw({"a": 1, "b": "x"}), ConvertErrorRecorder()) is None

    def test_export(self) -> None:
        assert MapConverter(IntegerConverter()).to_export({"a": 1}) == MappingNode(
            {"a": ScalarNode(1)}
        )

    def test_accepts_requires_str_keys(self) -> None:
        converter = MapConverter(IntegerConverter())
        assert converter.accepts({"a": 1})
        assert not converter.accepts({1: 1})
        assert not converter.accepts([("a", 1)])
