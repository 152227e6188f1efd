"""Tests for the shorthand property constructors."""

from __future__ import annotations

from dataclasses import dataclass

import pytest
from sample_holders import Color, Group, Limits

from typedconf.convert.scalars import IntegerConverter, StringConverter
from typedconf.errors import ConfigurationError, RecordConstructionError
from typedconf.properties.initializer import (
    new_list_property,
    new_map_property,
    new_property,
    new_record_property,
)
from typedconf.properties.types import (
    BooleanProperty,
    EnumProperty,
    FloatProperty,
    IntegerProperty,
    RecordProperty,
    StringListProperty,
    StringProperty,
)
from typedconf.resource.nodes import from_raw


@dataclass
class NeedsArgs:
    value: int


class TestNewProperty:
    @pytest.mark.parametrize(
        ("default", "kind"),
        [
            (True, BooleanProperty),
            (3, IntegerProperty),
            (1.5, FloatProperty),
            ("text", StringProperty),
            (Color.RED, EnumProperty),
            (["a"], StringListProperty),
            (Group(), RecordProperty),
            (Limits(), RecordProperty),
        ],
    )
    def test_infers_type(self, default: object, kind: type) -> None:
        prop = new_property("some.path", default)
        assert isinstance(prop, kind)
        assert prop.path == "some.path"

    def test_comments_passed(self) -> None:
        assert new_property("a", 1, comments=["one"]).comments == ("one",)

    @pytest.mark.parametrize("default", [None, b"raw", [1, 2], object()])
    def test_cannot_infer(self, default: object) -> None:
        with pytest.raises(ConfigurationError):
            new_property("a", default)


class TestNewListProperty:
    def test_values_become_default(self) -> None:
        prop = new_list_property(int, "l", 1, 2)
        assert prop.default_value == (1, 2)
        assert isinstance(prop.converter.element, IntegerConverter)  # type: ignore[attr-defined]

    def test_string_elements_coerce(self) -> None:
        prop = new_list_property(str, "l")
        element = prop.converter.element  # type: ignore[attr-defined]
        assert isinstance(element, StringConverter)
        assert element.coerce
        assert prop.resolve(from_raw({"l": [1, True]})).value == ("1", "true")

    def test_record_elements_strict(self) -> None:
        prop = new_list_property(Group, "groups", Group(name="a"))
        result = prop.resolve(from_raw({"groups": [{"name": "b"}, "junk"]}))
        assert result.value == (Group(name="a"),)
        assert not result.is_valid


class TestNewMapProperty:
    def test_map_of_ints(self) -> None:
        prop = new_map_property(int, "m", {"a": 1})
        result = prop.resolve(from_raw({"m": {"b": 2, "c": "x"}}))
        assert result.value == {"b": 2}
        assert not result.is_valid

    def test_map_of_records(self) -> None:
        prop = new_map_property(Group, "m")
        ops = {"name": "ops", "members": [], "priority": 1}
        result = prop.resolve(from_raw({"m": {"ops": ops}}))
        assert result.value == {"ops": Group(name="ops", members=(), priority=1)}
        assert result.is_valid


class TestNewRecordProperty:
    def test_default_instance_created(self) -> None:
        prop = new_record_property(Group, "g")
        assert prop.default_value == Group()

    def test_explicit_default(self) -> None:
        prop = new_record_property(Group, "g", Group(name="x"))
        assert prop.default_value.name == "x"

    def test_type_without_initializer(self) -> None:
        with pytest.raises(RecordConstructionError, match="without arguments"):
            new_record_property(NeedsArgs, "n")
