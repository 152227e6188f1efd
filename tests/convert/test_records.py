"""Tests for record descriptors and RecordConverter."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

import pytest

from sample_holders import Endpoint, Group, Limits, WorldGroupConfig
from typedconf.convert.recorder import ConvertErrorRecorder
from typedconf.convert.records import (
    FieldDescriptor,
    RecordConverter,
    RecordDescriptor,
    describe,
    is_record_type,
    register_record,
    unregister_record,
)
from typedconf.convert.scalars import IntegerConverter
from typedconf.errors import ConfigurationError, RecordConstructionError
from typedconf.properties.types import RecordProperty
from typedconf.resource.nodes import MappingNode, ScalarNode, from_raw


class Point:
    def __init__(self) -> None:
        self.x = 0
        self.y: int | None = None


@dataclass
class NeedsArgs:
    value: int


@dataclass(frozen=True)
class Frozen:
    a: int = 1


@dataclass
class Inner:
    name: str


@dataclass
class Outer:
    inner: Inner | None = None
    size: int = 1


@dataclass
class Crowd:
    members: list[Inner] = field(default_factory=list)


@dataclass
class TreeNode:
    label: str = "root"
    children: list[TreeNode] = field(default_factory=list)


def _convert(record_type: type, raw: object) -> tuple[object, bool]:
    recorder = ConvertErrorRecorder()
    found = RecordConverter(record_type).convert(from_raw(raw), recorder)
    return (None if found is None else found.value), recorder.is_fully_valid()


class TestRecordConverter:
    def test_all_fields_present(self) -> None:
        value, valid = _convert(Group, {"name": "admins", "members": ["ann"], "priority": 3})
        assert value == Group(name="admins", members=("ann",), priority=3)
        assert valid

    def test_missing_optional_field(self) -> None:
        value, valid = _convert(Group, {"name": "admins"})
        assert value == Group(name="admins", members=[], priority=1)
        assert not valid

    def test_missing_required_field(self) -> None:
        value, _ = _convert(Endpoint, {"timeout": 2.0})
        assert value is None

    def test_wrong_kind_for_required_field(self) -> None:
        value, _ = _convert(Endpoint, {"url": ["x"]})
        assert value is None

    def test_empty_mapping_against_defaults(self) -> None:
        value, valid = _convert(Group, {})
        assert value == Group()
        assert not valid

    def test_not_a_mapping(self) -> None:
        value, _ = _convert(Group, ["name"])
        assert value is None

    def test_key_override(self) -> None:
        value, valid = _convert(WorldGroupConfig, {"groups": {}, "default-group": "ops"})
        assert isinstance(value, WorldGroupConfig)
        assert value.default_group == "ops"
        assert valid

    def test_nested_records(self) -> None:
        value, valid = _convert(
            WorldGroupConfig,
            {
                "groups": {"ops": {"name": "ops", "members": ["a", 1], "priority": 2}},
                "default-group": "ops",
            },
        )
        assert isinstance(value, WorldGroupConfig)
        assert value.groups["ops"] == Group(name="ops", members=("a", "1"), priority=2)
        assert valid

    def test_bad_nested_record_fails_the_map(self) -> None:
        value, valid = _convert(
            WorldGroupConfig, {"groups": {"ops": "not a group"}, "default-group": "ops"}
        )
        assert isinstance(value, WorldGroupConfig)
        assert value.groups == {}
        assert not valid

    def test_pydantic_record_uses_alias(self) -> None:
        value, valid = _convert(Limits, {"max-items": 5, "ratio": 1})
        assert isinstance(value, Limits)
        assert value.max_items == 5
        assert value.ratio == 1.0
        assert valid

    def test_export_skips_none(self) -> None:
        node = RecordConverter(Endpoint).to_export(Endpoint())
        assert node == MappingNode({"timeout": ScalarNode(5.0)})

    def test_export_uses_resource_keys(self) -> None:
        node = RecordConverter(WorldGroupConfig).to_export(WorldGroupConfig())
        assert node == MappingNode(
            {"groups": MappingNode(), "default-group": ScalarNode("default")}
        )

    def test_frozen_record_cannot_be_filled(self) -> None:
        with pytest.raises(RecordConstructionError, match="Cannot set field"):
            _convert(Frozen, {"a": 2})


class TestDescriptors:
    def test_describe_is_memoized(self) -> None:
        assert describe(Group) is describe(Group)

    def test_describe_concurrently(self) -> None:
        with ThreadPoolExecutor(max_workers=8) as pool:
            descriptors = list(pool.map(lambda _: describe(Group), range(32)))
        assert all(d is descriptors[0] for d in descriptors)

    def test_field_order(self) -> None:
        assert [f.name for f in describe(Group).fields] == ["name", "members", "priority"]

    def test_not_a_record_type(self) -> None:
        assert not is_record_type(Point)
        with pytest.raises(ConfigurationError, match="not a record type"):
            describe(Point)

    def test_needs_no_arg_initializer(self) -> None:
        with pytest.raises(RecordConstructionError, match="without arguments"):
            describe(NeedsArgs)

    def test_registered_descriptor(self) -> None:
        register_record(
            RecordDescriptor(
                Point,
                (
                    FieldDescriptor("x", IntegerConverter()),
                    FieldDescriptor("y", IntegerConverter(), key="why", default=5),
                ),
            )
        )
        try:
            assert is_record_type(Point)
            value, valid = _convert(Point, {"x": 2})
            assert isinstance(value, Point)
            assert (value.x, value.y) == (2, 5)
            assert not valid
        finally:
            unregister_record(Point)
        assert not is_record_type(Point)

    def test_explicit_default_is_copied(self) -> None:
        default = [1]
        descriptor = RecordDescriptor(
            Point, (FieldDescriptor("y", IntegerConverter(), default=default),)
        )
        instance = Point()
        assert descriptor.apply_default(instance, descriptor.fields[0])
        assert instance.y == [1]
        assert instance.y is not default

    def test_required_without_default(self) -> None:
        descriptor = RecordDescriptor(Point, (FieldDescriptor("y", IntegerConverter()),))
        assert not descriptor.apply_default(Point(), descriptor.fields[0])


class TestNestedRecordTypes:
    def test_nested_type_without_initializer_fails_on_describe(self) -> None:
        with pytest.raises(RecordConstructionError, match="without arguments"):
            describe(Outer)

    def test_nested_type_without_initializer_fails_on_declaration(self) -> None:
        with pytest.raises(RecordConstructionError):
            RecordProperty(Outer, Outer(inner=Inner("z")), "o")

    def test_list_element_type_without_initializer_fails(self) -> None:
        with pytest.raises(RecordConstructionError):
            describe(Crowd)

    def test_self_referential_type(self) -> None:
        descriptor = describe(TreeNode)
        assert [f.name for f in descriptor.fields] == ["label", "children"]
        raw = {"label": "a", "children": [{"label": "b", "children": []}]}
        value, valid = _convert(TreeNode, raw)
        assert value == TreeNode("a", (TreeNode("b", ()),))
        assert valid
