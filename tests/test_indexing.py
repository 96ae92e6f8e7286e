from dataclasses import dataclass
from typing import Annotated

import pytest

from configbind.errors import DuplicatePropertyError
from configbind.indexing import index_by_name
from configbind.introspector import TypeIntrospector
from configbind.markers import Property


@dataclass
class QueueConfig:
    name: Annotated[str, Property()]
    capacity: Annotated[int, Property()]
    durable: Annotated[bool, Property(optional=True)] = False


@dataclass
class ClashingConfig:
    size: Annotated[int, Property()]
    limit: Annotated[int, Property(name="size")]


class Converter:
    def convert(self, value, target_type, prop):
        return value


def test_unique_names_are_indexed():
    properties = TypeIntrospector(QueueConfig).properties()
    index = index_by_name(properties)

    assert len(index) == len(properties)
    assert list(index) == ["name", "capacity", "durable"]
    assert index["capacity"] is properties[1]


def test_duplicate_names_are_rejected():
    properties = TypeIntrospector(ClashingConfig).properties()

    with pytest.raises(DuplicatePropertyError, match="Duplicate property name 'size'"):
        index_by_name(properties)


def test_discovery_itself_accepts_duplicate_names():
    assert [p.name for p in TypeIntrospector(ClashingConfig).properties()] == ["size", "size"]


def test_redeclared_field_is_a_duplicate():
    @dataclass
    class Renamed(QueueConfig):
        capacity: Annotated[int, Property()] = 10

    with pytest.raises(DuplicatePropertyError, match="'capacity'"):
        index_by_name(Renamed)


def test_class_is_indexed_after_discovery():
    index = index_by_name(QueueConfig)

    assert set(index) == {"name", "capacity", "durable"}
    assert index["name"].get_value(QueueConfig("jobs", 5)) == "jobs"


def test_converter_is_used_for_class_discovery():
    converter = Converter()

    assert index_by_name(QueueConfig, converter)["durable"].converter is converter


def test_index_is_read_only():
    index = index_by_name(QueueConfig)

    with pytest.raises(TypeError):
        index["other"] = index["name"]


def test_empty_input_gives_empty_index():
    assert len(index_by_name([])) == 0
