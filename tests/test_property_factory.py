from typing import Annotated

import pytest

from configbind.domain import FieldDescriptor, PropertyRole
from configbind.errors import PropertyDefinitionError
from configbind.markers import Delegate, Property
from configbind.property_factory import PropertyFactory


class Owner:
    pass


class UpperCaseConverter:
    def convert(self, value, target_type, prop):
        return value.upper()


@pytest.fixture
def factory():
    return PropertyFactory()


def make_field(*markers, name="field") -> FieldDescriptor:
    return FieldDescriptor(name, str, markers, False, Owner)


def test_unmarked_field_is_not_a_property(factory):
    assert factory.try_create(make_field()) is None
    assert factory.try_create(make_field("a qualifier", 42)) is None


def test_marked_field_becomes_property(factory):
    field = make_field(Property())
    prop = factory.try_create(field)

    assert prop.name == "field"
    assert prop.field is field
    assert prop.role is PropertyRole.PLAIN
    assert not prop.optional
    assert not prop.is_delegate


def test_marker_settings_are_carried_to_property(factory):
    prop = factory.try_create(make_field("unrelated", Property(name="renamed", optional=True)))

    assert prop.name == "renamed"
    assert prop.optional


def test_delegate_marker_makes_delegate_property(factory):
    prop = factory.try_create(make_field(Delegate()))

    assert prop.is_delegate
    assert prop.role is PropertyRole.DELEGATE


def test_two_markers_are_rejected(factory):
    with pytest.raises(PropertyDefinitionError, match="Owner.field has 2 property markers"):
        factory.try_create(make_field(Property(), Delegate()))


def test_empty_name_is_rejected(factory):
    with pytest.raises(PropertyDefinitionError, match="empty property name"):
        factory.try_create(make_field(Property(name="")))


def test_converter_is_bound_to_property():
    converter = UpperCaseConverter()
    prop = PropertyFactory(converter).try_create(make_field(Property()))

    assert prop.converter is converter


def test_delegate_marker_is_a_property_with_fixed_role():
    marker = Delegate(name="wrapped", optional=True)

    assert isinstance(marker, Property)
    assert marker.role is PropertyRole.DELEGATE
    assert marker.name == "wrapped"
    assert marker.optional
