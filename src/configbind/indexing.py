"""Name-indexed views of injectable properties."""

import inspect
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Union

from configbind.converter import PropertyValueConverter
from configbind.domain import InjectableProperty
from configbind.errors import DuplicatePropertyError
from configbind.introspector import TypeIntrospector

__all__ = ["index_by_name"]


def index_by_name(
    source: Union[type, Iterable[InjectableProperty]],
    converter: Optional[PropertyValueConverter] = None,
) -> Mapping[str, InjectableProperty]:
    """Index properties by name.

    Args:
        source: Either a configuration class, whose properties are discovered
            first, or an iterable of properties.
        converter: Converter used when discovering the properties of a class.

    Returns:
        A read-only mapping from property name to property, in discovery order.

    Raises:
        DuplicatePropertyError: If two properties share a name.
    """
    if inspect.isclass(source):
        source = TypeIntrospector(source, converter).properties()

    properties_by_name: dict[str, InjectableProperty] = {}
    for prop in source:
        if prop.name in properties_by_name:
            existing = properties_by_name[prop.name]
            raise DuplicatePropertyError(
                f"Duplicate property name '{prop.name}' "
                f"for fields {existing.field.owner.__qualname__}.{existing.field.name} "
                f"and {prop.field.owner.__qualname__}.{prop.field.name}"
            )
        properties_by_name[prop.name] = prop

    return MappingProxyType(properties_by_name)
