"""Configbind configuration class analysis.

Configbind tells a configuration-binding framework which fields of a
configuration class can be populated from external configuration, in what
order, where the class's lifecycle hooks are, and how to see through
configuration objects that decorate other configuration objects.

Key Features:
    - Injectable properties declared with standard ``Annotated`` type hints
    - Ancestor-first property ordering across class hierarchies
    - Post-construct and pre-destroy hook lookup
    - Shallow and deep stripping of decorating configuration objects
    - Uniqueness-checked property name indexes

Basic Usage:
    >>> from configbind import Property, TypeIntrospector, index_by_name
    >>>
    >>> @dataclass
    ... class DatabaseConfig:
    ...     url: Annotated[str, Property()]
    ...     pool_size: Annotated[int, Property(optional=True)] = 5
    >>>
    >>> [p.name for p in TypeIntrospector(DatabaseConfig).properties()]
    ['url', 'pool_size']
    >>> index_by_name(DatabaseConfig)["url"].get_value(DatabaseConfig("sqlite://"))
    'sqlite://'

The library consists of several modules:
    - introspector: Property discovery over a class hierarchy
    - property_factory: Field eligibility and property construction
    - markers: Property and delegate markers
    - lifecycle: Lifecycle hook markers and lookup
    - decoration: Shallow and deep delegate stripping
    - indexing: Name-indexed property mappings
    - domain: Core domain models (FieldDescriptor, InjectableProperty)
    - errors: Library-specific exceptions
"""

from configbind.converter import PropertyValueConverter
from configbind.decoration import DEFAULT_MAX_DEPTH, strip_deep, strip_shallow
from configbind.domain import FieldDescriptor, InjectableProperty, PropertyRole
from configbind.errors import (
    ConfigurationError,
    DecorationCycleError,
    DecorationError,
    DuplicatePropertyError,
    LifecycleError,
    PropertyDefinitionError,
)
from configbind.indexing import index_by_name
from configbind.introspector import TypeIntrospector
from configbind.lifecycle import LifecycleMarker, find_method_with_marker, post_construct, pre_destroy
from configbind.markers import Delegate, Property
from configbind.property_factory import PropertyFactory

__all__ = [
    "TypeIntrospector",
    "PropertyFactory",
    "PropertyValueConverter",
    "Property",
    "Delegate",
    "PropertyRole",
    "FieldDescriptor",
    "InjectableProperty",
    "LifecycleMarker",
    "post_construct",
    "pre_destroy",
    "find_method_with_marker",
    "strip_shallow",
    "strip_deep",
    "DEFAULT_MAX_DEPTH",
    "index_by_name",
    "ConfigurationError",
    "PropertyDefinitionError",
    "DuplicatePropertyError",
    "LifecycleError",
    "DecorationError",
    "DecorationCycleError",
]
