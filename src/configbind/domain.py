"""Domain models used throughout the library."""

import dataclasses
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from configbind.converter import PropertyValueConverter


class PropertyRole(Enum):
    """The role a property plays within its configuration class."""

    PLAIN = auto()
    DELEGATE = auto()


@dataclass(frozen=True)
class FieldDescriptor:
    """A field declared directly on a class.

    Attributes:
        name: The attribute name of the field.
        declared_type: The field's type hint with any ``Annotated`` wrapper removed.
        markers: The ``Annotated`` metadata attached to the hint, in declaration order.
        is_static: True for ``ClassVar`` fields, which never become properties.
        owner: The class that declares the field.
    """

    name: str
    declared_type: Any
    markers: tuple[Any, ...]
    is_static: bool
    owner: type


@dataclass(frozen=True)
class InjectableProperty:
    """
    A field of a configuration class that can receive a value from configuration.

    Attributes:
        name: The name the property is bound under; unique within one analysis result
            unless two fields resolve to the same name.
        field: The field the property reads and writes.
        role: Whether this is a plain property or the delegate of a decorator.
        optional: Whether a configuration source may leave the property unset.
        converter: Optional capability used to convert raw values on write.
    """

    name: str
    field: FieldDescriptor
    role: PropertyRole = PropertyRole.PLAIN
    optional: bool = False
    converter: Optional["PropertyValueConverter"] = dataclasses.field(default=None, compare=False)

    @property
    def is_delegate(self) -> bool:
        return self.role is PropertyRole.DELEGATE

    def get_value(self, instance: Any) -> Any:
        """Read the property off a live instance."""
        return getattr(instance, self.field.name)

    def set_value(self, instance: Any, value: Any) -> None:
        """Write a raw configuration value to a live instance.

        The value is passed through the converter when one is configured.
        Frozen dataclass instances are written to as well.
        """
        if self.converter is not None:
            value = self.converter.convert(value, self.field.declared_type, self)
        object.__setattr__(instance, self.field.name, value)
