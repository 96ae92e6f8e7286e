"""Construction of injectable properties from class fields."""

from typing import Optional

from configbind.converter import PropertyValueConverter
from configbind.domain import FieldDescriptor, InjectableProperty
from configbind.errors import PropertyDefinitionError
from configbind.markers import Property

__all__ = ["PropertyFactory"]


class PropertyFactory:
    """Decides which fields are injectable and builds their properties."""

    def __init__(self, converter: Optional[PropertyValueConverter] = None):
        self._converter = converter

    def try_create(self, field: FieldDescriptor) -> Optional[InjectableProperty]:
        """Create a property for a field, if the field is marked as one.

        Args:
            field: The field to examine.

        Returns:
            An :class:`InjectableProperty` bound to the field and this factory's
            converter, or None if the field carries no :class:`Property` marker.

        Raises:
            PropertyDefinitionError: If the field carries more than one
                :class:`Property` marker or an empty property name.
        """
        markers = [m for m in field.markers if isinstance(m, Property)]
        if not markers:
            return None

        if len(markers) > 1:
            raise PropertyDefinitionError(
                f"Field {field.owner.__qualname__}.{field.name} "
                f"has {len(markers)} property markers: {markers}"
            )

        marker = markers[0]
        if marker.name == "":
            raise PropertyDefinitionError(
                f"Field {field.owner.__qualname__}.{field.name} declares an empty property name"
            )

        return InjectableProperty(
            marker.name or field.name,
            field,
            marker.role,
            marker.optional,
            self._converter,
        )
