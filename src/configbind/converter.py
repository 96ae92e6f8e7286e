"""The value conversion capability forwarded to injectable properties."""

from typing import Any, Protocol, runtime_checkable, TYPE_CHECKING

if TYPE_CHECKING:
    from configbind.domain import InjectableProperty

__all__ = ["PropertyValueConverter"]


@runtime_checkable
class PropertyValueConverter(Protocol):
    """Converts a raw configuration value into the type a property expects.

    Implementations are supplied by the host framework. The library never
    calls a converter during discovery; it is only used when a value is
    written through :meth:`InjectableProperty.set_value`.
    """

    def convert(self, value: Any, target_type: Any, prop: "InjectableProperty") -> Any:
        ...
