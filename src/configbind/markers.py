"""Markers that make class fields injectable.

Markers are placed in the metadata of an ``Annotated`` field hint:

    >>> @dataclass
    ... class ServerConfig:
    ...     host: Annotated[str, Property()]
    ...     port: Annotated[int, Property(name="listen_port", optional=True)]
    ...     debug: bool = False  # not injectable

A decorating configuration class marks the wrapped configuration with
:class:`Delegate`:

    >>> @dataclass
    ... class LoggingServerConfig:
    ...     inner: Annotated[ServerConfig, Delegate()]
"""

from dataclasses import dataclass, field
from typing import Optional

from configbind.domain import PropertyRole

__all__ = ["Property", "Delegate", "PropertyRole"]


@dataclass(frozen=True)
class Property:
    """Marks a field as an injectable property.

    Attributes:
        name: The name under which the property is bound. Defaults to the field name.
        optional: Whether a configuration source may leave the property unset.
        role: Whether the property is a plain value or the delegate of a decorator.
    """

    name: Optional[str] = None
    optional: bool = False
    role: PropertyRole = PropertyRole.PLAIN


@dataclass(frozen=True)
class Delegate(Property):
    """Marks a field as the wrapped configuration of a decorating configuration class.

    A :class:`Property` whose role is always ``PropertyRole.DELEGATE``.
    """

    role: PropertyRole = field(default=PropertyRole.DELEGATE, init=False)
