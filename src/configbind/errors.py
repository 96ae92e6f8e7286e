__all__ = [
    "ConfigurationError",
    "PropertyDefinitionError",
    "DuplicatePropertyError",
    "LifecycleError",
    "DecorationError",
    "DecorationCycleError",
]


class ConfigurationError(Exception):
    """Base class for errors raised while analysing configuration classes."""

    pass


class PropertyDefinitionError(ConfigurationError):
    """Raised when a field carries a malformed combination of property markers."""

    pass


class DuplicatePropertyError(ConfigurationError):
    """Raised when two properties resolve to the same name in a name index."""

    pass


class LifecycleError(ConfigurationError):
    """Raised when a lifecycle marker is found on more than one method."""

    pass


class DecorationError(ConfigurationError):
    """Raised when a decorated configuration object cannot be stripped."""

    pass


class DecorationCycleError(DecorationError):
    """Raised when deep stripping exceeds its depth guard."""

    pass
