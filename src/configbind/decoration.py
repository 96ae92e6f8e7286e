"""Unwrapping of decorated configuration objects.

A configuration class decorates another configuration object when one of its
properties is marked as a :func:`~configbind.markers.Delegate`. Stripping
follows delegates towards the innermost, undecorated object.
"""

import logging
from typing import Any, Optional

from configbind.errors import DecorationCycleError, DecorationError
from configbind.introspector import TypeIntrospector

__all__ = ["strip_shallow", "strip_deep", "DEFAULT_MAX_DEPTH"]

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 100


def strip_shallow(decorated: Any) -> Any:
    """Strip one decoration from a configuration object.

    Args:
        decorated: The possibly decorated object.

    Returns:
        The value of the object's delegate property, or the object itself if
        its class declares no delegate.

    Raises:
        DecorationError: If the class cannot be analysed or the delegate cannot be read.
    """
    try:
        delegate = TypeIntrospector(type(decorated)).delegate_property()
        if delegate is None:
            return decorated
        return delegate.get_value(decorated)
    except Exception as e:
        raise DecorationError(
            f"Unable to strip decoration from {type(decorated).__qualname__}: {e}"
        ) from e


def strip_deep(decorated: Any, max_depth: Optional[int] = DEFAULT_MAX_DEPTH) -> Any:
    """Strip all decorations from a configuration object.

    Args:
        decorated: The possibly decorated object.
        max_depth: The most decorations that may be removed. None removes the
            limit, in which case a cyclic decoration chain never terminates.

    Returns:
        The innermost object, the first one that strips to itself.

    Raises:
        DecorationError: If any layer cannot be stripped.
        DecorationCycleError: If more than ``max_depth`` decorations are found.
    """
    current = decorated
    depth = 0
    while True:
        stripped = strip_shallow(current)
        if stripped is current:
            logger.debug(
                "Stripped %d decorations from %s", depth, type(decorated).__qualname__
            )
            return stripped

        depth += 1
        if max_depth is not None and depth > max_depth:
            raise DecorationCycleError(
                f"More than {max_depth} decorations on {type(decorated).__qualname__}; "
                "decoration cycle suspected"
            )
        current = stripped
