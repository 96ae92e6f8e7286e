"""Lifecycle hook markers and their lookup.

    >>> class PoolConfig:
    ...     @post_construct
    ...     def open(self):
    ...         ...
    ...
    ...     @pre_destroy
    ...     def close(self):
    ...         ...
    >>>
    >>> find_method_with_marker(LifecycleMarker.POST_CONSTRUCT, PoolConfig)
    <function PoolConfig.open at ...>

Hooks are only located here; calling them is up to the caller.
"""

import inspect
from enum import Enum, auto
from typing import Callable, Optional

from configbind.errors import LifecycleError

__all__ = [
    "LifecycleMarker",
    "post_construct",
    "pre_destroy",
    "find_method_with_marker",
]

LIFECYCLE_MARKERS = "__lifecycle_markers__"


class LifecycleMarker(Enum):
    POST_CONSTRUCT = auto()
    PRE_DESTROY = auto()


def set_marker(func: Callable, marker: LifecycleMarker) -> Callable:
    target = getattr(func, "__func__", func)
    markers = getattr(target, LIFECYCLE_MARKERS, frozenset())
    setattr(target, LIFECYCLE_MARKERS, markers | {marker})
    return func


def post_construct(func: Callable) -> Callable:
    """Marks a method to be run once a configuration object has been populated."""
    return set_marker(func, LifecycleMarker.POST_CONSTRUCT)


def pre_destroy(func: Callable) -> Callable:
    """Marks a method to be run before a configuration object is discarded."""
    return set_marker(func, LifecycleMarker.PRE_DESTROY)


def find_method_with_marker(marker: LifecycleMarker, cls: type) -> Optional[Callable]:
    """Find the public method of a class carrying a lifecycle marker.

    Instance methods, class methods and static methods are scanned, inherited
    ones included. A subclass that overrides a marked method without marking
    the override hides the marker.

    Args:
        marker: The lifecycle marker to look for.
        cls: The class to scan.

    Returns:
        The marked function as looked up on the class (a bound method for class
        methods), or None if no method carries the marker.

    Raises:
        LifecycleError: If more than one method carries the marker.
    """
    candidates = [
        member
        for name, member in inspect.getmembers(cls, inspect.isroutine)
        if not name.startswith("_") and marker in getattr(member, LIFECYCLE_MARKERS, ())
    ]
    if len(candidates) > 1:
        raise LifecycleError(
            f"{cls.__qualname__} has {len(candidates)} methods marked {marker.name}: "
            f"{[c.__name__ for c in candidates]}"
        )
    return candidates[0] if candidates else None
