"""Discovery of the injectable properties declared by a configuration class.

Properties are collected from the whole class hierarchy. Classes higher up the
hierarchy come first, so properties inherited from a base class precede those
declared by a subclass; within one class, properties keep their declaration
order.

Example:
    >>> @dataclass
    ... class Base:
    ...     x: Annotated[int, Property()]
    >>>
    >>> @dataclass
    ... class Child(Base):
    ...     y: Annotated[str, Property()]
    ...     Z: ClassVar[Annotated[int, Property()]] = 0
    >>>
    >>> [p.name for p in TypeIntrospector(Child).properties()]
    ['x', 'y']
"""

import inspect
import logging
import sys
from typing import Annotated, Any, ClassVar, Optional, get_args, get_origin

from configbind.converter import PropertyValueConverter
from configbind.domain import FieldDescriptor, InjectableProperty
from configbind.lifecycle import LifecycleMarker, find_method_with_marker
from configbind.property_factory import PropertyFactory

__all__ = ["TypeIntrospector", "type_chain", "declared_fields"]

logger = logging.getLogger(__name__)


class TypeIntrospector:
    """Analyses a single configuration class.

    Nothing is cached: every call inspects the class afresh.
    """

    def __init__(self, config_class: type, converter: Optional[PropertyValueConverter] = None):
        self.config_class = config_class
        self.converter = converter
        self._factory = PropertyFactory(converter)

    def properties(self) -> tuple[InjectableProperty, ...]:
        """Discover the injectable properties of the class, ancestors first.

        Returns:
            A new tuple of properties on every call.

        Raises:
            PropertyDefinitionError: If any field carries malformed markers.
        """
        result = []
        for klass in type_chain(self.config_class):
            for field in declared_fields(klass):
                if field.is_static:
                    continue
                prop = self._factory.try_create(field)
                if prop is not None:
                    result.append(prop)

        logger.debug(
            "Discovered properties %s on %s",
            [p.name for p in result],
            self.config_class.__qualname__,
        )
        return tuple(result)

    def delegate_property(self) -> Optional[InjectableProperty]:
        """Return the first property marked as a delegate, or None if the class has none."""
        return next((p for p in self.properties() if p.is_delegate), None)

    def post_construct_method(self) -> Optional[Any]:
        return find_method_with_marker(LifecycleMarker.POST_CONSTRUCT, self.config_class)

    def pre_destroy_method(self) -> Optional[Any]:
        return find_method_with_marker(LifecycleMarker.PRE_DESTROY, self.config_class)


def type_chain(cls: type) -> list[type]:
    """List the classes whose fields belong to ``cls``, most ancestral first.

    Protocol classes are interfaces and are left out.
    """
    return [
        klass
        for klass in reversed(cls.__mro__)
        if not getattr(klass, "_is_protocol", False)
    ]


def declared_fields(cls: type) -> list[FieldDescriptor]:
    """List the fields annotated directly on ``cls``, in declaration order.

    String annotations are resolved one field at a time against the module and
    class namespaces. An annotation naming something undefined at runtime, such
    as a type imported only for type checking, is kept as the raw string and
    so carries no markers.
    """
    own_annotations = _own_annotations(cls)
    if not own_annotations:
        return []

    module = sys.modules.get(cls.__module__)
    globalns = getattr(module, "__dict__", {})
    localns = dict(vars(cls))
    return [
        _make_field(cls, name, _resolve_annotation(cls, name, annotation, globalns, localns))
        for name, annotation in own_annotations.items()
    ]


def _own_annotations(cls: type) -> dict[str, Any]:
    if sys.version_info >= (3, 14):
        # Deferred annotations: undefined names become ForwardRefs instead of raising.
        import annotationlib

        return annotationlib.get_annotations(cls, format=annotationlib.Format.FORWARDREF)
    return inspect.get_annotations(cls)


def _resolve_annotation(owner: type, name: str, annotation: Any, globalns: dict, localns: dict) -> Any:
    if not isinstance(annotation, str):
        return annotation
    try:
        return eval(annotation, globalns, localns)
    except NameError as e:
        logger.debug("Leaving annotation of %s.%s unresolved: %s", owner.__qualname__, name, e)
        return annotation


def _make_field(owner: type, name: str, hint: Any) -> FieldDescriptor:
    is_static = False
    markers: tuple[Any, ...] = ()

    if get_origin(hint) is Annotated:
        hint, *metadata = get_args(hint)
        markers = tuple(metadata)

    if hint is ClassVar or get_origin(hint) is ClassVar:
        is_static = True
        args = get_args(hint)
        hint = args[0] if args else Any

    if get_origin(hint) is Annotated:
        hint, *metadata = get_args(hint)
        markers = markers + tuple(metadata)

    return FieldDescriptor(name, hint, markers, is_static, owner)
