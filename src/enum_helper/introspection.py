"""
Enum type metadata.

``describe`` builds an ``EnumDescriptor`` from an enum class. Enum classes can
register their descriptor once at definition time with ``@register_enum``;
``get_descriptor`` then serves the registered snapshot.
"""

import logging
from enum import Enum
from typing import Dict, Iterator, List, Optional

from . import views
from .data_types import EnumDescriptor, EnumKind, EnumLike
from .errors import EnumHelperError, ErrorCategory, ErrorSeverity

logger = logging.getLogger(__name__)

_BUILTIN_MODULES = ("builtins", "enum")


def _mixin_names(enum_class: type) -> List[str]:
    """Names of helper classes mixed in, skipping enum bases and scalar data types."""
    return [
        base.__name__
        for base in enum_class.__mro__[1:]
        if not issubclass(base, Enum) and base.__module__ != "builtins"
    ]


def _parent_enum(enum_class: type) -> str:
    for base in enum_class.__mro__[1:]:
        if issubclass(base, Enum):
            return base.__name__
    return ""


def describe(enum_class: EnumLike) -> EnumDescriptor:
    """
    Describe an enum type.

    Args:
        enum_class: Enum class to inspect

    Returns:
        Descriptor with the kind, backing type, member count, mixins, parent
        enum, module and origin of the type
    """
    backed = views.is_backed(enum_class)
    scalar = views.backing_type(enum_class)
    is_class = isinstance(enum_class, type)
    module = getattr(enum_class, "__module__", "")
    return EnumDescriptor(
        name=views.enum_name(enum_class),
        type=EnumKind.BACKED if backed else EnumKind.PURE,
        backed_type=scalar.__name__ if backed and scalar else "",
        cases_count=views.cases_count(enum_class),
        trait_names=_mixin_names(enum_class) if is_class else [],
        parent_class=_parent_enum(enum_class) if is_class else "",
        namespace=module,
        user_defined=module not in _BUILTIN_MODULES,
    )


class EnumRegistry:
    """Descriptors of registered enum types, keyed by class."""

    def __init__(self):
        self._descriptors: Dict[type, EnumDescriptor] = {}

    def register(self, enum_class: type) -> EnumDescriptor:
        """
        Compute and store the descriptor for an enum class.

        Raises:
            EnumHelperError: If ``enum_class`` is not an Enum subclass
        """
        if not (isinstance(enum_class, type) and issubclass(enum_class, Enum)):
            raise EnumHelperError(
                f"Cannot register {enum_class!r}: not an Enum subclass",
                ErrorCategory.VALIDATION,
                ErrorSeverity.ERROR,
                {"type": type(enum_class).__name__},
            )
        descriptor = describe(enum_class)
        self._descriptors[enum_class] = descriptor
        logger.debug(
            f"Registered {descriptor.namespace}.{descriptor.name} "
            f"({descriptor.type.value}, {descriptor.cases_count} cases)"
        )
        return descriptor

    def get(self, enum_class: type) -> Optional[EnumDescriptor]:
        return self._descriptors.get(enum_class)

    def unregister(self, enum_class: type) -> bool:
        """Remove a registration. Returns False if the class was not registered."""
        return self._descriptors.pop(enum_class, None) is not None

    def __contains__(self, enum_class: object) -> bool:
        return enum_class in self._descriptors

    def __len__(self) -> int:
        return len(self._descriptors)

    def __iter__(self) -> Iterator[type]:
        return iter(list(self._descriptors))


registry = EnumRegistry()


def register_enum(enum_class):
    """Class decorator registering an enum's descriptor at definition time."""
    registry.register(enum_class)
    return enum_class


def get_descriptor(enum_class: EnumLike) -> EnumDescriptor:
    """Get the registered descriptor, or describe the type on the spot."""
    descriptor = registry.get(enum_class) if isinstance(enum_class, type) else None
    return descriptor if descriptor is not None else describe(enum_class)
