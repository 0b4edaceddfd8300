"""
Helper mixin for enumerations.

Mix ``EnumHelperMixin`` in ahead of the enum base to get the helper
operations as classmethods::

    class Status(EnumHelperMixin, IntEnum):
        ACTIVE = 1
        INACTIVE = 2

    Status.values()       # [1, 2]
    Status.flip()         # {1: "ACTIVE", 2: "INACTIVE"}

Backed enums mix in ``int`` or ``str`` (``IntEnum``, ``StrEnum``,
``class X(str, Enum)``); plain ``Enum`` subclasses are pure.
"""
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional, Union

from . import serializers, views
from .data_types import EnumDescriptor, Scalar, SerializationResult
from .introspection import get_descriptor


class EnumHelperMixin:
    """Listing, lookup, filtering, serialization and introspection for enums."""

    @classmethod
    def get_all(cls) -> List[Enum]:
        """Get all members in definition order."""
        return views.get_all(cls)

    @classmethod
    def as_dict(cls) -> views.EnumView:
        """Get name->value mapping (backed) or list of names (pure)."""
        return views.as_dict(cls)

    @classmethod
    def is_pure(cls) -> bool:
        return views.is_pure(cls)

    @classmethod
    def is_backed(cls) -> bool:
        return views.is_backed(cls)

    @classmethod
    def is_empty(cls) -> bool:
        return views.is_empty(cls)

    @classmethod
    def cases_count(cls) -> int:
        return views.cases_count(cls)

    @classmethod
    def random_case(cls) -> Enum:
        """Get a random member. Raises EmptyEnumError on an empty enum."""
        return views.random_case(cls)

    @classmethod
    def values(cls) -> List[Scalar]:
        """Get all backing values."""
        return views.values(cls)

    @classmethod
    def names(cls) -> List[str]:
        """Get all member names."""
        return views.names(cls)

    @classmethod
    def random_value(cls) -> Optional[Scalar]:
        return views.random_value(cls)

    @classmethod
    def random_name(cls) -> Optional[str]:
        return views.random_name(cls)

    @classmethod
    def flip(cls) -> Dict[Scalar, str]:
        """Get value->name mapping. Raises DuplicateValueError on aliased values."""
        return views.flip(cls)

    @classmethod
    def value_exists(cls, value: Scalar, strict: bool = True) -> bool:
        return views.value_exists(cls, value, strict)

    @classmethod
    def name_exists(cls, name: str, strict: bool = True) -> bool:
        return views.name_exists(cls, name, strict)

    @classmethod
    def name_from_value(cls, value: Scalar) -> Optional[str]:
        """Get the member name for a value, None if absent."""
        return views.name_from_value(cls, value)

    @classmethod
    def from_name(cls, name: str, case_sensitive: bool = True) -> Optional[Enum]:
        """Convert name to member, None if absent."""
        return views.from_name(cls, name, case_sensitive)

    @classmethod
    def from_value(cls, value: Scalar) -> Optional[Enum]:
        """Convert backing value to member, None if absent."""
        return views.from_value(cls, value)

    @classmethod
    def to_json(
        cls,
        ensure_ascii: Optional[bool] = None,
        indent: Optional[int] = None,
        sort_keys: bool = False,
        depth: Optional[int] = None,
    ) -> Optional[str]:
        """Convert enum to JSON. None when empty or encoding fails."""
        return serializers.to_json(cls, ensure_ascii, indent, sort_keys, depth)

    @classmethod
    def to_xml(cls) -> Optional[str]:
        """Convert enum to XML. None when empty; raises SerializationError on failure."""
        return serializers.to_xml(cls)

    @classmethod
    def serialize(cls, format: str = "json", **options) -> SerializationResult:
        return serializers.serialize(cls, format, **options)

    @classmethod
    def describe(cls) -> EnumDescriptor:
        """Get type metadata."""
        return get_descriptor(cls)

    @classmethod
    def filter_values_by_prefix(cls, prefix: Scalar) -> List[Scalar]:
        return views.filter_values_by_prefix(cls, prefix)

    @classmethod
    def filter_names_by_prefix(cls, prefix: str) -> List[str]:
        return views.filter_names_by_prefix(cls, prefix)

    @classmethod
    def filter_values_by_suffix(cls, suffix: Scalar) -> List[Scalar]:
        return views.filter_values_by_suffix(cls, suffix)

    @classmethod
    def filter_names_by_suffix(cls, suffix: str) -> List[str]:
        return views.filter_names_by_suffix(cls, suffix)

    @classmethod
    def filter_values(cls, predicate: Callable[[Scalar], bool]) -> List[Scalar]:
        return views.filter_values(cls, predicate)

    @classmethod
    def filter_names(cls, predicate: Callable[[str], bool]) -> List[str]:
        return views.filter_names(cls, predicate)

    @classmethod
    def is_value_in(cls, wanted: Union[Scalar, Iterable[Scalar]]) -> bool:
        return views.is_value_in(cls, wanted)

    @classmethod
    def is_not_value_in(cls, wanted: Union[Scalar, Iterable[Scalar]]) -> bool:
        return views.is_not_value_in(cls, wanted)

    @classmethod
    def is_name_in(cls, wanted: Union[str, Iterable[str]]) -> bool:
        return views.is_name_in(cls, wanted)

    @classmethod
    def is_not_name_in(cls, wanted: Union[str, Iterable[str]]) -> bool:
        return views.is_not_name_in(cls, wanted)
