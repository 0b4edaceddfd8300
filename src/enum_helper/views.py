"""
Derived views over an enum's members.

Every function takes the enum class as its first argument and recomputes its
result from the live member list. Nothing is cached and nothing is mutated.
These are the building blocks behind ``EnumHelperMixin``; they also work on
enum classes that do not use the mixin.
"""

import random
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from .data_types import EnumLike, Scalar
from .errors import DuplicateValueError, EmptyEnumError

EnumView = Union[Dict[str, Scalar], List[str]]


def enum_name(enum_class: EnumLike) -> str:
    return getattr(enum_class, "__qualname__", type(enum_class).__name__)


def as_text(value: Any) -> str:
    return value if isinstance(value, str) else str(value)


def _matches(candidate: Any, existing: Any, strict: bool) -> bool:
    """Compare type-exact when strict, otherwise through their text forms."""
    if strict:
        return type(candidate) is type(existing) and candidate == existing
    return candidate == existing or as_text(candidate) == as_text(existing)


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (int, str))


def _unwrap(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def _members(enum_class: EnumLike) -> List[Enum]:
    # Iteration skips composite flag members declared in the class body
    return [
        member
        for alias, member in enum_class.__members__.items()
        if member.name == alias
    ]


# Listing


def get_all(enum_class: EnumLike) -> List[Enum]:
    """Get all members in definition order, aliases excluded."""
    return _members(enum_class)


def cases_count(enum_class: EnumLike) -> int:
    """Get the number of members, aliases excluded."""
    return len(_members(enum_class))


def is_empty(enum_class: EnumLike) -> bool:
    """Check whether the enum has no members."""
    return cases_count(enum_class) == 0


def backing_type(enum_class: EnumLike) -> Optional[type]:
    """
    Get the scalar data type mixed into the enum.

    ``int`` for ``IntEnum``/``IntFlag`` style enums, ``str`` for ``StrEnum``
    and ``(str, Enum)`` style enums, None for plain enums whose values are
    opaque identifiers.
    """
    if not isinstance(enum_class, type):
        return None
    for scalar in (int, str):
        if issubclass(enum_class, scalar):
            return scalar
    return None


def is_backed(enum_class: EnumLike) -> bool:
    """Check whether every member carries an int or str backing value."""
    return not is_empty(enum_class) and backing_type(enum_class) is not None


def is_pure(enum_class: EnumLike) -> bool:
    """Check whether the enum has names only. Empty enums are always pure."""
    return not is_backed(enum_class)


def names(enum_class: EnumLike) -> List[str]:
    """Get all member names."""
    return [member.name for member in _members(enum_class)]


def values(enum_class: EnumLike) -> List[Scalar]:
    """Get all backing values. Pure enums have none."""
    if not is_backed(enum_class):
        return []
    return [member.value for member in _members(enum_class)]


def as_dict(enum_class: EnumLike) -> EnumView:
    """
    Get the enum as plain data.

    Backed enums map each name to its value; pure enums give the list of
    names.
    """
    if is_backed(enum_class):
        return {member.name: member.value for member in _members(enum_class)}
    return names(enum_class)


# Random selection


def random_case(enum_class: EnumLike) -> Enum:
    """
    Pick a member uniformly at random.

    Raises:
        EmptyEnumError: If the enum has no members
    """
    members = get_all(enum_class)
    if not members:
        raise EmptyEnumError(enum_name(enum_class), "pick a random member")
    return random.choice(members)


def random_value(enum_class: EnumLike) -> Optional[Scalar]:
    """Pick a backing value at random, or None if there are none."""
    candidates = values(enum_class)
    return random.choice(candidates) if candidates else None


def random_name(enum_class: EnumLike) -> Optional[str]:
    """Pick a member name at random, or None if there are none."""
    candidates = names(enum_class)
    return random.choice(candidates) if candidates else None


# Lookup


def flip(enum_class: EnumLike) -> Dict[Scalar, str]:
    """
    Map each backing value to its member name.

    Python folds a repeated value into an alias of the first member, so an
    enum with aliases has no value-to-name bijection.

    Raises:
        DuplicateValueError: If two names share a backing value
    """
    if not is_backed(enum_class):
        return {}

    duplicates = [
        member.value
        for alias, member in enum_class.__members__.items()
        if member.name != alias
    ]
    if duplicates:
        raise DuplicateValueError(enum_name(enum_class), list(dict.fromkeys(duplicates)))
    return {member.value: member.name for member in _members(enum_class)}


def value_exists(enum_class: EnumLike, value: Scalar, strict: bool = True) -> bool:
    """
    Check if a backing value exists.

    Args:
        value: Value to look for
        strict: Require the same type (``1`` does not match ``"1"``)

    Enum members are compared by their own value.
    """
    value = _unwrap(value)
    return any(_matches(value, existing, strict) for existing in values(enum_class))


def name_exists(enum_class: EnumLike, name: str, strict: bool = True) -> bool:
    """Check if a member name exists. ``strict`` as in ``value_exists``."""
    return any(_matches(name, existing, strict) for existing in names(enum_class))


def name_from_value(enum_class: EnumLike, value: Scalar) -> Optional[str]:
    """Get the member name for a backing value, or None if no member has it."""
    member = from_value(enum_class, value)
    return member.name if member is not None else None


def from_name(enum_class: EnumLike, name: str, case_sensitive: bool = True) -> Optional[Enum]:
    """Get a member by name, optionally ignoring case. Aliases resolve to their member."""
    if not name:
        return None
    if case_sensitive:
        return enum_class.__members__.get(name)
    wanted = name.upper()
    for alias, member in enum_class.__members__.items():
        if alias.upper() == wanted:
            return member
    return None


def from_value(enum_class: EnumLike, value: Scalar) -> Optional[Enum]:
    """Get a member by backing value without raising. Members are accepted as their value."""
    if not is_backed(enum_class):
        return None
    value = _unwrap(value)
    for member in _members(enum_class):
        if _matches(value, member.value, strict=True):
            return member
    return None


# Filtering


def filter_values_by_prefix(enum_class: EnumLike, prefix: Scalar) -> List[Scalar]:
    """Get values whose text contains ``prefix`` (case-sensitive)."""
    needle = as_text(prefix)
    return [value for value in values(enum_class) if needle in as_text(value)]


def filter_names_by_prefix(enum_class: EnumLike, prefix: str) -> List[str]:
    """Get names containing ``prefix`` (case-sensitive)."""
    needle = as_text(prefix)
    return [name for name in names(enum_class) if needle in name]


def _ends_with(text: str, suffix: str) -> bool:
    text, suffix = text.lower(), suffix.lower()
    if len(text) == 1:
        return text.startswith(suffix)
    return text.endswith(suffix)


def filter_values_by_suffix(enum_class: EnumLike, suffix: Scalar) -> List[Scalar]:
    """Get values whose text ends with ``suffix``, ignoring case."""
    tail = as_text(suffix)
    return [value for value in values(enum_class) if _ends_with(as_text(value), tail)]


def filter_names_by_suffix(enum_class: EnumLike, suffix: str) -> List[str]:
    """Get names ending with ``suffix``, ignoring case."""
    tail = as_text(suffix)
    return [name for name in names(enum_class) if _ends_with(name, tail)]


def filter_values(enum_class: EnumLike, predicate: Callable[[Scalar], bool]) -> List[Scalar]:
    """Get values for which ``predicate`` returns true, in definition order."""
    return [value for value in values(enum_class) if predicate(value)]


def filter_names(enum_class: EnumLike, predicate: Callable[[str], bool]) -> List[str]:
    """Get names for which ``predicate`` returns true, in definition order."""
    return [name for name in names(enum_class) if predicate(name)]


# Membership


def _contains_all(
    exists: Callable[[Any], bool], wanted: Union[Scalar, Iterable[Scalar]]
) -> bool:
    if _is_scalar(wanted):
        return exists(wanted)
    return all(exists(item) for item in wanted)


def is_value_in(enum_class: EnumLike, wanted: Union[Scalar, Iterable[Scalar]]) -> bool:
    """
    Check that a value, or every value of a collection, is a backing value.

    An empty collection is trivially contained.
    """
    return _contains_all(lambda item: value_exists(enum_class, item), wanted)


def is_not_value_in(enum_class: EnumLike, wanted: Union[Scalar, Iterable[Scalar]]) -> bool:
    return not is_value_in(enum_class, wanted)


def is_name_in(enum_class: EnumLike, wanted: Union[str, Iterable[str]]) -> bool:
    """Check that a name, or every name of a collection, exists."""
    return _contains_all(lambda item: name_exists(enum_class, item), wanted)


def is_not_name_in(enum_class: EnumLike, wanted: Union[str, Iterable[str]]) -> bool:
    return not is_name_in(enum_class, wanted)
