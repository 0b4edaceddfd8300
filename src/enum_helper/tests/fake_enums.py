"""Enum fixtures shared by the enum helper tests."""
from enum import Enum, IntEnum, IntFlag, StrEnum, auto

from enum_helper import EnumHelperMixin, register_enum


class BackedIntEnum(EnumHelperMixin, IntEnum):
    BACKED_INT_ONE = 1
    BACKED_INT_TWO = 2
    BACKED_INT_THREE = 3
    BACKED_INT_FOUR = 4


class BackedStringEnum(EnumHelperMixin, str, Enum):
    BACKED_STRING_ONE = "string one"
    BACKED_STRING_TWO = "string two"
    BACKED_STRING_THREE = "string three"
    BACKED_STRING_FOUR = "string four"


class PureEnum(EnumHelperMixin, Enum):
    PURE_ENUM_ONE = auto()
    PURE_ENUM_TWO = auto()
    PURE_ENUM_THREE = auto()
    PURE_ENUM_FOUR = auto()


class EmptyEnum(EnumHelperMixin, Enum):
    pass


class AliasedIntEnum(EnumHelperMixin, IntEnum):
    ONE = 1
    UNO = 1
    TWO = 2


class MarkupStringEnum(EnumHelperMixin, StrEnum):
    AMPERSAND = "fish & chips"
    TAG = "<b>bold</b>"
    ACCENT = "café"


class PermissionFlag(EnumHelperMixin, IntFlag):
    READ = 4
    WRITE = 2
    EXECUTE = 1
    ALL = 7


class BrokenXmlEnum(EnumHelperMixin, StrEnum):
    NUL = "bad\x00value"


@register_enum
class RegisteredEnum(EnumHelperMixin, IntEnum):
    LOW = 10
    HIGH = 20


BACKED_INT_VALUES = [1, 2, 3, 4]
BACKED_STRING_VALUES = ["string one", "string two", "string three", "string four"]
BACKED_INT_NAMES = ["BACKED_INT_ONE", "BACKED_INT_TWO", "BACKED_INT_THREE", "BACKED_INT_FOUR"]
BACKED_STRING_NAMES = [
    "BACKED_STRING_ONE", "BACKED_STRING_TWO", "BACKED_STRING_THREE", "BACKED_STRING_FOUR"
]
PURE_ENUM_NAMES = ["PURE_ENUM_ONE", "PURE_ENUM_TWO", "PURE_ENUM_THREE", "PURE_ENUM_FOUR"]

# (enum, values, names)
ALL_ENUMS = [
    (BackedStringEnum, BACKED_STRING_VALUES, BACKED_STRING_NAMES),
    (BackedIntEnum, BACKED_INT_VALUES, BACKED_INT_NAMES),
    (PureEnum, [], PURE_ENUM_NAMES),
    (EmptyEnum, [], []),
]
PURE_ENUMS = [PureEnum, EmptyEnum]
BACKED_ENUMS = [BackedIntEnum, BackedStringEnum]
