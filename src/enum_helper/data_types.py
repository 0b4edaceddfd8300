"""
Enum helper data types.

Shared types for the enum helper: the scalar union used for backing values,
the capability protocol any enum-like type must satisfy, the read-only
descriptor returned by introspection and the typed serialization result.
"""

from enum import Enum
from typing import Any, Dict, Iterator, List, Mapping, Optional, Protocol, Union, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

from .errors import EnumHelperError

Scalar = Union[int, str]


@runtime_checkable
class EnumMember(Protocol):
    """A single member: a name and a value."""

    @property
    def name(self) -> str: ...

    @property
    def value(self) -> Any: ...


@runtime_checkable
class EnumLike(Protocol):
    """
    Capability protocol for enum-like types.

    Any class that lists its members by iteration and exposes the full
    name-to-member table (aliases included) through ``__members__`` can be
    passed to the view functions. Every ``enum.Enum`` subclass qualifies.
    """

    __members__: Mapping[str, Any]

    def __iter__(self) -> Iterator[EnumMember]: ...

    def __len__(self) -> int: ...


class EnumKind(str, Enum):
    """Whether an enum carries scalar backing values."""

    PURE = "Pure"
    BACKED = "Backed"


class SerializationFormat(str, Enum):
    """Supported text encodings."""

    JSON = "json"
    XML = "xml"


class EnumDescriptor(BaseModel):
    """
    Read-only metadata snapshot of an enum type.

    Field aliases keep the key names used by ``info()`` style dumps
    (``traitNames``) while attributes stay snake_case.
    """

    name: str = Field(..., description="Qualified class name")
    type: EnumKind = Field(..., description="Pure or Backed")
    backed_type: str = Field("", description="Backing scalar type: int, str or empty")
    cases_count: int = Field(0, ge=0, description="Number of members")
    trait_names: List[str] = Field(
        default_factory=list, alias="traitNames", description="Mixin classes in the MRO"
    )
    parent_class: str = Field(..., description="Nearest enum ancestor")
    namespace: str = Field(..., description="Declaring module")
    user_defined: bool = Field(True, description="False for standard library enums")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def is_backed(self) -> bool:
        return self.type is EnumKind.BACKED

    def to_info(self) -> Dict[str, Any]:
        """Dump using the ``info()`` key names."""
        return self.model_dump(mode="json", by_alias=True)


class SerializationResult(BaseModel):
    """Outcome of encoding an enum, success or failure."""

    success: bool
    format: SerializationFormat
    data: Optional[str] = None
    error: Optional[Dict[str, Any]] = Field(None, description="Error details on failure")

    @classmethod
    def ok(cls, format: SerializationFormat, data: str):
        """Create success result with the encoded text."""
        return cls(success=True, format=format, data=data)

    @classmethod
    def from_exception(cls, format: SerializationFormat, exception: EnumHelperError):
        """Create failure result from exception."""
        return cls(
            success=False,
            format=format,
            error=exception.to_dict()["error"]
        )
