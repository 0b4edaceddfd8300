"""
enum-helper: convenience operations for Python enums.

Organization:
- mixin.py: EnumHelperMixin, the classmethod surface mixed into enum classes
- views.py: listing, lookup, filtering and membership as free functions
- serializers.py: JSON and XML encoding
- introspection.py: type descriptors and the registration decorator
- errors.py: structured exceptions
- data_types.py: Scalar, EnumLike, EnumDescriptor, SerializationResult
- config.py / logging_config.py: configuration and logging setup
"""

from .__version__ import __version__
from .config import EnumHelperConfig, get_config, set_config
from .data_types import (
    EnumDescriptor,
    EnumKind,
    EnumLike,
    Scalar,
    SerializationFormat,
    SerializationResult,
)
from .errors import (
    DuplicateValueError,
    EmptyEnumError,
    EnumHelperError,
    ErrorCategory,
    ErrorSeverity,
    SerializationError,
)
from .introspection import EnumRegistry, describe, get_descriptor, register_enum, registry
from .mixin import EnumHelperMixin
from .serializers import serialize, to_json, to_xml

__all__ = [
    "__version__",
    "DuplicateValueError",
    "EmptyEnumError",
    "EnumDescriptor",
    "EnumHelperConfig",
    "EnumHelperError",
    "EnumHelperMixin",
    "EnumKind",
    "EnumLike",
    "EnumRegistry",
    "ErrorCategory",
    "ErrorSeverity",
    "Scalar",
    "SerializationError",
    "SerializationFormat",
    "SerializationResult",
    "describe",
    "get_config",
    "get_descriptor",
    "register_enum",
    "registry",
    "serialize",
    "set_config",
    "to_json",
    "to_xml",
]
