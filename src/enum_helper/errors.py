"""
Enum helper error handling.

Provides structured exceptions for the few enum operations that can fail:
drawing from an empty enum, flipping an enum whose values are not unique,
and encoding an enum to JSON or XML.
"""
from typing import Optional, Dict, Any, List
from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity levels."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """Error categories for classification."""
    EMPTY = "empty"
    VALIDATION = "validation"
    SERIALIZATION = "serialization"
    UNKNOWN = "unknown"


class EnumHelperError(Exception):
    """Base exception for all enum helper errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.category = category
        self.severity = severity
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/response."""
        return {
            "error": {
                "type": self.__class__.__name__,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "details": self.details
            }
        }


class EmptyEnumError(EnumHelperError):
    """Operation needs at least one member but the enum has none."""

    def __init__(self, enum_name: str, operation: Optional[str] = None):
        message = f"Enum '{enum_name}' has no members"
        if operation:
            message = f"Cannot {operation}: {message}"
        details = {"enum": enum_name}
        if operation:
            details["operation"] = operation
        super().__init__(
            message,
            ErrorCategory.EMPTY,
            ErrorSeverity.ERROR,
            details
        )
        self.enum_name = enum_name


class DuplicateValueError(EnumHelperError):
    """Backing values are not unique, so name and value cannot be swapped."""

    def __init__(self, enum_name: str, duplicates: List[Any]):
        message = (
            f"Enum '{enum_name}' has duplicate values: "
            f"{', '.join(repr(v) for v in duplicates)}"
        )
        super().__init__(
            message,
            ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR,
            {"enum": enum_name, "duplicates": duplicates}
        )
        self.enum_name = enum_name
        self.duplicates = duplicates


class SerializationError(EnumHelperError):
    """JSON or XML encoding failed."""

    def __init__(
        self,
        message: str,
        format: str,
        original_error: Optional[Exception] = None
    ):
        details = {
            "format": format,
            "original_error": str(original_error) if original_error else None,
            "error_type": type(original_error).__name__ if original_error else None
        }
        super().__init__(
            message,
            ErrorCategory.SERIALIZATION,
            ErrorSeverity.ERROR,
            details
        )
        self.format = format
        self.original_error = original_error
