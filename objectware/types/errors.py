"""
Structured error types for Objectware.

The traversal functions never raise their own errors; failures there come
straight from Python (or from user callbacks). These types cover misuse of
the LayeredObject data model: invalid prototypes and invalid property keys.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, IntEnum
from typing import Any

from objectware.constants import utcnow


class ErrorCode(IntEnum):
    """Internal error codes for categorization."""

    # Prototype Chain Errors (1000-1999)
    PROTOTYPE_INVALID = 1001
    PROTOTYPE_CYCLE = 1002

    # Property Errors (2000-2999)
    PROPERTY_KEY_INVALID = 2001


class ErrorSeverity(str, Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass
class ErrorContext:
    """Context information for an error."""

    operation: str | None = None
    key: str | None = None
    timestamp: datetime = field(default_factory=utcnow)
    additional_info: dict[str, Any] = field(default_factory=dict)


class ObjectwareError(Exception):
    """Base error class for Objectware."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        user_message: str,
        severity: str = ErrorSeverity.MEDIUM,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.severity = severity
        self.user_message = user_message
        self.context = context or ErrorContext()

    def __str__(self) -> str:
        return self.args[0] if self.args else ""

    def get_formatted_message(self) -> str:
        """Get a formatted error message for display to users."""
        parts = [
            f"[Error] {self.user_message}",
            f"   Code: {self.code.value}",
        ]

        if self.context.operation:
            parts.append(f"   Operation: {self.context.operation}")
        if self.context.key is not None:
            parts.append(f"   Key: {self.context.key!r}")

        return "\n".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "name": self.__class__.__name__,
            "code": self.code.value,
            "message": str(self),
            "user_message": self.user_message,
            "severity": self.severity,
            "context": {
                "operation": self.context.operation,
                "key": self.context.key,
                "timestamp": self.context.timestamp.isoformat(),
                "additional_info": self.context.additional_info,
            },
        }


class PrototypeError(ObjectwareError, TypeError):
    """A prototype that is not a mapping, or one that would close a cycle."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.PROTOTYPE_INVALID,
        user_message: str | None = None,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(
            code=code,
            message=message,
            user_message=user_message or "Invalid prototype.",
            severity=ErrorSeverity.HIGH,
            context=context,
        )


class PropertyError(ObjectwareError, KeyError):
    """A property key that LayeredObject cannot store."""

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.PROPERTY_KEY_INVALID,
            message=message,
            user_message=user_message or "Invalid property key.",
            severity=ErrorSeverity.MEDIUM,
            context=context,
        )
