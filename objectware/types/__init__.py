"""
Objectware type definitions.

This module exports the layered object model and its error types.
"""

# Core types
from objectware.constants import UNDEFINED

from .core import LayeredObject

# Error types
from .errors import (
    ErrorCode,
    ErrorContext,
    ErrorSeverity,
    ObjectwareError,
    PropertyError,
    PrototypeError,
)

__all__ = [
    # Core types
    "LayeredObject",
    "UNDEFINED",
    # Error types
    "ErrorCode",
    "ErrorSeverity",
    "ErrorContext",
    "ObjectwareError",
    "PrototypeError",
    "PropertyError",
]
