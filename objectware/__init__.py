"""
Objectware - iteration helpers for objects.

Dictionary counterparts of the familiar list helpers, working over every
enumerable property of an object, inherited ones included:
- assign / clone: copy properties between objects
- filter / map / map_keys: derive a new dict property by property
- keys / values / is_empty: inspect the enumerable property set

Inheritance is modelled by LayeredObject, a mapping with an explicit
prototype chain and per-property visibility. Plain dicts work everywhere a
LayeredObject does; they simply have nothing to inherit.
"""

from objectware.constants import UNDEFINED
from objectware.traversal import (
    assign,
    clone,
    filter,
    is_empty,
    keys,
    map,
    map_keys,
    values,
)
from objectware.types import (
    ErrorCode,
    ErrorContext,
    ErrorSeverity,
    LayeredObject,
    ObjectwareError,
    PropertyError,
    PrototypeError,
)
from objectware.utils.logger import configure_from_env

__version__ = "0.1.0"

__all__ = [
    # Traversal
    "assign",
    "clone",
    "filter",
    "is_empty",
    "keys",
    "map",
    "map_keys",
    "values",
    # Types
    "LayeredObject",
    "UNDEFINED",
    # Errors
    "ErrorCode",
    "ErrorContext",
    "ErrorSeverity",
    "ObjectwareError",
    "PropertyError",
    "PrototypeError",
]

configure_from_env()
