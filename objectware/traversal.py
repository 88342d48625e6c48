"""
Traversal helpers over the enumerable properties of an object.

Every function walks the object's enumerable properties once, own
properties first and then inherited ones (see LayeredObject), and builds a
new plain dict or list. Only ``assign`` mutates, and only its target.

Usage:
    import objectware as _

    _.filter({"a": 1, "b": 2}, lambda value: value % 2 == 0)  # {"b": 2}
    _.map_keys({"name": "John"}, str.upper)                    # {"NAME": "John"}
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable

from objectware.constants import UNDEFINED
from objectware.utils.callbacks import bind_callback
from objectware.utils.logger import logger

__all__ = [
    "assign",
    "clone",
    "filter",
    "is_empty",
    "keys",
    "map",
    "map_keys",
    "values",
]


def assign(target: Any = UNDEFINED, *sources: Mapping[str, Any] | None) -> Any:
    """
    Copy enumerable properties of each source onto ``target``.

    Sources are applied in order, so later sources win. None and UNDEFINED
    sources are skipped. A None or UNDEFINED target is returned untouched.

    Args:
        target: Mutable mapping to write into.
        *sources: Mappings to read from, own and inherited properties alike.

    Returns:
        ``target`` itself.
    """
    if target is None or target is UNDEFINED:
        logger.trace("assign: passing through {!r} target", target)
        return target

    for source in sources:
        if source is None or source is UNDEFINED:
            logger.trace("assign: skipping {!r} source", source)
            continue
        for key, value in source.items():
            target[key] = value

    return target


def clone(source: Mapping[str, Any] | None = UNDEFINED) -> Any:
    """
    Shallow-copy the enumerable properties of ``source`` into a new dict.

    None and UNDEFINED are returned as-is.
    """
    if source is None or source is UNDEFINED:
        logger.trace("clone: passing through {!r} source", source)
        return source
    return assign({}, source)


def filter(
    obj: Mapping[str, Any],
    predicate: Callable[..., Any],
    context: Any = UNDEFINED,
) -> dict[str, Any]:
    """
    Keep the properties for which ``predicate(value, key, obj)`` is truthy.

    Args:
        obj: Object to read.
        predicate: Called with ``(value, key, obj)``.
        context: Passed to ``predicate`` as a leading argument when given.

    Returns:
        A new dict with the kept properties.
    """
    test = bind_callback(predicate, context)
    result: dict[str, Any] = {}
    for key, value in obj.items():
        if test(value, key, obj):
            result[key] = value
    return result


def map(
    obj: Mapping[str, Any],
    transform: Callable[..., Any],
    context: Any = UNDEFINED,
) -> dict[str, Any]:
    """
    Replace each value with ``transform(value, key, obj)``.

    Args:
        obj: Object to read.
        transform: Called with ``(value, key, obj)``.
        context: Passed to ``transform`` as a leading argument when given.

    Returns:
        A new dict with the same keys and transformed values.
    """
    apply = bind_callback(transform, context)
    return {key: apply(value, key, obj) for key, value in obj.items()}


def map_keys(
    obj: Mapping[str, Any],
    transform: Callable[..., Any],
    context: Any = UNDEFINED,
) -> dict[Any, Any]:
    """
    Replace each key with ``transform(key, value, obj)``.

    Note the argument order: key first, unlike filter() and map(). When two
    keys transform to the same new key the later one wins.

    Args:
        obj: Object to read.
        transform: Called with ``(key, value, obj)``.
        context: Passed to ``transform`` as a leading argument when given.

    Returns:
        A new dict with transformed keys and the original values.
    """
    apply = bind_callback(transform, context)
    result: dict[Any, Any] = {}
    for key, value in obj.items():
        result[apply(key, value, obj)] = value
    return result


def keys(obj: Mapping[str, Any]) -> list[str]:
    """All enumerable keys, own then inherited."""
    return list(obj.keys())


def values(obj: Mapping[str, Any]) -> list[Any]:
    """All enumerable values, in the same order as keys()."""
    return list(obj.values())


def is_empty(obj: Mapping[str, Any]) -> bool:
    """Check whether ``obj`` has no enumerable properties at all."""
    for _ in obj.keys():
        return False
    return True
