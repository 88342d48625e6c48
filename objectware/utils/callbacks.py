"""Callback binding for the traversal functions.

Callbacks are called with a fixed argument tuple, e.g. ``(value, key, obj)``.
Two adjustments happen before the call:

- Context: when a context is supplied it is passed as the leading
  argument, so ``filter(obj, Checker.accepts, checker)`` calls
  ``Checker.accepts(checker, value, key, obj)``.
- Arity: a callback only receives as many positional arguments as its
  signature accepts, so ``str.upper`` can be handed just the key and
  ``bool`` or ``str`` just the value.
"""

from __future__ import annotations

import functools
import inspect
from typing import Any, Callable

from objectware.constants import UNDEFINED
from objectware.utils.logger import logger


def _wrapped_type(fn: Callable[..., Any]) -> type | None:
    """The class behind ``fn`` (or behind a partial of it), if any."""
    target = fn.func if isinstance(fn, functools.partial) else fn
    return target if isinstance(target, type) else None


def positional_arity(fn: Callable[..., Any]) -> int | None:
    """Count the positional parameters ``fn`` accepts.

    Builtin types (``str``, ``int``, ``bool``) are conversions and take one
    argument; with a context bound in front that is the context plus one.
    Returns None when ``fn`` takes ``*args`` or, for anything other than a
    class, its signature cannot be inspected; such callables receive every
    argument.
    """
    cls = _wrapped_type(fn)
    if cls is not None and cls.__module__ == "builtins":
        return 1

    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        if cls is not None:
            logger.trace("No signature for class {!r}, passing one argument", cls)
            return 1
        logger.trace("No signature for {!r}, passing all arguments", fn)
        return None

    count = 0
    for param in signature.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return None
        if param.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            count += 1
    return count


def bind_callback(
    fn: Callable[..., Any],
    context: Any = UNDEFINED,
) -> Callable[..., Any]:
    """Return a callable that applies ``fn`` with context and arity fitting.

    Args:
        fn: The user callback.
        context: Value passed as the leading argument. Omit (or pass
            UNDEFINED) for no context; None is a valid context.

    Returns:
        A function taking the full argument tuple.
    """
    bound = fn if context is UNDEFINED else functools.partial(fn, context)
    arity = positional_arity(bound)

    if arity is None:
        return bound

    def call(*args: Any) -> Any:
        return bound(*args[:arity])

    return call
