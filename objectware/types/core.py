"""
Core types for object traversal.

LayeredObject models an object whose properties come from several layers:
its own properties first, then a chain of prototypes consulted in order.
Each own property carries a visibility flag; hidden (non-enumerable)
properties can be read by key but are skipped during iteration.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any

from objectware.types.errors import (
    ErrorCode,
    ErrorContext,
    PropertyError,
    PrototypeError,
)
from objectware.utils.logger import logger


class LayeredObject(MutableMapping[str, Any]):
    """A mapping with its own properties plus an optional prototype chain.

    The prototype may be None, a plain Mapping (every key enumerable, end of
    the chain) or another LayeredObject.

    Iteration yields enumerable own keys in insertion order, then the
    prototype's enumerable keys, skipping any key already defined on a
    nearer layer whether or not that nearer definition is enumerable.
    """

    __slots__ = ("_properties", "_hidden", "_prototype")

    def __init__(
        self,
        properties: Mapping[str, Any] | None = None,
        prototype: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        self._properties: dict[str, Any] = {}
        self._hidden: set[str] = set()
        self._prototype: Mapping[str, Any] | None = None
        self.prototype = prototype
        if properties is not None:
            for key, value in properties.items():
                self.define_property(key, value)
        for key, value in kwargs.items():
            self.define_property(key, value)

    @classmethod
    def create(
        cls,
        prototype: Mapping[str, Any] | None,
        properties: Mapping[str, Any] | None = None,
    ) -> LayeredObject:
        """Create an object that inherits from ``prototype``."""
        return cls(properties, prototype=prototype)

    # ------------------------------------------------------------------
    # Prototype chain
    # ------------------------------------------------------------------

    @property
    def prototype(self) -> Mapping[str, Any] | None:
        return self._prototype

    @prototype.setter
    def prototype(self, prototype: Mapping[str, Any] | None) -> None:
        if prototype is not None and not isinstance(prototype, Mapping):
            logger.debug(
                "Rejected prototype of type {}", type(prototype).__name__
            )
            raise PrototypeError(
                f"Prototype must be a mapping or None, not {type(prototype).__name__}",
                context=ErrorContext(operation="set_prototype"),
            )

        layer = prototype
        while isinstance(layer, LayeredObject):
            if layer is self:
                logger.debug("Rejected cyclic prototype assignment")
                raise PrototypeError(
                    "Cyclic prototype chain",
                    code=ErrorCode.PROTOTYPE_CYCLE,
                    user_message="Prototype chain would contain a cycle.",
                    context=ErrorContext(operation="set_prototype"),
                )
            layer = layer._prototype

        self._prototype = prototype
        if prototype is not None:
            logger.debug("Prototype set to {}", type(prototype).__name__)

    def _layers(self) -> Iterator[Mapping[str, Any]]:
        """Yield each layer in the chain, most-derived first."""
        layer: Mapping[str, Any] | None = self
        while layer is not None:
            yield layer
            layer = layer._prototype if isinstance(layer, LayeredObject) else None

    # ------------------------------------------------------------------
    # Own properties
    # ------------------------------------------------------------------

    def define_property(self, key: str, value: Any, enumerable: bool = True) -> None:
        """Define or redefine an own property with an explicit visibility flag."""
        if not isinstance(key, str):
            raise PropertyError(
                f"Property keys must be strings, not {type(key).__name__}",
                context=ErrorContext(operation="define_property", key=repr(key)),
            )
        self._properties[key] = value
        if enumerable:
            self._hidden.discard(key)
        else:
            self._hidden.add(key)

    def has_own(self, key: str) -> bool:
        return key in self._properties

    def is_enumerable(self, key: str) -> bool:
        """Check whether ``key`` is an enumerable own property."""
        return key in self._properties and key not in self._hidden

    def own_keys(self) -> list[str]:
        """Enumerable own keys in insertion order."""
        return [key for key in self._properties if key not in self._hidden]

    def get_own_property_names(self) -> list[str]:
        """All own keys, hidden ones included."""
        return list(self._properties)

    # ------------------------------------------------------------------
    # Mapping protocol
    # ------------------------------------------------------------------

    def __getitem__(self, key: str) -> Any:
        for layer in self._layers():
            if isinstance(layer, LayeredObject):
                if key in layer._properties:
                    return layer._properties[key]
            elif key in layer:
                return layer[key]
        raise KeyError(key)

    def __setitem__(self, key: str, value: Any) -> None:
        if key in self._properties:
            self._properties[key] = value
        else:
            self.define_property(key, value)

    def __delitem__(self, key: str) -> None:
        del self._properties[key]
        self._hidden.discard(key)

    def __iter__(self) -> Iterator[str]:
        seen: set[str] = set()
        for layer in self._layers():
            if isinstance(layer, LayeredObject):
                for key in layer._properties:
                    if key in seen:
                        continue
                    seen.add(key)
                    if key not in layer._hidden:
                        yield key
            else:
                for key in layer:
                    if key not in seen:
                        seen.add(key)
                        yield key

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        own = {key: self._properties[key] for key in self.own_keys()}
        if self._prototype is None:
            return f"LayeredObject({own!r})"
        return f"LayeredObject({own!r}, prototype={self._prototype!r})"
