"""Type registry implementation."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel

from lockstep.kernel.map import MapCombinator

logger = logging.getLogger(__name__)

ITERATOR_SLOTS: tuple[str, ...] = ("__new__", "__next__", "__iter__")

MAP_DOC = (
    "map(func, *iterables) --> map object\n\n"
    "Make an iterator that computes the function using arguments from\n"
    "each of the iterables.  Stops when the shortest iterable is exhausted."
)


class TypeDefinition(BaseModel):
    """Descriptive metadata for a registered type."""
    name: str
    doc: str = ""
    slots: tuple[str, ...] = ITERATOR_SLOTS


class TypeRegistry:
    """Registry mapping type names to classes and their protocol entry points.

    Each registration also carries the type's doc string; doc() is the
    source of truth for it.
    """

    def __init__(self) -> None:
        self._types: dict[str, type] = {}
        self._definitions: dict[str, TypeDefinition] = {}
        self._slots: dict[str, dict[str, Callable[..., Any]]] = {}

    def register(self, definition: TypeDefinition, cls: type) -> None:
        """Register a class under definition.name with every slot it declares."""
        entry_points: dict[str, Callable[..., Any]] = {}
        for slot in definition.slots:
            fn = getattr(cls, slot, None)
            if fn is None:
                raise ValueError(f"Type '{definition.name}' is missing slot '{slot}'")
            entry_points[slot] = fn

        self._types[definition.name] = cls
        self._definitions[definition.name] = definition
        self._slots[definition.name] = entry_points
        logger.debug("registered type %r with slots %s", definition.name, list(entry_points))

    def get(self, name: str) -> type:
        if name not in self._types:
            raise KeyError(f"Type '{name}' not found in registry")
        return self._types[name]

    def get_definition(self, name: str) -> TypeDefinition | None:
        return self._definitions.get(name)

    def slot(self, name: str, slot: str) -> Callable[..., Any]:
        """Return the entry point registered for slot on type name."""
        entry_points = self._slots.get(name)
        if entry_points is None:
            raise KeyError(f"Type '{name}' not found in registry")
        if slot not in entry_points:
            raise KeyError(f"Type '{name}' has no slot '{slot}'")
        return entry_points[slot]

    def new(self, name: str, *args: Any) -> Any:
        """Construct an instance through the registered __new__ entry point."""
        cls = self.get(name)
        return self.slot(name, "__new__")(cls, *args)

    def doc(self, name: str) -> str:
        """Return the documentation registered for a type.

        This is the host-facing doc metadata and is independent of the
        class's own __doc__, which documents the implementation.
        """
        definition = self.get_definition(name)
        if definition is None:
            raise KeyError(f"Type '{name}' not found in registry")
        return definition.doc

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def names(self) -> list[str]:
        return list(self._types)


def builtin_registry() -> TypeRegistry:
    """Create a registry with the builtin iterator types."""
    registry = TypeRegistry()
    registry.register(TypeDefinition(name="map", doc=MAP_DOC), MapCombinator)
    return registry
