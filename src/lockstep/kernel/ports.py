"""Capability protocols consumed by the combinator - pure abstractions."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

from lockstep.kernel.result import Signal


@runtime_checkable
class IterableSource(Protocol):
    """Stateful cursor over a sequence."""

    def advance(self) -> Any | Signal:
        """Return the next value, or EXHAUSTED when no values remain."""
        ...


@runtime_checkable
class Invocable(Protocol):
    """Anything callable with an ordered argument list.

    Raising StopIteration from call() means "no further values".
    """

    def call(self, args: Sequence[Any]) -> Any: ...
