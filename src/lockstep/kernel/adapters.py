"""Adapters from plain Python objects to the combinator's capability ports.

Python iterables become IterableSource cursors and Python callables become
Invocables. Native Python capabilities take precedence over a structural
match on the ports.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any

from lockstep.kernel.errors import ConstructionError
from lockstep.kernel.ports import Invocable, IterableSource
from lockstep.kernel.result import EXHAUSTED, Signal


class IteratorSource:
    """IterableSource over a Python iterator."""

    __slots__ = ("_iterator",)

    def __init__(self, iterator: Iterator[Any]) -> None:
        self._iterator = iterator

    def advance(self) -> Any | Signal:
        try:
            return next(self._iterator)
        except StopIteration:
            return EXHAUSTED

    def __repr__(self) -> str:
        return f"IteratorSource({self._iterator!r})"


@dataclass(frozen=True)
class CallableInvocable:
    """Invocable over a Python callable.

    The wrapped object is not checked for callability up front; calling a
    non-callable fails at invocation time like any other mapper error.
    """

    fn: Callable[..., Any]

    def call(self, args: Sequence[Any]) -> Any:
        return self.fn(*args)


def _subclasses(value: Any, port: type) -> bool:
    """True when value's type names the port as a base class."""
    return port in type(value).__mro__


def _natively_iterable(value: Any) -> bool:
    cls = type(value)
    return getattr(cls, "__iter__", None) is not None or hasattr(cls, "__getitem__")


def get_iterator(value: Any, position: int = 0) -> IterableSource:
    """Adapt a value into a cursor.

    Python's own iteration protocol wins over a structural match, so an
    iterable that happens to define advance() is still iterated with iter().
    Only IterableSource subclasses, or objects that are not iterable at all,
    are used as cursors directly.

    Args:
        value: An IterableSource, or anything iter() accepts
        position: Argument index of value, reported on failure

    Returns:
        A fresh cursor positioned before the first value

    Raises:
        ConstructionError: If the value does not support iteration
    """
    if _subclasses(value, IterableSource):
        return value
    if not _natively_iterable(value) and isinstance(value, IterableSource):
        return value
    try:
        iterator = iter(value)
    except TypeError as exc:
        raise ConstructionError(
            f"'{type(value).__name__}' object does not support iteration "
            f"(argument {position})",
            raw_value=value,
            position=position,
        ) from exc
    return IteratorSource(iterator)


def as_invocable(value: Any) -> Invocable:
    """Adapt a value into an Invocable.

    Python callables are always called as fn(*args), even when they also
    carry a call attribute. Invocable subclasses and non-callable objects
    with a call() method pass through.
    """
    if _subclasses(value, Invocable):
        return value
    if not callable(value) and isinstance(value, Invocable):
        return value
    return CallableInvocable(value)


def advance(cursor: IterableSource) -> Any | Signal:
    """Request the next value from a cursor."""
    return cursor.advance()


def invoke(invocable: Invocable, args: Sequence[Any]) -> Any:
    """Call an Invocable with an ordered argument list.

    May raise StopIteration, which callers treat as exhaustion.
    """
    return invocable.call(args)
