from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from lockstep import EXHAUSTED, IterableSource, Invocable


@dataclass
class RecordingSource(IterableSource):
    """Cursor over a fixed list that counts every advance, including exhausted ones."""

    values: list[Any]
    advances: int = 0

    def advance(self) -> Any:
        self.advances += 1
        if self.advances > len(self.values):
            return EXHAUSTED
        return self.values[self.advances - 1]


@dataclass
class RecordingMapper(Invocable):
    """Mapper that remembers its calls and delegates to fn."""

    fn: Any = None
    calls: list[tuple[Any, ...]] = field(default_factory=list)

    def call(self, args: Sequence[Any]) -> Any:
        self.calls.append(tuple(args))
        if self.fn is None:
            return tuple(args)
        return self.fn(*args)


class CountingIterable:
    """Iterable that counts how many times iter() was requested on it."""

    def __init__(self, values: list[Any]) -> None:
        self.values = values
        self.iter_calls = 0

    def __iter__(self):
        self.iter_calls += 1
        return iter(self.values)


class NotIterable:
    def __repr__(self) -> str:
        return "NotIterable()"


class BrokenIterable:
    """Iterable whose __iter__ hook fails with a non-TypeError."""

    def __iter__(self):
        raise RuntimeError("iteration hook failed")


def stop_after(limit: int):
    """Mapper that raises StopIteration on its (limit + 1)th call."""
    calls = {"n": 0}

    def mapper(*args: Any) -> Any:
        calls["n"] += 1
        if calls["n"] > limit:
            raise StopIteration
        return args

    return mapper
