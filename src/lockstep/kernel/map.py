"""Lazy multi-source map combinator."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Self

from lockstep.kernel.adapters import advance, as_invocable, get_iterator, invoke
from lockstep.kernel.ports import Invocable, IterableSource
from lockstep.kernel.result import EXHAUSTED, Step


class MapCombinator:
    """Apply a mapper to the lockstep next values of several cursors.

    The mapper is held by shared reference and only ever invoked. The
    cursors are obtained once at construction, in argument order, and are
    owned by the combinator from then on.

    Each step advances the cursors left to right. The first exhausted
    cursor ends the step without calling the mapper, and cursors before it
    stay advanced. The mapper may end the sequence itself by raising
    StopIteration.

    The combinator is single-pass and not re-entrant: a mapper that steps
    the same combinator has undefined results.
    """

    __slots__ = ("_mapper", "_sources", "_exhausted")

    _mapper: Invocable
    _sources: tuple[IterableSource, ...]
    _exhausted: bool

    def __new__(cls, function: Any, *iterables: Any) -> Self:
        sources = tuple(
            get_iterator(iterable, position)
            for position, iterable in enumerate(iterables)
        )
        self = super().__new__(cls)
        self._mapper = as_invocable(function)
        self._sources = sources
        self._exhausted = False
        return self

    @classmethod
    def new(cls, function: Any, iterables: Iterable[Any] = ()) -> Self:
        """Construct from a callable and an iterable of iterables."""
        return cls(function, *iterables)

    @property
    def mapper(self) -> Invocable:
        return self._mapper

    @property
    def sources(self) -> tuple[IterableSource, ...]:
        return self._sources

    def step(self) -> Step[Any]:
        """Advance once and report the outcome without raising.

        Once a step has ended, every later step ends too without touching
        the cursors or the mapper.
        """
        if self._exhausted:
            return Step.Ended()
        args: list[Any] = []
        try:
            for source in self._sources:
                value = advance(source)
                if value is EXHAUSTED:
                    self._exhausted = True
                    return Step.Ended()
                args.append(value)
            return Step.Produced(invoke(self._mapper, args))
        except StopIteration:
            # Exhaustion raised rather than returned, normally by the mapper.
            self._exhausted = True
            return Step.Ended()
        except Exception as exc:
            return Step.Failed(exc)

    def __next__(self) -> Any:
        return self.step().unwrap()

    def __iter__(self) -> Self:
        return self

    def __repr__(self) -> str:
        return f"<{type(self).__name__} mapper={self._mapper!r} sources={len(self._sources)}>"
