"""Tagged outcome of a single combinator step."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Literal, TypeVar

V = TypeVar("V")


class Signal(Enum):
    """Protocol-level markers passed between cursors and the combinator."""

    EXHAUSTED = "exhausted"

    def __repr__(self) -> str:
        return f"<{self.name}>"


EXHAUSTED = Signal.EXHAUSTED


@dataclass(frozen=True)
class Step(Generic[V]):
    """
    Outcome of advancing a combinator once.

    Kinds:
    - produced: The mapper returned a value
    - ended: A cursor, or the mapper itself, signalled exhaustion
    - failed: The mapper or a cursor raised; the exception is carried unchanged
    """

    kind: Literal["produced", "ended", "failed"]
    value: V | None = None
    error: BaseException | None = None

    @staticmethod
    def Produced(value: Any) -> Step[Any]:
        return Step(kind="produced", value=value)

    @staticmethod
    def Ended() -> Step[Any]:
        return Step(kind="ended")

    @staticmethod
    def Failed(error: BaseException) -> Step[Any]:
        if error is None:
            raise ValueError("Failed step requires an error")
        return Step(kind="failed", error=error)

    @property
    def produced(self) -> bool:
        return self.kind == "produced"

    @property
    def ended(self) -> bool:
        return self.kind == "ended"

    @property
    def failed(self) -> bool:
        return self.kind == "failed"

    def unwrap(self) -> V:
        """Return the produced value, or translate the step into Python's iterator protocol.

        Raises:
            StopIteration: If the step ended
            BaseException: The carried error, unmodified, if the step failed
        """
        if self.error is not None:
            raise self.error
        if self.kind == "ended":
            raise StopIteration
        return self.value  # type: ignore[return-value]
