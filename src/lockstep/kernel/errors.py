"""Error types for combinator construction."""

from __future__ import annotations


class ConstructionError(TypeError):
    """Error raised when an argument cannot be adapted into a cursor.

    Preserves the offending value and its argument position so callers
    can tell which iterable was rejected.
    """

    def __init__(self, message: str, raw_value: object, position: int) -> None:
        self.raw_value = raw_value
        self.position = position
        super().__init__(message)

    def __repr__(self) -> str:
        return (
            f"ConstructionError({super().__repr__()}, "
            f"raw_value={self.raw_value!r}, position={self.position})"
        )
