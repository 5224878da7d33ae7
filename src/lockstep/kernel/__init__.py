"""Kernel layer - the map combinator and the abstractions it consumes."""

from lockstep.kernel.errors import ConstructionError
from lockstep.kernel.result import EXHAUSTED, Signal, Step
from lockstep.kernel.ports import Invocable, IterableSource
from lockstep.kernel.trace import Evidence, Trace
from lockstep.kernel.adapters import (
    CallableInvocable,
    IteratorSource,
    advance,
    as_invocable,
    get_iterator,
    invoke,
)
from lockstep.kernel.map import MapCombinator

__all__ = [
    "MapCombinator",
    "Step",
    "Signal",
    "EXHAUSTED",
    "ConstructionError",
    # Ports
    "IterableSource",
    "Invocable",
    # Adapters
    "IteratorSource",
    "CallableInvocable",
    "get_iterator",
    "as_invocable",
    "advance",
    "invoke",
    # Tracing
    "Evidence",
    "Trace",
]
