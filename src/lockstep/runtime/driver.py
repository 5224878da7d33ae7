"""Drive a combinator step by step and collect what it produces."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any

from lockstep.kernel.map import MapCombinator
from lockstep.kernel.result import Step
from lockstep.kernel.trace import Trace


@dataclass(frozen=True)
class DriveConfig:
    max_steps: int | None = None


@dataclass(frozen=True)
class DriveResult:
    """
    Outcome of draining a combinator.

    Attributes:
        values: Every produced value, in order
        final: The ended/failed step that stopped the drain, or None when
            max_steps was reached first
        steps: Number of step calls made
    """

    values: tuple[Any, ...]
    final: Step[Any] | None
    steps: int

    @property
    def exhausted(self) -> bool:
        return self.final is not None and self.final.ended

    @property
    def error(self) -> BaseException | None:
        if self.final is None:
            return None
        return self.final.error


def drain(
    combinator: MapCombinator,
    config: DriveConfig | None = None,
    trace: Trace | None = None,
) -> DriveResult:
    """Step a combinator until it ends, fails, or max_steps values are produced.

    Failures are reported in DriveResult.final rather than raised.

    Args:
        combinator: The combinator to drive
        config: Step limit, unbounded by default
        trace: Optional trace receiving drain_begin, step and drain_end events

    Returns:
        DriveResult with the produced values and the stopping step
    """
    config = config or DriveConfig()
    if config.max_steps is not None and config.max_steps <= 0:
        raise ValueError("max_steps must be positive")

    drain_id: int | None = None
    if trace is not None:
        drain_id = trace.record(
            "drain_begin",
            info={"sources": len(combinator.sources), "max_steps": config.max_steps},
        )

    values: list[Any] = []
    final: Step[Any] | None = None
    steps = 0
    try:
        while config.max_steps is None or len(values) < config.max_steps:
            start_time = time.perf_counter()
            step = combinator.step()
            duration_ms = (time.perf_counter() - start_time) * 1000
            steps += 1

            if trace is not None:
                info: dict[str, Any] = {"index": steps - 1, "kind": step.kind}
                if step.failed:
                    info["error"] = repr(step.error)
                trace.record("step", info=info, parent_id=drain_id, duration_ms=duration_ms)

            if not step.produced:
                final = step
                break
            values.append(step.value)
    finally:
        if trace is not None and drain_id is not None:
            trace.record(
                "drain_end",
                info={"steps": steps, "produced": len(values)},
                parent_id=drain_id,
            )

    return DriveResult(values=tuple(values), final=final, steps=steps)
