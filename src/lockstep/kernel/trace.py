"""Runtime trace infrastructure for driving combinators.

Trace is runtime infrastructure: it observes steps taken by a driver and
never participates in what a combinator produces.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any


@dataclass(frozen=True)
class Evidence:
    """A single recorded runtime event."""

    action: str
    id: int = 0
    parent_id: int | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    info: dict[str, Any] = field(default_factory=dict)
    duration_ms: float | None = None


class Trace:
    """Append-only event log for one or more drain runs.

    A disabled trace drops every record() call, so drivers can accept one
    unconditionally.
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._events: list[Evidence] = []

    def record(
        self,
        action: str,
        info: dict[str, Any] | None = None,
        parent_id: int | None = None,
        duration_ms: float | None = None,
    ) -> int | None:
        """Record an event.

        Returns:
            Event ID for linking child events, or None if tracing disabled
        """
        if not self.enabled:
            return None
        event_id = len(self._events)
        self._events.append(
            Evidence(
                action=action,
                id=event_id,
                parent_id=parent_id,
                info=info or {},
                duration_ms=duration_ms,
            )
        )
        return event_id

    def get_events(self) -> list[Evidence]:
        return list(self._events)

    def find_all(self, action: str | None = None, **info: Any) -> list[Evidence]:
        """Find events by action name and/or info entries.

        Example:
            trace.find_all("step", kind="ended")
        """
        return [
            ev
            for ev in self._events
            if (action is None or ev.action == action)
            and all(ev.info.get(k) == v for k, v in info.items())
        ]

    def __len__(self) -> int:
        return len(self._events)
