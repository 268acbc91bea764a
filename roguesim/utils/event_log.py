"""Thread-safe log of game events exposed via the API."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass

from roguesim.core.time import Time


@dataclass(frozen=True, slots=True)
class SimEvent:
    """A single game event for the API event feed."""

    time: Time
    category: str
    message: str
    entity_ids: tuple[int, ...] = ()  # IDs of entities involved in this event


class EventLog:
    """Unbounded event log. The engine appends; readers copy a slice.

    All events are kept until manually cleared via ``clear()``.
    Thread-safe via a simple lock — the HTTP layer reads while the engine
    writes.
    """

    __slots__ = ("_buffer", "_lock")

    def __init__(self) -> None:
        self._buffer: deque[SimEvent] = deque()
        self._lock = threading.Lock()

    def append(self, event: SimEvent) -> None:
        with self._lock:
            self._buffer.append(event)

    def append_many(self, events: list[SimEvent]) -> None:
        with self._lock:
            self._buffer.extend(events)

    def since(self, time: Time) -> list[SimEvent]:
        """Return all events stamped at or after *time*."""
        with self._lock:
            return [e for e in self._buffer if e.time >= time]

    def latest(self, count: int = 50) -> list[SimEvent]:
        """Return the *count* most recent events."""
        with self._lock:
            items = list(self._buffer)
        return items[-count:]

    def clear(self) -> None:
        with self._lock:
            self._buffer.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._buffer)
