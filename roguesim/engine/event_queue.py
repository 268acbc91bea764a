"""Discrete-event scheduler: a min-heap of events keyed by (time, generation)."""

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from roguesim.core.time import ZERO, Time

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, slots=True, order=True)
class ScheduledEvent:
    """An event owned by the EventQueue from insertion until popped.

    Ordering uses ``(time, generation)`` only; the payload is never compared.
    """

    time: Time
    generation: int
    payload: Any = field(compare=False)


class EventQueue(Generic[T]):
    """Priority queue with strict FIFO among equal-time events.

    Every insertion takes a fresh generation number, so two events scheduled
    for the same instant always pop in insertion order.
    """

    __slots__ = ("_heap", "_generation", "_now")

    def __init__(self) -> None:
        self._heap: list[ScheduledEvent] = []
        self._generation: int = 0
        self._now: Time = ZERO

    @property
    def now(self) -> Time:
        """Current clock; advances only when an event is popped."""
        return self._now

    def schedule(self, at: Time, payload: T) -> ScheduledEvent:
        if at < self._now:
            logger.warning("[%s] event scheduled in the past at %s: %r", self._now, at, payload)
        self._generation += 1
        event = ScheduledEvent(at, self._generation, payload)
        heapq.heappush(self._heap, event)
        logger.debug("[%s] schedule at %s: %r", self._now, at, payload)
        return event

    def schedule_after(self, delay: Time | int, payload: T) -> ScheduledEvent:
        return self.schedule(self._now + delay, payload)

    def pop_next(self) -> tuple[Time, T] | None:
        """Remove the earliest event; None means nothing is left to run."""
        if not self._heap:
            return None
        event = heapq.heappop(self._heap)
        # Never move the clock backwards
        if event.time > self._now:
            self._now = event.time
        return event.time, event.payload

    def peek(self) -> tuple[Time, T] | None:
        if not self._heap:
            return None
        event = self._heap[0]
        return event.time, event.payload

    @property
    def has_next(self) -> bool:
        return bool(self._heap)

    def clear(self) -> None:
        self._heap.clear()

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
