"""FIFO action queue for the actor currently holding the turn."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from roguesim.actions.base import GameAction


class ActionQueue:
    """Single-producer, single-consumer FIFO of GameActions.

    The input layer or the DecisionDriver pushes; the TurnEngine drains one
    at a time. Cleared whenever a turn ends, so leftovers never carry over.
    """

    __slots__ = ("_queue",)

    def __init__(self) -> None:
        self._queue: deque[GameAction] = deque()

    def push(self, action: GameAction) -> None:
        self._queue.append(action)

    def extend(self, actions: list[GameAction]) -> None:
        self._queue.extend(actions)

    def pop(self) -> GameAction | None:
        """Remove and return the head action, or None if the queue is empty."""
        if not self._queue:
            return None
        return self._queue.popleft()

    def clear(self) -> None:
        self._queue.clear()

    @property
    def empty(self) -> bool:
        return not self._queue

    def __len__(self) -> int:
        return len(self._queue)
