"""Tests for the discrete-event scheduler and the per-turn action queue."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from roguesim.actions.base import ActorRef, GameAction
from roguesim.core.enums import ActionType
from roguesim.core.time import ZERO, Time
from roguesim.engine.action_queue import ActionQueue
from roguesim.engine.event_queue import EventQueue


class TestEventOrdering:
    def test_pops_in_time_order(self):
        q: EventQueue[str] = EventQueue()
        q.schedule(Time(5, 0), "late")
        q.schedule(Time(1, 0), "early")
        q.schedule(Time(3, 0), "middle")
        assert [q.pop_next()[1] for _ in range(3)] == ["early", "middle", "late"]

    def test_fifo_among_equal_times(self):
        q: EventQueue[str] = EventQueue()
        q.schedule(Time(1, 0), "A")
        q.schedule(Time(1, 0), "B")
        q.schedule(Time(0, 500), "C")
        assert q.pop_next() == (Time(0, 500), "C")
        assert q.pop_next() == (Time(1, 0), "A")
        assert q.pop_next() == (Time(1, 0), "B")
        assert q.now == Time(1, 0)

    def test_empty_pop_returns_none(self):
        q: EventQueue[str] = EventQueue()
        assert q.pop_next() is None
        assert q.now == ZERO

    def test_payload_never_compared(self):
        q: EventQueue[object] = EventQueue()
        q.schedule(Time(1, 0), {"unorderable": 1})
        q.schedule(Time(1, 0), {"unorderable": 2})
        assert q.pop_next()[1] == {"unorderable": 1}


class TestClock:
    def test_clock_advances_on_pop(self):
        q: EventQueue[str] = EventQueue()
        q.schedule_after(Time(2, 0), "x")
        assert q.now == ZERO
        q.pop_next()
        assert q.now == Time(2, 0)

    def test_schedule_after_is_relative_to_now(self):
        q: EventQueue[str] = EventQueue()
        q.schedule(Time(4, 0), "first")
        q.pop_next()
        event = q.schedule_after(3, "second")
        assert event.time == Time(7, 0)

    def test_clock_never_goes_backwards(self):
        q: EventQueue[str] = EventQueue()
        q.schedule(Time(5, 0), "a")
        q.pop_next()
        q.schedule(Time(2, 0), "past")
        at, payload = q.pop_next()
        assert (at, payload) == (Time(2, 0), "past")
        assert q.now == Time(5, 0)

    def test_peek_and_len(self):
        q: EventQueue[str] = EventQueue()
        assert not q
        q.schedule(Time(1, 0), "a")
        assert q.peek() == (Time(1, 0), "a")
        assert len(q) == 1 and q.has_next
        q.clear()
        assert len(q) == 0


class TestActionQueue:
    def test_fifo(self):
        actor = ActorRef.player(1)
        aq = ActionQueue()
        first = GameAction(actor, 1, ActionType.LOOK, (0, 0))
        second = GameAction(actor, 1, ActionType.PASS)
        aq.extend([first, second])
        assert aq.pop() is first
        assert aq.pop() is second
        assert aq.pop() is None
        assert aq.empty
