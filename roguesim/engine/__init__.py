"""Engine layer: event queue, action queue, turn engine."""

from roguesim.engine.action_queue import ActionQueue
from roguesim.engine.event_queue import EventQueue, ScheduledEvent
from roguesim.engine.turn_engine import TurnEngine, TurnGrant

__all__ = ["ActionQueue", "EventQueue", "ScheduledEvent", "TurnEngine", "TurnGrant"]
