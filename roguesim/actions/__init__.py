"""Action system: game actions, turn results, and their handlers."""

from roguesim.actions.base import ActorRef, ExecutionContext, GameAction, TurnResult
from roguesim.actions.move import MoveAttackAction
from roguesim.actions.look import LookAction, PlayAction
from roguesim.actions.wait import PassAction, StopAction

__all__ = [
    "ActorRef",
    "ExecutionContext",
    "GameAction",
    "LookAction",
    "MoveAttackAction",
    "PassAction",
    "PlayAction",
    "StopAction",
    "TurnResult",
]
