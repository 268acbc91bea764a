"""PassAction / StopAction — the two verbs that never touch the map."""

from __future__ import annotations

import logging

from roguesim.actions.base import ExecutionContext, GameAction, TurnResult
from roguesim.utils.event_log import SimEvent

logger = logging.getLogger(__name__)


class PassAction:
    """Stateless handler for PASS: end the turn after the configured delay."""

    @staticmethod
    def execute(action: GameAction, ctx: ExecutionContext) -> TurnResult:
        eid = action.actor.entity_id
        ctx.events.append(SimEvent(ctx.now, "pass", f"{action.actor!r} passes", (eid,)))
        return TurnResult.end_turn(ctx.turn_delay)


class StopAction:
    """Stateless handler for STOP: end the turn without rescheduling."""

    @staticmethod
    def execute(action: GameAction, ctx: ExecutionContext) -> TurnResult:
        eid = action.actor.entity_id
        logger.info("[%s] %r stops; no further turns scheduled", ctx.now, action.actor)
        ctx.events.append(SimEvent(ctx.now, "stop", f"{action.actor!r} stops", (eid,)))
        return TurnResult.stop()
