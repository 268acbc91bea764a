"""LookAction / PlayAction — cursor control for the human input layer.

Neither consumes the turn.
"""

from __future__ import annotations

import logging

from roguesim.actions.base import ExecutionContext, GameAction, TurnResult
from roguesim.ai.pathfinding import Pathfinder
from roguesim.core.enums import InputMode
from roguesim.utils.event_log import SimEvent

logger = logging.getLogger(__name__)


class LookAction:
    """Move the look cursor and trace the route from the actor to it.

    The first LOOK of a session places the cursor on the actor itself;
    later ones shift it by (dx, dy).
    """

    @staticmethod
    def execute(action: GameAction, ctx: ExecutionContext) -> TurnResult:
        world = ctx.world
        eid = action.actor.entity_id
        actor_pos = world.require_position(eid)

        if world.cursor is not None:
            dx, dy = action.delta
            cursor = world.cursor.delta(dx, dy)
        else:
            cursor = actor_pos

        pf = Pathfinder(world.grid, ctx.config.pathfinder_max_nodes)
        found = pf.find_path(actor_pos, cursor, world.occupancy.as_dict())

        world.cursor = cursor
        world.look_path = found[0] if found is not None else []
        world.input_mode = InputMode.LOOK

        logger.debug("[%s] look at %s (route: %d cells)", ctx.now, cursor, len(world.look_path))
        ctx.events.append(SimEvent(ctx.now, "look", f"looking at {cursor!r}", (eid,)))
        return TurnResult.cont()


class PlayAction:
    """Leave look mode: drop the cursor and its route."""

    @staticmethod
    def execute(action: GameAction, ctx: ExecutionContext) -> TurnResult:
        world = ctx.world
        world.cursor = None
        world.look_path = []
        world.input_mode = InputMode.PLAY
        ctx.events.append(SimEvent(ctx.now, "look", "look mode closed", (action.actor.entity_id,)))
        return TurnResult.cont()
