"""MoveAttackAction — step into a neighbouring cell, or bump whoever is there.

The Collider classifies the target cell:

* EMPTY    → the actor moves, occupancy follows, the turn ends.
* WALL     → nothing happens and the turn is NOT consumed.
* OCCUPIED → an interaction placeholder; it still costs the turn.
"""

from __future__ import annotations

import logging

from roguesim.actions.base import ExecutionContext, GameAction, TurnResult
from roguesim.core.enums import OccupierKind
from roguesim.utils.event_log import SimEvent

logger = logging.getLogger(__name__)


class MoveAttackAction:
    """Stateless handler for MOVE_ATTACK actions."""

    @staticmethod
    def execute(action: GameAction, ctx: ExecutionContext) -> TurnResult:
        world = ctx.world
        eid = action.actor.entity_id
        dx, dy = action.delta
        origin = world.require_position(eid)
        target = origin.delta(dx, dy)

        occupier = ctx.collider.get(target)
        match occupier.kind:
            case OccupierKind.EMPTY:
                world.move_entity(eid, target)
                if action.actor.is_player:
                    attrs = world.require_attributes(eid)
                    world.player_fov.compute(target, attrs.vision_radius)
                logger.debug("[%s] %r moves %s -> %s", ctx.now, action.actor, origin, target)
                ctx.events.append(SimEvent(
                    ctx.now, "movement", f"{action.actor!r} moves to {target!r}", (eid,),
                ))
                return TurnResult.end_turn(ctx.turn_delay)

            case OccupierKind.WALL:
                logger.debug("[%s] %r blocked by wall at %s", ctx.now, action.actor, target)
                ctx.events.append(SimEvent(
                    ctx.now, "blocked", f"{action.actor!r} bumps into a wall at {target!r}", (eid,),
                ))
                return TurnResult.cont()

            case OccupierKind.OCCUPIED:
                other = occupier.entity_id
                logger.info("[%s] %r interacts with entity %d at %s", ctx.now, action.actor, other, target)
                ctx.events.append(SimEvent(
                    ctx.now, "interaction", f"{action.actor!r} interacts with entity {other}", (eid, other),
                ))
                return TurnResult.end_turn(ctx.turn_delay)

        raise ValueError(f"Unknown occupier kind {occupier.kind!r}")
