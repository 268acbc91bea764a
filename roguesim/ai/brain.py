"""DecisionDriver — turns a non-player actor's turn into queued GameActions.

Pipeline per turn:
  1. ActionCatalog.build runs every registered provider against a read-only
     Snapshot, producing scored candidates plus current facts.
  2. The highest-utility candidate's postconditions become the goal and the
     GOAP planner searches for the cheapest sequence reaching it.
  3. Only the first planned step is translated into a GameAction.
  4. A trailing Pass is always appended so the actor's turn ends even when
     nothing actionable came out of planning.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from roguesim.actions.base import ActorRef, GameAction
from roguesim.ai.context import AIContext
from roguesim.ai.goals import ActionCatalog
from roguesim.ai.pathfinding import Pathfinder
from roguesim.ai.planner import ActionDefinition, Attack, Meditate
from roguesim.core.enums import ActionType

if TYPE_CHECKING:
    from roguesim.config import SimulationConfig
    from roguesim.core.models import Entity
    from roguesim.core.snapshot import Snapshot

logger = logging.getLogger(__name__)


class DecisionDriver:
    """Stateless decision engine for AI-controlled actors."""

    __slots__ = ("_config",)

    def __init__(self, config: SimulationConfig) -> None:
        self._config = config

    def decide(self, actor: Entity, snapshot: Snapshot) -> list[GameAction]:
        """Return the actions to enqueue for *actor*: first plan step + Pass."""
        ref = ActorRef.non_player(actor.id)
        turn = snapshot.player_turns
        ctx = AIContext(
            actor=actor,
            snapshot=snapshot,
            config=self._config,
            pathfinder=Pathfinder(snapshot.grid, self._config.pathfinder_max_nodes),
        )

        catalog = ActionCatalog.build(ctx)
        steps = catalog.plan(self._config.planner_max_expansions)

        actions: list[GameAction] = []
        if steps is None:
            logger.debug("[%s] %s has no plan; passing", snapshot.time, ref)
        elif steps:
            logger.debug("[%s] %s plan: %r", snapshot.time, ref, steps)
            first = self._translate(steps[0], ctx, ref, turn)
            if first is not None:
                actions.append(first)

        # Safety net: the turn always ends
        actions.append(GameAction(ref, turn, ActionType.PASS))
        return actions

    @staticmethod
    def _translate(step: ActionDefinition, ctx: AIContext, ref: ActorRef, turn: int) -> GameAction | None:
        match step.kind:
            case Meditate():
                return GameAction(ref, turn, ActionType.PASS)
            case Attack(target=target_id):
                target = ctx.snapshot.entities.get(target_id)
                if target is None:
                    return None
                found = ctx.path_to(target.pos)
                if found is None:
                    logger.debug("[%s] %s: no path to %d", ctx.snapshot.time, ref, target_id)
                    return None
                cells, _ = found
                if len(cells) < 2:
                    return None
                here, nxt = cells[0], cells[1]
                return GameAction(ref, turn, ActionType.MOVE_ATTACK, (nxt.x - here.x, nxt.y - here.y))
            case _:
                # Get / DrinkPotable have no world effect yet
                return None
