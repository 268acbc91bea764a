"""Built-in ActionProvider implementations.

Each class is a self-contained source of candidates. To add a new one:
  1. Create a new ActionProvider subclass here (or in a separate file).
  2. Register it in ``registry.py``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from roguesim.ai.goals.base import ActionCatalog, ActionProvider
from roguesim.ai.perception import Perception
from roguesim.ai.planner import (
    UNDER_THREAT,
    ActionDefinition,
    Attack,
    DrinkPotable,
    Get,
    Meditate,
    Predicate,
    State,
)

if TYPE_CHECKING:
    from roguesim.ai.context import AIContext


class MeditateProvider(ActionProvider):
    """Baseline self-regulation: the calmer the actor, the less it wants this."""

    @property
    def name(self) -> str:
        return "meditate"

    def provide(self, ctx: AIContext, catalog: ActionCatalog) -> None:
        attrs = ctx.actor.attributes
        calmness = attrs.calmness if attrs is not None else 0.0
        catalog.add(
            ActionDefinition(
                kind=Meditate(),
                cost=ctx.config.meditate_cost,
                postconditions=State({UNDER_THREAT: False}),
            ),
            utility=1.0 - calmness,
        )


class PotableProvider(ActionProvider):
    """Drink / get pairs for every potable liquid the actor can reach."""

    @property
    def name(self) -> str:
        return "potables"

    def provide(self, ctx: AIContext, catalog: ActionCatalog) -> None:
        attrs = ctx.actor.attributes
        thirst = attrs.thirst if attrs is not None else 0.0
        cost = ctx.config.action_cost
        for item in Perception.potables(ctx.snapshot):
            if not ctx.can_reach(item.pos):
                continue
            have = Predicate.have(item.id)
            catalog.add(
                ActionDefinition(
                    kind=DrinkPotable(item.id),
                    cost=cost,
                    preconditions=State({have: True}),
                    postconditions=State({have: False}),
                ),
                utility=1.0 - thirst,
            )
            catalog.add(
                ActionDefinition(
                    kind=Get(item.id),
                    cost=cost,
                    preconditions=State({have: False}),
                    postconditions=State({have: True}),
                ),
                utility=0.0,
            )


class HostileProvider(ActionProvider):
    """Attack candidates for every live hostile; a visible one is a threat."""

    @property
    def name(self) -> str:
        return "hostiles"

    def provide(self, ctx: AIContext, catalog: ActionCatalog) -> None:
        cost = ctx.config.action_cost
        for other in Perception.hostiles(ctx.actor, ctx.snapshot, ctx.config.hostility_threshold):
            seen = ctx.can_see(other)
            if seen:
                catalog.set_fact(UNDER_THREAT, True)
            catalog.add(
                ActionDefinition(
                    kind=Attack(other.id),
                    cost=cost,
                    preconditions=State({UNDER_THREAT: True}),
                    postconditions=State({UNDER_THREAT: False}),
                ),
                utility=1.0 if seen else 0.0,
            )
