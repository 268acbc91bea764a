"""Base classes for the action-catalog plugin system.

ScoredAction   — An ActionDefinition plus a per-turn utility.
ActionProvider — Abstract base class; subclass and implement `provide()`.
ActionCatalog  — Candidate actions plus the facts gathered while building them.
PROVIDER_REGISTRY — Module-level list where providers are registered.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from roguesim.ai.planner import DEFAULT_MAX_EXPANSIONS, ActionDefinition, Predicate, State, plan

if TYPE_CHECKING:
    from roguesim.ai.context import AIContext

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Data types
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ScoredAction:
    """A candidate action for this turn. Utility is never persisted."""
    definition: ActionDefinition
    utility: float

    @property
    def kind(self):
        return self.definition.kind


# ---------------------------------------------------------------------------
# Abstract provider
# ---------------------------------------------------------------------------

class ActionProvider(ABC):
    """Base class for all action providers.

    Subclass this and implement:
      - name:                 unique provider identifier string
      - provide(ctx, catalog): add ScoredActions and facts to the catalog
    Providers only read the context; they never mutate the world.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique provider identifier (e.g. 'meditate', 'potables')."""

    @abstractmethod
    def provide(self, ctx: AIContext, catalog: ActionCatalog) -> None:
        """Append this provider's candidates (and any facts) to *catalog*."""


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

PROVIDER_REGISTRY: list[ActionProvider] = []


def register_provider(provider: ActionProvider) -> ActionProvider:
    """Register an ActionProvider instance in the global registry."""
    PROVIDER_REGISTRY.append(provider)
    return provider


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

class ActionCatalog:
    """Per-actor, per-turn set of scored candidates and current facts.

    Usage::

        catalog = ActionCatalog.build(ctx)
        best = catalog.find_max_utility()
        steps = catalog.plan()
    """

    __slots__ = ("_actions", "_facts")

    def __init__(self) -> None:
        self._actions: list[ScoredAction] = []
        self._facts: dict[Predicate, bool] = {}

    @classmethod
    def build(cls, ctx: AIContext, providers: Iterable[ActionProvider] | None = None) -> ActionCatalog:
        """Run every provider (registry order by default) against *ctx*."""
        catalog = cls()
        for provider in (PROVIDER_REGISTRY if providers is None else providers):
            provider.provide(ctx, catalog)
        return catalog

    def add(self, definition: ActionDefinition, utility: float) -> ScoredAction:
        scored = ScoredAction(definition, utility)
        self._actions.append(scored)
        return scored

    def set_fact(self, predicate: Predicate, value: bool) -> None:
        self._facts[predicate] = value

    @property
    def actions(self) -> list[ScoredAction]:
        return list(self._actions)

    @property
    def current_state(self) -> State:
        return State(self._facts)

    def definitions(self) -> list[ActionDefinition]:
        return [s.definition for s in self._actions]

    def find_max_utility(self) -> ScoredAction | None:
        """Highest-utility candidate; the earliest one wins exact ties."""
        best: ScoredAction | None = None
        for scored in self._actions:
            if best is None or scored.utility > best.utility:
                best = scored
        return best

    def plan(self, max_expansions: int = DEFAULT_MAX_EXPANSIONS) -> list[ActionDefinition] | None:
        """Plan toward the postconditions of the most useful candidate."""
        best = self.find_max_utility()
        if best is None:
            return []
        goal = best.definition.postconditions
        logger.debug("Goal %r from %r (utility %.3f)", goal, self.current_state, best.utility)
        return plan(self.current_state, goal, self.definitions(), max_expansions)

    def __len__(self) -> int:
        return len(self._actions)
