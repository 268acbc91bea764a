"""Goal-oriented action planner (GOAP).

Symbolic world states are immutable, hashable mappings from ``Predicate``
to ``bool``. An ``ActionDefinition`` carries a cost plus precondition and
postcondition states; applying an action overwrites the postcondition keys.

``plan()`` runs a uniform-cost search from the current state and returns the
cheapest action sequence whose chained postconditions satisfy every key of
the goal. Equal-cost candidates are resolved by discovery order, so the same
inputs always give the same plan.

Key semantics:
  - a goal key is satisfied only when present in the state with the same
    value (keys the goal does not mention are unconstrained);
  - a precondition key absent from the state is read as False, and logged at
    DEBUG since it usually means the snapshot never set that fact.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Mapping, Sequence, Union

from roguesim.core.enums import PredicateKind

logger = logging.getLogger(__name__)

DEFAULT_MAX_EXPANSIONS = 10_000


# ---------------------------------------------------------------------------
# Predicates & states
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True, order=True)
class Predicate:
    """A symbolic fact key: ``Have(entity)`` or ``UnderThreat``."""

    kind: PredicateKind
    target: int = 0

    @classmethod
    def have(cls, entity_id: int) -> Predicate:
        return cls(PredicateKind.HAVE, entity_id)

    def __repr__(self) -> str:
        if self.kind == PredicateKind.HAVE:
            return f"Have({self.target})"
        return "UnderThreat"


UNDER_THREAT = Predicate(PredicateKind.UNDER_THREAT)


class State(Mapping[Predicate, bool]):
    """Immutable, key-ordered mapping of predicates to booleans.

    Equality and hashing are structural, so states can key the planner's
    visited tables.
    """

    __slots__ = ("_items", "_index", "_hash")

    def __init__(self, facts: Mapping[Predicate, bool] | Iterable[tuple[Predicate, bool]] = ()) -> None:
        index = dict(facts)
        self._items: tuple[tuple[Predicate, bool], ...] = tuple(sorted(index.items()))
        self._index: dict[Predicate, bool] = dict(self._items)
        self._hash = hash(self._items)

    # -- Mapping protocol --

    def __getitem__(self, key: Predicate) -> bool:
        return self._index[key]

    def __iter__(self) -> Iterator[Predicate]:
        return (k for k, _ in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, other: object) -> bool:
        if isinstance(other, State):
            return self._items == other._items
        return NotImplemented

    def __repr__(self) -> str:
        body = ", ".join(f"{k!r}={v}" for k, v in self._items)
        return f"State({{{body}}})"

    # -- planner helpers --

    def apply(self, effects: State) -> State:
        """Return a new state with every key of *effects* overwritten."""
        if not effects:
            return self
        merged = dict(self._index)
        merged.update(effects._index)
        return State(merged)

    def satisfies(self, goal: State) -> bool:
        """True if every goal key is present here with the same value."""
        index = self._index
        for key, value in goal._items:
            if key not in index or index[key] != value:
                return False
        return True

    def meets(self, preconditions: State) -> bool:
        """True if every precondition holds, absent keys reading as False."""
        index = self._index
        for key, value in preconditions._items:
            if key not in index:
                logger.debug("Precondition %r absent from %r; treating as False", key, self)
                if value:
                    return False
            elif index[key] != value:
                return False
        return True


EMPTY_STATE = State()


# ---------------------------------------------------------------------------
# Action kinds (tagged union)
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Meditate:
    """Calm down; clears the threat flag."""

    def __repr__(self) -> str:
        return "Meditate"


@dataclass(frozen=True, slots=True)
class DrinkPotable:
    target: int

    def __repr__(self) -> str:
        return f"DrinkPotable({self.target})"


@dataclass(frozen=True, slots=True)
class Get:
    target: int

    def __repr__(self) -> str:
        return f"Get({self.target})"


@dataclass(frozen=True, slots=True)
class Attack:
    target: int

    def __repr__(self) -> str:
        return f"Attack({self.target})"


ActionKind = Union[Meditate, DrinkPotable, Get, Attack]


@dataclass(frozen=True, slots=True)
class ActionDefinition:
    """A plannable action: identity, edge cost and symbolic conditions."""

    kind: ActionKind
    cost: int = 1
    preconditions: State = field(default=EMPTY_STATE)
    postconditions: State = field(default=EMPTY_STATE)

    def __post_init__(self) -> None:
        if self.cost < 0:
            raise ValueError(f"Action cost must be non-negative, got {self.cost} for {self.kind!r}")

    def __repr__(self) -> str:
        return f"{self.kind!r}[cost={self.cost}]"


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------

def plan(
    current: State,
    goal: State,
    actions: Sequence[ActionDefinition],
    max_expansions: int = DEFAULT_MAX_EXPANSIONS,
) -> list[ActionDefinition] | None:
    """Cheapest action sequence taking *current* to a state satisfying *goal*.

    Returns ``[]`` when there is nothing to do (no actions, or the goal
    already holds) and None when the goal is unreachable or the expansion
    budget runs out. Never raises for unreachable goals.
    """
    if not actions or current.satisfies(goal):
        return []

    counter = itertools.count()
    # Frontier entries: (accumulated cost, discovery order, state)
    frontier: list[tuple[int, int, State]] = [(0, next(counter), current)]
    best_cost: dict[State, int] = {current: 0}
    came_from: dict[State, tuple[State, ActionDefinition]] = {}
    closed: set[State] = set()
    expansions = 0

    while frontier:
        cost, _, state = heapq.heappop(frontier)
        if state in closed:
            continue
        if state.satisfies(goal):
            return _reconstruct(came_from, state)
        closed.add(state)

        expansions += 1
        if expansions > max_expansions:
            logger.warning(
                "Planner gave up after %d expansions (goal %r, %d actions)",
                max_expansions, goal, len(actions),
            )
            return None

        for action in actions:
            if not state.meets(action.preconditions):
                continue
            nxt = state.apply(action.postconditions)
            if nxt in closed:
                continue
            new_cost = cost + action.cost
            # Strict improvement only: first-found wins among equal costs
            if new_cost < best_cost.get(nxt, new_cost + 1):
                best_cost[nxt] = new_cost
                came_from[nxt] = (state, action)
                heapq.heappush(frontier, (new_cost, next(counter), nxt))

    logger.debug("No plan from %r to %r", current, goal)
    return None


def _reconstruct(
    came_from: dict[State, tuple[State, ActionDefinition]],
    state: State,
) -> list[ActionDefinition]:
    steps: list[ActionDefinition] = []
    while state in came_from:
        state, action = came_from[state]
        steps.append(action)
    steps.reverse()
    return steps


def plan_cost(steps: Iterable[ActionDefinition]) -> int:
    return sum(a.cost for a in steps)
