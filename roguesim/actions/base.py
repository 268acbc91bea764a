"""Game actions — the universal currency between input/AI and the TurnEngine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from roguesim.core.enums import ActionType, ActorKind, TurnStatus
from roguesim.core.time import ONE_TICK, Time

if TYPE_CHECKING:
    from roguesim.config import SimulationConfig
    from roguesim.core.world_state import WorldState
    from roguesim.systems.occupancy import Collider
    from roguesim.utils.event_log import SimEvent

# Verbs that carry a (dx, dy) payload
DIRECTIONAL_VERBS = frozenset({ActionType.MOVE_ATTACK, ActionType.LOOK})


@dataclass(frozen=True, slots=True)
class ActorRef:
    """Tagged reference to whoever holds (or will hold) a turn."""

    entity_id: int
    kind: ActorKind

    @classmethod
    def player(cls, entity_id: int) -> ActorRef:
        return cls(entity_id, ActorKind.PLAYER)

    @classmethod
    def non_player(cls, entity_id: int) -> ActorRef:
        return cls(entity_id, ActorKind.NON_PLAYER)

    @property
    def is_player(self) -> bool:
        return self.kind == ActorKind.PLAYER

    def __repr__(self) -> str:
        tag = "Player" if self.is_player else "NonPlayer"
        return f"{tag}({self.entity_id})"


@dataclass(frozen=True, slots=True)
class GameAction:
    """One queued action for the actor holding the turn.

    ``turn`` is stamped with the player-turn counter at enqueue time.
    """

    actor: ActorRef
    turn: int
    verb: ActionType
    delta: tuple[int, int] | None = None

    def __post_init__(self) -> None:
        if self.verb in DIRECTIONAL_VERBS and self.delta is None:
            raise ValueError(f"{self.verb.name} requires a (dx, dy) delta")
        if self.verb not in DIRECTIONAL_VERBS and self.delta is not None:
            raise ValueError(f"{self.verb.name} does not take a delta")
        # One king move at a time
        if self.verb == ActionType.MOVE_ATTACK and max(abs(self.delta[0]), abs(self.delta[1])) != 1:
            raise ValueError(f"MOVE_ATTACK delta must reach a neighbouring cell, got {self.delta}")

    def __repr__(self) -> str:
        payload = f"{self.delta}" if self.delta is not None else ""
        return f"Action({self.actor!r}, turn={self.turn}, {self.verb.name}{payload})"


@dataclass(frozen=True, slots=True)
class TurnResult:
    """Outcome of executing one GameAction."""

    status: TurnStatus
    delay: Time = ONE_TICK

    @classmethod
    def end_turn(cls, delay: Time = ONE_TICK) -> TurnResult:
        return cls(TurnStatus.END_TURN, delay)

    @classmethod
    def cont(cls) -> TurnResult:
        return cls(TurnStatus.CONTINUE)

    @classmethod
    def stop(cls) -> TurnResult:
        return cls(TurnStatus.STOP)


@dataclass(slots=True)
class ExecutionContext:
    """Everything an action handler may touch while it runs.

    Built by the TurnEngine for each action; handlers append to ``events``
    and the engine forwards them to the EventLog.
    """

    world: WorldState
    collider: Collider
    config: SimulationConfig
    now: Time
    events: list[SimEvent] = field(default_factory=list)

    @property
    def turn_delay(self) -> Time:
        return Time(self.config.turn_delay_ticks, 0)
