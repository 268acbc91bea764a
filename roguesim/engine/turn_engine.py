"""TurnEngine — the authoritative turn scheduler and action executor.

Step cycle:
  1. AI — if a non-player actor holds the turn, ask the DecisionDriver
  2. Drain — execute queued actions FIFO until one ends the turn
  3. Advance — if nobody holds the turn, pop the next event (or halt)

State machine:
  IDLE → ACTOR_TURN (TurnGrant popped) | HALTED (event queue empty)
  ACTOR_TURN → ACTOR_TURN (CONTINUE) | IDLE (END_TURN / STOP)
  any → HALTED (finish)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from roguesim.actions.base import ActorRef, ExecutionContext, GameAction, TurnResult
from roguesim.actions.look import LookAction, PlayAction
from roguesim.actions.move import MoveAttackAction
from roguesim.actions.wait import PassAction, StopAction
from roguesim.core.enums import ActionType, EngineState, TurnStatus
from roguesim.core.snapshot import Snapshot
from roguesim.core.time import ONE_TICK, Time
from roguesim.engine.action_queue import ActionQueue
from roguesim.engine.event_queue import EventQueue
from roguesim.systems.occupancy import Collider
from roguesim.utils.event_log import EventLog, SimEvent

if TYPE_CHECKING:
    from roguesim.ai.brain import DecisionDriver
    from roguesim.config import SimulationConfig
    from roguesim.core.world_state import WorldState

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TurnGrant:
    """Event payload: hand the turn to *actor*."""

    actor: ActorRef


# Verb → stateless handler
ACTION_HANDLERS = {
    ActionType.PASS: PassAction,
    ActionType.STOP: StopAction,
    ActionType.MOVE_ATTACK: MoveAttackAction,
    ActionType.LOOK: LookAction,
    ActionType.PLAY: PlayAction,
}


class TurnEngine:
    """The heartbeat of the game.

    Single-threaded: every world mutation happens inside ``step()``.
    """

    __slots__ = (
        "_config",
        "_world",
        "_driver",
        "_events",
        "_actions",
        "_collider",
        "_event_log",
        "_turn",
        "_player_turns",
        "_halted",
    )

    def __init__(
        self,
        config: SimulationConfig,
        world: WorldState,
        driver: DecisionDriver | None = None,
        event_log: EventLog | None = None,
    ) -> None:
        self._config = config
        self._world = world
        self._driver = driver
        self._events: EventQueue[TurnGrant] = EventQueue()
        self._actions = ActionQueue()
        self._collider = Collider(world.grid, world.occupancy)
        self._event_log = event_log if event_log is not None else EventLog()
        self._turn: ActorRef | None = None
        self._player_turns: int = 0
        self._halted: bool = False

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def world(self) -> WorldState:
        return self._world

    @property
    def now(self) -> Time:
        return self._events.now

    @property
    def player_turns(self) -> int:
        return self._player_turns

    @property
    def current_actor(self) -> ActorRef | None:
        return self._turn

    @property
    def event_queue(self) -> EventQueue[TurnGrant]:
        return self._events

    @property
    def action_queue(self) -> ActionQueue:
        return self._actions

    @property
    def event_log(self) -> EventLog:
        return self._event_log

    @property
    def state(self) -> EngineState:
        if self._halted:
            return EngineState.HALTED
        if self._turn is not None:
            return EngineState.ACTOR_TURN
        return EngineState.IDLE

    @property
    def halted(self) -> bool:
        return self._halted

    @property
    def awaiting_player(self) -> bool:
        """True when the player holds the turn and nothing is queued."""
        return (
            not self._halted
            and self._turn is not None
            and self._turn.is_player
            and self._actions.empty
        )

    def create_snapshot(self) -> Snapshot:
        """Create an immutable snapshot of the current world state."""
        return Snapshot.from_world(self._world, self.now, self._player_turns)

    # ------------------------------------------------------------------
    # Session setup
    # ------------------------------------------------------------------

    def start(self) -> None:
        """The player takes the first turn; every AI actor wakes one tick later."""
        player_id = self._world.player_id
        if player_id is not None:
            self._begin_turn(ActorRef.player(player_id))
        for eid in sorted(self._world.entities):
            entity = self._world.entities[eid]
            if entity.ai_controlled and entity.alive:
                self.schedule_turn(ONE_TICK, ActorRef.non_player(eid))
        logger.info(
            "[%s] Session started: %d actors scheduled",
            self.now, len(self._events),
        )

    def schedule_turn(self, delay: Time | int, actor: ActorRef) -> None:
        logger.debug("[%s] schedule actor turn in %s for %r", self.now, delay, actor)
        self._events.schedule_after(delay, TurnGrant(actor))

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def enqueue(self, actor: ActorRef, verb: ActionType, delta: tuple[int, int] | None = None) -> GameAction:
        """Queue an action stamped with the current player-turn counter."""
        action = GameAction(actor, self._player_turns, verb, delta)
        self._actions.push(action)
        return action

    def submit(self, verb: ActionType, delta: tuple[int, int] | None = None) -> GameAction | None:
        """Queue a human action; refused (None) unless the player holds the turn."""
        if self._halted or self._turn is None or not self._turn.is_player:
            logger.debug("[%s] input %s ignored: not the player's turn", self.now, verb.name)
            return None
        return self.enqueue(self._turn, verb, delta)

    def finish(self) -> None:
        """Halt immediately (quit command)."""
        if self._halted:
            return
        logger.info("[%s] stop requested", self.now)
        self._halt("session finished")

    # ------------------------------------------------------------------
    # Stepping
    # ------------------------------------------------------------------

    def step(self) -> bool:
        """Execute one discrete step. Returns False when the engine must wait.

        Waiting means the player needs to provide input or the engine has
        halted.
        """
        if self._halted:
            return False

        # 1. AI
        actor = self._turn
        if actor is not None and not actor.is_player and self._driver is not None:
            self._run_ai(actor)

        # 2. Drain
        self._drain()
        if self._halted:
            return False

        # 3. Advance
        if self._turn is None:
            self._advance()
            return not self._halted
        return not self._turn.is_player

    def poll(self, max_steps: int | None = None) -> int:
        """Step until input is needed, the engine halts, or the budget runs out.

        Returns the number of steps taken.
        """
        budget = max_steps if max_steps is not None else self._config.max_steps_per_poll
        steps = 0
        while steps < budget:
            steps += 1
            if not self.step():
                break
        return steps

    # ------------------------------------------------------------------
    # Internal phases
    # ------------------------------------------------------------------

    def _run_ai(self, actor: ActorRef) -> None:
        world = self._world
        entity = world.require_entity(actor.entity_id)
        world.require_attributes(actor.entity_id)
        logger.debug("[%s] ai turn: %r", self.now, actor)
        snapshot = self.create_snapshot()
        # The driver gets its own copy of the actor from the snapshot
        actions = self._driver.decide(snapshot.entities[entity.id], snapshot)
        self._actions.extend(actions)

    def _drain(self) -> None:
        while self._turn is not None:
            action = self._actions.pop()
            if action is None:
                return
            result = self._execute(action)
            match result.status:
                case TurnStatus.END_TURN:
                    self._end_turn(action.actor)
                    self.schedule_turn(result.delay, action.actor)
                case TurnStatus.STOP:
                    self._end_turn(action.actor)
                case TurnStatus.CONTINUE:
                    pass

    def _execute(self, action: GameAction) -> TurnResult:
        logger.info("[%s] action %s by %r", self.now, action.verb.name, action.actor)
        handler = ACTION_HANDLERS.get(action.verb)
        if handler is None:
            raise ValueError(f"No handler for verb {action.verb!r}")
        ctx = ExecutionContext(
            world=self._world,
            collider=self._collider,
            config=self._config,
            now=self.now,
        )
        result = handler.execute(action, ctx)
        if ctx.events:
            self._event_log.append_many(ctx.events)
        return result

    def _advance(self) -> None:
        popped = self._events.pop_next()
        if popped is None:
            logger.warning("[%s] game event queue empty and out of turns. stopping", self.now)
            self._halt("event queue exhausted")
            return
        at, grant = popped
        logger.info("[%s] %r", at, grant)
        actor = grant.actor
        if actor.entity_id not in self._world.entities:
            logger.warning("[%s] skipping turn grant for despawned entity %d", at, actor.entity_id)
            return
        self._begin_turn(actor)

    def _begin_turn(self, actor: ActorRef) -> None:
        if actor.is_player:
            self._player_turns += 1
        self._turn = actor
        logger.debug("[%s] new turn: %d for %r", self.now, self._player_turns, actor)
        self._event_log.append(SimEvent(
            self.now, "turn", f"turn {self._player_turns} for {actor!r}", (actor.entity_id,),
        ))

    def _end_turn(self, actor: ActorRef) -> None:
        self._turn = None
        self._actions.clear()
        logger.debug("[%s] end turn: %d for %r", self.now, self._player_turns, actor)

    def _halt(self, reason: str) -> None:
        self._halted = True
        self._turn = None
        self._actions.clear()
        self._event_log.append(SimEvent(self.now, "halt", reason))
