"""EngineManager — singleton wrapper that owns the TurnEngine for the API.

Every engine call runs under one lock, so a step is atomic with respect to
readers; readers only ever see an immutable Snapshot taken after the step.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from roguesim.ai.brain import DecisionDriver
from roguesim.core.enums import ActionType, EngineState
from roguesim.core.grid import Grid
from roguesim.core.snapshot import Snapshot
from roguesim.engine.turn_engine import TurnEngine
from roguesim.systems.generator import build_arena
from roguesim.systems.rng import DeterministicRNG
from roguesim.utils.event_log import EventLog

if TYPE_CHECKING:
    from roguesim.actions.base import ActorRef
    from roguesim.config import SimulationConfig

logger = logging.getLogger(__name__)


class EngineManager:
    """Manages the game session behind the HTTP layer.

    Provides thread-safe access to:
      - latest snapshot (atomic reference swap)
      - event log (lock-guarded)
      - control commands (step / act / reset)
    """

    def __init__(self, config: SimulationConfig) -> None:
        self._config = config
        self.config = config

        self._engine_lock = threading.Lock()
        self._snapshot_lock = threading.Lock()
        self._latest_snapshot: Snapshot | None = None
        self._latest_state: EngineState = EngineState.IDLE
        self._latest_actor: ActorRef | None = None
        self._event_log = EventLog()
        self._engine: TurnEngine | None = None

        self._build()

    # -- public properties --

    @property
    def event_log(self) -> EventLog:
        return self._event_log

    @property
    def engine_state(self) -> EngineState:
        with self._engine_lock:
            return self._engine.state if self._engine else EngineState.HALTED

    @property
    def current_actor(self) -> ActorRef | None:
        with self._engine_lock:
            return self._engine.current_actor if self._engine else None

    @property
    def awaiting_player(self) -> bool:
        with self._engine_lock:
            return self._engine is not None and self._engine.awaiting_player

    # -- snapshot access --

    def get_snapshot(self) -> Snapshot | None:
        with self._snapshot_lock:
            return self._latest_snapshot

    def get_view(self) -> tuple[Snapshot | None, EngineState, ActorRef | None]:
        """Snapshot, engine state and turn holder, all published by the same step."""
        with self._snapshot_lock:
            return self._latest_snapshot, self._latest_state, self._latest_actor

    def get_grid(self) -> Grid | None:
        """Return the grid from the latest snapshot (static data)."""
        snap = self.get_snapshot()
        return snap.grid if snap else None

    # -- lifecycle --

    def start(self) -> None:
        """Run the engine forward until the player is asked for input."""
        with self._engine_lock:
            self._engine.poll()
            self._publish()
        logger.info("EngineManager started at %s", self._latest_snapshot.time)

    def step(self) -> int:
        """Advance the engine by one discrete step; returns steps taken."""
        with self._engine_lock:
            taken = self._engine.poll(1)
            self._publish()
        return taken

    def act(self, verb: ActionType, delta: tuple[int, int] | None = None) -> bool:
        """Submit a player action and run until input is needed again.

        Returns False (and changes nothing) when it is not the player's turn.
        """
        with self._engine_lock:
            if self._engine.submit(verb, delta) is None:
                return False
            self._engine.poll()
            self._publish()
        return True

    def stop(self) -> None:
        with self._engine_lock:
            if self._engine is not None:
                self._engine.finish()
                self._publish()
        logger.info("EngineManager stopped.")

    def reset(self) -> None:
        """Rebuild the session from config and run to the first player turn."""
        with self._engine_lock:
            self._event_log.clear()
            self._build()
        self.start()
        logger.info("EngineManager reset.")

    # -- internals --

    def _build(self) -> None:
        """Construct all game components from config."""
        cfg = self._config
        rng = DeterministicRNG(cfg.world_seed)
        world = build_arena(cfg, rng)
        self._engine = TurnEngine(cfg, world, DecisionDriver(cfg), self._event_log)
        self._engine.start()
        self._publish()

    def _publish(self) -> None:
        engine = self._engine
        snap = engine.create_snapshot()
        with self._snapshot_lock:
            self._latest_snapshot = snap
            self._latest_state = engine.state
            self._latest_actor = engine.current_actor
