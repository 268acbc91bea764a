"""Arena — test fixture for building small hand-made worlds.

Creates a WorldState from ASCII rows, lets tests drop in a player,
monsters and potions, and hands back snapshots or a ready TurnEngine.

Usage:
    arena = Arena(["#######",
                   "#.....#",
                   "#######"])
    arena.add_player((1, 1))
    orc = arena.add_monster((5, 1), calmness=0.8)
    engine = arena.engine()
    engine.start()
    engine.poll()
"""

from __future__ import annotations

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from roguesim.ai.brain import DecisionDriver
from roguesim.config import SimulationConfig
from roguesim.core import faction
from roguesim.core.grid import Grid
from roguesim.core.models import Attributes, Entity, Liquid, Vector2
from roguesim.core.snapshot import Snapshot
from roguesim.core.time import ZERO, Time
from roguesim.core.world_state import WorldState
from roguesim.engine.turn_engine import TurnEngine
from roguesim.systems.fov import Visibility
from roguesim.systems.occupancy import OccupancyIndex

OPEN_ROOM = [
    "############",
    "#..........#",
    "#..........#",
    "#..........#",
    "#..........#",
    "#..........#",
    "############",
]


class Arena:
    """A small world under full test control."""

    def __init__(self, rows: list[str] | None = None, **config_overrides) -> None:
        self.config = SimulationConfig(**config_overrides)
        self.grid = Grid.from_rows(rows or OPEN_ROOM)
        self.world = WorldState(
            seed=self.config.world_seed,
            grid=self.grid,
            occupancy=OccupancyIndex(),
            player_fov=Visibility(self.grid),
        )

    # -- population --

    def add_player(self, pos: tuple[int, int], vision_radius: int = 20) -> Entity:
        eid = self.world.allocate_entity_id()
        player = Entity(
            id=eid, kind="player", pos=Vector2(*pos), glyph="@",
            attributes=Attributes(
                name="player", hp=30, max_hp=30,
                vision_radius=vision_radius, faction=faction.PLAYER,
            ),
        )
        self.world.add_entity(player)
        self.world.player_id = eid
        self.world.player_fov.compute(player.pos, vision_radius)
        return player

    def add_monster(
        self,
        pos: tuple[int, int],
        calmness: float = 0.5,
        thirst: float = 0.5,
        vision_radius: int = 8,
        faction_name: str = faction.MONSTER,
        kind: str = "orc",
    ) -> Entity:
        eid = self.world.allocate_entity_id()
        monster = Entity(
            id=eid, kind=kind, pos=Vector2(*pos), glyph="o",
            attributes=Attributes(
                name=kind, hp=10, max_hp=10, calmness=calmness, thirst=thirst,
                vision_radius=vision_radius, faction=faction_name,
            ),
            ai_controlled=True,
        )
        self.world.add_entity(monster)
        return monster

    def add_potion(self, pos: tuple[int, int]) -> Entity:
        eid = self.world.allocate_entity_id()
        potion = Entity(
            id=eid, kind="potion", pos=Vector2(*pos), glyph="!",
            liquid=Liquid(potable=True),
        )
        self.world.add_entity(potion)
        return potion

    # -- views --

    def snapshot(self, time: Time = ZERO, player_turns: int = 0) -> Snapshot:
        return Snapshot.from_world(self.world, time, player_turns)

    def engine(self, with_driver: bool = True) -> TurnEngine:
        driver = DecisionDriver(self.config) if with_driver else None
        return TurnEngine(self.config, self.world, driver)

    def entity(self, eid: int) -> Entity:
        return self.world.entities[eid]
