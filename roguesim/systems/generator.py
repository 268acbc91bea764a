"""Arena builder — terrain plus the initial cast of entities."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from roguesim.core import faction
from roguesim.core.enums import Domain, Material
from roguesim.core.grid import Grid
from roguesim.core.models import Attributes, Entity, Liquid, Vector2
from roguesim.core.world_state import WorldState
from roguesim.systems.fov import Visibility
from roguesim.systems.occupancy import OccupancyIndex

if TYPE_CHECKING:
    from roguesim.config import SimulationConfig
    from roguesim.systems.rng import DeterministicRNG

logger = logging.getLogger(__name__)

# Monster templates: kind -> (glyph, hp)
_MONSTER_TEMPLATES: dict[str, tuple[str, int]] = {
    "orc": ("o", 10),
    "troll": ("T", 16),
}

_PLAYER_HP = 30
_MAX_PLACEMENT_ATTEMPTS = 64


class EntityGenerator:
    """Creates the player, monsters and potions with deterministic stats and positions."""

    __slots__ = ("_config", "_rng")

    def __init__(self, config: SimulationConfig, rng: DeterministicRNG) -> None:
        self._config = config
        self._rng = rng

    # -- terrain --

    def build_grid(self) -> Grid:
        """A walled rectangle with scattered single-cell pillars."""
        cfg = self._config
        grid = Grid(cfg.grid_width, cfg.grid_height, default=Material.FLOOR)
        for x in range(cfg.grid_width):
            grid.set(Vector2(x, 0), Material.WALL)
            grid.set(Vector2(x, cfg.grid_height - 1), Material.WALL)
        for y in range(cfg.grid_height):
            grid.set(Vector2(0, y), Material.WALL)
            grid.set(Vector2(cfg.grid_width - 1, y), Material.WALL)

        centre = self.centre()
        for i in range(cfg.pillar_count):
            x = self._rng.next_int(Domain.MAP_GEN, i, 0, 2, cfg.grid_width - 3)
            y = self._rng.next_int(Domain.MAP_GEN, i, 1, 2, cfg.grid_height - 3)
            pos = Vector2(x, y)
            # Keep the player's start and its neighbours open
            if pos.manhattan(centre) <= 2:
                continue
            grid.set(pos, Material.WALL)
        return grid

    def centre(self) -> Vector2:
        return Vector2(self._config.grid_width // 2, self._config.grid_height // 2)

    # -- entities --

    def spawn_player(self, world: WorldState) -> Entity:
        eid = world.allocate_entity_id()
        entity = Entity(
            id=eid,
            kind="player",
            pos=self.centre(),
            glyph="@",
            attributes=Attributes(
                name="player",
                hp=_PLAYER_HP,
                max_hp=_PLAYER_HP,
                vision_radius=self._config.player_vision_radius,
                faction=faction.PLAYER,
            ),
        )
        world.add_entity(entity)
        world.player_id = eid
        return entity

    def spawn_monster(self, world: WorldState) -> Entity:
        """Orc or troll on a free floor cell, with rolled calmness and thirst."""
        eid = world.allocate_entity_id()
        is_troll = self._rng.next_bool(Domain.SPAWN, eid, 0, self._config.troll_chance)
        kind = "troll" if is_troll else "orc"
        glyph, hp = _MONSTER_TEMPLATES[kind]
        attrs = Attributes(
            name=kind,
            hp=hp,
            max_hp=hp,
            calmness=round(self._rng.next_float(Domain.PERSONALITY, eid, 0), 3),
            thirst=round(self._rng.next_float(Domain.PERSONALITY, eid, 1), 3),
            goodness=round(self._rng.next_float(Domain.PERSONALITY, eid, 2) * 2.0 - 1.0, 3),
            lawfulness=round(self._rng.next_float(Domain.PERSONALITY, eid, 3) * 2.0 - 1.0, 3),
            vision_radius=self._config.npc_vision_radius,
            faction=faction.MONSTER,
        )
        entity = Entity(
            id=eid, kind=kind, pos=self._free_cell(world, eid), glyph=glyph,
            attributes=attrs, ai_controlled=True,
        )
        world.add_entity(entity)
        return entity

    def spawn_potion(self, world: WorldState) -> Entity:
        eid = world.allocate_entity_id()
        entity = Entity(
            id=eid, kind="potion", pos=self._free_cell(world, eid), glyph="!",
            liquid=Liquid(potable=True),
        )
        world.add_entity(entity)
        return entity

    def _free_cell(self, world: WorldState, eid: int) -> Vector2:
        grid = world.grid
        for attempt in range(_MAX_PLACEMENT_ATTEMPTS):
            x = self._rng.next_int(Domain.SPAWN, eid, 2 * attempt + 1, 1, grid.width - 2)
            y = self._rng.next_int(Domain.SPAWN, eid, 2 * attempt + 2, 1, grid.height - 2)
            pos = Vector2(x, y)
            if self._is_free(world, pos):
                return pos
        # Fall back to a row-major scan of the interior
        for pos in grid.cells():
            if self._is_free(world, pos):
                return pos
        raise RuntimeError("Arena has no free floor cell left")

    @staticmethod
    def _is_free(world: WorldState, pos: Vector2) -> bool:
        if not world.grid.is_walkable(pos) or world.occupancy.is_blocked(pos):
            return False
        return not any(e.pos == pos for e in world.entities.values())


def build_arena(config: SimulationConfig, rng: DeterministicRNG) -> WorldState:
    """Create a fully populated world: terrain, player, monsters, potions."""
    gen = EntityGenerator(config, rng)
    grid = gen.build_grid()
    world = WorldState(
        seed=config.world_seed,
        grid=grid,
        occupancy=OccupancyIndex(),
        player_fov=Visibility(grid),
    )
    player = gen.spawn_player(world)
    for _ in range(config.monster_count):
        gen.spawn_monster(world)
    for _ in range(config.potion_count):
        gen.spawn_potion(world)
    world.player_fov.compute(player.pos, config.player_vision_radius)
    logger.info(
        "Arena %dx%d built: %d monsters, %d potions (seed=%d)",
        grid.width, grid.height, config.monster_count, config.potion_count, config.world_seed,
    )
    return world
