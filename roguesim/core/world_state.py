"""Mutable authoritative world state — only mutated by the TurnEngine."""

from __future__ import annotations

from typing import TYPE_CHECKING

from roguesim.core.enums import InputMode
from roguesim.core.faction import FactionTable
from roguesim.core.grid import Grid
from roguesim.core.models import Attributes, Entity, Vector2

if TYPE_CHECKING:
    from roguesim.systems.fov import Visibility
    from roguesim.systems.occupancy import OccupancyIndex


class MissingComponentError(LookupError):
    """A live actor lacks a component the engine needs (position, attributes)."""

    def __init__(self, entity_id: int, component: str) -> None:
        super().__init__(f"Entity {entity_id} has no {component}")
        self.entity_id = entity_id
        self.component = component


class WorldState:
    """The single source of truth for the simulation."""

    __slots__ = (
        "seed", "entities", "grid", "occupancy", "factions", "player_fov",
        "player_id", "cursor", "look_path", "input_mode", "_next_entity_id",
    )

    def __init__(
        self,
        seed: int,
        grid: Grid,
        occupancy: OccupancyIndex,
        player_fov: Visibility,
        factions: FactionTable | None = None,
    ) -> None:
        self.seed: int = seed
        self.entities: dict[int, Entity] = {}
        self.grid: Grid = grid
        self.occupancy: OccupancyIndex = occupancy
        self.factions: FactionTable = factions if factions is not None else FactionTable.default()
        self.player_fov: Visibility = player_fov
        self.player_id: int | None = None
        self.cursor: Vector2 | None = None
        self.look_path: list[Vector2] = []
        self.input_mode: InputMode = InputMode.PLAY
        self._next_entity_id: int = 1

    def allocate_entity_id(self) -> int:
        eid = self._next_entity_id
        self._next_entity_id += 1
        return eid

    def add_entity(self, entity: Entity) -> None:
        self.entities[entity.id] = entity
        if entity.blocks:
            self.occupancy.add(entity.id, entity.pos)

    def remove_entity(self, entity_id: int) -> Entity | None:
        entity = self.entities.pop(entity_id, None)
        if entity is not None:
            self.occupancy.remove(entity_id, entity.pos)
        return entity

    def move_entity(self, entity_id: int, new_pos: Vector2) -> None:
        entity = self.require_entity(entity_id)
        old_pos = entity.pos
        entity.pos = new_pos
        if entity.blocks:
            self.occupancy.move_to(entity_id, old_pos, new_pos)

    # -- strict accessors (raise instead of returning None) --

    def require_entity(self, entity_id: int) -> Entity:
        entity = self.entities.get(entity_id)
        if entity is None:
            raise MissingComponentError(entity_id, "position")
        return entity

    def require_position(self, entity_id: int) -> Vector2:
        return self.require_entity(entity_id).pos

    def require_attributes(self, entity_id: int) -> Attributes:
        attrs = self.require_entity(entity_id).attributes
        if attrs is None:
            raise MissingComponentError(entity_id, "attributes")
        return attrs

    @property
    def player(self) -> Entity | None:
        if self.player_id is None:
            return None
        return self.entities.get(self.player_id)
