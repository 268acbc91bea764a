"""Immutable snapshot of the world state for the decision layer."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from roguesim.core.enums import InputMode
from roguesim.core.faction import FactionTable
from roguesim.core.grid import Grid
from roguesim.core.models import Entity, Vector2
from roguesim.core.time import Time
from roguesim.core.world_state import WorldState


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Read-only view of the world handed to scorers, planners and readers.

    Uses copied entities and a MappingProxyType for the entity dict so
    that nothing downstream can mutate the authoritative store.
    """

    time: Time
    player_turns: int
    entities: Mapping[int, Entity]
    grid: Grid
    factions: FactionTable
    occupied: Mapping[Vector2, int]
    visible: frozenset[Vector2]
    explored: frozenset[Vector2]
    player_id: int | None
    cursor: Vector2 | None
    look_path: tuple[Vector2, ...]
    input_mode: InputMode

    @classmethod
    def from_world(cls, world: WorldState, time: Time, player_turns: int) -> Snapshot:
        copied_entities = {eid: e.copy() for eid, e in world.entities.items()}
        return cls(
            time=time,
            player_turns=player_turns,
            entities=MappingProxyType(copied_entities),
            grid=world.grid,  # terrain is fixed after generation
            factions=world.factions,
            occupied=MappingProxyType(world.occupancy.as_dict()),
            visible=frozenset(world.player_fov.visible),
            explored=frozenset(world.player_fov.explored),
            player_id=world.player_id,
            cursor=world.cursor,
            look_path=tuple(world.look_path),
            input_mode=world.input_mode,
        )

    @property
    def player(self) -> Entity | None:
        if self.player_id is None:
            return None
        return self.entities.get(self.player_id)
