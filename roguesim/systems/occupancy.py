"""Position index for O(1) "who stands here" lookups, plus the Collider."""

from __future__ import annotations

from dataclasses import dataclass

from roguesim.core.enums import OccupierKind
from roguesim.core.grid import Grid
from roguesim.core.models import Vector2


class OccupancyIndex:
    """Maps each cell to the single blocking entity standing on it.

    Updated on every move; only blocking entities are indexed.
    """

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: dict[Vector2, int] = {}

    def add(self, entity_id: int, pos: Vector2) -> None:
        self._cells[pos] = entity_id

    def remove(self, entity_id: int, pos: Vector2) -> None:
        if self._cells.get(pos) == entity_id:
            del self._cells[pos]

    def move_to(self, entity_id: int, old_pos: Vector2, new_pos: Vector2) -> None:
        self.remove(entity_id, old_pos)
        self.add(entity_id, new_pos)

    def get(self, pos: Vector2) -> int | None:
        return self._cells.get(pos)

    def is_blocked(self, pos: Vector2) -> bool:
        return pos in self._cells

    def as_dict(self) -> dict[Vector2, int]:
        return dict(self._cells)

    def clear(self) -> None:
        self._cells.clear()

    def __len__(self) -> int:
        return len(self._cells)


@dataclass(frozen=True, slots=True)
class Occupier:
    """What is in a cell from a mover's point of view."""

    kind: OccupierKind
    entity_id: int | None = None

    @property
    def is_empty(self) -> bool:
        return self.kind == OccupierKind.EMPTY


EMPTY = Occupier(OccupierKind.EMPTY)
WALL = Occupier(OccupierKind.WALL)


class Collider:
    """Classifies a cell as EMPTY, WALL or OCCUPIED(entity)."""

    __slots__ = ("_grid", "_index")

    def __init__(self, grid: Grid, index: OccupancyIndex) -> None:
        self._grid = grid
        self._index = index

    def get(self, pos: Vector2) -> Occupier:
        # Terrain first: a wall cell never reports an occupant
        if self._grid.blocks_movement(pos):
            return WALL
        eid = self._index.get(pos)
        if eid is not None:
            return Occupier(OccupierKind.OCCUPIED, eid)
        return EMPTY
