"""Grid / terrain map."""

from __future__ import annotations

from typing import Iterable

from roguesim.core.enums import Material
from roguesim.core.models import Vector2

# ASCII legend used by Grid.from_rows
_GLYPH_MATERIAL: dict[str, Material] = {
    ".": Material.FLOOR,
    "#": Material.WALL,
    " ": Material.VOID,
}


class Grid:
    """2D tile grid backed by a flat list.

    Produced once at session start and read-only afterwards; anything
    outside the bounds reads as WALL.
    """

    __slots__ = ("width", "height", "_tiles")

    def __init__(self, width: int, height: int, default: Material = Material.FLOOR) -> None:
        self.width = width
        self.height = height
        self._tiles: list[Material] = [default] * (width * height)

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> Grid:
        """Build a grid from ASCII rows ('#' wall, '.' floor, ' ' void).

        Any other character is read as floor so that test maps can mark
        spawn points inline.
        """
        rows = list(rows)
        height = len(rows)
        width = max((len(r) for r in rows), default=0)
        grid = cls(width, height, default=Material.VOID)
        for y, row in enumerate(rows):
            for x, ch in enumerate(row):
                grid.set(Vector2(x, y), _GLYPH_MATERIAL.get(ch, Material.FLOOR))
        return grid

    # -- access --

    def _idx(self, x: int, y: int) -> int:
        return y * self.width + x

    def in_bounds(self, pos: Vector2) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def get(self, pos: Vector2) -> Material:
        if not self.in_bounds(pos):
            return Material.WALL
        return self._tiles[self._idx(pos.x, pos.y)]

    def set(self, pos: Vector2, material: Material) -> None:
        if self.in_bounds(pos):
            self._tiles[self._idx(pos.x, pos.y)] = material

    def blocks_movement(self, pos: Vector2) -> bool:
        return self.get(pos) == Material.WALL

    def blocks_sight(self, pos: Vector2) -> bool:
        return self.get(pos) == Material.WALL

    def is_walkable(self, pos: Vector2) -> bool:
        return not self.blocks_movement(pos)

    # -- fast raw-coordinate access (no Vector2 alloc, for hot loops) --

    def blocks_sight_xy(self, x: int, y: int) -> bool:
        if 0 <= x < self.width and 0 <= y < self.height:
            return self._tiles[y * self.width + x] == Material.WALL
        return True

    def in_bounds_xy(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cells(self) -> Iterable[Vector2]:
        for y in range(self.height):
            for x in range(self.width):
                yield Vector2(x, y)

    @property
    def tiles(self) -> list[Material]:
        return self._tiles
