"""Field of view — recursive shadow casting over the terrain.

Walls are lit (you can see the wall you are looking at); cells outside the
map block sight. The explored set is monotonic: once a cell has been in the
field of view it stays explored for the rest of the session.
"""

from __future__ import annotations

import logging

from roguesim.core.grid import Grid
from roguesim.core.models import Vector2

logger = logging.getLogger(__name__)

# Octant transforms (xx, xy, yx, yy) for the 8 octants around the origin
_OCTANTS: tuple[tuple[int, int, int, int], ...] = (
    (1, 0, 0, 1),
    (0, 1, 1, 0),
    (0, -1, 1, 0),
    (-1, 0, 0, 1),
    (-1, 0, 0, -1),
    (0, -1, -1, 0),
    (0, 1, -1, 0),
    (1, 0, 0, -1),
)


def _cast_light(
    grid: Grid,
    lit: set[Vector2],
    cx: int,
    cy: int,
    row: int,
    start: float,
    end: float,
    radius: int,
    xx: int,
    xy: int,
    yx: int,
    yy: int,
) -> None:
    if start < end:
        return
    radius_sq = radius * radius
    new_start = start
    for j in range(row, radius + 1):
        dx, dy = -j - 1, -j
        blocked = False
        while dx <= 0:
            dx += 1
            x = cx + dx * xx + dy * xy
            y = cy + dx * yx + dy * yy
            l_slope = (dx - 0.5) / (dy + 0.5)
            r_slope = (dx + 0.5) / (dy - 0.5)
            if start < r_slope:
                continue
            if end > l_slope:
                break
            if dx * dx + dy * dy <= radius_sq and grid.in_bounds_xy(x, y):
                lit.add(Vector2(x, y))
            opaque = grid.blocks_sight_xy(x, y)
            if blocked:
                if opaque:
                    new_start = r_slope
                    continue
                blocked = False
                start = new_start
            elif opaque and j < radius:
                blocked = True
                _cast_light(grid, lit, cx, cy, j + 1, start, l_slope, radius, xx, xy, yx, yy)
                new_start = r_slope
        if blocked:
            break


def visible_from(grid: Grid, origin: Vector2, radius: int) -> set[Vector2]:
    """Cells visible from *origin* within *radius* (0 = whole map).

    Pure function: touches no explored memory. Used for per-actor perception.
    """
    if radius <= 0:
        radius = max(grid.width, grid.height)
    lit: set[Vector2] = set()
    if grid.in_bounds(origin):
        lit.add(origin)
    for xx, xy, yx, yy in _OCTANTS:
        _cast_light(grid, lit, origin.x, origin.y, 1, 1.0, 0.0, radius, xx, xy, yx, yy)
    return lit


class Visibility:
    """The player's field of view plus the explored-cells memory."""

    __slots__ = ("_grid", "_visible", "_explored")

    def __init__(self, grid: Grid) -> None:
        self._grid = grid
        self._visible: set[Vector2] = set()
        self._explored: set[Vector2] = set()

    def compute(self, origin: Vector2, radius: int) -> None:
        """Recompute the visible set from *origin* and fold it into explored."""
        self._visible = visible_from(self._grid, origin, radius)
        self._explored |= self._visible
        logger.debug(
            "FOV from %s r=%d: %d visible, %d explored",
            origin, radius, len(self._visible), len(self._explored),
        )

    def is_in_fov(self, cell: Vector2) -> bool:
        return cell in self._visible

    def is_explored(self, cell: Vector2) -> bool:
        return cell in self._explored

    @property
    def visible(self) -> set[Vector2]:
        return self._visible

    @property
    def explored(self) -> set[Vector2]:
        return self._explored
