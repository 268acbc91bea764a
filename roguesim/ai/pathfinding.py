"""A* Pathfinding over the 8-connected grid.

Provides a `Pathfinder` class that computes paths through the grid,
respecting walls and a set of cells held by blocking entities.

Usage:
    pf = Pathfinder(grid)
    found = pf.find_path(start, goal, occupied)   # (list[Vector2], cost) or None
    next_step = pf.next_step(start, goal)         # Vector2 or None
"""

from __future__ import annotations

import heapq
import logging
from typing import TYPE_CHECKING, Container

from roguesim.core.models import NEIGHBOUR_OFFSETS, Vector2

if TYPE_CHECKING:
    from roguesim.core.grid import Grid

logger = logging.getLogger(__name__)

STEP_COST = 1


# ---------------------------------------------------------------------------
# A* Pathfinder
# ---------------------------------------------------------------------------

class Pathfinder:
    """A* pathfinder operating on the game Grid.

    Reads only terrain plus the occupancy set it is handed, so it is safe to
    run against a Snapshot. Optionally bounded: explores at most `max_nodes`
    before giving up.
    """

    __slots__ = ("_grid", "_max_nodes")

    def __init__(self, grid: Grid, max_nodes: int | None = None) -> None:
        self._grid = grid
        self._max_nodes = max_nodes

    def find_path(
        self,
        start: Vector2,
        goal: Vector2,
        occupied: Container[Vector2] | None = None,
    ) -> tuple[list[Vector2], int] | None:
        """Compute an A* path from *start* to *goal*.

        Returns ``(cells, cost)`` where *cells* includes both *start* and
        *goal*, or None if no path exists (within the node budget).

        *occupied* holds cells blocked by other entities. The *goal* cell is
        always enterable even if occupied, so an actor can path up to
        someone it wants to interact with.
        """
        if start == goal:
            return [start], 0

        grid = self._grid
        if grid.blocks_movement(goal):
            return None

        occ = occupied if occupied is not None else ()

        # A* open set: (f_score, counter, x, y)
        counter = 0
        open_heap: list[tuple[int, int, int, int]] = []
        heapq.heappush(open_heap, (0, counter, start.x, start.y))

        g_score: dict[tuple[int, int], int] = {(start.x, start.y): 0}
        came_from: dict[tuple[int, int], tuple[int, int]] = {}
        closed: set[tuple[int, int]] = set()
        nodes_explored = 0

        gx, gy = goal.x, goal.y

        while open_heap:
            if self._max_nodes is not None and nodes_explored >= self._max_nodes:
                logger.debug("Path %s -> %s abandoned after %d nodes", start, goal, nodes_explored)
                return None

            _, _, cx, cy = heapq.heappop(open_heap)
            ckey = (cx, cy)

            if cx == gx and cy == gy:
                return self._reconstruct(came_from, ckey), g_score[ckey]

            if ckey in closed:
                continue
            closed.add(ckey)
            nodes_explored += 1

            current_g = g_score[ckey]

            for dx, dy in NEIGHBOUR_OFFSETS:
                nx, ny = cx + dx, cy + dy
                nkey = (nx, ny)

                if nkey in closed:
                    continue

                npos = Vector2(nx, ny)
                if grid.blocks_movement(npos):
                    continue

                # Occupied check (skip goal tile)
                if npos in occ and not (nx == gx and ny == gy):
                    continue

                tentative_g = current_g + STEP_COST

                if tentative_g < g_score.get(nkey, 1 << 62):
                    g_score[nkey] = tentative_g
                    came_from[nkey] = ckey
                    h = abs(nx - gx) + abs(ny - gy)  # Manhattan heuristic
                    counter += 1
                    heapq.heappush(open_heap, (tentative_g + h, counter, nx, ny))

        return None

    def next_step(
        self,
        start: Vector2,
        goal: Vector2,
        occupied: Container[Vector2] | None = None,
    ) -> Vector2 | None:
        """Return the cell after *start* on the path, or None if there is none."""
        found = self.find_path(start, goal, occupied)
        if found is None:
            return None
        cells, _ = found
        if len(cells) < 2:
            return None
        return cells[1]

    @staticmethod
    def _reconstruct(
        came_from: dict[tuple[int, int], tuple[int, int]],
        current: tuple[int, int],
    ) -> list[Vector2]:
        """Walk back through came_from to build the path, start included."""
        path: list[Vector2] = [Vector2(current[0], current[1])]
        while current in came_from:
            current = came_from[current]
            path.append(Vector2(current[0], current[1]))
        path.reverse()
        return path
