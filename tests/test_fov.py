"""Tests for shadow-cast field of view and explored memory."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from roguesim.core.enums import Material
from roguesim.core.grid import Grid
from roguesim.core.models import Vector2
from roguesim.systems.fov import Visibility, visible_from

ROOMS = [
    "###########",
    "#....#....#",
    "#....#....#",
    "#....#....#",
    "###########",
]


class TestVisibleFrom:
    def test_origin_is_visible(self):
        g = Grid(9, 9, default=Material.FLOOR)
        assert Vector2(4, 4) in visible_from(g, Vector2(4, 4), 3)

    def test_open_field_radius(self):
        g = Grid(21, 21, default=Material.FLOOR)
        lit = visible_from(g, Vector2(10, 10), 3)
        assert Vector2(13, 10) in lit
        assert Vector2(10, 7) in lit
        assert Vector2(14, 10) not in lit
        # Outside the circle even though inside the square
        assert Vector2(13, 13) not in lit

    def test_walls_are_lit(self):
        g = Grid.from_rows(ROOMS)
        lit = visible_from(g, Vector2(2, 2), 10)
        assert Vector2(5, 2) in lit
        assert Vector2(0, 0) in lit

    def test_walls_block_sight(self):
        g = Grid.from_rows(ROOMS)
        lit = visible_from(g, Vector2(2, 2), 10)
        assert Vector2(7, 2) not in lit
        assert Vector2(9, 1) not in lit

    def test_zero_radius_sees_whole_room(self):
        g = Grid.from_rows(ROOMS)
        lit = visible_from(g, Vector2(2, 2), 0)
        assert all(Vector2(x, y) in lit for x in range(1, 5) for y in range(1, 4))

    def test_never_outside_map(self):
        g = Grid(5, 5, default=Material.FLOOR)
        lit = visible_from(g, Vector2(0, 0), 8)
        assert all(g.in_bounds(c) for c in lit)


class TestVisibility:
    def test_compute_replaces_visible(self):
        g = Grid.from_rows(ROOMS)
        vis = Visibility(g)
        vis.compute(Vector2(2, 2), 10)
        assert vis.is_in_fov(Vector2(1, 1))
        vis.compute(Vector2(8, 2), 10)
        assert not vis.is_in_fov(Vector2(1, 1))
        assert vis.is_in_fov(Vector2(9, 3))

    def test_explored_is_monotonic(self):
        g = Grid.from_rows(ROOMS)
        vis = Visibility(g)
        vis.compute(Vector2(2, 2), 10)
        before = set(vis.explored)
        vis.compute(Vector2(8, 2), 10)
        assert before <= vis.explored
        assert vis.is_explored(Vector2(1, 1))
        assert vis.is_explored(Vector2(9, 3))
        assert vis.visible <= vis.explored
