"""Tests for the world store: occupancy, collider, factions and snapshots."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from roguesim.core import faction
from roguesim.core.enums import OccupierKind
from roguesim.core.faction import FactionTable, Opinion
from roguesim.core.models import Vector2
from roguesim.core.world_state import MissingComponentError
from roguesim.systems.occupancy import Collider, OccupancyIndex
from tests.helpers.arena import Arena


class TestOccupancyIndex:
    def test_add_get_remove(self):
        idx = OccupancyIndex()
        idx.add(3, Vector2(1, 1))
        assert idx.get(Vector2(1, 1)) == 3
        assert idx.is_blocked(Vector2(1, 1))
        idx.remove(3, Vector2(1, 1))
        assert idx.get(Vector2(1, 1)) is None

    def test_remove_ignores_other_owner(self):
        idx = OccupancyIndex()
        idx.add(3, Vector2(1, 1))
        idx.remove(4, Vector2(1, 1))
        assert idx.get(Vector2(1, 1)) == 3

    def test_move_to(self):
        idx = OccupancyIndex()
        idx.add(3, Vector2(1, 1))
        idx.move_to(3, Vector2(1, 1), Vector2(2, 1))
        assert idx.as_dict() == {Vector2(2, 1): 3}


class TestCollider:
    def test_classifies_cells(self):
        arena = Arena()
        player = arena.add_player((2, 2))
        collider = Collider(arena.grid, arena.world.occupancy)
        assert collider.get(Vector2(0, 0)).kind == OccupierKind.WALL
        assert collider.get(Vector2(3, 3)).is_empty
        hit = collider.get(Vector2(2, 2))
        assert hit.kind == OccupierKind.OCCUPIED
        assert hit.entity_id == player.id

    def test_out_of_bounds_is_wall(self):
        arena = Arena()
        collider = Collider(arena.grid, arena.world.occupancy)
        assert collider.get(Vector2(-5, 40)).kind == OccupierKind.WALL

    def test_items_do_not_block(self):
        arena = Arena()
        arena.add_potion((4, 4))
        collider = Collider(arena.grid, arena.world.occupancy)
        assert collider.get(Vector2(4, 4)).is_empty


class TestFactions:
    def test_default_table(self):
        table = FactionTable.default()
        assert table.is_hostile(faction.MONSTER, faction.PLAYER)
        assert table.is_hostile(faction.PLAYER, faction.MONSTER)
        assert not table.is_hostile(faction.MONSTER, faction.MONSTER)

    def test_unknown_pair_is_neutral(self):
        table = FactionTable.default()
        assert table.get("elves", "dwarves") == Opinion(0.0)

    def test_opinions_are_directional(self):
        table = FactionTable()
        table.set("elves", "dwarves", -0.9)
        assert table.is_hostile("elves", "dwarves")
        assert not table.is_hostile("dwarves", "elves")

    def test_opinion_bands(self):
        assert Opinion(0.8).is_friendly()
        assert Opinion(-0.8).is_hostile()
        assert not Opinion(-0.5).is_hostile()


class TestWorldState:
    def test_require_missing_entity(self):
        arena = Arena()
        with pytest.raises(MissingComponentError) as excinfo:
            arena.world.require_position(42)
        assert excinfo.value.entity_id == 42

    def test_require_missing_attributes(self):
        arena = Arena()
        potion = arena.add_potion((3, 3))
        with pytest.raises(MissingComponentError):
            arena.world.require_attributes(potion.id)

    def test_entity_ids_unique(self):
        arena = Arena()
        ids = {arena.add_monster((x, 1)).id for x in range(1, 6)}
        assert len(ids) == 5


class TestSnapshot:
    def test_snapshot_is_isolated_from_world(self):
        arena = Arena()
        player = arena.add_player((2, 2))
        snap = arena.snapshot()
        arena.world.move_entity(player.id, Vector2(3, 2))
        assert snap.entities[player.id].pos == Vector2(2, 2)
        assert snap.occupied.get(Vector2(2, 2)) == player.id

    def test_snapshot_mapping_is_read_only(self):
        arena = Arena()
        arena.add_player((2, 2))
        snap = arena.snapshot()
        with pytest.raises(TypeError):
            snap.entities[99] = None

