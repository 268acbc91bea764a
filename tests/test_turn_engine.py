"""Tests for the TurnEngine: scheduling, draining, turn hand-off and halting."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from roguesim.actions.base import ActorRef, GameAction
from roguesim.core.enums import ActionType, EngineState, InputMode
from roguesim.core.models import Entity, Vector2
from roguesim.core.time import Time
from roguesim.core.world_state import MissingComponentError
from tests.helpers.arena import Arena


def _started(arena: Arena, with_driver: bool = True):
    engine = arena.engine(with_driver=with_driver)
    engine.start()
    engine.poll()
    return engine


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------

class TestLifecycle:
    def test_empty_engine_halts_on_first_poll(self):
        arena = Arena()
        engine = arena.engine()
        steps = engine.poll()
        assert steps == 1
        assert engine.state == EngineState.HALTED
        assert engine.event_log.latest(1)[0].category == "halt"

    def test_player_gets_first_turn(self):
        arena = Arena()
        arena.add_player((2, 2))
        engine = _started(arena)
        assert engine.awaiting_player
        assert engine.player_turns == 1
        assert engine.current_actor == ActorRef.player(1)

    def test_finish_halts_and_refuses_input(self):
        arena = Arena()
        arena.add_player((2, 2))
        engine = _started(arena)
        engine.finish()
        assert engine.halted
        assert engine.submit(ActionType.PASS) is None
        assert engine.step() is False

    def test_stop_ends_turn_without_rescheduling(self):
        arena = Arena()
        arena.add_player((2, 2))
        engine = _started(arena)
        engine.submit(ActionType.STOP)
        engine.poll()
        assert engine.state == EngineState.HALTED
        categories = [e.category for e in engine.event_log.latest(10)]
        assert "stop" in categories


# ---------------------------------------------------------------------------
# Player input
# ---------------------------------------------------------------------------

class TestPlayerTurns:
    def test_pass_advances_clock_and_counter(self):
        arena = Arena()
        arena.add_player((2, 2))
        engine = _started(arena)
        engine.submit(ActionType.PASS)
        engine.poll()
        assert engine.now == Time(1, 0)
        assert engine.player_turns == 2
        assert engine.awaiting_player

    def test_submit_refused_before_start(self):
        arena = Arena()
        arena.add_player((2, 2))
        engine = arena.engine()
        assert engine.submit(ActionType.PASS) is None

    def test_action_stamped_with_player_turn(self):
        arena = Arena()
        arena.add_player((2, 2))
        engine = _started(arena)
        action = engine.submit(ActionType.PASS)
        assert action.turn == 1

    def test_move_into_empty_cell(self):
        arena = Arena()
        arena.add_player((2, 2))
        engine = _started(arena)
        engine.submit(ActionType.MOVE_ATTACK, (1, 0))
        engine.poll()
        player = engine.world.player
        assert player.pos == Vector2(3, 2)
        assert engine.world.occupancy.get(Vector2(3, 2)) == player.id
        assert engine.world.occupancy.get(Vector2(2, 2)) is None
        assert engine.world.player_fov.is_in_fov(Vector2(3, 2))
        assert engine.player_turns == 2

    def test_blocked_move_keeps_the_turn(self):
        arena = Arena()
        arena.add_player((1, 1))
        engine = _started(arena)
        engine.submit(ActionType.MOVE_ATTACK, (-1, 0))
        engine.poll()
        assert engine.world.player.pos == Vector2(1, 1)
        assert engine.awaiting_player
        assert engine.player_turns == 1
        assert engine.now == Time(0, 0)
        assert engine.event_log.latest(1)[0].category == "blocked"

    def test_bump_into_occupant_ends_turn(self):
        arena = Arena()
        arena.add_player((2, 2))
        arena.add_monster((3, 2), calmness=1.0)
        engine = _started(arena)
        engine.submit(ActionType.MOVE_ATTACK, (1, 0))
        engine.poll(1)
        assert engine.world.player.pos == Vector2(2, 2)
        assert any(e.category == "interaction" for e in engine.event_log.latest(10))

    def test_queue_cleared_when_turn_ends(self):
        arena = Arena()
        arena.add_player((2, 2))
        engine = _started(arena)
        engine.submit(ActionType.PASS)
        engine.submit(ActionType.MOVE_ATTACK, (1, 0))
        engine.poll()
        # The move queued behind the pass never runs
        assert engine.world.player.pos == Vector2(2, 2)
        assert engine.action_queue.empty

    def test_directional_verb_requires_delta(self):
        with pytest.raises(ValueError):
            GameAction(ActorRef.player(1), 0, ActionType.MOVE_ATTACK)
        with pytest.raises(ValueError):
            GameAction(ActorRef.player(1), 0, ActionType.PASS, (1, 0))

    def test_long_move_rejected(self):
        arena = Arena([
            "#######",
            "#..#..#",
            "#######",
        ])
        arena.add_player((1, 1))
        engine = _started(arena)
        with pytest.raises(ValueError):
            engine.submit(ActionType.MOVE_ATTACK, (4, 0))
        engine.poll()
        assert engine.world.player.pos == Vector2(1, 1)
        assert engine.player_turns == 1

    def test_zero_move_rejected(self):
        arena = Arena()
        arena.add_player((2, 2))
        engine = _started(arena)
        with pytest.raises(ValueError):
            engine.submit(ActionType.MOVE_ATTACK, (0, 0))
        engine.poll()
        assert engine.awaiting_player
        assert engine.player_turns == 1


class TestLookMode:
    def test_first_look_targets_the_actor(self):
        arena = Arena()
        arena.add_player((2, 2))
        engine = _started(arena)
        engine.submit(ActionType.LOOK, (1, 1))
        engine.poll()
        world = engine.world
        assert world.cursor == Vector2(2, 2)
        assert world.input_mode == InputMode.LOOK
        assert world.look_path == [Vector2(2, 2)]
        assert engine.awaiting_player

    def test_look_moves_cursor_and_traces_route(self):
        arena = Arena()
        arena.add_player((2, 2))
        engine = _started(arena)
        engine.submit(ActionType.LOOK, (0, 0))
        engine.submit(ActionType.LOOK, (3, 0))
        engine.poll()
        world = engine.world
        assert world.cursor == Vector2(5, 2)
        assert world.look_path[0] == Vector2(2, 2)
        assert world.look_path[-1] == Vector2(5, 2)
        # Looking never consumes the turn
        assert engine.player_turns == 1

    def test_play_clears_cursor(self):
        arena = Arena()
        arena.add_player((2, 2))
        engine = _started(arena)
        engine.submit(ActionType.LOOK, (0, 0))
        engine.submit(ActionType.PLAY)
        engine.poll()
        world = engine.world
        assert world.cursor is None
        assert world.look_path == []
        assert world.input_mode == InputMode.PLAY


# ---------------------------------------------------------------------------
# Non-player turns
# ---------------------------------------------------------------------------

class TestNonPlayerTurns:
    def test_monster_approaches_visible_player(self):
        arena = Arena()
        arena.add_player((1, 1))
        orc = arena.add_monster((5, 1), calmness=0.5)
        engine = _started(arena)
        engine.submit(ActionType.PASS)
        engine.poll()
        assert engine.world.entities[orc.id].pos == Vector2(4, 1)
        assert engine.awaiting_player
        assert engine.player_turns == 2

    def test_monsters_scheduled_one_tick_after_start(self):
        arena = Arena()
        arena.add_player((1, 1))
        arena.add_monster((8, 4))
        engine = arena.engine()
        engine.start()
        assert engine.event_queue.peek()[0] == Time(1, 0)

    def test_despawned_actor_is_skipped(self):
        arena = Arena()
        arena.add_player((2, 2))
        engine = _started(arena)
        engine.schedule_turn(Time(0, 5), ActorRef.non_player(99))
        engine.submit(ActionType.PASS)
        engine.poll()
        assert engine.awaiting_player
        assert engine.player_turns == 2

    def test_actor_without_attributes_raises(self):
        arena = Arena()
        arena.add_player((2, 2))
        ghost = Entity(id=arena.world.allocate_entity_id(), kind="ghost", pos=Vector2(6, 3), ai_controlled=True)
        arena.world.add_entity(ghost)
        engine = _started(arena)
        # Not alive without attributes, so start() never scheduled it
        engine.schedule_turn(Time(0, 5), ActorRef.non_player(ghost.id))
        engine.submit(ActionType.PASS)
        with pytest.raises(MissingComponentError):
            engine.poll()
