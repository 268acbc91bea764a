"""Enumerations used throughout the engine."""

from __future__ import annotations

from enum import IntEnum, unique


@unique
class ActionType(IntEnum):
    """Verbs a GameAction can carry."""

    PASS = 0
    STOP = 1
    MOVE_ATTACK = 2
    LOOK = 3
    PLAY = 4


@unique
class ActorKind(IntEnum):
    """Who controls an actor."""

    PLAYER = 0
    NON_PLAYER = 1


@unique
class TurnStatus(IntEnum):
    """Outcome of executing one GameAction."""

    END_TURN = 0
    CONTINUE = 1
    STOP = 2


@unique
class EngineState(IntEnum):
    """Turn engine state machine."""

    IDLE = 0
    ACTOR_TURN = 1
    HALTED = 2


@unique
class InputMode(IntEnum):
    """How the human input layer interprets directional commands."""

    PLAY = 0
    LOOK = 1


@unique
class OccupierKind(IntEnum):
    """Collider classification of a map cell."""

    EMPTY = 0
    WALL = 1
    OCCUPIED = 2


@unique
class PredicateKind(IntEnum):
    """Symbolic facts the planner reasons about."""

    HAVE = 0
    UNDER_THREAT = 1


@unique
class Domain(IntEnum):
    """RNG domains for deterministic randomness isolation."""

    SPAWN = 0
    MAP_GEN = 1
    PERSONALITY = 2


@unique
class Material(IntEnum):
    """Tile materials on the grid."""

    FLOOR = 0
    WALL = 1
    VOID = 2
