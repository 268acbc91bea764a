"""Core data models and world representation."""

from roguesim.core.enums import ActionType, ActorKind, Domain, EngineState, InputMode, Material, TurnStatus
from roguesim.core.time import Time
from roguesim.core.models import Attributes, Entity, Liquid, Vector2
from roguesim.core.grid import Grid
from roguesim.core.faction import FactionTable, Opinion
from roguesim.core.world_state import MissingComponentError, WorldState
from roguesim.core.snapshot import Snapshot

__all__ = [
    "ActionType",
    "ActorKind",
    "Attributes",
    "Domain",
    "EngineState",
    "Entity",
    "FactionTable",
    "Grid",
    "InputMode",
    "Liquid",
    "Material",
    "MissingComponentError",
    "Opinion",
    "Snapshot",
    "Time",
    "TurnStatus",
    "Vector2",
    "WorldState",
]
