"""Engine systems: RNG, occupancy, field of view, arena generation."""

from roguesim.systems.rng import DeterministicRNG
from roguesim.systems.occupancy import Collider, OccupancyIndex, Occupier
from roguesim.systems.fov import Visibility, visible_from
from roguesim.systems.generator import EntityGenerator, build_arena

__all__ = [
    "Collider",
    "DeterministicRNG",
    "EntityGenerator",
    "OccupancyIndex",
    "Occupier",
    "Visibility",
    "build_arena",
    "visible_from",
]
