"""AIContext — single object handed to every action provider."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from roguesim.ai.pathfinding import Pathfinder
from roguesim.ai.perception import Perception
from roguesim.core.models import Entity, Vector2

if TYPE_CHECKING:
    from roguesim.config import SimulationConfig
    from roguesim.core.snapshot import Snapshot


@dataclass(slots=True)
class AIContext:
    """All data a provider might need. Extend this to add new perception
    inputs without changing provider signatures."""

    actor: Entity
    snapshot: Snapshot
    config: SimulationConfig
    pathfinder: Pathfinder

    # -- cached helpers (lazily populated) --

    _visible: frozenset[Vector2] | None = None

    @property
    def visible(self) -> frozenset[Vector2]:
        if self._visible is None:
            self._visible = Perception.visible_cells(
                self.actor, self.snapshot, self.config.npc_vision_radius)
        return self._visible

    def can_see(self, other: Entity) -> bool:
        return other.pos in self.visible

    def path_to(self, pos: Vector2) -> tuple[list[Vector2], int] | None:
        return self.pathfinder.find_path(self.actor.pos, pos, self.snapshot.occupied)

    def can_reach(self, pos: Vector2) -> bool:
        """Co-located, or a finite path exists."""
        if pos == self.actor.pos:
            return True
        return self.path_to(pos) is not None
