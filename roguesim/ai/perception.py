"""Perception system — what an actor can see and who it considers an enemy.

All methods are stateless and operate on immutable snapshots.
Enemy detection goes through the FactionTable, so changing who hates whom
requires zero changes here.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from roguesim.core.faction import HOSTILE_THRESHOLD
from roguesim.core.models import Entity, Vector2
from roguesim.systems.fov import visible_from

if TYPE_CHECKING:
    from roguesim.core.snapshot import Snapshot


class Perception:
    """Stateless perception utilities operating on immutable snapshots."""

    __slots__ = ()

    # ------------------------------------------------------------------
    # Vision
    # ------------------------------------------------------------------

    @staticmethod
    def visible_cells(actor: Entity, snapshot: Snapshot, default_radius: int) -> frozenset[Vector2]:
        """Cells in *actor*'s field of view.

        The player reuses the maintained player FOV; everyone else gets a
        scratch shadow-cast from their own position.
        """
        if actor.id == snapshot.player_id:
            return snapshot.visible
        radius = default_radius
        if actor.attributes is not None and actor.attributes.vision_radius > 0:
            radius = actor.attributes.vision_radius
        return frozenset(visible_from(snapshot.grid, actor.pos, radius))

    # ------------------------------------------------------------------
    # Faction-aware queries
    # ------------------------------------------------------------------

    @staticmethod
    def is_hostile(
        actor: Entity,
        other: Entity,
        snapshot: Snapshot,
        threshold: float = HOSTILE_THRESHOLD,
    ) -> bool:
        """True if *other*'s faction regards *actor*'s faction as an enemy."""
        if actor.attributes is None or other.attributes is None:
            return False
        opinion = snapshot.factions.get(other.attributes.faction, actor.attributes.faction)
        return opinion.value < threshold

    @staticmethod
    def hostiles(
        actor: Entity,
        snapshot: Snapshot,
        threshold: float = HOSTILE_THRESHOLD,
    ) -> list[Entity]:
        """Live hostile entities, in entity-id order."""
        result: list[Entity] = []
        for eid in sorted(snapshot.entities):
            if eid == actor.id:
                continue
            other = snapshot.entities[eid]
            if other.alive and Perception.is_hostile(actor, other, snapshot, threshold):
                result.append(other)
        return result

    @staticmethod
    def potables(snapshot: Snapshot) -> list[Entity]:
        """Potable liquid entities, in entity-id order."""
        return [snapshot.entities[eid] for eid in sorted(snapshot.entities) if snapshot.entities[eid].is_potable]
