"""Faction opinions — how one group of entities regards another.

Opinions are directional (subject → object) floats; a pair with no entry is
neutral (0.0). The table is a read-only input to the utility scorer.
"""

from __future__ import annotations

from dataclasses import dataclass

PLAYER = "player"
MONSTER = "monster"
NEUTRAL = "neutral"

HOSTILE_THRESHOLD = -0.5
FRIENDLY_THRESHOLD = 0.5


@dataclass(frozen=True, slots=True, order=True)
class Opinion:
    """A subject faction's feeling about an object faction, in [-1, 1]."""

    value: float = 0.0

    def is_positive(self) -> bool:
        return self.value > 0.0

    def is_negative(self) -> bool:
        return self.value < 0.0

    def is_friendly(self) -> bool:
        return self.value > FRIENDLY_THRESHOLD

    def is_hostile(self) -> bool:
        return self.value < HOSTILE_THRESHOLD


class FactionTable:
    """Data-driven registry of directional opinions between factions.

    Usage:
        table = FactionTable.default()
        table.get("monster", "player")          # → Opinion(-1.0)
        table.is_hostile("monster", "player")   # → True
    """

    __slots__ = ("player_faction", "_opinions")

    def __init__(self, player_faction: str = PLAYER) -> None:
        self.player_faction = player_faction
        self._opinions: dict[tuple[str, str], Opinion] = {}

    # -- builders --

    def set(self, subject: str, obj: str, opinion: Opinion | float) -> None:
        if not isinstance(opinion, Opinion):
            opinion = Opinion(float(opinion))
        self._opinions[(subject, obj)] = opinion

    def set_symmetric(self, subject: str, obj: str, opinion: Opinion | float) -> None:
        self.set(subject, obj, opinion)
        self.set(obj, subject, opinion)

    # -- queries --

    def get(self, subject: str, obj: str) -> Opinion:
        return self._opinions.get((subject, obj), Opinion())

    def is_hostile(self, subject: str, obj: str) -> bool:
        return self.get(subject, obj).is_hostile()

    def is_friendly(self, subject: str, obj: str) -> bool:
        return self.get(subject, obj).is_friendly()

    # -- factory --

    @classmethod
    def default(cls) -> FactionTable:
        """Player and monsters hate each other; everything else is neutral."""
        table = cls(PLAYER)
        table.set_symmetric(PLAYER, MONSTER, -1.0)
        return table
