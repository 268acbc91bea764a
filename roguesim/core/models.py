"""Core data models: Vector2, Attributes, Liquid, Entity."""

from __future__ import annotations

from dataclasses import dataclass, field, replace


@dataclass(frozen=True, slots=True, order=True)
class Vector2:
    """Immutable 2D integer coordinate."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def delta(self, dx: int, dy: int) -> Vector2:
        return Vector2(self.x + dx, self.y + dy)

    def manhattan(self, other: Vector2) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def neighbours(self) -> tuple[Vector2, ...]:
        """The 8 surrounding cells, row by row from the top-left."""
        return tuple(self.delta(dx, dy) for dx, dy in NEIGHBOUR_OFFSETS)

    def __repr__(self) -> str:
        return f"({self.x}, {self.y})"


NEIGHBOUR_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0), (1, 0),
    (-1, 1), (0, 1), (1, 1),
)


@dataclass(slots=True)
class Attributes:
    """Personality, needs and vitals of a living entity.

    Read by the planner, mutated only by the engine (and, eventually,
    combat / needs systems).
    """

    name: str = ""
    blocks: bool = True
    alive: bool = True
    goodness: float = 0.0
    lawfulness: float = 0.0
    calmness: float = 0.0
    thirst: float = 0.0
    hp: int = 10
    max_hp: int = 10
    vision_radius: int = 0
    faction: str = ""


@dataclass(frozen=True, slots=True)
class Liquid:
    """Marks an item entity as a liquid."""

    potable: bool = False


@dataclass(slots=True)
class Entity:
    """A thing on the map: the player, a monster, a potion..."""

    id: int
    kind: str
    pos: Vector2
    glyph: str = "?"
    attributes: Attributes | None = None
    liquid: Liquid | None = None
    ai_controlled: bool = False
    tags: set[str] = field(default_factory=set)

    @property
    def blocks(self) -> bool:
        """True if this entity occupies its cell for movement purposes."""
        return self.attributes is not None and self.attributes.blocks and self.attributes.alive

    @property
    def alive(self) -> bool:
        return self.attributes is not None and self.attributes.alive

    @property
    def is_potable(self) -> bool:
        return self.liquid is not None and self.liquid.potable

    def copy(self) -> Entity:
        return replace(
            self,
            attributes=replace(self.attributes) if self.attributes is not None else None,
            tags=set(self.tags),
        )
