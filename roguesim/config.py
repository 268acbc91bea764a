"""Simulation configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SimulationConfig:
    """Immutable configuration for a game session."""

    # World
    world_seed: int = 42
    grid_width: int = 40
    grid_height: int = 30

    # Arena contents
    monster_count: int = 6
    potion_count: int = 4
    pillar_count: int = 12
    troll_chance: float = 0.2

    # Vision
    player_vision_radius: int = 20
    npc_vision_radius: int = 8

    # Factions
    hostility_threshold: float = -0.5

    # Action costs (planner edge weights) and turn delays (ticks)
    meditate_cost: int = 2
    action_cost: int = 1
    turn_delay_ticks: int = 1

    # Search budgets
    planner_max_expansions: int = 10_000
    pathfinder_max_nodes: int | None = None

    # Engine
    max_steps_per_poll: int = 1000

    # Logging
    log_level: str = "INFO"
