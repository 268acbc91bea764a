"""Pydantic response models for the REST API."""

from __future__ import annotations

from pydantic import BaseModel, Field


# --- Entity ---

class EntitySchema(BaseModel):
    id: int
    kind: str
    glyph: str
    x: int
    y: int
    name: str = ""
    hp: int = 0
    max_hp: int = 0
    faction: str = ""
    calmness: float = 0.0
    thirst: float = 0.0
    vision_radius: int = 0
    blocks: bool = False
    potable: bool = False
    visible: bool = Field(False, description="Inside the player's current field of view")


class CellSchema(BaseModel):
    x: int
    y: int


# --- Map ---

class MapResponse(BaseModel):
    width: int
    height: int
    grid: list[int] = Field(description="RLE-encoded Material values: [value, count, value, count, ...] (0=Floor,1=Wall,2=Void)")
    visible: list[CellSchema] = Field(default_factory=list)
    explored: list[CellSchema] = Field(default_factory=list)


# --- World State ---

class EventSchema(BaseModel):
    time: str
    category: str
    message: str
    entity_ids: list[int] = Field(default_factory=list)


class WorldStateResponse(BaseModel):
    time: str
    ticks: int
    player_turns: int
    engine_state: str
    current_actor: int | None = None
    input_mode: str
    cursor: CellSchema | None = None
    look_path: list[CellSchema] = Field(default_factory=list)
    entities: list[EntitySchema]
    events: list[EventSchema] = Field(default_factory=list)


# --- Control ---

class ActRequest(BaseModel):
    verb: str = Field(description="pass | stop | move_attack | look | play")
    dx: int | None = None
    dy: int | None = None


class ControlResponse(BaseModel):
    status: str
    message: str
    time: str = "0.000000"
    player_turns: int = 0


# --- Config ---

class SimulationConfigResponse(BaseModel):
    world_seed: int
    grid_width: int
    grid_height: int
    monster_count: int
    potion_count: int
    player_vision_radius: int
    npc_vision_radius: int
    hostility_threshold: float
    meditate_cost: int
    action_cost: int
    turn_delay_ticks: int
    planner_max_expansions: int
    pathfinder_max_nodes: int | None = None
    max_steps_per_poll: int
