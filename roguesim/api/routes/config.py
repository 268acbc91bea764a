"""GET /api/v1/config — expose game configuration."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from roguesim.api.dependencies import get_engine_manager
from roguesim.api.engine_manager import EngineManager
from roguesim.api.schemas import SimulationConfigResponse

router = APIRouter()


@router.get("/config", response_model=SimulationConfigResponse)
def get_config(
    manager: EngineManager = Depends(get_engine_manager),
) -> SimulationConfigResponse:
    cfg = manager.config
    return SimulationConfigResponse(
        world_seed=cfg.world_seed,
        grid_width=cfg.grid_width,
        grid_height=cfg.grid_height,
        monster_count=cfg.monster_count,
        potion_count=cfg.potion_count,
        player_vision_radius=cfg.player_vision_radius,
        npc_vision_radius=cfg.npc_vision_radius,
        hostility_threshold=cfg.hostility_threshold,
        meditate_cost=cfg.meditate_cost,
        action_cost=cfg.action_cost,
        turn_delay_ticks=cfg.turn_delay_ticks,
        planner_max_expansions=cfg.planner_max_expansions,
        pathfinder_max_nodes=cfg.pathfinder_max_nodes,
        max_steps_per_poll=cfg.max_steps_per_poll,
    )
