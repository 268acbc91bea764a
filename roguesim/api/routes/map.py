"""GET /api/v1/map — terrain plus the player's visibility memory."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from roguesim.api.dependencies import get_engine_manager
from roguesim.api.engine_manager import EngineManager
from roguesim.api.schemas import CellSchema, MapResponse

router = APIRouter()


def rle_encode(values: list[int]) -> list[int]:
    """RLE encode: [value, count, value, count, ...]"""
    rle: list[int] = []
    if not values:
        return rle
    cur_val = values[0]
    cur_count = 1
    for v in values[1:]:
        if v == cur_val:
            cur_count += 1
        else:
            rle.append(cur_val)
            rle.append(cur_count)
            cur_val = v
            cur_count = 1
    rle.append(cur_val)
    rle.append(cur_count)
    return rle


@router.get("/map", response_model=MapResponse)
def get_map(manager: EngineManager = Depends(get_engine_manager)) -> MapResponse:
    snapshot = manager.get_snapshot()
    if snapshot is None:
        raise HTTPException(status_code=503, detail="Game not initialized yet.")

    grid = snapshot.grid
    return MapResponse(
        width=grid.width,
        height=grid.height,
        grid=rle_encode([int(t) for t in grid.tiles]),
        visible=[CellSchema(x=c.x, y=c.y) for c in sorted(snapshot.visible)],
        explored=[CellSchema(x=c.x, y=c.y) for c in sorted(snapshot.explored)],
    )
