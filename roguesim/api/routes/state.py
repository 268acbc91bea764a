"""GET /api/v1/state — dynamic entity & event data (polled by UI)."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from roguesim.api.dependencies import get_engine_manager
from roguesim.api.engine_manager import EngineManager
from roguesim.api.schemas import CellSchema, EntitySchema, EventSchema, WorldStateResponse
from roguesim.core.time import Time

router = APIRouter()


def _serialize_entity(e, visible) -> EntitySchema:
    a = e.attributes
    return EntitySchema(
        id=e.id,
        kind=e.kind,
        glyph=e.glyph,
        x=e.pos.x,
        y=e.pos.y,
        name=a.name if a else e.kind,
        hp=a.hp if a else 0,
        max_hp=a.max_hp if a else 0,
        faction=a.faction if a else "",
        calmness=a.calmness if a else 0.0,
        thirst=a.thirst if a else 0.0,
        vision_radius=a.vision_radius if a else 0,
        blocks=e.blocks,
        potable=e.is_potable,
        visible=e.pos in visible,
    )


@router.get("/state", response_model=WorldStateResponse)
def get_state(
    since: int | None = Query(None, ge=0, description="Only events at or after this tick"),
    limit: int = Query(50, ge=1, le=1000, description="Maximum number of events to return"),
    manager: EngineManager = Depends(get_engine_manager),
) -> WorldStateResponse:
    snapshot, engine_state, actor = manager.get_view()
    if snapshot is None:
        raise HTTPException(status_code=503, detail="No snapshot available yet.")

    if since is not None:
        events = manager.event_log.since(Time(since))[-limit:]
    else:
        events = manager.event_log.latest(limit)

    return WorldStateResponse(
        time=str(snapshot.time),
        ticks=snapshot.time.ticks,
        player_turns=snapshot.player_turns,
        engine_state=engine_state.name.lower(),
        current_actor=actor.entity_id if actor else None,
        input_mode=snapshot.input_mode.name.lower(),
        cursor=CellSchema(x=snapshot.cursor.x, y=snapshot.cursor.y) if snapshot.cursor else None,
        look_path=[CellSchema(x=c.x, y=c.y) for c in snapshot.look_path],
        entities=[
            _serialize_entity(snapshot.entities[eid], snapshot.visible)
            for eid in sorted(snapshot.entities)
        ],
        events=[
            EventSchema(time=str(e.time), category=e.category, message=e.message, entity_ids=list(e.entity_ids))
            for e in events
        ],
    )
