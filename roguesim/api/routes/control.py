"""POST /api/v1/control/{action} and /api/v1/act — drive the game session."""

from __future__ import annotations

from enum import Enum

from fastapi import APIRouter, Depends, HTTPException

from roguesim.api.dependencies import get_engine_manager
from roguesim.api.engine_manager import EngineManager
from roguesim.api.schemas import ActRequest, ControlResponse
from roguesim.core.enums import ActionType, EngineState

router = APIRouter()


class ControlAction(str, Enum):
    step = "step"
    reset = "reset"


def _response(manager: EngineManager, status: str, message: str) -> ControlResponse:
    snapshot = manager.get_snapshot()
    if snapshot is None:
        return ControlResponse(status=status, message=message)
    return ControlResponse(
        status=status,
        message=message,
        time=str(snapshot.time),
        player_turns=snapshot.player_turns,
    )


@router.post("/control/{action}", response_model=ControlResponse)
def control(
    action: ControlAction,
    manager: EngineManager = Depends(get_engine_manager),
) -> ControlResponse:
    match action:
        case ControlAction.step:
            if manager.engine_state == EngineState.HALTED:
                return _response(manager, "noop", "Game has halted.")
            if manager.awaiting_player:
                return _response(manager, "noop", "Waiting for player input.")
            manager.step()
            return _response(manager, "ok", "Single step executed.")

        case ControlAction.reset:
            manager.reset()
            return _response(manager, "ok", "Game reset.")


@router.post("/act", response_model=ControlResponse)
def act(
    body: ActRequest,
    manager: EngineManager = Depends(get_engine_manager),
) -> ControlResponse:
    try:
        verb = ActionType[body.verb.upper()]
    except KeyError:
        raise HTTPException(status_code=422, detail=f"Unknown verb {body.verb!r}")

    delta = None
    if body.dx is not None or body.dy is not None:
        delta = (body.dx or 0, body.dy or 0)

    try:
        accepted = manager.act(verb, delta)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc))

    if not accepted:
        raise HTTPException(status_code=409, detail="Not the player's turn.")
    return _response(manager, "ok", f"{verb.name.lower()} accepted.")
