"""/api/v1/actor — actor location, move range and moves."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from tilearena.ai.reachability import InvalidArgumentError, max_reachable_cells
from tilearena.api.arena_manager import ArenaManager
from tilearena.api.dependencies import started_arena_manager
from tilearena.api.schemas import ActorResponse, MoveResponse
from tilearena.core.actor import PathNotDeterminedError
from tilearena.core.models import Vector2

router = APIRouter()


def _actor_response(manager: ArenaManager) -> ActorResponse:
    location, move_range = manager.actor_state()
    return ActorResponse(
        x=location.x, y=location.y, move_range=move_range,
        max_reachable=max_reachable_cells(move_range),
    )


@router.get("/actor", response_model=ActorResponse)
def get_actor(manager: ArenaManager = Depends(started_arena_manager)) -> ActorResponse:
    return _actor_response(manager)


@router.put("/actor/range", response_model=ActorResponse)
def set_actor_range(
    value: int = Query(..., description="New move range"),
    manager: ArenaManager = Depends(started_arena_manager),
) -> ActorResponse:
    try:
        manager.set_move_range(value)
    except InvalidArgumentError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return _actor_response(manager)


@router.post("/actor/move", response_model=MoveResponse)
def move_actor(
    x: int = Query(...),
    y: int = Query(...),
    manager: ArenaManager = Depends(started_arena_manager),
) -> MoveResponse:
    try:
        route = manager.move_actor(Vector2(x, y))
    except PathNotDeterminedError as exc:
        raise HTTPException(status_code=409, detail=exc.args[0]) from exc
    return MoveResponse(x=route[-1].x, y=route[-1].y, route=[cell.as_list() for cell in route])
