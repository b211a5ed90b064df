"""GET /api/v1/reachable and /api/v1/steps — reachable-path queries."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from tilearena.ai.reachability import InvalidArgumentError
from tilearena.api.arena_manager import ArenaManager
from tilearena.api.dependencies import started_arena_manager
from tilearena.api.schemas import ReachableCellSchema, ReachableResponse, StepsResponse
from tilearena.core.models import Vector2

router = APIRouter()


def _origin(x: int | None, y: int | None) -> Vector2 | None:
    if x is None and y is None:
        return None
    if x is None or y is None:
        raise HTTPException(status_code=422, detail="Both x and y must be given, or neither.")
    return Vector2(x, y)


@router.get("/reachable", response_model=ReachableResponse)
def get_reachable(
    x: int | None = Query(None, description="Start x (defaults to the actor)"),
    y: int | None = Query(None, description="Start y (defaults to the actor)"),
    range_: int | None = Query(None, alias="range", description="Move budget (defaults to the actor's)"),
    manager: ArenaManager = Depends(started_arena_manager),
) -> ReachableResponse:
    try:
        start, budget, result = manager.reachable(_origin(x, y), range_)
    except InvalidArgumentError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    cells = [
        ReachableCellSchema(
            x=dest.x, y=dest.y, moves=len(path) - 1,
            path=[cell.as_list() for cell in path],
        )
        for dest, path in result.items()
    ]
    return ReachableResponse(start_x=start.x, start_y=start.y, range=budget, count=len(cells), cells=cells)


@router.get("/steps", response_model=StepsResponse)
def get_steps(
    x: int | None = Query(None, description="Start x (defaults to the actor)"),
    y: int | None = Query(None, description="Start y (defaults to the actor)"),
    range_: int | None = Query(None, alias="range", description="Move budget (defaults to the actor's)"),
    manager: ArenaManager = Depends(started_arena_manager),
) -> StepsResponse:
    try:
        start, budget, trace = manager.steps(_origin(x, y), range_)
    except InvalidArgumentError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    return StepsResponse(
        start_x=start.x,
        start_y=start.y,
        range=budget,
        total_steps=len(trace),
        seconds_per_step=manager.config.seconds_per_step,
        steps=[[cell.as_list() for cell in step] for step in trace],
    )
