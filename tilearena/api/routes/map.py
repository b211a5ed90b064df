"""GET /api/v1/map and POST /api/v1/layout/randomize — the wall layout."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from tilearena.api.arena_manager import ArenaManager
from tilearena.api.dependencies import started_arena_manager
from tilearena.api.schemas import LayoutResponse, MapResponse

router = APIRouter()


def rle_encode(values: list[int]) -> list[int]:
    """Run-length encode as a flat ``[value, count, value, count, ...]`` list."""
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
def get_map(manager: ArenaManager = Depends(started_arena_manager)) -> MapResponse:
    grid = manager.get_grid()
    tiles = [int(t) for t in grid.tiles()]
    return MapResponse(width=grid.width, height=grid.height, epoch=manager.get_epoch(), grid=rle_encode(tiles))


@router.post("/layout/randomize", response_model=LayoutResponse)
def randomize_layout(
    threshold: float | None = Query(None, ge=0.0, le=1.0, description="Noise threshold; lower means more walls"),
    manager: ArenaManager = Depends(started_arena_manager),
) -> LayoutResponse:
    walls = manager.randomize(threshold)
    location, _ = manager.actor_state()
    return LayoutResponse(epoch=manager.get_epoch(), walls=walls, actor_x=location.x, actor_y=location.y)
