"""GET /api/v1/config — expose arena configuration."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from tilearena.api.arena_manager import ArenaManager
from tilearena.api.dependencies import current_arena_manager
from tilearena.api.schemas import ArenaConfigResponse

router = APIRouter()


@router.get("/config", response_model=ArenaConfigResponse)
def get_config(
    manager: ArenaManager = Depends(current_arena_manager),
) -> ArenaConfigResponse:
    cfg = manager.config
    return ArenaConfigResponse(
        seed=cfg.seed,
        width=cfg.width,
        height=cfg.height,
        move_range=cfg.move_range,
        wall_threshold_min=cfg.wall_threshold_min,
        wall_threshold_max=cfg.wall_threshold_max,
        noise_scale=cfg.noise_scale,
        seconds_per_tile=cfg.seconds_per_tile,
        seconds_per_step=cfg.seconds_per_step,
    )
