"""Versioned API route modules."""

from fastapi import APIRouter

from tilearena.api.routes.actor import router as actor_router
from tilearena.api.routes.config import router as config_router
from tilearena.api.routes.events import router as events_router
from tilearena.api.routes.map import router as map_router
from tilearena.api.routes.reachability import router as reachability_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(map_router, tags=["Map"])
api_router.include_router(reachability_router, tags=["Reachability"])
api_router.include_router(actor_router, tags=["Actor"])
api_router.include_router(events_router, tags=["Events"])
api_router.include_router(config_router, tags=["Config"])

__all__ = ["api_router"]
