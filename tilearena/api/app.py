"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tilearena.api.arena_manager import ArenaManager
from tilearena.api.dependencies import install_arena_manager
from tilearena.api.routes import api_router
from tilearena.config import ArenaConfig
from tilearena.utils.logging import configure_logging

logger = logging.getLogger(__name__)


def create_app(config: ArenaConfig | None = None) -> FastAPI:
    """Build and return the fully-configured FastAPI application."""
    if config is None:
        config = ArenaConfig()

    _config = config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        configure_logging(_config)
        manager = ArenaManager(_config)
        install_arena_manager(manager)
        manager.start()
        logger.info("API server started — arena ready.")
        yield
        install_arena_manager(None)
        logger.info("API server shutting down.")

    app = FastAPI(
        title="Tile Arena",
        description=(
            "Reachable-path queries over a tile arena.\n\n"
            "## API Groups\n\n"
            "- **Map** — Wall layout (RLE) and layout regeneration\n"
            "- **Reachability** — Reachable tiles with shortest paths, and the full search trace\n"
            "- **Actor** — Actor location, move range and moves\n"
            "- **Events** — Arena event feed\n"
            "- **Config** — Read-only arena configuration\n"
        ),
        version="0.1.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Map", "description": "Wall layout. Changes only when the layout is regenerated."},
            {"name": "Reachability", "description": "Tiles reachable within a move budget and one shortest path to each; the search trace for playback."},
            {"name": "Actor", "description": "The actor's location and move range; moving along a reachable path."},
            {"name": "Events", "description": "Layout changes and actor moves, polled by sequence number."},
            {"name": "Config", "description": "Read-only arena configuration parameters."},
        ],
    )

    # CORS — allow any origin in dev
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    return app
