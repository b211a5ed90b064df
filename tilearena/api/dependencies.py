"""FastAPI dependencies: the process-wide ArenaManager.

``current_arena_manager`` is for routes that work before the first layout exists
(events, config); ``started_arena_manager`` answers 503 until it does.
"""

from __future__ import annotations

from fastapi import HTTPException

from tilearena.api.arena_manager import ArenaManager

_arena_manager: ArenaManager | None = None


def install_arena_manager(manager: ArenaManager | None) -> None:
    """Set (or with None, drop) the manager served to routes."""
    global _arena_manager
    _arena_manager = manager


def current_arena_manager() -> ArenaManager:
    if _arena_manager is None:
        raise HTTPException(status_code=503, detail="Arena server is not running.")
    return _arena_manager


def started_arena_manager() -> ArenaManager:
    manager = current_arena_manager()
    if not manager.started:
        raise HTTPException(status_code=503, detail="Arena not initialized yet.")
    return manager
