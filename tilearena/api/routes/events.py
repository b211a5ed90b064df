"""GET /api/v1/events — arena event feed."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from tilearena.api.arena_manager import ArenaManager
from tilearena.api.dependencies import current_arena_manager
from tilearena.api.schemas import EventSchema, EventsResponse

router = APIRouter()


@router.get("/events", response_model=EventsResponse)
def get_events(
    since: int = Query(0, ge=0, description="Return events with seq >= since"),
    manager: ArenaManager = Depends(current_arena_manager),
) -> EventsResponse:
    events = manager.event_log.since(since)
    return EventsResponse(
        events=[EventSchema(seq=e.seq, category=e.category, message=e.message) for e in events],
    )
