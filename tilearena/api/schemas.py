"""Pydantic response models for the REST API."""

from __future__ import annotations

from pydantic import BaseModel, Field


# --- Map / layout ---

class MapResponse(BaseModel):
    width: int
    height: int
    epoch: int = 0
    grid: list[int] = Field(default_factory=list)  # RLE: [value, count, value, count, ...]


class LayoutResponse(BaseModel):
    epoch: int
    walls: int
    actor_x: int
    actor_y: int


# --- Actor ---

class ActorResponse(BaseModel):
    x: int
    y: int
    move_range: int
    max_reachable: int


class MoveResponse(BaseModel):
    x: int
    y: int
    route: list[list[int]] = Field(default_factory=list)  # start -> destination


# --- Reachability ---

class ReachableCellSchema(BaseModel):
    x: int
    y: int
    moves: int
    path: list[list[int]] = Field(default_factory=list)  # destination -> start


class ReachableResponse(BaseModel):
    start_x: int
    start_y: int
    range: int
    count: int
    cells: list[ReachableCellSchema] = Field(default_factory=list)


class StepsResponse(BaseModel):
    start_x: int
    start_y: int
    range: int
    total_steps: int
    seconds_per_step: float
    steps: list[list[list[int]]] = Field(default_factory=list)


# --- Events ---

class EventSchema(BaseModel):
    seq: int
    category: str
    message: str


class EventsResponse(BaseModel):
    events: list[EventSchema] = Field(default_factory=list)


# --- Config ---

class ArenaConfigResponse(BaseModel):
    seed: int
    width: int
    height: int
    move_range: int
    wall_threshold_min: float
    wall_threshold_max: float
    noise_scale: float
    seconds_per_tile: float
    seconds_per_step: float
