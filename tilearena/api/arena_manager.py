"""ArenaManager — owns the live arena and actor behind the API.

FastAPI runs sync routes on a threadpool, so every access to the arena or
actor goes through one lock.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from tilearena.ai.reachability import Path, SearchResult
from tilearena.core.actor import TileActor
from tilearena.core.arena import TileArena
from tilearena.core.grid import Grid
from tilearena.core.models import Vector2
from tilearena.systems.rng import DeterministicRNG
from tilearena.utils.event_log import EventLog

if TYPE_CHECKING:
    from tilearena.config import ArenaConfig

logger = logging.getLogger(__name__)


class ArenaManager:
    """Manages the arena session lifecycle.

    Provides thread-safe access to:
      - the current layout (copied out for readers)
      - the actor (location, range, path selection, moves)
      - the event feed (lock-guarded ring buffer)
    """

    def __init__(self, config: ArenaConfig) -> None:
        self.config = config
        self._lock = threading.Lock()
        self._event_log = EventLog(config.max_events)
        self._started = False
        self._build()

    # -- public properties --

    @property
    def started(self) -> bool:
        return self._started

    @property
    def event_log(self) -> EventLog:
        return self._event_log

    # -- lifecycle --

    def start(self) -> None:
        """Generate the first layout. Calling again is a no-op."""
        with self._lock:
            if self._started:
                return
            self._started = True
            self._randomize_locked(None)
        logger.info("ArenaManager started (%dx%d, seed=%d)", self.config.width, self.config.height, self.config.seed)

    def reset(self) -> None:
        """Rebuild from config and generate a fresh first layout."""
        with self._lock:
            self._actor.detach()
            self._event_log.clear()
            self._build()
            self._randomize_locked(None)
            self._started = True
        logger.info("ArenaManager reset.")

    # -- reads --

    def get_grid(self) -> Grid:
        with self._lock:
            return self._arena.grid.copy()

    def get_epoch(self) -> int:
        with self._lock:
            return self._arena.epoch

    def actor_state(self) -> tuple[Vector2, int]:
        with self._lock:
            return self._actor.location, self._actor.move_range

    def reachable(self, start: Vector2 | None = None, move_range: int | None = None) -> tuple[Vector2, int, SearchResult]:
        """Search from *start* (default: the actor) with *move_range* (default: the actor's).

        Querying with the actor's own location and range also refreshes its
        selectable paths.
        """
        with self._lock:
            actor = self._actor
            origin = actor.location if start is None else start
            budget = actor.move_range if move_range is None else move_range
            if origin == actor.location and budget == actor.move_range:
                result = dict(actor.select())
            else:
                result = self._arena.get_all_movement_paths(origin, budget)
        return origin, budget, result

    def steps(self, start: Vector2 | None = None, move_range: int | None = None) -> tuple[Vector2, int, list[Path]]:
        with self._lock:
            origin = self._actor.location if start is None else start
            budget = self._actor.move_range if move_range is None else move_range
            trace = self._arena.get_algorithm_steps(origin, budget)
        return origin, budget, trace

    # -- writes --

    def randomize(self, threshold: float | None = None) -> int:
        with self._lock:
            return self._randomize_locked(threshold)

    def set_move_range(self, value: int) -> None:
        with self._lock:
            self._actor.move_range = value
        self._event_log.append("actor", f"Move range set to {value}")

    def move_actor(self, dest: Vector2) -> Path:
        """Move the actor to *dest* along its selected path, selecting first if needed."""
        with self._lock:
            actor = self._actor
            if dest not in actor.available_paths:
                actor.select()
            origin = actor.location
            route = actor.move_to(dest)
        self._event_log.append("actor", f"Actor moved {origin} -> {dest} ({len(route) - 1} steps)")
        return route

    # -- internals --

    def _build(self) -> None:
        cfg = self.config
        self._arena = TileArena(cfg.width, cfg.height, DeterministicRNG(cfg.seed), noise_scale=cfg.noise_scale)
        self._actor = TileActor(self._arena, Vector2(0, 0), cfg.move_range)
        # Subscribed after the actor so the logged location is the relocated one.
        self._arena.subscribe(self._on_layout_change)

    def _randomize_locked(self, threshold: float | None) -> int:
        cfg = self.config
        return self._arena.randomize(threshold, low=cfg.wall_threshold_min, high=cfg.wall_threshold_max)

    def _on_layout_change(self) -> None:
        self._event_log.append(
            "layout",
            f"Layout #{self._arena.epoch} ready; actor at {self._actor.location}",
        )
