"""TileArena — owns the wall layout that actors navigate."""

from __future__ import annotations

import logging
from typing import Callable

from tilearena.ai.reachability import Path, SearchResult, enumerate_steps, search
from tilearena.core.enums import Domain, Material
from tilearena.core.grid import Grid
from tilearena.core.models import Vector2
from tilearena.systems.layout import generate_walls
from tilearena.systems.rng import DeterministicRNG

logger = logging.getLogger(__name__)

LayoutListener = Callable[[], None]


class TileArena:
    """A tile arena with a regenerable wall layout.

    Listeners registered with ``subscribe`` are called after every layout
    change, in subscription order.
    """

    __slots__ = ("_grid", "_rng", "_epoch", "_noise_scale", "_listeners")

    def __init__(
        self,
        width: int,
        height: int,
        rng: DeterministicRNG,
        noise_scale: float = 0.35,
    ) -> None:
        self._grid = Grid(width, height)
        self._rng = rng
        self._epoch = 0
        self._noise_scale = noise_scale
        self._listeners: list[LayoutListener] = []

    # -- properties --

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def width(self) -> int:
        return self._grid.width

    @property
    def height(self) -> int:
        return self._grid.height

    @property
    def epoch(self) -> int:
        """Number of layouts generated so far."""
        return self._epoch

    def wall_tile_states(self) -> list[list[bool]]:
        return self._grid.wall_states()

    # -- layout-change observers --

    def subscribe(self, listener: LayoutListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: LayoutListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify_layout_change(self) -> None:
        for listener in list(self._listeners):
            listener()

    # -- queries --

    def get_all_movement_paths(self, start: Vector2, move_range: int) -> SearchResult:
        """Every reachable tile from *start* with a shortest path back to it."""
        return search(self._grid, start, move_range)

    def get_algorithm_steps(self, start: Vector2, move_range: int) -> list[Path]:
        """Every intermediate path the search builds, in visit order."""
        return list(enumerate_steps(self._grid, start, move_range))

    def random_free_tile(self) -> Vector2 | None:
        """Pick a tile without a wall, or None if the arena is solid."""
        pool = list(self._grid.free_tiles())
        if not pool:
            return None
        index = self._rng.next_int(Domain.PLACEMENT, self._epoch, len(pool), 0, len(pool) - 1)
        return pool[index]

    # -- mutation --

    def randomize(self, threshold: float | None = None, low: float = 0.4, high: float = 0.6) -> int:
        """Generate a new wall layout and notify listeners; return the wall count.

        Without an explicit *threshold*, one is drawn from ``[low, high)``.
        """
        self._epoch += 1
        if threshold is None:
            threshold = self._rng.next_range(Domain.THRESHOLD, self._epoch, 0, low, high)
        walls = generate_walls(
            self._grid, self._rng, threshold, epoch=self._epoch, scale=self._noise_scale,
        )
        logger.info(
            "Layout #%d generated: threshold=%.3f walls=%d/%d",
            self._epoch, threshold, walls, self.width * self.height,
        )
        self._notify_layout_change()
        return walls

    def set_wall(self, pos: Vector2, is_wall: bool = True) -> None:
        if not self._grid.in_bounds(pos):
            raise ValueError(f"{pos} is outside the {self.width}x{self.height} arena")
        self._grid.set(pos, Material.WALL if is_wall else Material.FLOOR)
        self._notify_layout_change()

    def clear(self) -> None:
        """Remove every wall."""
        self._grid.fill(Material.FLOOR)
        self._notify_layout_change()
