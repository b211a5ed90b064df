"""Bounded reachable-path search.

Finds every tile an actor can reach within a move budget, together with one
shortest path to each, using a depth-first walk that remembers the best
moves-left value seen per tile and only re-expands a tile when it is reached
with strictly more budget than before.

Usage:
    paths = search(grid, Vector2(2, 2), 3)          # {dest: (dest, ..., start)}
    for step in enumerate_steps(grid, start, 3):    # every path state, in push order
        draw(step)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Protocol

from tilearena.core.models import DIRECTION_OFFSETS, Vector2

logger = logging.getLogger(__name__)

# Destination first, start last.
Path = tuple[Vector2, ...]
SearchResult = dict[Vector2, Path]

# Left, right, up, down. Order decides which of several equally short paths wins.
_STEPS: tuple[tuple[int, int], ...] = tuple((d.x, d.y) for d in DIRECTION_OFFSETS.values())


class InvalidArgumentError(ValueError):
    """Raised for a negative move range or a start outside the grid."""


class GridSource(Protocol):
    """Anything with bounds and an open/blocked predicate."""

    width: int
    height: int

    def is_open(self, x: int, y: int) -> bool: ...


@dataclass(slots=True)
class _Frame:
    x: int
    y: int
    next_dir: int = 0


def max_reachable_cells(move_range: int) -> int:
    """Upper bound on result size: the diamond of radius *move_range*."""
    if move_range < 0:
        raise InvalidArgumentError("Range must be greater than or equal to zero.")
    return 1 + 2 * move_range * (move_range + 1)


def _validate(grid: GridSource, start: Vector2, move_range: int) -> None:
    if move_range < 0:
        raise InvalidArgumentError("Range must be greater than or equal to zero.")
    if not 0 <= start.x < grid.width:
        raise InvalidArgumentError(
            f"Starting point x coordinate {start.x} is not within the arena bounds [0, {grid.width})."
        )
    if not 0 <= start.y < grid.height:
        raise InvalidArgumentError(
            f"Starting point y coordinate {start.y} is not within the arena bounds [0, {grid.height})."
        )


def _traverse(grid: GridSource, start: Vector2, move_range: int) -> Iterator[tuple[Vector2, Path]]:
    """Yield ``(cell, path)`` on every push of the depth-first walk.

    The memo is a dense box covering the intersection of the grid and the
    ``start +/- r`` square. A step is only taken while budget remains, so
    every visited cell falls inside it.
    """
    width = grid.width
    height = grid.height
    is_open = grid.is_open

    origin_x = max(0, start.x - move_range)
    origin_y = max(0, start.y - move_range)
    span_x = min(width - 1, start.x + move_range) - origin_x + 1
    span_y = min(height - 1, start.y + move_range) - origin_y + 1
    best_moves_left = [-1] * (span_x * span_y)

    path: list[Vector2] = [start]
    moves_left = move_range
    best_moves_left[(start.x - origin_x) * span_y + (start.y - origin_y)] = moves_left
    yield start, (start,)

    stack: list[_Frame] = [_Frame(start.x, start.y)]
    while stack:
        frame = stack[-1]
        if moves_left > 0 and frame.next_dir < len(_STEPS):
            dx, dy = _STEPS[frame.next_dir]
            frame.next_dir += 1
            nx = frame.x + dx
            ny = frame.y + dy
            if not (0 <= nx < width and 0 <= ny < height):
                continue
            if not is_open(nx, ny):
                continue
            slot = (nx - origin_x) * span_y + (ny - origin_y)
            if best_moves_left[slot] >= moves_left - 1:
                continue

            moves_left -= 1
            best_moves_left[slot] = moves_left
            cell = Vector2(nx, ny)
            path.append(cell)
            stack.append(_Frame(nx, ny))
            yield cell, tuple(reversed(path))
        else:
            # Branch exhausted: step back and let the parent try its next direction.
            stack.pop()
            path.pop()
            moves_left += 1


def search(grid: GridSource, start: Vector2, move_range: int) -> SearchResult:
    """Return ``{destination: path}`` for every tile reachable within *move_range*.

    Each path runs from the destination back to *start* and is one of the
    shortest routes to it. *start* itself maps to ``(start,)``. A blocked start
    is not checked; a start with no open neighbours yields only itself.

    Raises InvalidArgumentError if *move_range* is negative or *start* lies
    outside the grid.
    """
    _validate(grid, start, move_range)

    result: SearchResult = {}
    pushes = 0
    for cell, path in _traverse(grid, start, move_range):
        result[cell] = path
        pushes += 1

    logger.debug(
        "Reachability from %s range=%d: %d cells, %d pushes",
        start, move_range, len(result), pushes,
    )
    return result


def enumerate_steps(grid: GridSource, start: Vector2, move_range: int) -> Iterator[Path]:
    """Lazily replay the search, yielding the current path on every push.

    Arguments are validated immediately; the traversal itself runs as the
    iterator is consumed. Calling again produces the identical sequence.
    """
    _validate(grid, start, move_range)
    return (path for _, path in _traverse(grid, start, move_range))


class ReachabilitySearch:
    """Reachability queries bound to a single grid.

    Holds no per-query state, so one instance can serve any number of
    concurrent callers as long as the grid is not mutated meanwhile.
    """

    __slots__ = ("_grid",)

    def __init__(self, grid: GridSource) -> None:
        self._grid = grid

    @property
    def grid(self) -> GridSource:
        return self._grid

    def search(self, start: Vector2, move_range: int) -> SearchResult:
        return search(self._grid, start, move_range)

    def enumerate_steps(self, start: Vector2, move_range: int) -> Iterator[Path]:
        return enumerate_steps(self._grid, start, move_range)

    def path_to(self, start: Vector2, move_range: int, dest: Vector2) -> Path | None:
        """Return the path to *dest*, or None if it is out of reach."""
        return self.search(start, move_range).get(dest)
