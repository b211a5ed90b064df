"""Grid / map system."""

from __future__ import annotations

from typing import Iterator

from tilearena.core.enums import Material
from tilearena.core.models import Vector2


class Grid:
    """2D tile grid backed by a flat list for cache-friendly access."""

    __slots__ = ("width", "height", "_tiles")

    def __init__(self, width: int, height: int, default: Material = Material.FLOOR) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._tiles: list[Material] = [default] * (width * height)

    @classmethod
    def from_rows(cls, rows: list[str], wall: str = "#") -> Grid:
        """Build a grid from text rows; the first row is the top (highest y)."""
        height = len(rows)
        width = len(rows[0]) if rows else 0
        grid = cls(width, height)
        for row_idx, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"Row {row_idx} has length {len(row)}, expected {width}")
            y = height - 1 - row_idx
            for x, ch in enumerate(row):
                if ch == wall:
                    grid.set_xy(x, y, Material.WALL)
        return grid

    # -- access --

    def _idx(self, x: int, y: int) -> int:
        return y * self.width + x

    def in_bounds(self, pos: Vector2) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def get(self, pos: Vector2) -> Material:
        if not self.in_bounds(pos):
            return Material.WALL
        return self._tiles[self._idx(pos.x, pos.y)]

    def set(self, pos: Vector2, material: Material) -> None:
        if self.in_bounds(pos):
            self._tiles[self._idx(pos.x, pos.y)] = material

    def is_walkable(self, pos: Vector2) -> bool:
        return self.get(pos) == Material.FLOOR

    def is_wall(self, pos: Vector2) -> bool:
        return self.get(pos) == Material.WALL

    # -- fast raw-coordinate access (no Vector2 alloc, for hot loops) --

    def get_xy(self, x: int, y: int) -> Material:
        if 0 <= x < self.width and 0 <= y < self.height:
            return self._tiles[y * self.width + x]
        return Material.WALL

    def set_xy(self, x: int, y: int, material: Material) -> None:
        if 0 <= x < self.width and 0 <= y < self.height:
            self._tiles[y * self.width + x] = material

    def is_open(self, x: int, y: int) -> bool:
        return self.get_xy(x, y) == Material.FLOOR

    # -- bulk --

    def fill(self, material: Material) -> None:
        self._tiles = [material] * (self.width * self.height)

    def free_tiles(self) -> Iterator[Vector2]:
        """Yield every open tile, column by column."""
        for x in range(self.width):
            for y in range(self.height):
                if self._tiles[y * self.width + x] == Material.FLOOR:
                    yield Vector2(x, y)

    def wall_states(self) -> list[list[bool]]:
        """Return a fresh ``[x][y]`` table of wall flags."""
        return [
            [self._tiles[y * self.width + x] == Material.WALL for y in range(self.height)]
            for x in range(self.width)
        ]

    def tiles(self) -> list[Material]:
        """Row-major copy of the tile list."""
        return list(self._tiles)

    # -- copy --

    def copy(self) -> Grid:
        new = Grid.__new__(Grid)
        new.width = self.width
        new.height = self.height
        new._tiles = list(self._tiles)
        return new
