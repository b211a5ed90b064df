"""Plain-text rendering of an arena and a reachable set, for the headless CLI."""

from __future__ import annotations

from tilearena.ai.reachability import SearchResult
from tilearena.core.grid import Grid
from tilearena.core.models import Vector2

WALL = "#"
FLOOR = "."
START = "@"
_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def move_glyph(moves: int) -> str:
    return _DIGITS[moves] if moves < len(_DIGITS) else "+"


def render_map(grid: Grid, start: Vector2 | None = None, reachable: SearchResult | None = None) -> list[str]:
    """Render one string per row, top row (highest y) first.

    Reachable tiles show the number of moves needed to reach them.
    """
    reachable = reachable or {}
    rows: list[str] = []
    for y in range(grid.height - 1, -1, -1):
        chars: list[str] = []
        for x in range(grid.width):
            pos = Vector2(x, y)
            if pos == start:
                chars.append(START)
            elif grid.is_wall(pos):
                chars.append(WALL)
            elif pos in reachable:
                chars.append(move_glyph(len(reachable[pos]) - 1))
            else:
                chars.append(FLOOR)
        rows.append("".join(chars))
    return rows
