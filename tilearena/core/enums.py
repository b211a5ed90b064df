"""Enumerations used throughout the arena."""

from __future__ import annotations

from enum import IntEnum, unique


@unique
class Material(IntEnum):
    """Tile materials. Only FLOOR is open to movement."""

    FLOOR = 0
    WALL = 1


@unique
class Direction(IntEnum):
    """Axis-aligned step directions, in the order the search tries them."""

    LEFT = 0
    RIGHT = 1
    UP = 2
    DOWN = 3


@unique
class Domain(IntEnum):
    """RNG domains for deterministic randomness isolation."""

    LAYOUT = 0
    THRESHOLD = 1
    PLACEMENT = 2
