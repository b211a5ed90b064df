"""Core data models and grid representation."""

from tilearena.core.enums import Direction, Domain, Material
from tilearena.core.models import DIRECTION_OFFSETS, Vector2
from tilearena.core.grid import Grid

__all__ = [
    "DIRECTION_OFFSETS",
    "Direction",
    "Domain",
    "Grid",
    "Material",
    "Vector2",
]
