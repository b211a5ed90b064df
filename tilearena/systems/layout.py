"""Noise-driven wall layouts.

Walls are placed wherever smooth 2D value noise exceeds a threshold, so they
clump into blobs instead of scattering like salt. A lower threshold means more
walls.
"""

from __future__ import annotations

import math

from tilearena.core.enums import Domain, Material
from tilearena.core.grid import Grid
from tilearena.systems.rng import DeterministicRNG


def _smoothstep(t: float) -> float:
    return t * t * (3.0 - 2.0 * t)


def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def value_noise(rng: DeterministicRNG, epoch: int, fx: float, fy: float) -> float:
    """Sample lattice value noise at (fx, fy); result is in [0.0, 1.0)."""
    x0 = math.floor(fx)
    y0 = math.floor(fy)
    sx = _smoothstep(fx - x0)
    sy = _smoothstep(fy - y0)

    c00 = rng.next_float(Domain.LAYOUT, epoch, x0, y0)
    c10 = rng.next_float(Domain.LAYOUT, epoch, x0 + 1, y0)
    c01 = rng.next_float(Domain.LAYOUT, epoch, x0, y0 + 1)
    c11 = rng.next_float(Domain.LAYOUT, epoch, x0 + 1, y0 + 1)

    return _lerp(_lerp(c00, c10, sx), _lerp(c01, c11, sx), sy)


def generate_walls(
    grid: Grid,
    rng: DeterministicRNG,
    threshold: float,
    epoch: int = 0,
    scale: float = 0.35,
) -> int:
    """Overwrite every tile of *grid* from noise; return the wall count."""
    if not 0.0 <= threshold <= 1.0:
        raise ValueError(f"threshold must be within [0, 1], got {threshold}")

    walls = 0
    for x in range(grid.width):
        for y in range(grid.height):
            is_wall = value_noise(rng, epoch, x * scale, y * scale) > threshold
            grid.set_xy(x, y, Material.WALL if is_wall else Material.FLOOR)
            walls += is_wall
    return walls
