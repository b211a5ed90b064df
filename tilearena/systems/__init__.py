"""Arena systems: RNG and layout generation."""

from tilearena.systems.rng import DeterministicRNG
from tilearena.systems.layout import generate_walls, value_noise

__all__ = ["DeterministicRNG", "generate_walls", "value_noise"]
