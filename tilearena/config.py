"""Arena configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ArenaConfig:
    """Immutable configuration for an arena session."""

    # World
    seed: int = 42
    width: int = 10
    height: int = 10

    # Layout generation: a threshold is drawn from [min, max) per randomize
    wall_threshold_min: float = 0.4
    wall_threshold_max: float = 0.6
    noise_scale: float = 0.35

    # Actor
    move_range: int = 3

    # Presentation timing, passed through to consumers
    seconds_per_tile: float = 1.0       # actor travel animation
    seconds_per_step: float = 0.1       # search trace playback

    # Event feed
    max_events: int = 500

    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s [%(levelname)-5s] %(name)-25s | %(message)s"
    log_datefmt: str = "%H:%M:%S"

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Arena dimensions must be positive, got {self.width}x{self.height}")
        if self.move_range < 0:
            raise ValueError("move_range must be greater than or equal to zero")
        if not 0.0 <= self.wall_threshold_min <= self.wall_threshold_max <= 1.0:
            raise ValueError("wall thresholds must satisfy 0 <= min <= max <= 1")
