"""Trace serialization — writes every intermediate search path to JSON for playback."""

from __future__ import annotations

import json
import logging
from pathlib import Path as FilePath
from typing import Any, Iterable

from tilearena.ai.reachability import Path
from tilearena.core.models import Vector2

logger = logging.getLogger(__name__)


class TraceRecorder:
    """Accumulates search steps and flushes them to a JSON trace file."""

    __slots__ = ("_path", "_start", "_move_range", "_steps")

    def __init__(self, path: str | FilePath, start: Vector2, move_range: int) -> None:
        self._path = FilePath(path)
        self._start = start
        self._move_range = move_range
        self._steps: list[list[list[int]]] = []

    @property
    def step_count(self) -> int:
        return len(self._steps)

    def record(self, step: Path) -> None:
        self._steps.append([cell.as_list() for cell in step])

    def record_all(self, steps: Iterable[Path]) -> None:
        for step in steps:
            self.record(step)

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": "1.0",
            "start": self._start.as_list(),
            "range": self._move_range,
            "total_steps": len(self._steps),
            "steps": self._steps,
        }

    def flush(self) -> None:
        """Write accumulated steps to disk."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")
        logger.info("Trace saved to %s (%d steps)", self._path, len(self._steps))


def load_trace(path: str | FilePath) -> list[Path]:
    """Read a trace file back into a list of paths."""
    data = json.loads(FilePath(path).read_text(encoding="utf-8"))
    return [tuple(Vector2(x, y) for x, y in step) for step in data["steps"]]
