"""Thread-safe bounded event feed exposed via the API."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ArenaEvent:
    """A single arena event for the API event feed."""

    seq: int
    category: str
    message: str


class EventLog:
    """Ring buffer of arena events. Writers append; readers snapshot a slice.

    Sequence numbers keep increasing after old events fall off the end, so
    pollers can ask for everything since the last number they saw.
    """

    __slots__ = ("_buffer", "_lock", "_next_seq")

    def __init__(self, maxlen: int = 500) -> None:
        self._buffer: deque[ArenaEvent] = deque(maxlen=maxlen)
        self._lock = threading.Lock()
        self._next_seq = 0

    def append(self, category: str, message: str) -> ArenaEvent:
        with self._lock:
            event = ArenaEvent(seq=self._next_seq, category=category, message=message)
            self._next_seq += 1
            self._buffer.append(event)
            return event

    def since(self, seq: int) -> list[ArenaEvent]:
        """Return all retained events with sequence number >= *seq*."""
        with self._lock:
            return [e for e in self._buffer if e.seq >= seq]

    def latest(self, count: int = 50) -> list[ArenaEvent]:
        """Return the *count* most recent events."""
        with self._lock:
            items = list(self._buffer)
        return items[-count:]

    def __len__(self) -> int:
        with self._lock:
            return len(self._buffer)

    def clear(self) -> None:
        with self._lock:
            self._buffer.clear()
