"""Domain-separated deterministic RNG using xxhash.

Every value is a pure function of (seed, domain, key, salt, extra), so a seeded
arena always produces the same layouts and placements regardless of call order.
"""

from __future__ import annotations

import struct

import xxhash

from tilearena.core.enums import Domain


class DeterministicRNG:
    """Stateless domain-separated pseudo-random number generator.

    No internal mutable state, therefore fully thread-safe.
    """

    __slots__ = ("_seed",)

    _MAX_UINT64 = (1 << 64) - 1

    def __init__(self, seed: int) -> None:
        self._seed = seed

    @property
    def seed(self) -> int:
        return self._seed

    def _hash(self, domain: Domain, key: int, salt: int, extra: int) -> int:
        payload = struct.pack("<qiqqq", self._seed, domain.value, key, salt, extra)
        return xxhash.xxh64(payload).intdigest()

    def next_float(self, domain: Domain, key: int, salt: int, extra: int = 0) -> float:
        """Return a deterministic float in [0.0, 1.0)."""
        return self._hash(domain, key, salt, extra) / (self._MAX_UINT64 + 1)

    def next_int(self, domain: Domain, key: int, salt: int, low: int, high: int) -> int:
        """Return a deterministic integer in [low, high] inclusive."""
        f = self.next_float(domain, key, salt)
        return low + int(f * (high - low + 1))

    def next_range(self, domain: Domain, key: int, salt: int, low: float, high: float) -> float:
        """Return a deterministic float in [low, high)."""
        return low + self.next_float(domain, key, salt) * (high - low)
