"""Domain-separated deterministic RNG using xxhash.

Every random draw is a pure function of the world seed, so the same seed
always builds the same arena and rolls the same personalities.

Formula: RNG_Value = Hash(WorldSeed, Domain, Key, Salt)
"""

from __future__ import annotations

import struct

import xxhash

from roguesim.core.enums import Domain


class DeterministicRNG:
    """Stateless domain-separated pseudo-random number generator.

    Each call is a pure function of (seed, domain, key, salt) —
    no internal mutable state.
    """

    __slots__ = ("_seed",)

    _MAX_UINT64 = (1 << 64) - 1

    def __init__(self, seed: int) -> None:
        self._seed = seed

    @property
    def seed(self) -> int:
        return self._seed

    def _hash(self, domain: Domain, key: int, salt: int) -> int:
        payload = struct.pack("<qiqi", self._seed, domain.value, key, salt)
        return xxhash.xxh64(payload).intdigest()

    def next_float(self, domain: Domain, key: int, salt: int = 0) -> float:
        """Return a deterministic float in [0.0, 1.0)."""
        return self._hash(domain, key, salt) / (self._MAX_UINT64 + 1)

    def next_int(self, domain: Domain, key: int, salt: int, low: int, high: int) -> int:
        """Return a deterministic integer in [low, high] inclusive."""
        f = self.next_float(domain, key, salt)
        return low + int(f * (high - low + 1))

    def next_bool(self, domain: Domain, key: int, salt: int = 0, probability: float = 0.5) -> bool:
        """Return True with the given probability."""
        return self.next_float(domain, key, salt) < probability
