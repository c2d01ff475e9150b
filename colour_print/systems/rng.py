"""Seeded pseudo-random sequence for level generation.

Minimal-standard multiplicative LCG: seed <- seed * 16807 mod (2**31 - 1).
A level's whole target is a pure function of its id, so the sequence is
seeded from the id alone and owned by a single generation call.
"""

from __future__ import annotations

import math

SEED_MULTIPLIER = 15485863
LCG_MULTIPLIER = 16807
LCG_MODULUS = 2147483647  # 2**31 - 1


class SeededSequence:
    """Reproducible stream of floats in [0.0, 1.0) derived from an integer id.

    Not thread-safe: every draw mutates the seed. Create one per level.
    """

    __slots__ = ("_seed",)

    def __init__(self, level_id: int) -> None:
        self._seed = level_id * SEED_MULTIPLIER

    @property
    def seed(self) -> int:
        return self._seed

    def next_float(self) -> float:
        """Advance the seed and return a float in [0.0, 1.0)."""
        self._seed = (self._seed * LCG_MULTIPLIER) % LCG_MODULUS
        return (self._seed - 1) / (LCG_MODULUS - 1)

    def next_index(self, k: int) -> int:
        """Return an index drawn uniformly from [0, k)."""
        if k <= 0:
            raise ValueError(f"cannot draw from an empty range (k={k})")
        return min(math.floor(self.next_float() * k), k - 1)

    def choice(self, options):
        """Pick one element of a non-empty sequence."""
        return options[self.next_index(len(options))]
