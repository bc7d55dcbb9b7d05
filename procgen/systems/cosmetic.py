"""CosmeticRNG: fast LCG for non-deterministic-critical visual randomness.

Owned by a session object and passed explicitly to whatever needs cosmetic
jitter (starfield twinkle, debris spin, radio chatter timing).  It must never
feed the seed-hierarchy generators; their output depends only on seeds.

LCG parameters (glibc): multiplier 1103515245, increment 12345, modulus 2**31.
"""

from __future__ import annotations

import math

_LCG_MUL = 1103515245
_LCG_INC = 12345
_STATE_MASK = 0x7FFFFFFF

DEFAULT_COSMETIC_SEED = 12345


class CosmeticRNG:
    """Resettable 31-bit linear congruential generator."""

    __slots__ = ("_state",)

    def __init__(self, seed: int = DEFAULT_COSMETIC_SEED) -> None:
        self._state = seed & _STATE_MASK

    def next(self) -> float:
        """Return a value in [0.0, 1.0]."""
        self._state = (self._state * _LCG_MUL + _LCG_INC) & _STATE_MASK
        return self._state / _STATE_MASK

    def range(self, lo: float, hi: float) -> float:
        return lo + self.next() * (hi - lo)

    def randint(self, lo: int, hi: int) -> int:
        """Return an integer in [lo, hi] (inclusive)."""
        return min(hi, math.floor(self.range(lo, hi + 1)))

    def reset(self, seed: int) -> None:
        self._state = seed & _STATE_MASK

    @property
    def state(self) -> int:
        return self._state

    @state.setter
    def state(self, value: int) -> None:
        self._state = value & _STATE_MASK
