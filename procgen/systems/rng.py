"""Seeded pseudo-random stream built on splitmix64.

Each draw advances the 64-bit state exactly once, so two streams from the
same seed driven through the same call sequence agree at every step.  Calling
in a different order gives different results even with the same call count.
"""

from __future__ import annotations

from typing import Sequence, TypeVar

from procgen.core.errors import EmptyCollectionError, EmptyWeightsError, InvalidWeightError
from procgen.systems.hashing import UINT64_MASK, splitmix64

T = TypeVar("T")

_U32_MASK = 0xFFFFFFFF
_TWO_POW_32 = float(1 << 32)


class RNGStream:
    """Stateful deterministic generator.  Owned by a single generation call."""

    __slots__ = ("_state",)

    def __init__(self, seed: int) -> None:
        self._state = seed & UINT64_MASK

    @property
    def state(self) -> int:
        return self._state

    def next_u32(self) -> int:
        """Return an integer in [0, 2**32 - 1]."""
        self._state = splitmix64(self._state)
        return self._state & _U32_MASK

    def next_f01(self) -> float:
        """Return a float in [0.0, 1.0)."""
        return self.next_u32() / _TWO_POW_32

    def range(self, lo: float, hi: float) -> float:
        """Return ``lo + (hi - lo) * f``.  Still consumes a draw when lo == hi."""
        return lo + (hi - lo) * self.next_f01()

    def pick(self, items: Sequence[T]) -> T:
        if not items:
            raise EmptyCollectionError("pick() from empty collection")
        idx = int(self.next_f01() * len(items))
        # float rounding must never reach len(items)
        return items[min(idx, len(items) - 1)]

    def weighted_pick(self, pairs: Sequence[tuple[T, float]]) -> T:
        """Pick a value from ``(value, weight)`` pairs, walking them in the given order."""
        if not pairs:
            raise EmptyWeightsError("weighted_pick() from empty list")
        total = 0.0
        for _, w in pairs:
            total += w
        if total <= 0:
            raise InvalidWeightError("weighted_pick() total weight <= 0")
        r = self.next_f01() * total
        for value, w in pairs:
            r -= w
            if r <= 0:
                return value
        return pairs[-1][0]

    def __repr__(self) -> str:
        return f"RNGStream(state={self._state})"


def create_rng(seed: int) -> RNGStream:
    return RNGStream(seed)
