"""Small numeric helpers shared by the generators."""

from __future__ import annotations

import math


def round_half_up(x: float) -> int:
    """Round to nearest, ties toward +inf (not Python's banker's rounding).

    ``floor(x + 0.5)`` is wrong just below a half: 0.49999999999999994 + 0.5
    rounds up to 1.0 in binary floating point, so compare the fractional part.
    """
    f = math.floor(x)
    return f + (1 if x - f >= 0.5 else 0)


def clamp(lo: float, hi: float, x: float) -> float:
    return min(hi, max(lo, x))


def clamp_int(x: float, lo: int, hi: int) -> int:
    return min(hi, max(lo, round_half_up(x)))
