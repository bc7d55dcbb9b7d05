"""64-bit hashing and hierarchical seed derivation.

The seed tree: a campaign seed is folded with ordered domain keys
(``"sector", x, y, z`` -> ``"system", i`` -> ``"mission", tier`` ...) to reach
any node.  The full key path is required to reproduce a child seed.

Formula: child = fold(parent, keys) where each step is
    state = splitmix64(state ^ hash_key(key))

Python ints are arbitrary precision, so every add/multiply is masked back to
64 bits to reproduce unsigned wraparound exactly.
"""

from __future__ import annotations

import math
from typing import Iterable, Union

from procgen.core.errors import InvalidSeedError

Key = Union[str, int, float]

UINT64_MASK = (1 << 64) - 1

_GOLDEN_GAMMA = 0x9E3779B97F4A7C15
_MIX_MUL_1 = 0xBF58476D1CE4E5B9
_MIX_MUL_2 = 0x94D049BB133111EB

_FNV_OFFSET_BASIS = 0xCBF29CE484222325
_FNV_PRIME = 0x100000001B3


def splitmix64(x: int) -> int:
    """Avalanche-mix one 64-bit word."""
    z = (x + _GOLDEN_GAMMA) & UINT64_MASK
    z = ((z ^ (z >> 30)) * _MIX_MUL_1) & UINT64_MASK
    z = ((z ^ (z >> 27)) * _MIX_MUL_2) & UINT64_MASK
    return z ^ (z >> 31)


def fnv1a64(text: str) -> int:
    """FNV-1a over UTF-16 code units, so non-BMP characters count as two units."""
    data = text.encode("utf-16-le", "surrogatepass")
    h = _FNV_OFFSET_BASIS
    for i in range(0, len(data), 2):
        h ^= data[i] | (data[i + 1] << 8)
        h = (h * _FNV_PRIME) & UINT64_MASK
    return h


def hash_key(key: Key) -> int:
    """Normalize one heterogeneous key to a 64-bit unsigned value.

    - ``str``   -> fnv1a64
    - ``int``   -> two's-complement reinterpretation (negatives differ from positives)
    - ``float`` -> floored first, so 3.14 and 3.99 hash identically
    """
    if isinstance(key, str):
        return fnv1a64(key)
    if isinstance(key, int):
        return key & UINT64_MASK
    if isinstance(key, float):
        return math.floor(key) & UINT64_MASK
    raise TypeError(f"Unsupported seed key type: {type(key).__name__}")


def hash64(parts: Iterable[Key]) -> int:
    """Fold keys into a root seed.  An empty sequence yields ``splitmix64(0)``."""
    parts = list(parts)
    if not parts:
        return splitmix64(0)
    state = 0
    for part in parts:
        state = splitmix64(state ^ hash_key(part))
    return state


def derive_seed(parent: int, *keys: Key) -> int:
    """Derive a child seed from ``parent`` and an ordered key path.

    With no keys the loop never runs and the (masked) parent is returned
    unchanged.
    """
    state = parent & UINT64_MASK
    for key in keys:
        state = splitmix64(state ^ hash_key(key))
    return state


def parse_seed(text: str) -> int:
    """Parse a decimal seed string (the text form used by config, CLI and API)."""
    raw = text.strip()
    if raw.startswith("+"):
        raw = raw[1:]
    if not raw or not raw.isascii() or not raw.isdigit():
        raise InvalidSeedError(f"Seed must be a decimal unsigned integer, got {text!r}")
    value = int(raw)
    if value > UINT64_MASK:
        raise InvalidSeedError(f"Seed {text!r} does not fit in 64 bits")
    return value


def format_seed(seed: int) -> str:
    return str(seed & UINT64_MASK)
