"""GalaxyCache: LRU window of generated sectors keyed by coordinate.

Every sector is re-derivable from (global seed, coordinate), so eviction only
costs regeneration time; it never changes a value.
"""

from __future__ import annotations

import logging
from collections import OrderedDict

from procgen.core.models import GenContext, SectorDef, SystemDef, Vec3
from procgen.systems.sector import get_sector
from procgen.systems.system import get_system

logger = logging.getLogger(__name__)

DEFAULT_MAX_SECTORS = 128

Coord = tuple[int, int, int]


class GalaxyCache:
    """Coordinate-keyed sector cache with least-recently-used eviction.

    Not thread-safe: one cache belongs to one session.
    """

    __slots__ = ("_ctx", "_max_sectors", "_sectors")

    def __init__(self, ctx: GenContext, max_sectors: int = DEFAULT_MAX_SECTORS) -> None:
        if max_sectors < 1:
            raise ValueError(f"max_sectors must be >= 1, got {max_sectors}")
        self._ctx = ctx
        self._max_sectors = max_sectors
        self._sectors: OrderedDict[Coord, SectorDef] = OrderedDict()

    @property
    def ctx(self) -> GenContext:
        return self._ctx

    @property
    def max_sectors(self) -> int:
        return self._max_sectors

    @staticmethod
    def _key(coord: Vec3 | Coord) -> Coord:
        x, y, z = coord
        return int(x), int(y), int(z)

    def sector(self, coord: Vec3 | Coord) -> SectorDef:
        key = self._key(coord)
        cached = self._sectors.get(key)
        if cached is not None:
            self._sectors.move_to_end(key)
            return cached
        sector = get_sector(key, self._ctx)
        self._sectors[key] = sector
        self._evict_if_needed()
        return sector

    def system(self, coord: Vec3 | Coord, system_index: int) -> SystemDef:
        return get_system(self.sector(coord), system_index, self._ctx)

    def sectors_in_radius(self, center: Vec3 | Coord, radius: int) -> list[SectorDef]:
        """All sectors in the cube ``center +/- radius``, iterated x, then y, then z."""
        if radius < 0:
            raise ValueError(f"radius must be >= 0, got {radius}")
        cx, cy, cz = self._key(center)
        out: list[SectorDef] = []
        for dx in range(-radius, radius + 1):
            for dy in range(-radius, radius + 1):
                for dz in range(-radius, radius + 1):
                    out.append(self.sector((cx + dx, cy + dy, cz + dz)))
        return out

    def clear(self) -> None:
        self._sectors.clear()

    def __len__(self) -> int:
        return len(self._sectors)

    def __contains__(self, coord: object) -> bool:
        try:
            return self._key(coord) in self._sectors  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return False

    def _evict_if_needed(self) -> None:
        while len(self._sectors) > self._max_sectors:
            key, _ = self._sectors.popitem(last=False)
            logger.debug("Evicted sector %s from cache", key)
