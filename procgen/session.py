"""GalaxySession: per-game owner of the sector cache and the cosmetic stream.

Content always comes from the seed hierarchy through the cache.  The cosmetic
stream lives beside it for callers that want throwaway visual randomness, and
is handed out explicitly rather than living at module level.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from procgen.core.models import EncounterDef, GenContext, MissionDef, SectorDef, SystemDef
from procgen.systems.cache import GalaxyCache
from procgen.systems.cosmetic import CosmeticRNG
from procgen.systems.encounter import get_encounter
from procgen.systems.mission import get_mission

if TYPE_CHECKING:
    from procgen.config import GeneratorConfig
    from procgen.systems.cache import Coord
    from procgen.core.models import Vec3

logger = logging.getLogger(__name__)


class GalaxySession:
    """Everything one running game needs to query generated content."""

    __slots__ = ("_config", "_ctx", "_cache", "_cosmetic")

    def __init__(self, config: GeneratorConfig) -> None:
        self._config = config
        self._ctx = config.context()
        self._cache = GalaxyCache(self._ctx, max_sectors=config.max_cached_sectors)
        self._cosmetic = CosmeticRNG(config.cosmetic_seed)
        logger.info(
            "Galaxy session ready (seed=%d, layer=%s, cache=%d sectors)",
            config.global_seed, config.progression_layer_id, config.max_cached_sectors,
        )

    @property
    def config(self) -> GeneratorConfig:
        return self._config

    @property
    def ctx(self) -> GenContext:
        return self._ctx

    @property
    def cache(self) -> GalaxyCache:
        return self._cache

    @property
    def cosmetic(self) -> CosmeticRNG:
        return self._cosmetic

    # -- content --

    def sector(self, coord: Vec3 | Coord) -> SectorDef:
        return self._cache.sector(coord)

    def sectors_in_radius(self, center: Vec3 | Coord, radius: int) -> list[SectorDef]:
        return self._cache.sectors_in_radius(center, radius)

    def system(self, coord: Vec3 | Coord, system_index: int) -> SystemDef:
        return self._cache.system(coord, system_index)

    def mission(self, coord: Vec3 | Coord, system_index: int, tier: int | None = None) -> MissionDef:
        if tier is None:
            tier = self._config.default_mission_tier
        return get_mission(self.system(coord, system_index), tier)

    def encounter(self, coord: Vec3 | Coord, system_index: int, layer_id: str | None = None) -> EncounterDef:
        if layer_id is None:
            layer_id = self._ctx.progression_layer_id or "v0"
        return get_encounter(self.system(coord, system_index), layer_id)

    # -- lifecycle --

    def reset(self) -> None:
        """Drop cached sectors and rewind the cosmetic stream to its configured seed."""
        self._cache.clear()
        self._cosmetic.reset(self._config.cosmetic_seed)
        logger.info("Galaxy session reset")
