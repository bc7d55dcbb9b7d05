"""System generator: star class, planets, POI density, economy, story anchors.

Two streams are seeded from the same system seed: a throwaway stream picks the
archetype, and a second stream owned by ``get_system`` performs every numeric
draw.  The archetype choice is therefore independent of the draws that follow.
Merging them into one stream would change every generated system.
"""

from __future__ import annotations

import math

from procgen.core.archetypes import SYSTEM_ARCHETYPES, SystemArchetype, weight_pairs
from procgen.core.enums import STAR_CLASS_IDS, StarClass
from procgen.core.errors import SystemIndexError
from procgen.core.models import EconomyProfile, GenContext, SectorDef, SystemDef
from procgen.systems.hashing import derive_seed
from procgen.systems.rng import RNGStream, create_rng
from procgen.utils.numeric import clamp

HIGH_PATROL_SECURITY = 0.7
LOW_PATROL_SECURITY = 0.3
RUINS_STORY_MULT = 1.5


def _pick_archetype(seed: int) -> SystemArchetype:
    return create_rng(seed).pick(SYSTEM_ARCHETYPES)


def _pick_star_class(archetype: SystemArchetype, rng: RNGStream) -> StarClass:
    return rng.weighted_pick(weight_pairs(archetype.star_class_weights, STAR_CLASS_IDS))


def get_system(sector: SectorDef, system_index: int, ctx: GenContext) -> SystemDef:
    """Generate system ``system_index`` of ``sector``.

    Raises SystemIndexError when the sector has no entry at that index.
    """
    if not 0 <= system_index < len(sector.systems):
        raise SystemIndexError(f"system_index {system_index} out of range for {sector.id}")
    entry = sector.systems[system_index]

    system_seed = entry.seed if entry.seed is not None else derive_seed(sector.seed, "system", system_index)

    archetype = _pick_archetype(system_seed)
    rng = create_rng(system_seed)

    star_class = _pick_star_class(archetype, rng)

    planet_lo, planet_hi = archetype.planet_count_range
    planet_count = math.floor(rng.range(planet_lo, planet_hi + 1))
    poi_density = rng.range(*archetype.poi_density_range)

    wealth = clamp(0.0, 1.0, (1 - sector.hazard_scalar) * rng.range(0.6, 1.0))
    industry = rng.range(0.2, 0.9)
    base_security = HIGH_PATROL_SECURITY if "high_patrol" in sector.tags else LOW_PATROL_SECURITY
    security = clamp(0.0, 1.0, base_security + rng.range(-0.2, 0.3))

    story_anchor_chance = rng.range(0.02, 0.12) * (RUINS_STORY_MULT if "ruins" in sector.tags else 1)

    return SystemDef(
        id=entry.id,
        seed=system_seed,
        sector_id=sector.id,
        sector_coord=sector.coord,
        local_pos=entry.local_pos,
        galaxy_pos=sector.coord + entry.local_pos,
        archetype_id=archetype.id,
        tags=tuple(archetype.tags),
        star_class=star_class,
        planet_count=planet_count,
        poi_density=poi_density,
        controlling_faction=sector.controlling_faction,
        economy=EconomyProfile(wealth=wealth, industry=industry, security=security),
        story_anchor_chance=story_anchor_chance,
    )
