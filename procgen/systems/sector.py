"""Sector generator: archetype, era/faction fields, hazard and system stubs."""

from __future__ import annotations

import math
from typing import Iterable, Mapping, TypeVar

from procgen.core.archetypes import SECTOR_ARCHETYPES, SectorArchetype, weight_pairs
from procgen.core.enums import ERA_IDS, FACTION_IDS
from procgen.core.models import GenContext, SectorDef, SystemEntry, Vec3
from procgen.systems.hashing import derive_seed
from procgen.systems.rng import RNGStream, create_rng

K = TypeVar("K")

# Weight given to categories an archetype leaves out, before jitter.
NORMALIZE_BASELINE = 0.05


def normalize_weights(
    base: Mapping[K, float],
    all_ids: Iterable[K],
    rng: RNGStream,
    baseline: float = NORMALIZE_BASELINE,
) -> dict[K, float]:
    """Jitter each weight by +/-10% (one draw per id, canonical order) and normalise to sum 1."""
    out: dict[K, float] = {}
    total = 0.0
    for cid, w in weight_pairs(base, all_ids, default=baseline):
        w0 = w * (0.9 + rng.next_f01() * 0.2)
        out[cid] = w0
        total += w0
    return {cid: w / total for cid, w in out.items()}


def _pick_archetype(seed: int) -> SectorArchetype:
    return create_rng(seed).pick(SECTOR_ARCHETYPES)


def get_sector(coord: Vec3 | tuple[int, int, int], ctx: GenContext) -> SectorDef:
    """Generate the sector at an integer galaxy coordinate."""
    x, y, z = (int(c) for c in coord)
    sector_seed = derive_seed(ctx.global_seed, "sector", x, y, z)

    archetype = _pick_archetype(sector_seed)
    rng = create_rng(sector_seed)

    era_echo = normalize_weights(archetype.era_weights, ERA_IDS, rng)
    faction_field = normalize_weights(archetype.faction_weights, FACTION_IDS, rng)
    controlling_faction = rng.weighted_pick([(fid, faction_field[fid]) for fid in FACTION_IDS])

    count_lo, count_hi = archetype.system_count_range
    system_count = math.floor(rng.range(count_lo, count_hi + 1))
    hazard_scalar = rng.range(*archetype.hazard_scalar_range)

    systems: list[SystemEntry] = []
    for i in range(system_count):
        system_seed = derive_seed(sector_seed, "system", i)
        srng = create_rng(system_seed)
        systems.append(SystemEntry(
            id=f"sys_{x}_{y}_{z}_{i}",
            seed=system_seed,
            local_pos=Vec3(srng.next_f01(), srng.next_f01(), srng.next_f01()),
        ))

    return SectorDef(
        id=f"sector_{x}_{y}_{z}",
        coord=Vec3(x, y, z),
        seed=sector_seed,
        archetype_id=archetype.id,
        tags=tuple(archetype.tags),
        era_echo=tuple(era_echo.items()),
        faction_field=tuple(faction_field.items()),
        controlling_faction=controlling_faction,
        hazard_scalar=hazard_scalar,
        system_count=system_count,
        systems=tuple(systems),
    )
