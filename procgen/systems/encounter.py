"""Encounter generator: enemy count, fighter mix and spawn ring for a system."""

from __future__ import annotations

from procgen.core.archetypes import FighterArchetype, enemy_weights_for, get_fighter_archetype
from procgen.core.enums import FighterId
from procgen.core.models import EncounterDef, SpawnRing, SystemDef
from procgen.systems.hashing import derive_seed
from procgen.systems.rng import create_rng
from procgen.utils.numeric import round_half_up

DEFAULT_LAYER_ID = "v0"


def get_encounter(system: SystemDef, layer_id: str = DEFAULT_LAYER_ID) -> EncounterDef:
    """Build the enemy encounter for ``system`` on progression layer ``layer_id``.

    Fighters are drawn one ``weighted_pick`` at a time, in order, so the same
    seed always yields the same ordered archetype list.
    """
    seed = derive_seed(system.seed, "encounter", layer_id)
    rng = create_rng(seed)

    density_scalar = 0.8 + system.poi_density * 0.6
    raw_count = rng.range(2, 6) * density_scalar
    count = max(1, round_half_up(raw_count))

    weights = enemy_weights_for(system.controlling_faction)
    archetypes: list[FighterId] = [rng.weighted_pick(weights) for _ in range(count)]

    # Denser encounters spread out farther.
    return EncounterDef(
        seed=seed,
        count=count,
        archetypes=tuple(archetypes),
        spawn_ring=SpawnRing(min=260 + count * 30, max=650 + count * 60),
    )


def resolve_fighters(encounter: EncounterDef) -> tuple[FighterArchetype, ...]:
    """Stat blocks for every fighter in the wave, in spawn order."""
    return tuple(get_fighter_archetype(fid) for fid in encounter.archetypes)
