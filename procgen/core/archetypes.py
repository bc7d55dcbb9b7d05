"""Archetype catalog: static weighted templates consulted by the generators.

Key types:
  SectorArchetype  : era/faction weights, system-count and hazard ranges
  SystemArchetype  : star-class weights, planet-count and POI-density ranges
  FighterArchetype : flight, weapon and durability stats for enemy fighters

Weight maps are sparse.  A category missing from a map takes an explicit
default weight at lookup time, and pairs are always built in the canonical
enum order (never dict insertion order) so weighted picks stay reproducible.
"""

from __future__ import annotations

from typing import Iterable, Mapping, TypeVar

from pydantic.dataclasses import dataclass as pydantic_dataclass

from procgen.core.enums import Era, Faction, FighterId, StarClass
from procgen.core.errors import UnknownArchetypeError

K = TypeVar("K")

DEFAULT_WEIGHT = 1.0


# ---------------------------------------------------------------------------
# Archetype definitions
# ---------------------------------------------------------------------------

@pydantic_dataclass(frozen=True)
class SectorArchetype:
    """Immutable blueprint for one kind of sector."""

    id: str
    tags: tuple[str, ...]
    era_weights: dict[Era, float]
    faction_weights: dict[Faction, float]
    system_count_range: tuple[int, int]
    hazard_scalar_range: tuple[float, float]


@pydantic_dataclass(frozen=True)
class SystemArchetype:
    """Immutable blueprint for one kind of star system."""

    id: str
    tags: tuple[str, ...]
    star_class_weights: dict[StarClass, float]
    planet_count_range: tuple[int, int]
    poi_density_range: tuple[float, float]


@pydantic_dataclass(frozen=True)
class FighterArchetype:
    """Immutable stat block for an enemy fighter."""

    id: FighterId
    name: str
    faction: Faction
    tags: tuple[str, ...]
    # Flight
    max_speed: float
    accel: float
    turn_rate: float            # rad/s
    # Weapons
    weapon_cooldown: float      # seconds between shots
    projectile_speed: float
    damage: float
    # Durability
    hp: float
    shield_hp: float
    hit_radius: float
    # AI behaviour (0..1)
    aggression: float
    evade_bias: float


# ---------------------------------------------------------------------------
# Sector archetypes
# ---------------------------------------------------------------------------

SECTOR_ARCHETYPES: tuple[SectorArchetype, ...] = (
    SectorArchetype(
        id="core_metropolis",
        tags=("core", "high_patrol", "wealthy"),
        era_weights={Era.OLD_REPUBLIC: 0.2, Era.CLONE_WARS: 0.2, Era.EMPIRE: 0.3, Era.NEW_REPUBLIC: 0.3},
        faction_weights={
            Faction.REPUBLIC: 0.35, Faction.EMPIRE: 0.25,
            Faction.INDEPENDENT: 0.2, Faction.JEDI_REMNANT: 0.1,
        },
        system_count_range=(10, 18),
        hazard_scalar_range=(0.1, 0.4),
    ),
    SectorArchetype(
        id="outer_rim_frontier",
        tags=("frontier", "low_patrol", "smuggler_friendly"),
        era_weights={
            Era.OLD_REPUBLIC: 0.15, Era.CLONE_WARS: 0.25, Era.EMPIRE: 0.25,
            Era.NEW_REPUBLIC: 0.25, Era.FIRST_ORDER: 0.1,
        },
        faction_weights={
            Faction.HUTTS: 0.25, Faction.PIRATES: 0.25, Faction.INDEPENDENT: 0.25,
            Faction.EMPIRE: 0.15, Faction.REPUBLIC: 0.1,
        },
        system_count_range=(6, 14),
        hazard_scalar_range=(0.2, 0.7),
    ),
    SectorArchetype(
        id="hutt_space",
        tags=("criminal", "trade_hub"),
        era_weights={Era.OLD_REPUBLIC: 0.2, Era.CLONE_WARS: 0.2, Era.EMPIRE: 0.3, Era.NEW_REPUBLIC: 0.3},
        faction_weights={Faction.HUTTS: 0.55, Faction.PIRATES: 0.2, Faction.INDEPENDENT: 0.25},
        system_count_range=(8, 16),
        hazard_scalar_range=(0.2, 0.6),
    ),
    SectorArchetype(
        id="war_scarred_remnant",
        tags=("battlefields", "ruins", "dangerous"),
        era_weights={Era.CLONE_WARS: 0.5, Era.EMPIRE: 0.3, Era.OLD_REPUBLIC: 0.2},
        faction_weights={
            Faction.PIRATES: 0.35, Faction.EMPIRE: 0.25,
            Faction.INDEPENDENT: 0.25, Faction.SITH_CULT: 0.15,
        },
        system_count_range=(5, 10),
        hazard_scalar_range=(0.5, 0.9),
    ),
)


# ---------------------------------------------------------------------------
# System archetypes
# ---------------------------------------------------------------------------

SYSTEM_ARCHETYPES: tuple[SystemArchetype, ...] = (
    SystemArchetype(
        id="trade_lane_hub",
        tags=("trade", "high_traffic"),
        star_class_weights={
            StarClass.G: 0.2, StarClass.K: 0.2, StarClass.F: 0.2,
            StarClass.M: 0.2, StarClass.A: 0.2,
        },
        planet_count_range=(4, 9),
        poi_density_range=(0.6, 1.0),
    ),
    SystemArchetype(
        id="smuggler_hideout",
        tags=("smuggler", "low_patrol"),
        star_class_weights={StarClass.M: 0.4, StarClass.K: 0.3, StarClass.G: 0.2, StarClass.NEUTRON: 0.1},
        planet_count_range=(2, 6),
        poi_density_range=(0.3, 0.7),
    ),
    SystemArchetype(
        id="dead_system",
        tags=("haunted", "anomaly"),
        star_class_weights={StarClass.BLACK_HOLE: 0.3, StarClass.NEUTRON: 0.3, StarClass.M: 0.4},
        planet_count_range=(0, 3),
        poi_density_range=(0.2, 0.5),
    ),
)


# ---------------------------------------------------------------------------
# Fighter archetypes and per-faction enemy tables
# ---------------------------------------------------------------------------

FIGHTER_ARCHETYPES: dict[FighterId, FighterArchetype] = {}


def _reg(a: FighterArchetype) -> None:
    FIGHTER_ARCHETYPES[a.id] = a


_reg(FighterArchetype(
    id=FighterId.TIE_LN, name="TIE/ln Space Superiority Fighter", faction=Faction.EMPIRE,
    tags=("fighter", "imperial", "swarm"),
    max_speed=260, accel=150, turn_rate=1.5,
    weapon_cooldown=0.14, projectile_speed=900, damage=8,
    hp=60, shield_hp=0, hit_radius=9,
    aggression=0.75, evade_bias=0.4,
))
_reg(FighterArchetype(
    id=FighterId.Z95, name="Z-95 Headhunter", faction=Faction.INDEPENDENT,
    tags=("fighter", "militia", "durable"),
    max_speed=230, accel=120, turn_rate=1.2,
    weapon_cooldown=0.16, projectile_speed=850, damage=7,
    hp=80, shield_hp=20, hit_radius=11,
    aggression=0.6, evade_bias=0.45,
))
_reg(FighterArchetype(
    id=FighterId.PIRATE_FANG, name="Pirate Fang", faction=Faction.PIRATES,
    tags=("fighter", "pirate", "raider"),
    max_speed=250, accel=140, turn_rate=1.35,
    weapon_cooldown=0.13, projectile_speed=880, damage=9,
    hp=70, shield_hp=10, hit_radius=10,
    aggression=0.8, evade_bias=0.35,
))

_EMPIRE_ENEMIES: tuple[tuple[FighterId, float], ...] = (
    (FighterId.TIE_LN, 0.75),
    (FighterId.Z95, 0.15),
    (FighterId.PIRATE_FANG, 0.1),
)
_OUTLAW_ENEMIES: tuple[tuple[FighterId, float], ...] = (
    (FighterId.PIRATE_FANG, 0.6),
    (FighterId.Z95, 0.3),
    (FighterId.TIE_LN, 0.1),
)
_DEFAULT_ENEMIES: tuple[tuple[FighterId, float], ...] = (
    (FighterId.Z95, 0.6),
    (FighterId.PIRATE_FANG, 0.25),
    (FighterId.TIE_LN, 0.15),
)

# Faction -> ordered (fighter, weight) pairs.  Order is part of the contract.
ENEMY_WEIGHTS: dict[Faction, tuple[tuple[FighterId, float], ...]] = {
    Faction.EMPIRE: _EMPIRE_ENEMIES,
    Faction.PIRATES: _OUTLAW_ENEMIES,
    Faction.HUTTS: _OUTLAW_ENEMIES,
}


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------

def weight_pairs(
    weights: Mapping[K, float],
    canonical_ids: Iterable[K],
    default: float = DEFAULT_WEIGHT,
) -> list[tuple[K, float]]:
    """Build ``(id, weight)`` pairs in canonical order, filling gaps with ``default``."""
    return [(cid, weights.get(cid, default)) for cid in canonical_ids]


def enemy_weights_for(faction: Faction) -> tuple[tuple[FighterId, float], ...]:
    return ENEMY_WEIGHTS.get(faction, _DEFAULT_ENEMIES)


def get_fighter_archetype(fighter_id: FighterId | str) -> FighterArchetype:
    """Look up a fighter stat block.  Raises UnknownArchetypeError for unknown ids."""
    try:
        key = FighterId(fighter_id)
    except ValueError:
        raise UnknownArchetypeError(f"Unknown fighter archetype: {fighter_id}") from None
    return FIGHTER_ARCHETYPES[key]


def get_sector_archetype(archetype_id: str) -> SectorArchetype:
    for a in SECTOR_ARCHETYPES:
        if a.id == archetype_id:
            return a
    raise UnknownArchetypeError(f"Unknown sector archetype: {archetype_id}")


def get_system_archetype(archetype_id: str) -> SystemArchetype:
    for a in SYSTEM_ARCHETYPES:
        if a.id == archetype_id:
            return a
    raise UnknownArchetypeError(f"Unknown system archetype: {archetype_id}")
