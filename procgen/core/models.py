"""Core data models: Vec3, generation context, and the generated content records."""

from __future__ import annotations

from dataclasses import dataclass

from procgen.core.enums import Era, Faction, FighterId, MissionType, StarClass


@dataclass(frozen=True, slots=True)
class Vec3:
    """Immutable 3D coordinate. Integer for sector coords, float for positions."""

    x: int | float = 0
    y: int | float = 0
    z: int | float = 0

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __repr__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"


@dataclass(frozen=True, slots=True)
class GenContext:
    """Campaign-wide inputs shared by every generation call."""

    global_seed: int
    progression_layer_id: str | None = None


@dataclass(frozen=True, slots=True)
class SystemEntry:
    """Stub for one system inside a sector, before the system is generated."""

    id: str
    seed: int | None
    local_pos: Vec3             # each component in [0, 1)


@dataclass(frozen=True, slots=True)
class SectorDef:
    """A generated sector: archetype, faction field, hazard, and system stubs."""

    id: str
    coord: Vec3
    seed: int
    archetype_id: str
    tags: tuple[str, ...]
    era_echo: tuple[tuple[Era, float], ...]           # (era, weight) in canonical order
    faction_field: tuple[tuple[Faction, float], ...]  # (faction, weight) in canonical order
    controlling_faction: Faction
    hazard_scalar: float
    system_count: int
    systems: tuple[SystemEntry, ...]


@dataclass(frozen=True, slots=True)
class EconomyProfile:
    wealth: float       # 0..1
    industry: float     # 0..1
    security: float     # 0..1


@dataclass(frozen=True, slots=True)
class SystemDef:
    """A fully generated star system."""

    id: str
    seed: int
    sector_id: str
    sector_coord: Vec3
    local_pos: Vec3
    galaxy_pos: Vec3
    archetype_id: str
    tags: tuple[str, ...]
    star_class: StarClass
    planet_count: int
    poi_density: float
    controlling_faction: Faction
    economy: EconomyProfile
    story_anchor_chance: float


@dataclass(frozen=True, slots=True)
class MissionDef:
    id: str
    seed: int
    tier: int
    type: MissionType
    title: str
    description: str
    system_id: str
    controlling_faction: Faction
    goal_kills: int
    reward_credits: int


@dataclass(frozen=True, slots=True)
class SpawnRing:
    min: int
    max: int


@dataclass(frozen=True, slots=True)
class EncounterDef:
    """Enemy wave for one system and progression layer."""

    seed: int
    count: int
    archetypes: tuple[FighterId, ...]
    spawn_ring: SpawnRing
