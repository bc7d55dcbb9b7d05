"""Pydantic response models for the REST API.

Seeds are 64-bit unsigned values, so every seed crosses the wire as decimal
text; JSON numbers lose precision above 2**53 in most clients.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from procgen.core.models import EncounterDef, MissionDef, SectorDef, SystemDef, SystemEntry
from procgen.systems.hashing import format_seed


# --- Seeds ---

class HashRequest(BaseModel):
    parts: list[int | float | str] = Field(default_factory=list)


class DeriveRequest(BaseModel):
    parent: str = Field(..., description="Parent seed as decimal text")
    keys: list[int | float | str] = Field(default_factory=list)


class SeedResponse(BaseModel):
    seed: str


# --- Galaxy ---

class SystemEntrySchema(BaseModel):
    id: str
    seed: str | None = None
    local_pos: tuple[float, float, float]

    @classmethod
    def from_entry(cls, entry: SystemEntry) -> SystemEntrySchema:
        return cls(
            id=entry.id,
            seed=format_seed(entry.seed) if entry.seed is not None else None,
            local_pos=tuple(entry.local_pos),
        )


class SectorSchema(BaseModel):
    id: str
    coord: tuple[int, int, int]
    seed: str
    archetype_id: str
    tags: list[str]
    era_echo: dict[str, float]
    faction_field: dict[str, float]
    controlling_faction: str
    hazard_scalar: float
    system_count: int
    systems: list[SystemEntrySchema]

    @classmethod
    def from_def(cls, sector: SectorDef) -> SectorSchema:
        return cls(
            id=sector.id,
            coord=tuple(int(c) for c in sector.coord),
            seed=format_seed(sector.seed),
            archetype_id=sector.archetype_id,
            tags=list(sector.tags),
            era_echo={k.value: v for k, v in sector.era_echo},
            faction_field={k.value: v for k, v in sector.faction_field},
            controlling_faction=sector.controlling_faction.value,
            hazard_scalar=sector.hazard_scalar,
            system_count=sector.system_count,
            systems=[SystemEntrySchema.from_entry(e) for e in sector.systems],
        )


class SectorSummarySchema(BaseModel):
    id: str
    coord: tuple[int, int, int]
    archetype_id: str
    controlling_faction: str
    system_count: int


class SectorListResponse(BaseModel):
    center: tuple[int, int, int]
    radius: int
    sectors: list[SectorSummarySchema]


class EconomySchema(BaseModel):
    wealth: float
    industry: float
    security: float


class SystemSchema(BaseModel):
    id: str
    seed: str
    sector_id: str
    sector_coord: tuple[int, int, int]
    local_pos: tuple[float, float, float]
    galaxy_pos: tuple[float, float, float]
    archetype_id: str
    tags: list[str]
    star_class: str
    planet_count: int
    poi_density: float
    controlling_faction: str
    economy: EconomySchema
    story_anchor_chance: float
    fingerprint: str = ""

    @classmethod
    def from_def(cls, system: SystemDef, fingerprint: str = "") -> SystemSchema:
        return cls(
            id=system.id,
            seed=format_seed(system.seed),
            sector_id=system.sector_id,
            sector_coord=tuple(int(c) for c in system.sector_coord),
            local_pos=tuple(system.local_pos),
            galaxy_pos=tuple(system.galaxy_pos),
            archetype_id=system.archetype_id,
            tags=list(system.tags),
            star_class=system.star_class.value,
            planet_count=system.planet_count,
            poi_density=system.poi_density,
            controlling_faction=system.controlling_faction.value,
            economy=EconomySchema(
                wealth=system.economy.wealth,
                industry=system.economy.industry,
                security=system.economy.security,
            ),
            story_anchor_chance=system.story_anchor_chance,
            fingerprint=fingerprint,
        )


# --- Missions & encounters ---

class MissionSchema(BaseModel):
    id: str
    seed: str
    tier: int
    type: str
    title: str
    description: str
    system_id: str
    controlling_faction: str
    goal_kills: int
    reward_credits: int

    @classmethod
    def from_def(cls, mission: MissionDef) -> MissionSchema:
        return cls(
            id=mission.id,
            seed=format_seed(mission.seed),
            tier=mission.tier,
            type=mission.type.value,
            title=mission.title,
            description=mission.description,
            system_id=mission.system_id,
            controlling_faction=mission.controlling_faction.value,
            goal_kills=mission.goal_kills,
            reward_credits=mission.reward_credits,
        )


class SpawnRingSchema(BaseModel):
    min: int
    max: int


class EncounterSchema(BaseModel):
    seed: str
    layer_id: str
    count: int
    archetypes: list[str]
    spawn_ring: SpawnRingSchema

    @classmethod
    def from_def(cls, encounter: EncounterDef, layer_id: str) -> EncounterSchema:
        return cls(
            seed=format_seed(encounter.seed),
            layer_id=layer_id,
            count=encounter.count,
            archetypes=[a.value for a in encounter.archetypes],
            spawn_ring=SpawnRingSchema(min=encounter.spawn_ring.min, max=encounter.spawn_ring.max),
        )


# --- Config ---

class GeneratorConfigResponse(BaseModel):
    global_seed: str
    progression_layer_id: str
    max_cached_sectors: int
    max_query_radius: int
    default_mission_tier: int
    cached_sectors: int
