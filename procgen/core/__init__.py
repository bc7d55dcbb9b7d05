"""Core data models, enumerations, archetype tables and errors."""

from procgen.core.enums import Era, Faction, FighterId, MissionType, StarClass
from procgen.core.errors import (
    EmptyCollectionError,
    EmptyWeightsError,
    InvalidSeedError,
    InvalidWeightError,
    ProcgenError,
    SystemIndexError,
    UnknownArchetypeError,
)
from procgen.core.models import (
    EconomyProfile,
    EncounterDef,
    GenContext,
    MissionDef,
    SectorDef,
    SpawnRing,
    SystemDef,
    SystemEntry,
    Vec3,
)

__all__ = [
    "EconomyProfile",
    "EmptyCollectionError",
    "EmptyWeightsError",
    "EncounterDef",
    "Era",
    "Faction",
    "FighterId",
    "GenContext",
    "InvalidSeedError",
    "InvalidWeightError",
    "MissionDef",
    "MissionType",
    "ProcgenError",
    "SectorDef",
    "SpawnRing",
    "StarClass",
    "SystemDef",
    "SystemEntry",
    "SystemIndexError",
    "UnknownArchetypeError",
    "Vec3",
]
