"""Deterministic galaxy content engine.

One 64-bit campaign seed plus a key path reproduces any sector, system,
mission or encounter without persisting it.
"""

from procgen.core.archetypes import get_fighter_archetype
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
    EncounterDef,
    GenContext,
    MissionDef,
    SectorDef,
    SystemDef,
    SystemEntry,
    Vec3,
)
from procgen.systems.hashing import derive_seed, format_seed, hash64, parse_seed
from procgen.systems.rng import RNGStream, create_rng
from procgen.systems.sector import get_sector
from procgen.systems.system import get_system
from procgen.systems.mission import get_mission
from procgen.systems.encounter import get_encounter

__version__ = "0.1.0"

__all__ = [
    "EmptyCollectionError",
    "EmptyWeightsError",
    "EncounterDef",
    "GenContext",
    "InvalidSeedError",
    "InvalidWeightError",
    "MissionDef",
    "ProcgenError",
    "RNGStream",
    "SectorDef",
    "SystemDef",
    "SystemEntry",
    "SystemIndexError",
    "UnknownArchetypeError",
    "Vec3",
    "create_rng",
    "derive_seed",
    "format_seed",
    "get_encounter",
    "get_fighter_archetype",
    "get_mission",
    "get_sector",
    "get_system",
    "hash64",
    "parse_seed",
]
