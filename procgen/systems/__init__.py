"""Generation systems: hashing, RNG streams, content generators, sector cache."""

from procgen.systems.hashing import derive_seed, hash64
from procgen.systems.rng import RNGStream, create_rng
from procgen.systems.sector import get_sector
from procgen.systems.system import get_system
from procgen.systems.mission import get_mission
from procgen.systems.encounter import get_encounter
from procgen.systems.cache import GalaxyCache

__all__ = [
    "GalaxyCache",
    "RNGStream",
    "create_rng",
    "derive_seed",
    "get_encounter",
    "get_mission",
    "get_sector",
    "get_system",
    "hash64",
]
