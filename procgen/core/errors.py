"""Error taxonomy for the generation core.

Every error here is a deterministic input-validation failure: retrying with the
same inputs reproduces the same error.
"""

from __future__ import annotations


class ProcgenError(Exception):
    """Base class for all generation errors."""


class EmptyCollectionError(ProcgenError, ValueError):
    """A draw was requested from an empty collection."""


class InvalidWeightError(ProcgenError, ValueError):
    """Weighted selection over weights whose total is not positive."""


class EmptyWeightsError(EmptyCollectionError, InvalidWeightError):
    """Weighted selection over an empty pair list."""


class SystemIndexError(ProcgenError, IndexError):
    """A system index has no entry in the sector's system list."""


class UnknownArchetypeError(ProcgenError, LookupError):
    """An archetype id is absent from the static tables."""


class InvalidSeedError(ProcgenError, ValueError):
    """Seed text is not a decimal 64-bit unsigned integer."""
