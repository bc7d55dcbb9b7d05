"""Enumerations used throughout the generators.

Declaration order is the canonical iteration order for weighted selection, so
members must never be reordered once seeds have been published.
"""

from __future__ import annotations

from enum import Enum, unique


@unique
class Era(str, Enum):
    """Historical eras a sector can echo."""

    OLD_REPUBLIC = "old_republic"
    CLONE_WARS = "clone_wars"
    EMPIRE = "empire"
    NEW_REPUBLIC = "new_republic"
    FIRST_ORDER = "first_order"


@unique
class Faction(str, Enum):
    """Factions that can control sectors and systems."""

    REPUBLIC = "republic"
    EMPIRE = "empire"
    HUTTS = "hutts"
    PIRATES = "pirates"
    INDEPENDENT = "independent"
    SITH_CULT = "sith_cult"
    JEDI_REMNANT = "jedi_remnant"


@unique
class StarClass(str, Enum):
    """Primary star classification of a system."""

    O = "o"
    B = "b"
    A = "a"
    F = "f"
    G = "g"
    K = "k"
    M = "m"
    NEUTRON = "neutron"
    BLACK_HOLE = "black_hole"


@unique
class FighterId(str, Enum):
    """Enemy fighter archetypes an encounter can field."""

    TIE_LN = "tie_ln"
    Z95 = "z95"
    PIRATE_FANG = "pirate_fang"


@unique
class MissionType(str, Enum):
    """Procedural mission categories."""

    BOUNTY = "bounty"


ERA_IDS: tuple[Era, ...] = tuple(Era)
FACTION_IDS: tuple[Faction, ...] = tuple(Faction)
STAR_CLASS_IDS: tuple[StarClass, ...] = tuple(StarClass)
