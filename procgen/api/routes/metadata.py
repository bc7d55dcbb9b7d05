"""Metadata endpoints: expose the static archetype catalog.

Archetypes are pydantic dataclasses defined in procgen/core/archetypes.py and
serialized directly through TypeAdapters, so the catalog has a single source
of truth for both the generators and API clients.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, TypeAdapter

from procgen.core.archetypes import (
    FIGHTER_ARCHETYPES,
    SECTOR_ARCHETYPES,
    SYSTEM_ARCHETYPES,
    FighterArchetype,
    SectorArchetype,
    SystemArchetype,
    enemy_weights_for,
    get_fighter_archetype,
)
from procgen.core.enums import ERA_IDS, FACTION_IDS, STAR_CLASS_IDS
from procgen.core.errors import UnknownArchetypeError

router = APIRouter(prefix="/metadata", tags=["Metadata"])


# ---------------------------------------------------------------------------
# Response wrappers
# ---------------------------------------------------------------------------

class EnemyWeightEntry(BaseModel):
    fighter: str
    weight: float


class ArchetypesResponse(BaseModel):
    eras: list[str]
    factions: list[str]
    star_classes: list[str]
    sector_archetypes: list[dict[str, Any]]
    system_archetypes: list[dict[str, Any]]
    enemy_weights: dict[str, list[EnemyWeightEntry]]


class FightersResponse(BaseModel):
    fighters: list[dict[str, Any]]


# ---------------------------------------------------------------------------
# TypeAdapters for core models
# ---------------------------------------------------------------------------

_sector_ta = TypeAdapter(SectorArchetype)
_system_ta = TypeAdapter(SystemArchetype)
_fighter_ta = TypeAdapter(FighterArchetype)


@router.get("/archetypes", response_model=ArchetypesResponse)
def get_archetypes() -> ArchetypesResponse:
    return ArchetypesResponse(
        eras=[e.value for e in ERA_IDS],
        factions=[f.value for f in FACTION_IDS],
        star_classes=[s.value for s in STAR_CLASS_IDS],
        sector_archetypes=[_sector_ta.dump_python(a, mode="json") for a in SECTOR_ARCHETYPES],
        system_archetypes=[_system_ta.dump_python(a, mode="json") for a in SYSTEM_ARCHETYPES],
        # Every faction is listed, including those that fall back to the default table.
        enemy_weights={
            f.value: [EnemyWeightEntry(fighter=fid.value, weight=w) for fid, w in enemy_weights_for(f)]
            for f in FACTION_IDS
        },
    )


@router.get("/fighters", response_model=FightersResponse)
def get_fighters() -> FightersResponse:
    return FightersResponse(
        fighters=[_fighter_ta.dump_python(a, mode="json") for a in FIGHTER_ARCHETYPES.values()],
    )


@router.get("/fighters/{fighter_id}")
def get_fighter(fighter_id: str) -> dict[str, Any]:
    try:
        archetype = get_fighter_archetype(fighter_id)
    except UnknownArchetypeError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return _fighter_ta.dump_python(archetype, mode="json")

