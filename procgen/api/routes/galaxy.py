"""GET /api/v1/galaxy/*: sectors, systems, missions and encounters on demand."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from procgen.api.dependencies import get_session, session_lock
from procgen.api.schemas import (
    EncounterSchema,
    MissionSchema,
    SectorListResponse,
    SectorSchema,
    SectorSummarySchema,
    SystemSchema,
)
from procgen.core.errors import SystemIndexError
from procgen.session import GalaxySession
from procgen.utils.fingerprint import content_fingerprint

router = APIRouter(prefix="/galaxy")


@router.get("/sectors", response_model=SectorListResponse)
def list_sectors(
    x: int = Query(0), y: int = Query(0), z: int = Query(0),
    radius: int = Query(1, ge=0, description="Cube radius in sectors"),
    session: GalaxySession = Depends(get_session),
) -> SectorListResponse:
    max_radius = session.config.max_query_radius
    if radius > max_radius:
        raise HTTPException(status_code=422, detail=f"radius must be <= {max_radius}")
    with session_lock():
        sectors = session.sectors_in_radius((x, y, z), radius)
    return SectorListResponse(
        center=(x, y, z),
        radius=radius,
        sectors=[
            SectorSummarySchema(
                id=s.id,
                coord=tuple(int(c) for c in s.coord),
                archetype_id=s.archetype_id,
                controlling_faction=s.controlling_faction.value,
                system_count=s.system_count,
            )
            for s in sectors
        ],
    )


@router.get("/sectors/{x}/{y}/{z}", response_model=SectorSchema)
def get_sector(x: int, y: int, z: int, session: GalaxySession = Depends(get_session)) -> SectorSchema:
    with session_lock():
        sector = session.sector((x, y, z))
    return SectorSchema.from_def(sector)


@router.get("/sectors/{x}/{y}/{z}/systems/{index}", response_model=SystemSchema)
def get_system(
    x: int, y: int, z: int, index: int,
    session: GalaxySession = Depends(get_session),
) -> SystemSchema:
    try:
        with session_lock():
            system = session.system((x, y, z), index)
    except SystemIndexError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return SystemSchema.from_def(system, fingerprint=content_fingerprint(system))


@router.get("/sectors/{x}/{y}/{z}/systems/{index}/mission", response_model=MissionSchema)
def get_mission(
    x: int, y: int, z: int, index: int,
    tier: int | None = Query(None, ge=0, description="Progression tier (defaults to config)"),
    session: GalaxySession = Depends(get_session),
) -> MissionSchema:
    try:
        with session_lock():
            mission = session.mission((x, y, z), index, tier)
    except SystemIndexError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return MissionSchema.from_def(mission)


@router.get("/sectors/{x}/{y}/{z}/systems/{index}/encounter", response_model=EncounterSchema)
def get_encounter(
    x: int, y: int, z: int, index: int,
    layer: str | None = Query(None, description="Progression layer id (defaults to config)"),
    session: GalaxySession = Depends(get_session),
) -> EncounterSchema:
    layer_id = layer if layer is not None else (session.ctx.progression_layer_id or "v0")
    try:
        with session_lock():
            encounter = session.encounter((x, y, z), index, layer_id)
    except SystemIndexError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return EncounterSchema.from_def(encounter, layer_id)
