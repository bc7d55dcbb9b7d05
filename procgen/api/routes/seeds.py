"""POST /api/v1/seeds/*: expose hash64 / derive_seed for tooling."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from procgen.api.schemas import DeriveRequest, HashRequest, SeedResponse
from procgen.systems.hashing import derive_seed, format_seed, hash64, parse_seed

router = APIRouter(prefix="/seeds")


@router.post("/hash", response_model=SeedResponse)
def post_hash(body: HashRequest) -> SeedResponse:
    try:
        seed = hash64(body.parts)
    except (ValueError, OverflowError) as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return SeedResponse(seed=format_seed(seed))


@router.post("/derive", response_model=SeedResponse)
def post_derive(body: DeriveRequest) -> SeedResponse:
    # InvalidSeedError is a ValueError
    try:
        seed = derive_seed(parse_seed(body.parent), *body.keys)
    except (ValueError, OverflowError) as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return SeedResponse(seed=format_seed(seed))
