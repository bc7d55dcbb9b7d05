"""GET /api/v1/config: expose generator configuration."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from procgen.api.dependencies import get_session, session_lock
from procgen.api.schemas import GeneratorConfigResponse
from procgen.session import GalaxySession
from procgen.systems.hashing import format_seed

router = APIRouter()


@router.get("/config", response_model=GeneratorConfigResponse)
def get_config(session: GalaxySession = Depends(get_session)) -> GeneratorConfigResponse:
    cfg = session.config
    with session_lock():
        cached = len(session.cache)
    return GeneratorConfigResponse(
        global_seed=format_seed(cfg.global_seed),
        progression_layer_id=cfg.progression_layer_id,
        max_cached_sectors=cfg.max_cached_sectors,
        max_query_radius=cfg.max_query_radius,
        default_mission_tier=cfg.default_mission_tier,
        cached_sectors=cached,
    )
