"""Tests for GeneratorConfig and GalaxySession."""

from __future__ import annotations

import dataclasses
import logging

import pytest

from procgen.config import GeneratorConfig
from procgen.core.errors import SystemIndexError
from procgen.core.models import GenContext
from procgen.session import GalaxySession
from procgen.systems.encounter import get_encounter
from procgen.systems.mission import get_mission
from procgen.systems.sector import get_sector
from procgen.systems.system import get_system


class TestGeneratorConfig:

    def test_defaults(self):
        cfg = GeneratorConfig()
        assert cfg.global_seed == 42
        assert cfg.progression_layer_id == "v0"
        assert cfg.max_cached_sectors == 128
        assert cfg.max_query_radius == 2
        assert cfg.default_mission_tier == 0
        assert cfg.log_level == "INFO"

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            GeneratorConfig().global_seed = 1  # type: ignore[misc]

    def test_context(self):
        assert GeneratorConfig(global_seed=9, progression_layer_id="v3").context() == GenContext(9, "v3")


class TestGalaxySession:

    def test_logs_on_creation(self, caplog):
        with caplog.at_level(logging.INFO, logger="procgen.session"):
            GalaxySession(GeneratorConfig(global_seed=11))
        assert any("seed=11" in r.getMessage() for r in caplog.records)

    def test_content_matches_pure_functions(self):
        cfg = GeneratorConfig(global_seed=77, progression_layer_id="v1", default_mission_tier=2)
        session = GalaxySession(cfg)
        ctx = cfg.context()
        sector = get_sector((1, 1, 1), ctx)
        system = get_system(sector, 0, ctx)
        assert session.sector((1, 1, 1)) == sector
        assert session.system((1, 1, 1), 0) == system
        assert session.mission((1, 1, 1), 0) == get_mission(system, 2)
        assert session.mission((1, 1, 1), 0, tier=5) == get_mission(system, 5)
        assert session.encounter((1, 1, 1), 0) == get_encounter(system, "v1")
        assert session.encounter((1, 1, 1), 0, "v9") == get_encounter(system, "v9")

    def test_sectors_in_radius(self):
        session = GalaxySession(GeneratorConfig())
        assert len(session.sectors_in_radius((0, 0, 0), 1)) == 27
        assert len(session.cache) == 27

    def test_cache_capacity_from_config(self):
        session = GalaxySession(GeneratorConfig(max_cached_sectors=3))
        session.sectors_in_radius((0, 0, 0), 1)
        assert len(session.cache) == 3

    def test_bad_index(self):
        session = GalaxySession(GeneratorConfig())
        with pytest.raises(SystemIndexError):
            session.system((0, 0, 0), 1000)

    def test_reset(self):
        session = GalaxySession(GeneratorConfig(cosmetic_seed=4))
        first = session.cosmetic.next()
        session.sector((0, 0, 0))
        session.reset()
        assert len(session.cache) == 0
        assert session.cosmetic.next() == first
