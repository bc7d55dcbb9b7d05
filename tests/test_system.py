"""Tests for the system generator, including the two-stream archetype draw."""

from __future__ import annotations

import dataclasses
import math

import pytest

from procgen.core.archetypes import SYSTEM_ARCHETYPES, get_system_archetype, weight_pairs
from procgen.core.enums import STAR_CLASS_IDS, Era, Faction
from procgen.core.errors import SystemIndexError
from procgen.core.models import SectorDef, SystemEntry, Vec3
from procgen.systems.hashing import derive_seed
from procgen.systems.rng import create_rng
from procgen.systems.sector import get_sector
from procgen.systems.system import get_system
from procgen.utils.numeric import clamp


def _make_sector(tags=(), hazard=0.3, seeds=True, count=6) -> SectorDef:
    """Hand-built sector so tag- and hazard-dependent rules can be pinned."""
    sector_seed = derive_seed(7, "sector", 4, 5, 6)
    systems = tuple(
        SystemEntry(
            id=f"sys_4_5_6_{i}",
            seed=derive_seed(sector_seed, "system", i) if seeds else None,
            local_pos=Vec3(0.25, 0.5, 0.75),
        )
        for i in range(count)
    )
    return SectorDef(
        id="sector_4_5_6",
        coord=Vec3(4, 5, 6),
        seed=sector_seed,
        archetype_id="test",
        tags=tuple(tags),
        era_echo=((Era.EMPIRE, 1.0),),
        faction_field=((Faction.HUTTS, 1.0),),
        controlling_faction=Faction.HUTTS,
        hazard_scalar=hazard,
        system_count=count,
        systems=systems,
    )


def _reference_draws(seed: int, single_stream: bool) -> tuple:
    """Recompute the numeric draws by hand, with one or two streams."""
    if single_stream:
        rng = create_rng(seed)
        archetype = rng.pick(SYSTEM_ARCHETYPES)
    else:
        archetype = create_rng(seed).pick(SYSTEM_ARCHETYPES)
        rng = create_rng(seed)
    star = rng.weighted_pick(weight_pairs(archetype.star_class_weights, STAR_CLASS_IDS))
    lo, hi = archetype.planet_count_range
    planets = math.floor(rng.range(lo, hi + 1))
    poi = rng.range(*archetype.poi_density_range)
    return archetype.id, star, planets, poi


class TestDeterminism:

    def test_same_inputs_same_system(self, ctx, origin_sector):
        for i in range(origin_sector.system_count):
            assert get_system(origin_sector, i, ctx) == get_system(origin_sector, i, ctx)

    def test_systems_in_sector_differ(self, ctx, origin_sector):
        seeds = {get_system(origin_sector, i, ctx).seed for i in range(origin_sector.system_count)}
        assert len(seeds) == origin_sector.system_count

    def test_missing_entry_seed_is_derived(self, ctx):
        with_seeds = _make_sector(seeds=True)
        without = _make_sector(seeds=False)
        for i in range(with_seeds.system_count):
            assert get_system(with_seeds, i, ctx) == get_system(without, i, ctx)


class TestTwoStreams:

    def test_matches_two_stream_reference(self, ctx, origin_sector):
        for i in range(origin_sector.system_count):
            system = get_system(origin_sector, i, ctx)
            arch_id, star, planets, poi = _reference_draws(system.seed, single_stream=False)
            assert system.archetype_id == arch_id
            assert system.star_class == star
            assert system.planet_count == planets
            assert system.poi_density == poi

    def test_differs_from_single_stream(self, ctx, origin_sector):
        systems = [get_system(origin_sector, i, ctx) for i in range(origin_sector.system_count)]
        actual = [(s.archetype_id, s.star_class, s.planet_count, s.poi_density) for s in systems]
        single = [_reference_draws(s.seed, single_stream=True) for s in systems]
        assert actual != single


class TestFields:

    def test_identity_fields(self, ctx, origin_sector):
        s = get_system(origin_sector, 0, ctx)
        entry = origin_sector.systems[0]
        assert s.id == entry.id
        assert s.seed == entry.seed
        assert s.sector_id == origin_sector.id
        assert s.sector_coord == origin_sector.coord
        assert s.local_pos == entry.local_pos
        assert s.controlling_faction == origin_sector.controlling_faction

    def test_galaxy_pos_is_sum(self, ctx):
        for coord in [(0, 0, 0), (-3, 2, 9), (10, -10, 1)]:
            sector = get_sector(coord, ctx)
            for i in range(sector.system_count):
                s = get_system(sector, i, ctx)
                assert s.galaxy_pos.x == sector.coord.x + s.local_pos.x
                assert s.galaxy_pos.y == sector.coord.y + s.local_pos.y
                assert s.galaxy_pos.z == sector.coord.z + s.local_pos.z

    def test_values_within_archetype_and_unit_range(self, ctx):
        for coord in [(x, 0, 0) for x in range(-5, 6)]:
            sector = get_sector(coord, ctx)
            for i in range(sector.system_count):
                s = get_system(sector, i, ctx)
                arch = get_system_archetype(s.archetype_id)
                assert s.tags == arch.tags
                assert arch.planet_count_range[0] <= s.planet_count <= arch.planet_count_range[1]
                assert arch.poi_density_range[0] <= s.poi_density <= arch.poi_density_range[1]
                for v in (s.economy.wealth, s.economy.industry, s.economy.security):
                    assert 0.0 <= v <= 1.0
                assert 0.02 <= s.story_anchor_chance <= 0.18

    def test_high_patrol_raises_security(self, ctx):
        high = _make_sector(tags=("high_patrol",))
        low = _make_sector(tags=("low_patrol",))
        for i in range(high.system_count):
            assert get_system(high, i, ctx).economy.security >= 0.5
            assert get_system(low, i, ctx).economy.security <= 0.6

    def test_ruins_boost_story_anchors(self, ctx):
        plain = _make_sector()
        ruins = _make_sector(tags=("ruins",))
        for i in range(plain.system_count):
            a = get_system(plain, i, ctx).story_anchor_chance
            b = get_system(ruins, i, ctx).story_anchor_chance
            assert b == pytest.approx(a * 1.5)

    def test_hazard_caps_wealth(self, ctx):
        dangerous = _make_sector(hazard=0.9)
        for i in range(dangerous.system_count):
            assert get_system(dangerous, i, ctx).economy.wealth <= 0.1 + 1e-12

    def test_hazard_above_one_clamps_to_zero(self, ctx):
        sector = _make_sector(hazard=1.5)
        assert get_system(sector, 0, ctx).economy.wealth == 0.0

    def test_wealth_formula(self, ctx):
        sector = _make_sector(hazard=0.25)
        s = get_system(sector, 0, ctx)
        rng = create_rng(s.seed)
        _ = rng.weighted_pick(weight_pairs(get_system_archetype(s.archetype_id).star_class_weights, STAR_CLASS_IDS))
        rng.range(0, 1)
        rng.range(0, 1)
        assert s.economy.wealth == clamp(0.0, 1.0, 0.75 * rng.range(0.6, 1.0))


class TestIndexBounds:

    @pytest.mark.parametrize("index", [-1, 6, 100])
    def test_out_of_range(self, ctx, index):
        with pytest.raises(SystemIndexError):
            get_system(_make_sector(count=6), index, ctx)

    def test_index_error_compatible(self, ctx):
        with pytest.raises(IndexError):
            get_system(_make_sector(count=0), 0, ctx)

    def test_records_frozen(self, ctx, origin_sector):
        s = get_system(origin_sector, 0, ctx)
        with pytest.raises(dataclasses.FrozenInstanceError):
            s.planet_count = 99  # type: ignore[misc]
