"""Tests for the archetype catalog: table integrity, canonical ordering, lookups."""

from __future__ import annotations

import pytest

from procgen.core.archetypes import (
    ENEMY_WEIGHTS,
    FIGHTER_ARCHETYPES,
    SECTOR_ARCHETYPES,
    SYSTEM_ARCHETYPES,
    enemy_weights_for,
    get_fighter_archetype,
    get_sector_archetype,
    get_system_archetype,
    weight_pairs,
)
from procgen.core.enums import ERA_IDS, FACTION_IDS, STAR_CLASS_IDS, Faction, FighterId, StarClass
from procgen.core.errors import UnknownArchetypeError


# ---------------------------------------------------------------------------
# Table integrity
# ---------------------------------------------------------------------------

class TestSectorArchetypes:

    def test_ids_unique(self):
        ids = [a.id for a in SECTOR_ARCHETYPES]
        assert len(ids) == len(set(ids)) == 4

    def test_ranges_ordered(self):
        for a in SECTOR_ARCHETYPES:
            assert a.system_count_range[0] <= a.system_count_range[1]
            assert 0.0 <= a.hazard_scalar_range[0] <= a.hazard_scalar_range[1] <= 1.0

    def test_weights_positive_and_known(self):
        for a in SECTOR_ARCHETYPES:
            assert all(w > 0 for w in a.era_weights.values())
            assert all(w > 0 for w in a.faction_weights.values())
            assert set(a.era_weights) <= set(ERA_IDS)
            assert set(a.faction_weights) <= set(FACTION_IDS)

    def test_frozen(self):
        with pytest.raises(Exception):
            SECTOR_ARCHETYPES[0].id = "hacked"  # type: ignore[misc]


class TestSystemArchetypes:

    def test_ids_unique(self):
        ids = [a.id for a in SYSTEM_ARCHETYPES]
        assert len(ids) == len(set(ids)) == 3

    def test_ranges_ordered(self):
        for a in SYSTEM_ARCHETYPES:
            assert 0 <= a.planet_count_range[0] <= a.planet_count_range[1]
            assert 0.0 <= a.poi_density_range[0] <= a.poi_density_range[1] <= 1.0

    def test_star_classes_known(self):
        for a in SYSTEM_ARCHETYPES:
            assert set(a.star_class_weights) <= set(STAR_CLASS_IDS)


class TestFighters:

    def test_every_fighter_registered(self):
        assert set(FIGHTER_ARCHETYPES) == set(FighterId)

    def test_enemy_tables_reference_registered_fighters(self):
        for faction in FACTION_IDS:
            pairs = enemy_weights_for(faction)
            assert pairs
            assert all(fid in FIGHTER_ARCHETYPES for fid, _ in pairs)
            assert sum(w for _, w in pairs) > 0

    def test_outlaws_share_a_table(self):
        assert ENEMY_WEIGHTS[Faction.PIRATES] is ENEMY_WEIGHTS[Faction.HUTTS]

    def test_unlisted_faction_uses_default(self):
        assert Faction.REPUBLIC not in ENEMY_WEIGHTS
        assert enemy_weights_for(Faction.REPUBLIC) == enemy_weights_for(Faction.SITH_CULT)
        assert enemy_weights_for(Faction.REPUBLIC)[0][0] == FighterId.Z95

    def test_empire_prefers_ties(self):
        assert enemy_weights_for(Faction.EMPIRE)[0] == (FighterId.TIE_LN, 0.75)


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------

class TestLookups:

    def test_fighter_by_string_and_enum(self):
        assert get_fighter_archetype("tie_ln") is get_fighter_archetype(FighterId.TIE_LN)
        assert get_fighter_archetype("z95").faction == Faction.INDEPENDENT

    def test_unknown_fighter(self):
        with pytest.raises(UnknownArchetypeError):
            get_fighter_archetype("x_wing")

    def test_unknown_fighter_is_lookup_error(self):
        with pytest.raises(LookupError):
            get_fighter_archetype("")

    def test_sector_and_system_lookup(self):
        assert get_sector_archetype("hutt_space").tags == ("criminal", "trade_hub")
        assert get_system_archetype("dead_system").planet_count_range == (0, 3)
        with pytest.raises(UnknownArchetypeError):
            get_sector_archetype("deep_core")
        with pytest.raises(UnknownArchetypeError):
            get_system_archetype("gas_giant_cluster")


class TestWeightPairs:

    def test_canonical_order_not_insertion_order(self):
        weights = {StarClass.M: 0.4, StarClass.G: 0.2}
        pairs = weight_pairs(weights, STAR_CLASS_IDS)
        assert [cid for cid, _ in pairs] == list(STAR_CLASS_IDS)

    def test_missing_ids_take_default(self):
        pairs = dict(weight_pairs({StarClass.M: 0.4}, STAR_CLASS_IDS))
        assert pairs[StarClass.M] == 0.4
        assert pairs[StarClass.O] == 1.0

    def test_custom_default(self):
        pairs = dict(weight_pairs({}, FACTION_IDS, default=0.05))
        assert set(pairs.values()) == {0.05}
