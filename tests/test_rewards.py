"""Tests for the activity XP awards."""

import pytest

from islandxp.progression.curve import MAX_LEVEL
from islandxp.progression.rewards import (
    Rarity,
    CATCH_XP,
    QUEST_XP,
    MARLIN_RING_BONUS_LEVELS,
    xp_for_catch,
)


class TestCatchXP:

    @pytest.mark.parametrize("rarity, xp", [
        (Rarity.COMMON, 10),
        (Rarity.UNCOMMON, 25),
        (Rarity.RARE, 75),
        (Rarity.EPIC, 200),
        (Rarity.LEGENDARY, 500),
        (Rarity.MYTHIC, 2000),
    ])
    def test_catch_values(self, rarity, xp):
        assert xp_for_catch(rarity) == xp

    def test_every_rarity_has_a_value(self):
        assert set(CATCH_XP) == set(Rarity)

    def test_rarer_is_worth_more(self):
        values = [xp_for_catch(r) for r in Rarity]
        assert values == sorted(values)

    def test_unknown_falls_back_to_common(self):
        assert xp_for_catch("shoe") == 10


class TestAwardsThroughEngine:

    def test_quest_xp(self, engine):
        engine.add_xp(QUEST_XP)
        assert engine.current_xp == 1000

    def test_catches_accumulate(self, engine):
        for rarity in Rarity:
            engine.add_xp(xp_for_catch(rarity))
        assert engine.current_xp == sum(CATCH_XP.values())

    def test_marlin_ring(self, engine):
        engine.set_bonus_levels(MARLIN_RING_BONUS_LEVELS)
        assert engine.effective_level == 11
        engine.advance_to_level(MAX_LEVEL - 5)
        assert engine.effective_level == MAX_LEVEL
