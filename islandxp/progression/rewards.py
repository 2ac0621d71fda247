"""XP awards handed out by the island's activities.

XP Awards
---------
- Common catch:          10 XP
- Uncommon catch:        25 XP
- Rare catch:            75 XP
- Epic catch:           200 XP
- Legendary catch:      500 XP
- Mythic catch:       2,000 XP
- Completed quest:    1,000 XP

The engine never grants these on its own; fishing and quest code looks
the amount up here and passes it to ``ProgressionEngine.add_xp``.
"""

from __future__ import annotations

from enum import Enum


class Rarity(Enum):
    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"
    MYTHIC = "mythic"


CATCH_XP: dict[Rarity, int] = {
    Rarity.COMMON: 10,
    Rarity.UNCOMMON: 25,
    Rarity.RARE: 75,
    Rarity.EPIC: 200,
    Rarity.LEGENDARY: 500,
    Rarity.MYTHIC: 2000,
}

QUEST_XP = 1000

# Groovy Marlin Ring
MARLIN_RING_BONUS_LEVELS = 10


def xp_for_catch(rarity: Rarity) -> int:
    """XP for landing a fish of *rarity* (common rate if unknown)."""
    return CATCH_XP.get(rarity, CATCH_XP[Rarity.COMMON])
