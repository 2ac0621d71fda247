"""Progression package."""

from .curve import (
    XPTable,
    CurveConfigError,
    build_xp_table,
    build_from_settings,
    MAX_LEVEL,
    MAX_XP,
    MIDPOINT_LEVEL,
    MIDPOINT_XP,
    MILESTONE_LEVELS,
)
from .engine import ProgressionEngine, ProgressSnapshot
from .rewards import (
    Rarity,
    CATCH_XP,
    QUEST_XP,
    MARLIN_RING_BONUS_LEVELS,
    xp_for_catch,
)

__all__ = [
    "XPTable",
    "CurveConfigError",
    "build_xp_table",
    "build_from_settings",
    "MAX_LEVEL",
    "MAX_XP",
    "MIDPOINT_LEVEL",
    "MIDPOINT_XP",
    "MILESTONE_LEVELS",
    "ProgressionEngine",
    "ProgressSnapshot",
    "Rarity",
    "CATCH_XP",
    "QUEST_XP",
    "MARLIN_RING_BONUS_LEVELS",
    "xp_for_catch",
]
