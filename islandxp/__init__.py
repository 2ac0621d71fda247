"""IslandXP: the island's experience and level engine."""

from .progression import (
    ProgressionEngine,
    ProgressSnapshot,
    XPTable,
    CurveConfigError,
    build_xp_table,
    MAX_LEVEL,
    MAX_XP,
    MIDPOINT_LEVEL,
    MIDPOINT_XP,
)
from .settings import CurveSettings, load_settings, save_settings

__version__ = "0.1.0"

__all__ = [
    "ProgressionEngine",
    "ProgressSnapshot",
    "XPTable",
    "CurveConfigError",
    "build_xp_table",
    "MAX_LEVEL",
    "MAX_XP",
    "MIDPOINT_LEVEL",
    "MIDPOINT_XP",
    "CurveSettings",
    "load_settings",
    "save_settings",
]
