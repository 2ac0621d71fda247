"""Curve tuning settings with JSON persistence.

Settings are stored at:
    ~/Library/Application Support/IslandXP/curve.json

Usage::

    settings = load_settings()
    settings.growth_b = 1.04
    save_settings(settings)

This file only tunes the XP curve.  Player progress is never written
here; saving and loading progress belongs to the game's save system.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, asdict, fields
from pathlib import Path

from .progression.curve import MAX_LEVEL, MAX_XP, MIDPOINT_LEVEL, MIDPOINT_XP


logger = logging.getLogger(__name__)

APP_SUPPORT_DIR = Path.home() / "Library" / "Application Support" / "IslandXP"
SETTINGS_PATH = APP_SUPPORT_DIR / "curve.json"


@dataclass
class CurveSettings:
    """All XP curve constants."""

    # ── checkpoints ───────────────────────────────────────────────────
    max_level: int = MAX_LEVEL
    midpoint_level: int = MIDPOINT_LEVEL
    midpoint_xp: int = MIDPOINT_XP
    cap_xp: int = MAX_XP

    # ── phase 1: levels 2..midpoint ───────────────────────────────────
    # base only sets the weights' units; each phase is rescaled to its budget
    base_a: float = 83.0
    growth_a: float = 1.0175               # ~1.75% more XP per level

    # ── phase 2: levels past the midpoint ─────────────────────────────
    base_b: float = 83.0
    growth_b: float = 1.03


def load_settings(path: Path | None = None) -> CurveSettings:
    """Load settings from disk, falling back to defaults."""
    path = path or SETTINGS_PATH
    try:
        if path.exists():
            data = json.loads(path.read_text(encoding="utf-8"))
            # Only use keys that exist in the dataclass
            valid_keys = {f.name for f in fields(CurveSettings)}
            filtered = {k: v for k, v in data.items() if k in valid_keys}
            return CurveSettings(**filtered)
    except (OSError, ValueError, AttributeError) as exc:
        logger.warning("Ignoring unreadable curve settings at %s: %s", path, exc)
    return CurveSettings()


def save_settings(settings: CurveSettings, path: Path | None = None) -> None:
    """Write settings to disk as JSON."""
    path = path or SETTINGS_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(asdict(settings), indent=2) + "\n",
        encoding="utf-8",
    )
