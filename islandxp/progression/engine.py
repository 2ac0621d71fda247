"""Progression engine: XP, levels, bonus levels and their signals.

State
-----
A session starts at level 1 with 0 XP.  The level is never stored
independently; it is re-resolved from XP after every mutation, so the
two can't disagree.  XP is clamped at the table's cap (100,000,000 by
default), which makes level 399 terminal.

Signals
-------
``xp_gained(amount, new_total)`` fires after every accepted
``add_xp``.  ``level_up(old_level, new_level)`` fires once per call
that raised the level, carrying the whole jump even when several
levels were crossed at once.  Both are emitted on the caller's thread
before ``add_xp`` returns.

Resets and restores are hard state changes and emit nothing.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass

from PyQt6.QtCore import QObject, pyqtSignal

from ..settings import CurveSettings
from .curve import XPTable, build_from_settings


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProgressSnapshot:
    """A consistent read of the engine state, for save systems."""

    xp: int
    level: int
    bonus_levels: int


class ProgressionEngine(QObject):
    """Owns one player's XP and level for a play session.

    Construct one per session and hand it to whatever needs it (UI,
    quests, fishing, save system).

    Signals
    -------
    xp_gained(amount: int, new_total: int)
        Emitted after XP is added.  ``amount`` is the requested amount,
        even when the cap absorbed part of it.
    level_up(old_level: int, new_level: int)
        Emitted when an ``add_xp`` call raises the level.
    """

    # object rather than int: XP totals are not limited to a C int
    xp_gained = pyqtSignal(object, object)
    level_up = pyqtSignal(int, int)

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        settings: CurveSettings | None = None,
        table: XPTable | None = None,
    ) -> None:
        super().__init__(parent)

        # CurveConfigError propagates: no engine without a valid curve
        if table is None:
            table = build_from_settings(settings or CurveSettings())
        self._table: XPTable = table

        self._lock = threading.RLock()
        self._xp: int = 0
        self._level: int = 1
        self._bonus_levels: int = 0

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def table(self) -> XPTable:
        return self._table

    @property
    def max_level(self) -> int:
        return self._table.max_level

    @property
    def max_xp(self) -> int:
        return self._table.cap_xp

    @property
    def current_xp(self) -> int:
        with self._lock:
            return self._xp

    @property
    def level(self) -> int:
        with self._lock:
            return self._level

    @property
    def bonus_levels(self) -> int:
        with self._lock:
            return self._bonus_levels

    @property
    def effective_level(self) -> int:
        """Level including equipment bonuses, capped at the max level."""
        with self._lock:
            return min(self._level + self._bonus_levels, self.max_level)

    @property
    def is_max_level(self) -> bool:
        return self.level >= self.max_level

    @property
    def xp_to_next_level(self) -> int:
        """XP still needed for the next level (0 at max level)."""
        with self._lock:
            if self._level >= self.max_level:
                return 0
            return self._table[self._level + 1] - self._xp

    @property
    def progress_to_next_level(self) -> float:
        """0.0 → 1.0 progress through the current level (1.0 at max)."""
        with self._lock:
            if self._level >= self.max_level:
                return 1.0
            floor = self._table[self._level]
            ceiling = self._table[self._level + 1]
            return (self._xp - floor) / (ceiling - floor)

    def xp_for_level(self, level: int) -> int:
        """Cumulative XP to reach *level*, clamped to the table's range."""
        if level < 1:
            return 0
        if level > self.max_level:
            return self.max_xp
        return self._table[level]

    def snapshot(self) -> ProgressSnapshot:
        with self._lock:
            return ProgressSnapshot(self._xp, self._level, self._bonus_levels)

    # ══════════════════════════════════════════════════════════════════
    #  MUTATIONS
    # ══════════════════════════════════════════════════════════════════

    def add_xp(self, amount: int) -> None:
        """Add XP, re-resolve the level, and emit signals.

        Non-positive amounts are ignored.  Once XP sits at the cap,
        further gains are ignored too and emit nothing.
        """
        if amount <= 0:
            return

        with self._lock:
            if self._xp >= self.max_xp:
                return
            old_level = self._level
            self._xp = min(self._xp + amount, self.max_xp)
            self._level = self._table.level_for_xp(self._xp)
            new_total = self._xp
            new_level = self._level

        logger.debug("+%d XP (total: %s)", amount, f"{new_total:,}")
        self.xp_gained.emit(amount, new_total)

        if new_level > old_level:
            logger.info("Level up! %d -> %d", old_level, new_level)
            self.level_up.emit(old_level, new_level)

    def set_bonus_levels(self, bonus: int) -> None:
        """Replace the equipment bonus.  Negative values count as 0."""
        with self._lock:
            self._bonus_levels = max(0, bonus)

    def reset_progress(self) -> None:
        """Hard reset to level 1, 0 XP, no bonus.  Emits nothing."""
        with self._lock:
            self._xp = 0
            self._level = 1
            self._bonus_levels = 0
        logger.info("Progress reset")

    def restore_progress(self, xp: int, bonus_levels: int = 0) -> None:
        """Rehydrate state from a save.  Emits nothing.

        XP is clamped into ``[0, max_xp]`` and the level is resolved
        from it; any level stored alongside the save is not trusted.
        """
        with self._lock:
            self._xp = max(0, min(xp, self.max_xp))
            self._level = self._table.level_for_xp(self._xp)
            self._bonus_levels = max(0, bonus_levels)
            level, total = self._level, self._xp
        logger.info("Progress restored: level %d, %s XP", level, f"{total:,}")

    def advance_to_level(self, level: int) -> int:
        """Grant exactly the XP needed to reach *level*.

        Goes through :meth:`add_xp`, so the usual signals fire.  Returns
        the XP granted, 0 when the level is already reached.
        """
        target = max(1, min(level, self.max_level))
        with self._lock:
            needed = self._table[target] - self._xp
        if needed <= 0:
            return 0
        self.add_xp(needed)
        return needed
