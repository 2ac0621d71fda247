"""XP curve construction for IslandXP.

Leveling Curve
--------------
Level 1 starts at 0 XP and level 399 sits at exactly 100,000,000 XP.
The curve is built in two geometric phases so early levels are cheap
and the last stretch is punishing:

    Phase 1  levels   2..320   shares 50,000,000 XP  (growth_a per level)
    Phase 2  levels 321..399   shares 50,000,000 XP  (growth_b per level)

Each phase weights its levels with ``base * growth ** n``, scales the
weights so they sum to the phase's XP budget, and rounds every
increment up.  Rounding drift is then removed at the two checkpoints
(level 320 and level 399) by writing the exact target values.

The tunables live in :class:`islandxp.settings.CurveSettings` so the
curve can be re-shaped without touching this module.
"""

from __future__ import annotations

import logging
import numbers
from bisect import bisect_right
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

import numpy as np

if TYPE_CHECKING:
    from ..settings import CurveSettings


logger = logging.getLogger(__name__)


# ── published constants ──────────────────────────────────────────────────

MAX_LEVEL = 399
MAX_XP = 100_000_000

MIDPOINT_LEVEL = 320
MIDPOINT_XP = 50_000_000

# Levels worth printing when summarising a curve.
MILESTONE_LEVELS = (2, 10, 50, 100, MIDPOINT_LEVEL, MAX_LEVEL)


class CurveConfigError(ValueError):
    """Raised when curve constants cannot produce a valid XP table."""


# ── table ────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class XPTable:
    """Immutable level → cumulative XP lookup.

    ``thresholds[0]`` holds level 1, so ``table[level]`` is
    ``thresholds[level - 1]``.  Indexing outside ``1..max_level``
    raises :class:`IndexError`.
    """

    thresholds: tuple[int, ...]

    def __len__(self) -> int:
        return len(self.thresholds)

    def __getitem__(self, level: int) -> int:
        if not 1 <= level <= len(self.thresholds):
            raise IndexError(f"level {level} outside 1..{len(self.thresholds)}")
        return self.thresholds[level - 1]

    def __iter__(self):
        return iter(self.thresholds)

    @property
    def max_level(self) -> int:
        return len(self.thresholds)

    @property
    def cap_xp(self) -> int:
        return self.thresholds[-1]

    def level_for_xp(self, total_xp: int) -> int:
        """Return the greatest level whose threshold is <= *total_xp*.

        Binary search over the thresholds; XP below zero resolves to
        level 1.
        """
        return max(1, bisect_right(self.thresholds, total_xp))

    def milestones(
        self, levels: Iterable[int] = MILESTONE_LEVELS,
    ) -> list[tuple[int, int]]:
        """``(level, xp)`` pairs for the given levels that exist in the table."""
        return [(lvl, self[lvl]) for lvl in levels if 1 <= lvl <= self.max_level]


# ── builder ──────────────────────────────────────────────────────────────


def _validate(
    max_level: int,
    midpoint_level: int,
    midpoint_xp: int,
    cap_xp: int,
    base_a: float,
    growth_a: float,
    base_b: float,
    growth_b: float,
) -> None:
    for name, value in (
        ("max_level", max_level), ("midpoint_level", midpoint_level),
        ("midpoint_xp", midpoint_xp), ("cap_xp", cap_xp),
    ):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise CurveConfigError(f"{name} must be an integer, got {value!r}")
    for name, value in (
        ("base_a", base_a), ("growth_a", growth_a),
        ("base_b", base_b), ("growth_b", growth_b),
    ):
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise CurveConfigError(f"{name} must be a number, got {value!r}")
    if not 1 < midpoint_level < max_level:
        raise CurveConfigError(
            f"need 1 < midpoint_level < max_level, "
            f"got midpoint_level={midpoint_level}, max_level={max_level}"
        )
    if midpoint_xp <= 0:
        raise CurveConfigError(f"midpoint_xp must be positive, got {midpoint_xp}")
    if cap_xp <= midpoint_xp:
        raise CurveConfigError(
            f"cap_xp ({cap_xp}) must exceed midpoint_xp ({midpoint_xp})"
        )
    for name, base in (("base_a", base_a), ("base_b", base_b)):
        if not base > 0:
            raise CurveConfigError(f"{name} must be positive, got {base}")
    for name, growth in (("growth_a", growth_a), ("growth_b", growth_b)):
        if not growth > 1:
            raise CurveConfigError(f"{name} must be greater than 1, got {growth}")


def _phase_increments(
    count: int, base: float, growth: float, target: int,
) -> np.ndarray:
    """Per-level XP increments for one phase, rounded up.

    The unrounded increments sum to *target* exactly; rounding up can
    push the rounded sum slightly above it.
    """
    # overflow surfaces as inf and is rejected below
    with np.errstate(over="ignore", invalid="ignore"):
        weights = base * np.power(growth, np.arange(count, dtype=np.float64))
        raw_sum = weights.sum()
    if not np.isfinite(raw_sum):
        raise CurveConfigError(
            f"growth {growth} overflows over {count} levels"
        )
    scale = target / raw_sum
    return np.ceil(weights * scale).astype(np.int64)


def build_xp_table(
    *,
    max_level: int = MAX_LEVEL,
    midpoint_level: int = MIDPOINT_LEVEL,
    midpoint_xp: int = MIDPOINT_XP,
    cap_xp: int = MAX_XP,
    base_a: float,
    growth_a: float,
    base_b: float,
    growth_b: float,
) -> XPTable:
    """Build the two-phase XP table.

    Raises :class:`CurveConfigError` for constants that cannot yield a
    table anchored at both checkpoints where every level costs XP.
    """
    _validate(
        max_level, midpoint_level, midpoint_xp, cap_xp,
        base_a, growth_a, base_b, growth_b,
    )

    # index 0 is level 1
    table = np.zeros(max_level, dtype=np.int64)

    phase_a = _phase_increments(midpoint_level - 1, base_a, growth_a, midpoint_xp)
    table[1:midpoint_level] = np.cumsum(phase_a)
    table[midpoint_level - 1] = midpoint_xp

    phase_b = _phase_increments(
        max_level - midpoint_level, base_b, growth_b, cap_xp - midpoint_xp,
    )
    table[midpoint_level:] = midpoint_xp + np.cumsum(phase_b)
    table[max_level - 1] = cap_xp

    drops = np.flatnonzero(np.diff(table) <= 0)
    if drops.size:
        # diff index i compares level i+1 with level i+2
        bad = int(drops[0]) + 1
        raise CurveConfigError(
            f"curve is not strictly increasing: level {bad + 1} "
            f"({int(table[bad])} XP) is not above level {bad} ({int(table[bad - 1])} XP)"
        )

    xp_table = XPTable(tuple(int(xp) for xp in table))
    logger.debug(
        "XP table built: %s",
        ", ".join(f"lvl {lvl}={xp:,}" for lvl, xp in xp_table.milestones()),
    )
    return xp_table


def build_from_settings(settings: CurveSettings) -> XPTable:
    """Build the table from a :class:`CurveSettings` instance."""
    return build_xp_table(
        max_level=settings.max_level,
        midpoint_level=settings.midpoint_level,
        midpoint_xp=settings.midpoint_xp,
        cap_xp=settings.cap_xp,
        base_a=settings.base_a,
        growth_a=settings.growth_a,
        base_b=settings.base_b,
        growth_b=settings.growth_b,
    )
