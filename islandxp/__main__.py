"""Print the XP curve: python -m islandxp [LEVEL ...]."""

from __future__ import annotations

import sys

from .progression.curve import CurveConfigError, MILESTONE_LEVELS, build_from_settings
from . import settings


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    try:
        levels = [int(a) for a in args] or list(MILESTONE_LEVELS)
    except ValueError:
        print(f"usage: python -m islandxp [LEVEL ...]  (got {' '.join(args)})",
              file=sys.stderr)
        sys.exit(2)

    try:
        table = build_from_settings(settings.load_settings())
    except CurveConfigError as exc:
        print(f"Invalid curve settings in {settings.SETTINGS_PATH}: {exc}", file=sys.stderr)
        sys.exit(2)

    for level, xp in table.milestones(levels):
        print(f"Level {level:>3}: {xp:>13,} XP")


if __name__ == "__main__":
    main()
