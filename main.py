#!/usr/bin/env python3
"""IslandXP curve summary entry point.

Run with:
    python main.py [LEVEL ...]
    python -m islandxp [LEVEL ...]
"""

from islandxp.__main__ import main


if __name__ == "__main__":
    main()
