#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Text-based park runner.

Prints the map after every tick:
- `.` empty, `#` path, `R` ride, `F` ferris wheel
- `@` one guest, `2`..`9` several guests sharing a cell
"""

from __future__ import annotations

import argparse
from collections import Counter
from typing import List, Optional

from park_grid import TileKind
from park_runtime import ParkSession, build_default_session
from park_settings import ParkSettings, load_park_settings

TILE_GLYPHS = {
    TileKind.EMPTY: ".",
    TileKind.PATH: "#",
    TileKind.RIDE: "R",
    TileKind.FERRIS: "F",
}


def render_ascii(session: ParkSession) -> List[str]:
    crowd = Counter(session.simulator.guests())
    rows: List[str] = []
    for y in range(session.grid.size):
        line = []
        for x in range(session.grid.size):
            n = crowd.get((x, y), 0)
            if n == 1:
                line.append("@")
            elif n > 1:
                line.append(str(min(n, 9)))
            else:
                line.append(TILE_GLYPHS[session.grid.tile_at(x, y)])
        rows.append("".join(line))
    return rows


def run_text_simulation(ticks: int, settings: ParkSettings) -> ParkSession:
    session = build_default_session(settings)

    print(f"[TEXT-PARK] start seed={settings.seed}, ticks={ticks}, guests={len(session.simulator)}")
    for line in session.logs:
        print(f"- {line}")

    for tick in range(1, ticks + 1):
        moved = session.tick_once()
        print(f"\n{'=' * 8} Tick {tick:03d} {'=' * 8}")
        print(f"[SUMMARY] moved={moved}/{len(session.simulator)} positions={list(session.simulator.guests())}")
        for row in render_ascii(session):
            print(row)

    print("\n[TEXT-PARK] done")
    return session


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Text-based park simulation")
    parser.add_argument("--ticks", type=int, default=10, help="Number of ticks to run (default: 10)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--settings", default=None, help="Path to park settings JSON")
    args = parser.parse_args(argv)

    if args.ticks <= 0:
        raise SystemExit("--ticks must be 1 or more.")

    settings = load_park_settings(args.settings)
    if args.seed is not None:
        settings = settings.model_copy(update={"seed": args.seed})
    run_text_simulation(ticks=args.ticks, settings=settings)


if __name__ == "__main__":
    main()
