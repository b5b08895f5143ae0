#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Tile grid of the park.

The grid is the only source of truth for what is built where and for which
cells guests may walk on. Cells are stored row-major (``rows[y][x]``).
"""

from __future__ import annotations

from enum import Enum
from typing import List, Tuple

from config import GRID_SIZE


class TileKind(str, Enum):
    EMPTY = "empty"
    PATH = "path"
    RIDE = "ride"
    FERRIS = "ferris"


class Tool(str, Enum):
    PATH = "path"
    RIDE = "ride"
    FERRIS = "ferris"
    CLEAR = "clear"

    @property
    def tile_kind(self) -> TileKind:
        if self is Tool.CLEAR:
            return TileKind.EMPTY
        return TileKind(self.value)


DEFAULT_TOOL = Tool.PATH

WALKABLE_KINDS = frozenset({TileKind.PATH})


class ParkGrid:
    def __init__(self, size: int = GRID_SIZE):
        if size < 1:
            raise ValueError(f"grid size must be positive: {size}")
        self.size = int(size)
        self._rows: List[List[TileKind]] = [[TileKind.EMPTY for _ in range(self.size)] for _ in range(self.size)]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def set_tile(self, x: int, y: int, kind: TileKind) -> None:
        """Paint one cell. Out-of-bounds coordinates are ignored."""
        if not self.in_bounds(x, y):
            return
        self._rows[y][x] = TileKind(kind)

    def clear_all(self) -> None:
        for row in self._rows:
            for x in range(self.size):
                row[x] = TileKind.EMPTY

    def tile_at(self, x: int, y: int) -> TileKind:
        if not self.in_bounds(x, y):
            raise ValueError(f"cell out of bounds: ({x}, {y})")
        return self._rows[y][x]

    def is_walkable(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and self._rows[y][x] in WALKABLE_KINDS

    def walkable_cells(self) -> List[Tuple[int, int]]:
        return [
            (x, y)
            for y, row in enumerate(self._rows)
            for x, kind in enumerate(row)
            if kind in WALKABLE_KINDS
        ]

    def count(self, kind: TileKind) -> int:
        return sum(1 for row in self._rows for cell in row if cell == kind)

    def snapshot(self) -> Tuple[Tuple[TileKind, ...], ...]:
        return tuple(tuple(row) for row in self._rows)

    def lay_path(self, y: int, x0: int, x1: int) -> None:
        """Paint Path on the horizontal run ``x0 <= x < x1`` of row ``y``."""
        for x in range(x0, x1):
            self.set_tile(x, y, TileKind.PATH)
