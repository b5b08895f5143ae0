#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Pixel geometry of the park window.

Screen coordinates use arcade's bottom-left origin; grid row 0 is drawn at
the top, so y is flipped when converting between pixels and cells.

    +-------------------------+  height
    |          grid           |
    +-------------------------+  grid_bottom
    |         status          |
    +-------------------------+  toolbar_h
    | buttons ...             |
    +-------------------------+  0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from config import STATUS_H, TOOLBAR_H
from park_grid import Tool

CLEAR_ALL = "clear_all"

BUTTON_SPECS: Tuple[Tuple[str, str], ...] = (
    ("Build Path", Tool.PATH.value),
    ("Build Ride", Tool.RIDE.value),
    ("Build Ferris Wheel", Tool.FERRIS.value),
    ("Clear Tile", Tool.CLEAR.value),
    ("Clear All Tiles", CLEAR_ALL),
)


@dataclass(frozen=True)
class ToolButton:
    label: str
    action: str
    left: float
    right: float
    bottom: float
    top: float

    def contains(self, x: float, y: float) -> bool:
        return self.left <= x <= self.right and self.bottom <= y <= self.top


@dataclass(frozen=True)
class ParkLayout:
    grid_size: int
    cell_size: int
    toolbar_h: int = TOOLBAR_H
    status_h: int = STATUS_H

    @property
    def grid_px(self) -> int:
        return self.grid_size * self.cell_size

    @property
    def grid_bottom(self) -> int:
        return self.toolbar_h + self.status_h

    @property
    def width(self) -> int:
        return self.grid_px

    @property
    def height(self) -> int:
        return self.grid_bottom + self.grid_px

    def cell_at_pixel(self, px: float, py: float) -> Optional[Tuple[int, int]]:
        """Screen pixel -> grid cell, or None outside the grid."""
        if px < 0 or py < self.grid_bottom:
            return None
        x = int(px // self.cell_size)
        y = self.grid_size - 1 - int((py - self.grid_bottom) // self.cell_size)
        if not (0 <= x < self.grid_size and 0 <= y < self.grid_size):
            return None
        return x, y

    def cell_rect(self, x: int, y: int) -> Tuple[float, float, float, float]:
        """Grid cell -> (left, right, bottom, top) in screen pixels."""
        left = x * self.cell_size
        bottom = self.grid_bottom + (self.grid_size - 1 - y) * self.cell_size
        return left, left + self.cell_size, bottom, bottom + self.cell_size

    def cell_center(self, x: int, y: int) -> Tuple[float, float]:
        left, right, bottom, top = self.cell_rect(x, y)
        return (left + right) / 2, (bottom + top) / 2

    def toolbar_buttons(self) -> List[ToolButton]:
        pad = 4
        slot = self.width / len(BUTTON_SPECS)
        return [
            ToolButton(
                label=label,
                action=action,
                left=idx * slot + pad,
                right=(idx + 1) * slot - pad,
                bottom=pad,
                top=self.toolbar_h - pad,
            )
            for idx, (label, action) in enumerate(BUTTON_SPECS)
        ]

    def button_at(self, px: float, py: float) -> Optional[ToolButton]:
        return next((button for button in self.toolbar_buttons() if button.contains(px, py)), None)
