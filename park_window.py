#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Arcade runtime for the park.

Usage:
    python park_window.py [--seed 7] [--tick-ms 100] [--settings path/to/park_settings.json]
"""

from __future__ import annotations

import argparse
from typing import Dict

import arcade
from pydantic import BaseModel, ConfigDict

from config import WINDOW_TITLE
from park_grid import TileKind, Tool
from park_layout import CLEAR_ALL, ParkLayout
from park_runtime import ParkSession, build_default_session
from park_settings import ParkSettings, load_park_settings, save_park_settings

BACKGROUND = (238, 238, 238, 255)
GRID_LINE = (211, 211, 211, 255)
GUEST_COLOR = (220, 30, 30, 255)

TILE_COLORS: Dict[TileKind, tuple[int, int, int, int]] = {
    TileKind.EMPTY: BACKGROUND,
    TileKind.PATH: (128, 128, 128, 255),
    TileKind.RIDE: (40, 60, 220, 255),
    TileKind.FERRIS: (40, 180, 70, 255),
}


class RuntimeConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str = WINDOW_TITLE
    font_size: int = 10


def tile_color(kind: TileKind) -> tuple[int, int, int, int]:
    return TILE_COLORS[kind]


class ParkArcadeWindow(arcade.Window):
    def __init__(self, session: ParkSession, layout: ParkLayout, config: RuntimeConfig):
        super().__init__(layout.width, layout.height, config.title)
        self.session = session
        self.layout = layout
        self.config = config

    def on_update(self, delta_time: float):
        self.session.advance(delta_time)

    def on_draw(self):
        self.clear(BACKGROUND)
        grid = self.session.grid
        cell = self.layout.cell_size

        for y in range(grid.size):
            for x in range(grid.size):
                left, right, bottom, top = self.layout.cell_rect(x, y)
                kind = grid.tile_at(x, y)
                if kind != TileKind.EMPTY:
                    arcade.draw_lrbt_rectangle_filled(left, right, bottom, top, tile_color(kind))
                arcade.draw_lrbt_rectangle_outline(left, right, bottom, top, GRID_LINE, 1)

        for gx, gy in self.session.simulator.guests():
            cx, cy = self.layout.cell_center(gx, gy)
            arcade.draw_circle_filled(cx, cy, cell / 4, GUEST_COLOR)

        self._draw_status()
        self._draw_toolbar()

    def _draw_status(self) -> None:
        bottom = self.layout.toolbar_h
        arcade.draw_lrbt_rectangle_filled(0, self.width, bottom, bottom + self.layout.status_h, (40, 44, 52, 255))
        last = self.session.logs[-1] if self.session.logs else ""
        status = (
            f"Tool={self.session.tool.value} | Tick={self.session.simulator.ticks} | "
            f"Guests={len(self.session.simulator)} | {last}"
        )
        arcade.draw_text(status, 6, bottom + 7, (230, 230, 230, 255), self.config.font_size)

    def _draw_toolbar(self) -> None:
        for button in self.layout.toolbar_buttons():
            active = button.action == self.session.tool.value
            fill = (90, 120, 170, 255) if active else (70, 74, 82, 255)
            arcade.draw_lrbt_rectangle_filled(button.left, button.right, button.bottom, button.top, fill)
            arcade.draw_text(
                button.label,
                (button.left + button.right) / 2,
                (button.bottom + button.top) / 2 - 5,
                (245, 245, 245, 255),
                self.config.font_size - 1,
                anchor_x="center",
            )

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        if button != arcade.MOUSE_BUTTON_LEFT:
            return

        pressed = self.layout.button_at(x, y)
        if pressed is not None:
            if pressed.action == CLEAR_ALL:
                self.session.clear_all()
            else:
                self.session.select_tool(Tool(pressed.action))
            return

        cell = self.layout.cell_at_pixel(x, y)
        if cell is not None:
            self.session.apply_tool_at(*cell)

    def on_key_press(self, key: int, modifiers: int):
        if key == arcade.key.SPACE:
            self.session.clock.running = not self.session.clock.running
            self.session.add_log(f"[sim] {'resumed' if self.session.clock.running else 'paused'}")


def run_arcade(settings: ParkSettings, config: RuntimeConfig) -> None:
    session = build_default_session(settings)
    layout = ParkLayout(grid_size=settings.grid_size, cell_size=settings.cell_size)
    ParkArcadeWindow(session, layout, config)
    arcade.run()


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Mini park builder (arcade)")
    parser.add_argument("--settings", default=None, help="Path to park settings JSON (default: data/park_settings.json)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for guests")
    parser.add_argument("--tick-ms", type=int, default=None, help="Simulation tick interval in ms")
    parser.add_argument("--guests", type=int, default=None, help="Number of guests spawned at start")
    parser.add_argument("--no-starter-path", action="store_true", help="Start with an empty park")
    parser.add_argument("--save-settings", default=None, help="Write the effective settings to this path and exit")
    return parser.parse_args()


def settings_from_args(args: argparse.Namespace) -> ParkSettings:
    settings = load_park_settings(args.settings)
    overrides: Dict[str, object] = {}
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.tick_ms is not None:
        overrides["tick_ms"] = args.tick_ms
    if args.guests is not None:
        overrides["initial_guests"] = args.guests
    if args.no_starter_path:
        overrides["starter_path"] = False
    if not overrides:
        return settings
    return ParkSettings.model_validate({**settings.model_dump(), **overrides})


def main() -> None:
    args = _parse_args()
    settings = settings_from_args(args)
    if args.save_settings:
        path = save_park_settings(settings, args.save_settings)
        print(f"settings written: {path}")
        return
    run_arcade(settings, RuntimeConfig())


if __name__ == "__main__":
    main()
