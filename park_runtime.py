#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Park session: the glue between the window and the simulation core.

The window forwards clicks, tool buttons and frame deltas here; the session
turns them into grid edits and fixed-interval simulator ticks.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from config import LOG_LIMIT, STARTER_PATH_ROW, STARTER_PATH_X0, STARTER_PATH_X1
from guest_simulator import GuestSimulator, SpawnFailed
from park_grid import DEFAULT_TOOL, ParkGrid, Tool
from park_settings import ParkSettings


@dataclass
class TickClock:
    tick_seconds: float = 0.1
    running: bool = True
    tick_count: int = 0
    accumulator: float = 0.0

    def update(self, dt: float) -> int:
        if not self.running:
            return 0
        self.accumulator += max(0.0, dt)
        ticks = 0
        while self.accumulator >= self.tick_seconds:
            self.accumulator -= self.tick_seconds
            self.tick_count += 1
            ticks += 1
        return ticks


@dataclass
class ParkSession:
    grid: ParkGrid
    simulator: GuestSimulator
    clock: TickClock = field(default_factory=TickClock)
    tool: Tool = DEFAULT_TOOL
    logs: List[str] = field(default_factory=list)

    def add_log(self, message: str) -> None:
        self.logs.append(message)
        if len(self.logs) > LOG_LIMIT:
            self.logs = self.logs[-LOG_LIMIT:]

    def select_tool(self, tool: Tool | str) -> None:
        self.tool = Tool(tool)
        self.add_log(f"[tool] {self.tool.value}")

    def apply_tool_at(self, x: int, y: int) -> bool:
        """Apply the current tool to one cell. Returns False outside the grid."""
        if not self.grid.in_bounds(x, y):
            return False
        kind = self.tool.tile_kind
        self.grid.set_tile(x, y, kind)
        self.add_log(f"[paint] ({x},{y}) -> {kind.value}")
        return True

    def clear_all(self) -> None:
        self.grid.clear_all()
        self.add_log("[clear] all tiles")

    def tick_once(self) -> int:
        return self.simulator.step()

    def advance(self, dt: float) -> int:
        """Feed a frame delta; runs as many whole ticks as have elapsed."""
        ticks = self.clock.update(dt)
        for _ in range(ticks):
            self.tick_once()
        return ticks


def build_default_session(settings: ParkSettings | None = None) -> ParkSession:
    settings = settings or ParkSettings()
    grid = ParkGrid(settings.grid_size)
    if settings.starter_path:
        grid.lay_path(STARTER_PATH_ROW, STARTER_PATH_X0, STARTER_PATH_X1)

    simulator = GuestSimulator(grid, seed=settings.seed, max_spawn_attempts=settings.max_spawn_attempts)
    session = ParkSession(
        grid=grid,
        simulator=simulator,
        clock=TickClock(tick_seconds=settings.tick_seconds),
    )
    for _ in range(settings.initial_guests):
        try:
            guest = simulator.spawn_guest()
        except SpawnFailed as exc:
            session.add_log(f"[spawn] failed: {exc}")
            break
        session.add_log(f"[spawn] guest at ({guest.x},{guest.y})")
    return session
