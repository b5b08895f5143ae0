#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Guests wandering the park's paths.

Each tick every guest picks one of the four orthogonal directions uniformly
at random and moves there if the target cell is walkable; otherwise it stays
put. Guests never interact and may share a cell. The simulator only reads
the grid.
"""

from __future__ import annotations

from dataclasses import dataclass
from random import Random
from typing import List, Optional, Tuple

from config import MAX_SPAWN_ATTEMPTS
from park_grid import ParkGrid

# N, S, W, E with y growing downwards.
MOVE_OFFSETS: Tuple[Tuple[int, int], ...] = ((0, -1), (0, 1), (-1, 0), (1, 0))


class SpawnFailed(RuntimeError):
    """Raised when a guest cannot be placed because no cell is walkable."""


@dataclass
class Guest:
    x: int
    y: int

    @property
    def position(self) -> Tuple[int, int]:
        return self.x, self.y


class GuestSimulator:
    def __init__(
        self,
        grid: ParkGrid,
        *,
        seed: Optional[int] = None,
        rng: Optional[Random] = None,
        max_spawn_attempts: int = MAX_SPAWN_ATTEMPTS,
    ):
        self.grid = grid
        self.rng = rng if rng is not None else Random(seed)
        self.max_spawn_attempts = max(0, int(max_spawn_attempts))
        self.ticks = 0
        self._guests: List[Guest] = []

    def spawn_guest(self) -> Guest:
        """Place a new guest on a uniformly random walkable cell.

        Rejection-samples up to ``max_spawn_attempts`` coordinates, then draws
        from the explicit walkable list so the loop is always bounded.
        """
        walkable = self.grid.walkable_cells()
        if not walkable:
            raise SpawnFailed("no walkable tile to spawn a guest on")

        size = self.grid.size
        for _ in range(self.max_spawn_attempts):
            x = self.rng.randrange(size)
            y = self.rng.randrange(size)
            if self.grid.is_walkable(x, y):
                break
        else:
            x, y = self.rng.choice(walkable)

        guest = Guest(x=x, y=y)
        self._guests.append(guest)
        return guest

    def spawn_guests(self, count: int) -> List[Guest]:
        return [self.spawn_guest() for _ in range(max(0, int(count)))]

    def step(self) -> int:
        """Advance every guest by one random step. Returns how many moved."""
        self.ticks += 1
        moved = 0
        for guest in self._guests:
            dx, dy = self.rng.choice(MOVE_OFFSETS)
            nx, ny = guest.x + dx, guest.y + dy
            if not self.grid.is_walkable(nx, ny):
                continue
            guest.x, guest.y = nx, ny
            moved += 1
        return moved

    def guests(self) -> Tuple[Tuple[int, int], ...]:
        return tuple(guest.position for guest in self._guests)

    def __len__(self) -> int:
        return len(self._guests)
