#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Park configuration.

Rule: constants/settings only in this file. (no logic)
"""

# --- Park ---
GRID_SIZE = 20
CELL_SIZE = 30               # px per cell

# --- Guests ---
INITIAL_GUESTS = 2
MAX_SPAWN_ATTEMPTS = 1000    # rejection-sampling draws before falling back to the walkable list

# --- Starter layout ---
STARTER_PATH_ROW = 10
STARTER_PATH_X0, STARTER_PATH_X1 = 5, 15   # half-open: x in [5, 15)

# --- Simulation ---
SIM_TICK_MS = 100            # real time per simulation tick (ms)

# --- Window ---
WINDOW_TITLE = "Mini RollerCoaster Tycoon"
TOOLBAR_H = 40
STATUS_H = 24

# --- Logs ---
LOG_LIMIT = 8
