#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Runtime settings for the park.

- schema validation: pydantic
- JSON I/O: orjson

A missing settings file means defaults; malformed or unknown values raise.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import orjson
from pydantic import BaseModel, ConfigDict, Field

from config import CELL_SIZE, GRID_SIZE, INITIAL_GUESTS, MAX_SPAWN_ATTEMPTS, SIM_TICK_MS

DATA_DIR = Path(__file__).parent / "data"
SETTINGS_FILE = DATA_DIR / "park_settings.json"


class ParkSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    grid_size: int = Field(default=GRID_SIZE, ge=1)
    cell_size: int = Field(default=CELL_SIZE, ge=4)
    tick_ms: int = Field(default=SIM_TICK_MS, ge=1)
    initial_guests: int = Field(default=INITIAL_GUESTS, ge=0)
    seed: Optional[int] = None
    max_spawn_attempts: int = Field(default=MAX_SPAWN_ATTEMPTS, ge=0)
    starter_path: bool = True

    @property
    def tick_seconds(self) -> float:
        return self.tick_ms / 1000.0


def load_park_settings(path: str | Path | None = None) -> ParkSettings:
    settings_path = Path(path) if path is not None else SETTINGS_FILE
    if not settings_path.exists():
        return ParkSettings()
    payload = orjson.loads(settings_path.read_bytes())
    return ParkSettings.model_validate(payload)


def save_park_settings(settings: ParkSettings, path: str | Path | None = None) -> Path:
    settings_path = Path(path) if path is not None else SETTINGS_FILE
    settings_path.parent.mkdir(parents=True, exist_ok=True)
    settings_path.write_bytes(orjson.dumps(settings.model_dump(), option=orjson.OPT_INDENT_2))
    return settings_path
