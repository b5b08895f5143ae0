from __future__ import annotations

from pathlib import Path

import pytest

import text_park
from guest_simulator import GuestSimulator
from park_grid import ParkGrid, TileKind
from park_runtime import ParkSession
from park_settings import ParkSettings


def test_render_ascii_draws_tiles_and_guests():
    grid = ParkGrid(size=5)
    grid.set_tile(0, 0, TileKind.PATH)
    grid.set_tile(1, 0, TileKind.RIDE)
    grid.set_tile(2, 0, TileKind.FERRIS)
    grid.set_tile(3, 1, TileKind.PATH)
    session = ParkSession(grid=grid, simulator=GuestSimulator(grid, seed=1, max_spawn_attempts=0))

    assert text_park.render_ascii(session) == ["#RF..", "...#.", ".....", ".....", "....."]

    grid.set_tile(3, 1, TileKind.RIDE)
    session.simulator.spawn_guests(2)
    assert text_park.render_ascii(session)[0] == "2RF.."

    grid.set_tile(3, 1, TileKind.PATH)
    grid.set_tile(0, 0, TileKind.EMPTY)
    session.simulator.spawn_guest()
    assert text_park.render_ascii(session)[1] == "...@."


def test_run_text_simulation_prints_every_tick(capsys):
    session = text_park.run_text_simulation(ticks=3, settings=ParkSettings(seed=4))

    out = capsys.readouterr().out
    assert "[TEXT-PARK] start seed=4, ticks=3, guests=2" in out
    assert "Tick 001" in out and "Tick 003" in out
    assert "[TEXT-PARK] done" in out
    assert session.simulator.ticks == 3


def test_main_rejects_non_positive_ticks():
    with pytest.raises(SystemExit):
        text_park.main(["--ticks", "0"])


def test_main_runs_with_seed_override(tmp_path: Path, capsys):
    text_park.main(["--ticks", "1", "--seed", "2", "--settings", str(tmp_path / "none.json")])

    out = capsys.readouterr().out
    assert "seed=2" in out
    assert "Tick 001" in out
