from __future__ import annotations

import importlib.util
import json
import sys
from pathlib import Path

import pytest

from park_grid import TileKind

HAS_ARCADE = importlib.util.find_spec("arcade") is not None


@pytest.mark.skipif(not HAS_ARCADE, reason="requires arcade")
def test_parse_args_defaults(monkeypatch):
    import park_window

    monkeypatch.setattr(sys, "argv", ["park_window.py"])
    args = park_window._parse_args()

    assert args.settings is None
    assert args.seed is None
    assert args.tick_ms is None
    assert args.guests is None
    assert args.no_starter_path is False
    assert args.save_settings is None


@pytest.mark.skipif(not HAS_ARCADE, reason="requires arcade")
def test_settings_from_args_applies_cli_overrides(monkeypatch, tmp_path: Path):
    import park_window

    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"seed": 1, "initial_guests": 5}), encoding="utf-8")
    monkeypatch.setattr(
        sys,
        "argv",
        ["park_window.py", "--settings", str(path), "--seed", "8", "--tick-ms", "250", "--no-starter-path"],
    )

    settings = park_window.settings_from_args(park_window._parse_args())

    assert settings.seed == 8
    assert settings.tick_ms == 250
    assert settings.initial_guests == 5
    assert settings.starter_path is False


@pytest.mark.skipif(not HAS_ARCADE, reason="requires arcade")
def test_main_save_settings_writes_file_without_opening_window(monkeypatch, tmp_path: Path, capsys):
    import park_window

    target = tmp_path / "out.json"
    monkeypatch.setattr(
        sys,
        "argv",
        ["park_window.py", "--settings", str(tmp_path / "none.json"), "--guests", "3", "--save-settings", str(target)],
    )
    monkeypatch.setattr(park_window, "run_arcade", lambda *_args, **_kwargs: pytest.fail("window must not open"))

    park_window.main()

    assert json.loads(target.read_text(encoding="utf-8"))["initial_guests"] == 3
    assert "settings written" in capsys.readouterr().out


@pytest.mark.skipif(not HAS_ARCADE, reason="requires arcade")
def test_every_tile_kind_has_a_distinct_color():
    import park_window

    colors = [park_window.tile_color(kind) for kind in TileKind]

    assert len(set(colors)) == len(TileKind)
    assert park_window.tile_color(TileKind.EMPTY) == park_window.BACKGROUND
    assert park_window.RuntimeConfig().title == "Mini RollerCoaster Tycoon"
