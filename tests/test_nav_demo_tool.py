# tests/test_nav_demo_tool.py
"""
Smoke tests for tools/nav_demo.py (scripted mode only).
"""

from __future__ import annotations

import argparse
import importlib.util
import json
from pathlib import Path

import pytest

TOOL_PATH = Path(__file__).resolve().parents[1] / "tools" / "nav_demo.py"


def load_tool():
    spec = importlib.util.spec_from_file_location("nav_demo", TOOL_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def small_config(tmp_path: Path) -> Path:
    path = tmp_path / "visualizer.yaml"
    path.write_text("visualizer:\n  grid_width: 5\n  grid_height: 4\n", encoding="utf-8")
    return path


def test_parse_cell() -> None:
    nav_demo = load_tool()

    assert nav_demo.parse_cell("3,4") == (3, 4)
    with pytest.raises(argparse.ArgumentTypeError):
        nav_demo.parse_cell("3;4")


def test_scripted_run_prints_grid_and_hud(small_config: Path, tmp_path: Path, capsys) -> None:
    nav_demo = load_tool()
    event_log = tmp_path / "logs" / "events.log"

    nav_demo.main([
        "--config", str(small_config),
        "--obstacle", "1,0",
        "--obstacle", "1,1",
        "--ticks", "40",
        "--event-log", str(event_log),
    ])

    out = capsys.readouterr().out
    assert "Path: " in out
    assert "state=ARRIVED" in out
    assert "AGENT_ARRIVED" in out

    kinds = [json.loads(line)["event_type"] for line in event_log.read_text(encoding="utf-8").splitlines()]
    assert kinds[0] == "PATH_COMPUTED"
    assert kinds.count("GRID_EDITED") == 2
    assert kinds[-1] == "AGENT_ARRIVED"


def test_scripted_navigate(small_config: Path, capsys) -> None:
    nav_demo = load_tool()

    nav_demo.main([
        "--config", str(small_config),
        "--diagonal",
        "--navigate", "0,3",
        "--ticks", "40",
    ])

    out = capsys.readouterr().out
    assert "Diagonal: ON" in out
    assert "position=Vec2i(0, 3)" in out
