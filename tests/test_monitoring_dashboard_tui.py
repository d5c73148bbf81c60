#tests/test_monitoring_dashboard_tui.py
"""
Smoke tests for monitoring.dashboard_tui.

Covers:
- Grid glyphs for cells, path overlay and agent
- Event updates land in the recent-events buffer
- Layout renders without crashing
"""

from __future__ import annotations

import io

from rich.console import Console

from monitoring.bus import EventBus
from monitoring.dashboard_tui import MAX_EVENTS, TuiDashboard, render_grid_text
from pathfinding import Grid
from visualizer import NavigationController, VisualizerConfig


def test_render_grid_text_glyphs() -> None:
    grid = Grid.from_rows([
        "S.#",
        "...",
        "..E",
    ])
    path = [(0, 0), (0, 1), (1, 1), (1, 2), (2, 2)]

    text = render_grid_text(grid, path, agent_pos=(0, 1))

    assert text.plain.split("\n") == [
        "S·█",
        "@•·",
        "·•E",
    ]


def test_render_grid_text_without_path() -> None:
    grid = Grid(2, 1)

    assert render_grid_text(grid).plain == "··"


def test_dashboard_collects_events_and_renders() -> None:
    bus = EventBus()
    controller = NavigationController(VisualizerConfig(grid_width=6, grid_height=4), bus)
    console = Console(file=io.StringIO(), width=120, height=30, color_system=None)
    dashboard = TuiDashboard(controller, bus, console=console)

    controller.click((2, 0))
    controller.press_key("d")

    names = [e.event_type.name for e in dashboard.recent_events]
    assert names == ["GRID_EDITED", "PATH_COMPUTED", "DIAGONAL_TOGGLED", "PATH_COMPUTED"]

    console.print(dashboard.build_layout())
    output = console.file.getvalue()
    assert "Grid" in output
    assert "Diagonal: ON" in output
    assert "DIAGONAL_TOGGLED" in output


def test_dashboard_keeps_only_recent_events() -> None:
    bus = EventBus()
    controller = NavigationController(VisualizerConfig(grid_width=5, grid_height=5), bus)
    dashboard = TuiDashboard(controller, bus)

    for _ in range(MAX_EVENTS + 4):
        controller.press_key(" ")

    assert len(dashboard.recent_events) == MAX_EVENTS

    dashboard.close()
    controller.press_key(" ")
    assert len(dashboard.recent_events) == MAX_EVENTS


def test_dashboard_run_stops_when_controller_stops() -> None:
    bus = EventBus()
    controller = NavigationController(VisualizerConfig(grid_width=4, grid_height=4), bus)
    console = Console(file=io.StringIO(), width=80, height=24, color_system=None)
    dashboard = TuiDashboard(controller, bus, console=console)

    controller.running = False
    dashboard.run()

    # no frames were advanced
    assert controller.agent.get_position() == (0, 0)
    assert controller.agent.timer == 0.0
