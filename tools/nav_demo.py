#!/usr/bin/env python3
"""
tools/nav_demo.py

Drive NavigationController from the command line.

Default (scripted) mode:
    - Loads config/visualizer.yaml (or --config)
    - Places obstacles given with --obstacle x,y (repeatable)
    - Optionally toggles diagonal movement and issues one --navigate x,y
    - Advances the agent for --ticks frames of --dt seconds
    - Prints the grid, HUD and recent events

--live:
    - Same setup, then runs the rich TuiDashboard for --seconds.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Tuple

# ---------------------------------------------------------------------------
# Ensure src/ is on sys.path when running as a script
# ---------------------------------------------------------------------------

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# ---------------------------------------------------------------------------
# Imports from the project
# ---------------------------------------------------------------------------

from rich.console import Console  # noqa: E402

from monitoring.bus import EventBus  # type: ignore[import]  # noqa: E402
from monitoring.dashboard_tui import TuiDashboard, render_grid_text  # type: ignore[import]  # noqa: E402
from monitoring.logger import JsonFileLogger  # type: ignore[import]  # noqa: E402
from visualizer import (  # type: ignore[import]  # noqa: E402
    NavigationController,
    PlacementMode,
    VisualizerConfig,
    configure_logging,
    load_config,
)

logger = logging.getLogger("tools.nav_demo")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def parse_cell(text: str) -> Tuple[int, int]:
    """Parse "x,y" into a cell coordinate."""
    try:
        x_str, y_str = text.split(",")
        return int(x_str), int(y_str)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected x,y but got {text!r}") from None


def build_controller(args: argparse.Namespace, config: VisualizerConfig, bus: EventBus) -> NavigationController:
    if args.diagonal:
        config.allow_diagonal = True

    controller = NavigationController(config, bus)

    controller.set_mode(PlacementMode.OBSTACLE)
    for cell in args.obstacle:
        controller.click(cell)

    if args.navigate is not None:
        # let the agent cover part of the initial route first
        for _ in range(args.ticks // 2):
            controller.update(args.dt)
        controller.set_mode(PlacementMode.NAVIGATE)
        controller.click(args.navigate)

    return controller


def run_scripted(controller: NavigationController, dashboard: TuiDashboard, args: argparse.Namespace) -> None:
    console = Console()

    for _ in range(args.ticks):
        controller.update(args.dt)

    agent = controller.agent
    console.rule("Grid")
    console.print(render_grid_text(controller.grid, controller.current_path, agent.get_position()))
    console.rule("HUD")
    console.print(controller.hud_text(), markup=False, soft_wrap=True)
    console.rule("Agent")
    console.print(f"state={agent.state.name} position={agent.get_position()}", markup=False, soft_wrap=True)
    console.rule("Events")
    for event in dashboard.recent_events:
        console.print(f"{event.event_type.name:<16} {event.message}", markup=False, soft_wrap=True)


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------


def main(argv: List[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Scripted / live demo for the grid pathfinding controller",
    )
    parser.add_argument("--config", type=Path, default=None, help="Path to a visualizer YAML file")
    parser.add_argument("--obstacle", type=parse_cell, action="append", default=[], help="Obstacle cell x,y (repeatable)")
    parser.add_argument("--navigate", type=parse_cell, default=None, help="Navigate the agent to x,y")
    parser.add_argument("--diagonal", action="store_true", help="Allow diagonal movement")
    parser.add_argument("--ticks", type=int, default=20, help="Frames to simulate in scripted mode")
    parser.add_argument("--dt", type=float, default=0.1, help="Seconds per simulated frame")
    parser.add_argument("--live", action="store_true", help="Run the live rich dashboard")
    parser.add_argument("--seconds", type=float, default=10.0, help="Live mode duration")
    parser.add_argument("--event-log", type=Path, default=None, help="Write monitoring events as JSONL")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )

    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    config = load_config(args.config)
    bus = EventBus()

    event_log_path = args.event_log or config.event_log_path
    events_log = JsonFileLogger(Path(event_log_path), bus) if event_log_path else None
    if events_log is not None:
        logger.info("Recording monitoring events to %s", events_log.path)

    try:
        controller = build_controller(args, config, bus)
        dashboard = TuiDashboard(controller, bus)
        if args.live:
            dashboard.run(max_seconds=args.seconds)
        else:
            run_scripted(controller, dashboard, args)
    finally:
        if events_log is not None:
            events_log.close()


if __name__ == "__main__":
    main()
