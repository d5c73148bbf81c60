# NavigationController: grid edits, navigation requests, agent stepping
# src/visualizer/controller.py
"""
Driver for the pathfinding core.

NavigationController owns one Grid, one Pathfinder and one Agent and turns
user-level commands into core calls:

- click(pos, left)  -> place/remove obstacles, move START/END, navigate
- press_key(key)    -> switch placement mode, toggle diagonal, recalculate
- update(dt)        -> advance the agent

Every grid edit triggers a fresh search; there is no path caching.
The controller has no rendering code. Views (monitoring.dashboard_tui,
tools/nav_demo.py) read grid / current_path / agent and hud_text().
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from monitoring.bus import EventBus
from monitoring.events import EventType
from monitoring.logger import log_event
from pathfinding import Agent, CellType, Grid, Pathfinder, Vec2i, route_cost

from .config import VisualizerConfig

logger = logging.getLogger(__name__)

MODULE_NAME = "visualizer.controller"


class PlacementMode(Enum):
    OBSTACLE = "Obstacle"
    START = "Start"
    END = "End"
    NAVIGATE = "Navigate"


# key -> placement mode
MODE_KEYS: Dict[str, PlacementMode] = {
    "1": PlacementMode.OBSTACLE,
    "2": PlacementMode.START,
    "3": PlacementMode.END,
    "4": PlacementMode.NAVIGATE,
}


class NavigationController:
    """
    Headless application state: grid, pathfinder, agent, placement mode.

    On construction START is placed at the top-left corner, END at the
    bottom-right corner, and the initial path is computed.
    """

    def __init__(
        self,
        config: Optional[VisualizerConfig] = None,
        bus: Optional[EventBus] = None,
    ) -> None:
        self._config = config or VisualizerConfig()
        self._bus = bus or EventBus()

        self._grid = Grid(self._config.grid_width, self._config.grid_height)
        self._pathfinder = Pathfinder(allow_diagonal=self._config.allow_diagonal)
        self._agent = Agent(move_interval=self._config.move_interval)

        self._mode = PlacementMode.OBSTACLE
        self._current_path: List[Vec2i] = []
        self._arrival_reported = False
        self.running = True

        self._grid.set_start(Vec2i(0, 0))
        self._grid.set_end(Vec2i(self._grid.width - 1, self._grid.height - 1))

        self.recalculate_path()

    # ------------------------------------------------------------------
    # Read-only accessors for views
    # ------------------------------------------------------------------

    @property
    def config(self) -> VisualizerConfig:
        return self._config

    @property
    def bus(self) -> EventBus:
        return self._bus

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def pathfinder(self) -> Pathfinder:
        return self._pathfinder

    @property
    def agent(self) -> Agent:
        return self._agent

    @property
    def current_path(self) -> List[Vec2i]:
        return list(self._current_path)

    @property
    def mode(self) -> PlacementMode:
        return self._mode

    def mode_name(self) -> str:
        return self._mode.value

    # ------------------------------------------------------------------
    # Input handling
    # ------------------------------------------------------------------

    def set_mode(self, mode: PlacementMode) -> None:
        if mode is self._mode:
            return
        self._mode = mode
        self._emit(EventType.MODE_CHANGED, f"Mode: {mode.value}", {"mode": mode.value})

    def click(self, pos: Tuple[int, int], left: bool = True) -> None:
        """
        Apply a click on grid cell `pos`. Clicks outside the grid are ignored.

        Left click acts according to the current mode; right click removes
        an obstacle.
        """
        pos = Vec2i(*pos)
        if not self._grid.is_in_bounds(pos):
            logger.debug("Ignoring click outside grid at %s", pos)
            return

        if not left:
            if self._grid.get_cell_type(pos) is CellType.OBSTACLE:
                self._grid.set_cell_type(pos, CellType.WALKABLE)
                self._emit_grid_edit("obstacle_removed", pos)
                self.recalculate_path()
            return

        if self._mode is PlacementMode.OBSTACLE:
            if self._grid.get_cell_type(pos) is CellType.WALKABLE:
                self._grid.set_cell_type(pos, CellType.OBSTACLE)
                self._emit_grid_edit("obstacle_placed", pos)
                self.recalculate_path()

        elif self._mode is PlacementMode.START:
            self._grid.set_start(pos)
            self._emit_grid_edit("start_moved", pos)
            self.recalculate_path()

        elif self._mode is PlacementMode.END:
            self._grid.set_end(pos)
            self._emit_grid_edit("end_moved", pos)
            self.recalculate_path()

        elif self._mode is PlacementMode.NAVIGATE:
            if self._grid.is_walkable(pos):
                self.navigate_to(pos)

    def press_key(self, key: str) -> None:
        """
        Handle a key press. Keys: "1".."4" modes, "d" diagonal,
        " " (space) recalculate, "escape" quit. Unknown keys are ignored.
        """
        key = key if key == " " else key.strip().lower()
        if key in MODE_KEYS:
            self.set_mode(MODE_KEYS[key])
        elif key == "d":
            self.toggle_diagonal()
        elif key in (" ", "space"):
            self.recalculate_path()
        elif key in ("escape", "esc"):
            self.running = False

    def toggle_diagonal(self) -> None:
        allow = not self._pathfinder.allow_diagonal
        self._pathfinder.set_allow_diagonal(allow)
        self._emit(
            EventType.DIAGONAL_TOGGLED,
            f"Diagonal movement {'ON' if allow else 'OFF'}",
            {"allow_diagonal": allow},
        )
        self.recalculate_path()

    def clear_grid(self) -> None:
        """Wipe obstacles and markers; the agent stops because no path remains."""
        self._grid.clear()
        self._emit(EventType.GRID_EDITED, "Grid cleared", {"edit": "cleared"})
        self.recalculate_path()

    # ------------------------------------------------------------------
    # Pathfinding
    # ------------------------------------------------------------------

    def recalculate_path(self) -> List[Vec2i]:
        """Search from the START marker to the END marker and restart the agent."""
        start = self._grid.get_start_position()
        end = self._grid.get_end_position()

        if start is None or end is None:
            self._current_path = []
            self._agent.reset()
            self._emit(
                EventType.PATH_NOT_FOUND,
                "Start or end marker missing",
                {"start": _pos_or_none(start), "end": _pos_or_none(end), "reason": "missing_marker"},
            )
            return []

        return self._search_and_assign(start, end)

    def navigate_to(self, destination: Tuple[int, int]) -> List[Vec2i]:
        """Search from the agent's current cell (see agent_origin) to `destination`."""
        return self._search_and_assign(self.agent_origin(), Vec2i(*destination))

    def agent_origin(self) -> Vec2i:
        """Agent position, else the START marker, else the top-left corner."""
        pos = self._agent.get_position()
        if pos is not None:
            return pos
        start = self._grid.get_start_position()
        if start is not None:
            return start
        return Vec2i(0, 0)

    def _search_and_assign(self, start: Vec2i, end: Vec2i) -> List[Vec2i]:
        self._current_path = self._pathfinder.find_path(self._grid, start, end)
        self._arrival_reported = False

        if self._current_path:
            self._agent.set_path(self._current_path)
            cost = route_cost(self._current_path)
            logger.info("Path %s -> %s: %d nodes, cost %d", start, end, len(self._current_path), cost)
            self._emit(
                EventType.PATH_COMPUTED,
                f"Path: {len(self._current_path)} nodes",
                {
                    "start": list(start),
                    "end": list(end),
                    "length": len(self._current_path),
                    "cost": cost,
                    "path": [list(p) for p in self._current_path],
                    "allow_diagonal": self._pathfinder.allow_diagonal,
                },
            )
        else:
            self._agent.reset()
            logger.info("No path %s -> %s", start, end)
            self._emit(
                EventType.PATH_NOT_FOUND,
                "No path",
                {"start": list(start), "end": list(end), "reason": "unreachable"},
            )
        return list(self._current_path)

    # ------------------------------------------------------------------
    # Frame update
    # ------------------------------------------------------------------

    def update(self, delta_time: float) -> None:
        self._agent.update(delta_time)

        # reported once per assigned route
        if (
            self._agent.has_path()
            and self._agent.has_reached_destination()
            and not self._arrival_reported
        ):
            self._arrival_reported = True
            pos = self._agent.get_position()
            logger.info("Agent arrived at %s", pos)
            self._emit(EventType.AGENT_ARRIVED, f"Agent arrived at {pos}", {"position": _pos_or_none(pos)})

    # ------------------------------------------------------------------
    # HUD / debug
    # ------------------------------------------------------------------

    def hud_text(self) -> str:
        diagonal = "ON" if self._pathfinder.allow_diagonal else "OFF"
        if self._current_path:
            path_info = f"Path: {len(self._current_path)} nodes"
        else:
            path_info = "No path"
        return (
            f"[1] Obstacle  [2] Start  [3] End  [4] Navigate  |  Mode: {self.mode_name()}"
            f"  |  [D] Diagonal: {diagonal}  |  {path_info}"
            "\n[Space] Recalculate  [RMB] Remove  [Esc] Quit"
        )

    def debug_state(self) -> Dict[str, Any]:
        """JSON-safe snapshot of the controller state."""
        return {
            "mode": self._mode.value,
            "allow_diagonal": self._pathfinder.allow_diagonal,
            "move_interval": self._agent.move_interval,
            "start": _pos_or_none(self._grid.get_start_position()),
            "end": _pos_or_none(self._grid.get_end_position()),
            "path": [list(p) for p in self._current_path],
            "agent_position": _pos_or_none(self._agent.get_position()),
            "agent_state": self._agent.state.name,
            "grid": self._grid.to_rows(),
        }

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _emit_grid_edit(self, edit: str, pos: Vec2i) -> None:
        self._emit(EventType.GRID_EDITED, f"Grid edit: {edit} at {pos}", {"edit": edit, "pos": list(pos)})

    def _emit(self, event_type: EventType, message: str, payload: Dict[str, Any]) -> None:
        log_event(
            bus=self._bus,
            module=MODULE_NAME,
            event_type=event_type,
            message=message,
            payload=payload,
        )


def _pos_or_none(pos: Optional[Vec2i]) -> Optional[List[int]]:
    return None if pos is None else [pos.x, pos.y]
