# rich-based TUI view of the grid, path and agent
#src/monitoring/dashboard_tui.py
"""
Terminal view for the pathfinding visualizer.

A lightweight terminal UI (using `rich`) that reads a navigation controller
and subscribes to the monitoring EventBus. It renders:

- Grid:
    - walkable / obstacle / start / end cells
    - current path overlay
    - agent marker
- HUD text from the controller
- Recent monitoring events

The view is read-only with respect to the grid; it only calls
controller.update(dt) from its own loop to keep the agent moving.
"""

from __future__ import annotations

import time
from collections import deque
from typing import Deque, List, Optional, Protocol, Sequence, Tuple

from rich.console import Console
from rich.layout import Layout
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from pathfinding import Agent, CellType, Grid

from .bus import EventBus
from .events import MonitoringEvent

# cell -> (glyph, style)
CELL_STYLES = {
    CellType.WALKABLE: ("·", "green"),
    CellType.OBSTACLE: ("█", "red"),
    CellType.START: ("S", "bold yellow"),
    CellType.END: ("E", "bold cyan"),
}
PATH_STYLE = ("•", "bold blue")
AGENT_STYLE = ("@", "bold magenta")

MAX_EVENTS = 8


# ============================================================
# What the dashboard expects from a controller
# ============================================================

class NavigationView(Protocol):
    @property
    def grid(self) -> Grid: ...

    @property
    def agent(self) -> Agent: ...

    @property
    def current_path(self) -> List[Tuple[int, int]]: ...

    running: bool

    def hud_text(self) -> str: ...

    def update(self, delta_time: float) -> None: ...


# ============================================================
# Grid rendering
# ============================================================

def render_grid_text(
    grid: Grid,
    path: Sequence[Tuple[int, int]] = (),
    agent_pos: Optional[Tuple[int, int]] = None,
) -> Text:
    """
    Build a styled Text block for the grid.

    Path cells are drawn over walkable cells only; START / END keep their
    own glyphs. The agent marker is drawn last.
    """
    path_cells = {tuple(p) for p in path}
    agent_cell = tuple(agent_pos) if agent_pos is not None else None

    text = Text()
    for y in range(grid.height):
        for x in range(grid.width):
            cell = grid.get_cell_type((x, y))
            glyph, style = CELL_STYLES[cell]
            if (x, y) == agent_cell:
                glyph, style = AGENT_STYLE
            elif (x, y) in path_cells and cell is CellType.WALKABLE:
                glyph, style = PATH_STYLE
            text.append(glyph, style=style)
        if y < grid.height - 1:
            text.append("\n")
    return text


# ============================================================
# TUI Dashboard
# ============================================================

class TuiDashboard:
    """
    Live terminal dashboard bound to a controller and an EventBus.
    """

    def __init__(
        self,
        controller: NavigationView,
        bus: EventBus,
        console: Optional[Console] = None,
    ) -> None:
        self._controller = controller
        self._bus = bus
        self._console = console or Console()
        self._events: Deque[MonitoringEvent] = deque(maxlen=MAX_EVENTS)

        self._bus.subscribe(self._on_event)

    @property
    def recent_events(self) -> List[MonitoringEvent]:
        return list(self._events)

    def _on_event(self, event: MonitoringEvent) -> None:
        self._events.append(event)

    def close(self) -> None:
        self._bus.unsubscribe(self._on_event)

    # --------------------------------------------------------
    # Rendering helpers
    # --------------------------------------------------------

    def _render_grid_panel(self) -> Panel:
        c = self._controller
        text = render_grid_text(c.grid, c.current_path, c.agent.get_position())
        return Panel(text, title="Grid", border_style="cyan")

    def _render_hud_panel(self) -> Panel:
        return Panel(Text(self._controller.hud_text()), title="HUD", border_style="white")

    def _render_events_panel(self) -> Panel:
        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("Event", style="bold", width=16)
        table.add_column("Message")

        if self._events:
            for event in self._events:
                table.add_row(event.event_type.name, event.message)
        else:
            table.add_row("<none>", "-")

        return Panel(table, title="Events", border_style="magenta")

    def build_layout(self) -> Layout:
        layout = Layout()
        layout.split(
            Layout(name="main", ratio=1),
            Layout(name="hud", size=4),
        )
        layout["main"].split_row(
            Layout(name="grid", ratio=2),
            Layout(name="events", ratio=1),
        )
        layout["grid"].update(self._render_grid_panel())
        layout["events"].update(self._render_events_panel())
        layout["hud"].update(self._render_hud_panel())
        return layout

    # --------------------------------------------------------
    # Main loop
    # --------------------------------------------------------

    def run(self, refresh_per_second: float = 20.0, max_seconds: Optional[float] = None) -> None:
        """
        Advance the controller with wall-clock deltas and redraw until
        controller.running is False or max_seconds elapse.

        Blocks the current thread.
        """
        refresh_delay = 1.0 / max(refresh_per_second, 0.1)
        started = last = time.monotonic()
        with Live(self.build_layout(), console=self._console, refresh_per_second=refresh_per_second) as live:
            while self._controller.running:
                now = time.monotonic()
                self._controller.update(now - last)
                last = now
                live.update(self.build_layout())
                if max_seconds is not None and now - started >= max_seconds:
                    break
                time.sleep(refresh_delay)
