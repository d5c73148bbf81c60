# src/pathfinding/__init__.py
"""
Grid pathfinding core.

Provides:
- Vec2i: integer grid coordinate
- Grid / CellType: cell map with single START / END markers
- Pathfinder: A* search (4-way or 8-way without corner cutting)
- Agent: steps along a route at a fixed interval
"""

from __future__ import annotations

from .vec import Vec2i
from .grid import CellType, Grid, GridBoundsError
from .pathfinder import (
    CARDINAL_COST,
    DIAGONAL_COST,
    Pathfinder,
    Route,
    route_cost,
)
from .agent import Agent, AgentState

__all__ = [
    "Vec2i",
    "CellType",
    "Grid",
    "GridBoundsError",
    "CARDINAL_COST",
    "DIAGONAL_COST",
    "Pathfinder",
    "Route",
    "route_cost",
    "Agent",
    "AgentState",
]
