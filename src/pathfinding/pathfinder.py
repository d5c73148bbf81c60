# A* pathfinding over Grid
# src/pathfinding/pathfinder.py
"""
A* pathfinding over a Grid.

- 4-directional moves (cost 10), optionally 8-directional (diagonal cost 14).
- Manhattan heuristic for 4-way, octile heuristic for 8-way.
- Equal f-cost ties go to the node with the smaller h-cost.
- Diagonal moves may not cut corners: both flanking cells must be walkable.

Nodes live in a per-call arena (a list addressed by index). The open heap
and the position -> node map store indices, and the whole arena is dropped
when find_path returns. Only plain Vec2i values escape through the route.
"""

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from .grid import CellType, Grid
from .vec import Vec2i

logger = logging.getLogger(__name__)

CARDINAL_COST = 10
DIAGONAL_COST = 14

# up, down, left, right
CARDINAL_DIRS: Tuple[Vec2i, ...] = (
    Vec2i(0, -1),
    Vec2i(0, 1),
    Vec2i(-1, 0),
    Vec2i(1, 0),
)

DIAGONAL_DIRS: Tuple[Vec2i, ...] = (
    Vec2i(-1, -1),
    Vec2i(1, -1),
    Vec2i(-1, 1),
    Vec2i(1, 1),
)

Route = List[Vec2i]


@dataclass
class PathNode:
    """Search node. `parent` is an arena index, or None for the start node."""

    pos: Vec2i
    g: int
    h: int
    parent: Optional[int] = None

    @property
    def f(self) -> int:
        return self.g + self.h


# ---------------------------------------------------------------------------
# Heuristics
# ---------------------------------------------------------------------------


def manhattan_distance(a: Tuple[int, int], b: Tuple[int, int]) -> int:
    return (abs(a[0] - b[0]) + abs(a[1] - b[1])) * CARDINAL_COST


def octile_distance(a: Tuple[int, int], b: Tuple[int, int]) -> int:
    dx = abs(a[0] - b[0])
    dy = abs(a[1] - b[1])
    return CARDINAL_COST * (dx + dy) + (DIAGONAL_COST - 2 * CARDINAL_COST) * min(dx, dy)


# ---------------------------------------------------------------------------
# Pathfinder
# ---------------------------------------------------------------------------


class Pathfinder:
    """
    Stateless A* search; the only setting is whether diagonal moves are allowed.

    The diagonal toggle also switches the heuristic, so it must be set before
    calling find_path rather than changed mid-search.
    """

    def __init__(self, allow_diagonal: bool = False) -> None:
        self._allow_diagonal = bool(allow_diagonal)

    @property
    def allow_diagonal(self) -> bool:
        return self._allow_diagonal

    def set_allow_diagonal(self, allow: bool) -> None:
        self._allow_diagonal = bool(allow)

    def heuristic(self, a: Tuple[int, int], b: Tuple[int, int]) -> int:
        if self._allow_diagonal:
            return octile_distance(a, b)
        return manhattan_distance(a, b)

    def find_path(
        self,
        grid: Grid,
        start: Tuple[int, int],
        end: Tuple[int, int],
    ) -> Route:
        """
        A* search for a route from start to end on `grid`.

        Returns the list of coordinates from start to end inclusive, or an
        empty list when either endpoint is out of bounds, either endpoint is
        an obstacle (unless start == end), or no route exists.
        """
        if not grid.is_in_bounds(start) or not grid.is_in_bounds(end):
            logger.debug("find_path: endpoint out of bounds start=%s end=%s", start, end)
            return []

        start = Vec2i(*start)
        end = Vec2i(*end)

        if start != end and (
            grid.get_cell_type(start) is CellType.OBSTACLE
            or grid.get_cell_type(end) is CellType.OBSTACLE
        ):
            logger.debug("find_path: endpoint on obstacle start=%s end=%s", start, end)
            return []

        nodes: List[PathNode] = [PathNode(start, 0, self.heuristic(start, end))]
        node_index: Dict[Vec2i, int] = {start: 0}
        closed: set[Vec2i] = set()

        # (f, h, seq, node index); seq keeps ordering FIFO among full ties
        open_heap: List[Tuple[int, int, int, int]] = []
        seq = 0
        heapq.heappush(open_heap, (nodes[0].f, nodes[0].h, seq, 0))

        while open_heap:
            _, _, _, current_idx = heapq.heappop(open_heap)
            current = nodes[current_idx]

            # stale entry from before a cheaper relaxation
            if current.pos in closed:
                continue

            if current.pos == end:
                route = _reconstruct_path(nodes, current_idx)
                logger.debug(
                    "find_path: %s -> %s found %d cells, %d nodes, %d closed",
                    start, end, len(route), len(nodes), len(closed),
                )
                return route

            closed.add(current.pos)

            for dir_, step_cost in self._moves():
                neighbor = current.pos + dir_

                if not grid.is_walkable(neighbor) or neighbor in closed:
                    continue

                if step_cost == DIAGONAL_COST and not _diagonal_is_clear(grid, current.pos, dir_):
                    continue

                new_g = current.g + step_cost
                existing_idx = node_index.get(neighbor)

                if existing_idx is None:
                    node = PathNode(neighbor, new_g, self.heuristic(neighbor, end), current_idx)
                    existing_idx = len(nodes)
                    nodes.append(node)
                    node_index[neighbor] = existing_idx
                else:
                    node = nodes[existing_idx]
                    if new_g >= node.g:
                        continue
                    node.g = new_g
                    node.parent = current_idx

                seq += 1
                heapq.heappush(open_heap, (node.f, node.h, seq, existing_idx))

        logger.debug(
            "find_path: %s -> %s no path (%d nodes, %d closed)",
            start, end, len(nodes), len(closed),
        )
        return []

    def _moves(self) -> List[Tuple[Vec2i, int]]:
        moves = [(d, CARDINAL_COST) for d in CARDINAL_DIRS]
        if self._allow_diagonal:
            moves.extend((d, DIAGONAL_COST) for d in DIAGONAL_DIRS)
        return moves


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _diagonal_is_clear(grid: Grid, pos: Vec2i, dir_: Vec2i) -> bool:
    """Both orthogonal cells flanking a diagonal step must be walkable."""
    return grid.is_walkable((pos.x + dir_.x, pos.y)) and grid.is_walkable(
        (pos.x, pos.y + dir_.y)
    )


def _reconstruct_path(nodes: Sequence[PathNode], goal_idx: int) -> Route:
    """Walk parent indices back from the goal node, then reverse."""
    path: Route = []
    idx: Optional[int] = goal_idx
    while idx is not None:
        node = nodes[idx]
        path.append(node.pos)
        idx = node.parent
    path.reverse()
    return path


def route_cost(route: Sequence[Tuple[int, int]]) -> int:
    """
    Total step cost of a route: 10 per cardinal step, 14 per diagonal step.

    Raises ValueError if two consecutive cells are not adjacent.
    """
    total = 0
    for a, b in zip(route, route[1:]):
        dx = abs(a[0] - b[0])
        dy = abs(a[1] - b[1])
        if (dx, dy) in ((1, 0), (0, 1)):
            total += CARDINAL_COST
        elif (dx, dy) == (1, 1):
            total += DIAGONAL_COST
        else:
            raise ValueError(f"Route cells {tuple(a)} and {tuple(b)} are not adjacent")
    return total
