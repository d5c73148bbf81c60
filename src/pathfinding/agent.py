# single agent stepping along a route
# src/pathfinding/agent.py
"""
Agent: advances a cursor through a route at a fixed time interval.

States:
- IDLE       no route
- FOLLOWING  index < last index
- ARRIVED    index == last index

update(dt) is a catch-up loop: a long frame may consume several steps, and
any remainder below one interval carries over to the next call.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import List, Optional, Sequence, Tuple

from .vec import Vec2i

DEFAULT_MOVE_INTERVAL = 0.1


class AgentState(Enum):
    IDLE = auto()
    FOLLOWING = auto()
    ARRIVED = auto()


class Agent:
    def __init__(self, move_interval: float = DEFAULT_MOVE_INTERVAL) -> None:
        self._path: List[Vec2i] = []
        self._index = 0
        self._timer = 0.0
        self._move_interval = DEFAULT_MOVE_INTERVAL
        self.set_move_interval(move_interval)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def move_interval(self) -> float:
        """Seconds spent on each cell before stepping to the next."""
        return self._move_interval

    @move_interval.setter
    def move_interval(self, seconds: float) -> None:
        self.set_move_interval(seconds)

    def set_move_interval(self, seconds: float) -> None:
        if seconds <= 0:
            raise ValueError(f"move_interval must be positive, got {seconds}")
        self._move_interval = float(seconds)

    # ------------------------------------------------------------------
    # Path control
    # ------------------------------------------------------------------

    def set_path(self, path: Sequence[Tuple[int, int]]) -> None:
        self._path = [Vec2i(*p) for p in path]
        self._index = 0
        self._timer = 0.0

    def reset(self) -> None:
        self._path = []
        self._index = 0
        self._timer = 0.0

    def update(self, delta_time: float) -> None:
        if not self._path or self.has_reached_destination():
            return

        self._timer += delta_time
        last = len(self._path) - 1

        while self._timer >= self._move_interval and self._index < last:
            self._timer -= self._move_interval
            self._index += 1

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def state(self) -> AgentState:
        if not self._path:
            return AgentState.IDLE
        if self._index >= len(self._path) - 1:
            return AgentState.ARRIVED
        return AgentState.FOLLOWING

    @property
    def path_index(self) -> int:
        return self._index

    @property
    def timer(self) -> float:
        return self._timer

    @property
    def path(self) -> List[Vec2i]:
        return list(self._path)

    def has_path(self) -> bool:
        return bool(self._path)

    def get_position(self) -> Optional[Vec2i]:
        if not self._path:
            return None
        return self._path[self._index]

    def has_reached_destination(self) -> bool:
        """True when idle or sitting on the last cell of the route."""
        if not self._path:
            return True
        return self._index >= len(self._path) - 1
