# cell classification + start/end markers
# src/pathfinding/grid.py
"""
Grid: fixed-size 2-D cell map used by the pathfinder.

This module only knows about cell types. It:
- Stores a width x height map of CellType values.
- Keeps at most one START and one END cell, caching their coordinates.
- Answers walkability / bounds queries.

It does NOT:
- Search for paths (see pathfinding.pathfinder).
- Know anything about rendering or input.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Tuple

from .vec import Vec2i

logger = logging.getLogger(__name__)


class CellType(Enum):
    WALKABLE = "walkable"
    OBSTACLE = "obstacle"
    START = "start"
    END = "end"


# ASCII notation used by Grid.from_rows / Grid.to_rows
CELL_CHARS = {
    CellType.WALKABLE: ".",
    CellType.OBSTACLE: "#",
    CellType.START: "S",
    CellType.END: "E",
}
_CHAR_TO_CELL = {ch: cell for cell, ch in CELL_CHARS.items()}

_TRAVERSABLE = (CellType.WALKABLE, CellType.START, CellType.END)


class GridBoundsError(ValueError):
    """Raised when a coordinate outside the grid is read or written."""

    def __init__(self, pos: Tuple[int, int], width: int, height: int) -> None:
        super().__init__(
            f"Grid coordinates out of bounds: {tuple(pos)} not in {width}x{height}"
        )
        self.pos = pos
        self.width = width
        self.height = height


class Grid:
    """
    width x height cell map with cached START / END positions.

    Setting a new START (or END) demotes the previous one back to WALKABLE,
    so callers never have to clear the old marker first.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._cells: List[List[CellType]] = [
            [CellType.WALKABLE] * width for _ in range(height)
        ]
        self._start_pos: Optional[Vec2i] = None
        self._end_pos: Optional[Vec2i] = None

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> "Grid":
        """
        Build a grid from ASCII rows ('.' walkable, '#' obstacle,
        'S' start, 'E' end). All rows must have the same length.
        """
        rows = list(rows)
        if not rows:
            raise ValueError("Grid.from_rows needs at least one row")
        width = len(rows[0])
        grid = cls(width, len(rows))
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"Row {y} has length {len(row)}, expected {width}")
            for x, ch in enumerate(row):
                try:
                    cell = _CHAR_TO_CELL[ch]
                except KeyError:
                    raise ValueError(f"Unknown cell character {ch!r} at ({x}, {y})") from None
                if cell is not CellType.WALKABLE:
                    grid.set_cell_type(Vec2i(x, y), cell)
        return grid

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    # ------------------------------------------------------------------
    # Cell queries
    # ------------------------------------------------------------------

    def is_in_bounds(self, pos: Tuple[int, int]) -> bool:
        x, y = pos
        return 0 <= x < self._width and 0 <= y < self._height

    def get_cell_type(self, pos: Tuple[int, int]) -> CellType:
        self._require_in_bounds(pos)
        x, y = pos
        return self._cells[y][x]

    def is_walkable(self, pos: Tuple[int, int]) -> bool:
        """False outside the grid or on an obstacle; START and END count as walkable."""
        if not self.is_in_bounds(pos):
            return False
        x, y = pos
        return self._cells[y][x] in _TRAVERSABLE

    def iter_cells(self) -> Iterator[Tuple[Vec2i, CellType]]:
        """Yield (pos, cell_type) in row-major order."""
        for y, row in enumerate(self._cells):
            for x, cell in enumerate(row):
                yield Vec2i(x, y), cell

    def to_rows(self) -> List[str]:
        return ["".join(CELL_CHARS[cell] for cell in row) for row in self._cells]

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def set_cell_type(self, pos: Tuple[int, int], cell_type: CellType) -> None:
        self._require_in_bounds(pos)
        pos = Vec2i(*pos)

        if cell_type is CellType.START:
            self._start_pos = self._move_special_cell(cell_type, self._start_pos, pos)
        elif cell_type is CellType.END:
            self._end_pos = self._move_special_cell(cell_type, self._end_pos, pos)

        self._cells[pos.y][pos.x] = cell_type

    def set_start(self, pos: Tuple[int, int]) -> None:
        self.set_cell_type(pos, CellType.START)

    def set_end(self, pos: Tuple[int, int]) -> None:
        self.set_cell_type(pos, CellType.END)

    def get_start_position(self) -> Optional[Vec2i]:
        return self._start_pos

    def get_end_position(self) -> Optional[Vec2i]:
        return self._end_pos

    def clear(self) -> None:
        """Reset every cell to WALKABLE and forget START / END."""
        for row in self._cells:
            for x in range(self._width):
                row[x] = CellType.WALKABLE
        self._start_pos = None
        self._end_pos = None
        logger.debug("Grid %dx%d cleared", self._width, self._height)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _require_in_bounds(self, pos: Tuple[int, int]) -> None:
        if not self.is_in_bounds(pos):
            raise GridBoundsError(pos, self._width, self._height)

    def _move_special_cell(
        self,
        cell_type: CellType,
        cached: Optional[Vec2i],
        new_pos: Vec2i,
    ) -> Vec2i:
        """
        Demote the old START / END cell and return the new cache value.

        The old cell is only demoted if it still holds `cell_type`; it may
        have been overwritten (e.g. by an obstacle) since it was cached.
        """
        if cached is None or cached == new_pos:
            return new_pos

        if self.is_in_bounds(cached) and self._cells[cached.y][cached.x] is cell_type:
            self._cells[cached.y][cached.x] = CellType.WALKABLE
        return new_pos
