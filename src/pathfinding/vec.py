# integer grid coordinate type
# src/pathfinding/vec.py
"""
Vec2i: immutable integer (x, y) grid coordinate.

A NamedTuple, so it hashes and compares like a plain tuple and can be used
directly as a dict / set key. (1, 2) and (2, 1) are distinct keys.
"""

from __future__ import annotations

from typing import NamedTuple


class Vec2i(NamedTuple):
    """Grid cell coordinate. x grows to the right, y grows downward."""

    x: int
    y: int

    def __add__(self, other: object) -> "Vec2i":  # type: ignore[override]
        if not isinstance(other, tuple) or len(other) != 2:
            return NotImplemented
        return Vec2i(self.x + other[0], self.y + other[1])

    def __sub__(self, other: object) -> "Vec2i":
        if not isinstance(other, tuple) or len(other) != 2:
            return NotImplemented
        return Vec2i(self.x - other[0], self.y - other[1])

    def __repr__(self) -> str:
        return f"Vec2i({self.x}, {self.y})"
