"""
Grid coordinates and the Manhattan distance used throughout the kernel.
"""

from typing import NamedTuple

from .constants import Direction


class Coord(NamedTuple):
    """A grid cell. x grows to the right, y grows upward; (0, 0) is bottom-left."""

    x: int
    y: int

    def go(self, direction: Direction) -> "Coord":
        dx, dy = direction.delta
        return Coord(self.x + dx, self.y + dy)


def manhattan(a: Coord, b: Coord) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)
