"""
Game constants for the greedy Battlesnake.
"""

from enum import Enum
from typing import Tuple


class Direction(Enum):
    """
    The four cardinal moves, valued by their Battlesnake wire names.

    Declaration order (up, down, left, right) is the canonical order used
    whenever a set of moves is enumerated.
    """

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> Tuple[int, int]:
        return _DELTAS[self]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @property
    def is_horizontal(self) -> bool:
        return self in (Direction.LEFT, Direction.RIGHT)

    @property
    def is_vertical(self) -> bool:
        return self in (Direction.UP, Direction.DOWN)


# Movement directions
UP = Direction.UP
DOWN = Direction.DOWN
LEFT = Direction.LEFT
RIGHT = Direction.RIGHT
VALID_MOVES = frozenset(Direction)

_DELTAS = {
    UP: (0, 1),     # Up => y + 1
    DOWN: (0, -1),  # Down => y - 1
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

_OPPOSITES = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Returned when no move is safe; the protocol needs a move every turn
DEFAULT_MOVE = DOWN
