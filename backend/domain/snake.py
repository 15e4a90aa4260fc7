"""
Snake entity for the move kernel.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .coord import Coord
from .errors import InvalidGameStateError


@dataclass(frozen=True)
class Snake:
    """
    Represents a snake on the board.

    Attributes:
        id: the engine-assigned snake id
        body: tuple of Coord from head at index 0 to tail at the end
        name: display name
        health: remaining health points
    """

    id: str
    body: Tuple[Coord, ...]
    name: str = ""
    health: int = 100

    def __post_init__(self):
        if not self.body:
            raise InvalidGameStateError(f"Snake {self.id!r} has an empty body")
        object.__setattr__(self, "body", tuple(Coord(*c) for c in self.body))

    @property
    def head(self) -> Coord:
        """Return the head position (first element)."""
        return self.body[0]

    @property
    def neck(self) -> Optional[Coord]:
        """Return the segment right behind the head, or None for a one-cell snake."""
        return self.body[1] if len(self.body) > 1 else None

    @property
    def length(self) -> int:
        return len(self.body)
