"""
Board and GameState entities - a snapshot of one turn as sent by the engine.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .coord import Coord
from .errors import InvalidGameStateError
from .snake import Snake


@dataclass(frozen=True)
class Board:
    """
    The playing field for a single turn.

    Attributes:
        width, height: board dimensions, cells span x in [0, width), y in [0, height)
        food: food positions in the order the engine listed them
        snakes: every snake on the board, including the acting one
    """

    width: int
    height: int
    food: Tuple[Coord, ...] = ()
    snakes: Tuple[Snake, ...] = ()

    def __post_init__(self):
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise InvalidGameStateError(
                    f"Board {name} must be a positive integer, got {value!r}"
                )
        object.__setattr__(self, "food", tuple(Coord(*f) for f in self.food))
        object.__setattr__(self, "snakes", tuple(self.snakes))

    def in_bounds(self, coord: Coord) -> bool:
        return 0 <= coord.x < self.width and 0 <= coord.y < self.height

    def occupied(self) -> List[Coord]:
        """Every cell covered by a snake (heads included), in board order."""
        cells: List[Coord] = []
        for snake in self.snakes:
            cells.append(snake.head)
            cells.extend(snake.body)
        return cells


@dataclass(frozen=True)
class GameState:
    """
    What the kernel gets to see on a given turn.

    Attributes:
        turn: turn counter, only used for diagnostics
        board: the board for this turn
        you: the snake we are choosing a move for
        game_id: engine game id, if any
    """

    turn: int
    board: Board
    you: Snake
    game_id: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "GameState":
        """
        Build a GameState from a Battlesnake move request body.

        Raises:
            InvalidGameStateError: if required keys are missing, the board
                dimensions are not positive integers or a snake has no body.
        """
        if not isinstance(payload, dict):
            raise InvalidGameStateError("Move payload must be a JSON object")
        try:
            board_data = payload["board"]
            board = Board(
                width=board_data["width"],
                height=board_data["height"],
                food=tuple(_parse_coord(f) for f in board_data.get("food") or []),
                snakes=tuple(_parse_snake(s) for s in board_data.get("snakes") or []),
            )
            you = _parse_snake(payload["you"])
            turn = _parse_int(payload, "turn", default=0)
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            if isinstance(exc, InvalidGameStateError):
                raise
            raise InvalidGameStateError(f"Malformed move payload: {exc!r}") from exc

        return cls(turn=turn, board=board, you=you, game_id=game_id_from_payload(payload))

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        # = snake body
        0,1,2... = snake head (showing the snake's index on the board)
        Y = our head
        (0,0) is at the bottom left, x-axis labels at the bottom
        """
        board = [['.' for _ in range(self.board.width)] for _ in range(self.board.height)]

        for food in self.board.food:
            if self.board.in_bounds(food):
                board[food.y][food.x] = 'F'

        snakes = list(self.board.snakes)
        if all(s.id != self.you.id for s in snakes):
            snakes.append(self.you)

        for i, snake in enumerate(snakes):
            marker = 'Y' if snake.id == self.you.id else str(i % 10)
            for pos_idx, cell in enumerate(snake.body):
                if not self.board.in_bounds(cell):
                    continue
                board[cell.y][cell.x] = marker if pos_idx == 0 else '#'

        result = []
        # Print rows in reverse order (bottom to top)
        for y in range(self.board.height - 1, -1, -1):
            result.append(f"{y:2d} {' '.join(board[y])}")

        result.append("   " + " ".join(str(i % 10) for i in range(self.board.width)))

        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState turn={self.turn}, food={list(self.board.food)}, "
            f"snakes={len(self.board.snakes)}, you={self.you.id}>"
        )


def game_id_from_payload(payload: Any) -> Optional[str]:
    """The engine game id from a request body, or None if it is not there."""
    if not isinstance(payload, dict):
        return None
    game = payload.get("game")
    if not isinstance(game, dict):
        return None
    return game.get("id")


def _parse_int(data: Dict[str, Any], key: str, default: Optional[int] = None) -> int:
    if default is not None and key not in data:
        return default
    value = data[key]
    # bool is an int subclass; JSON true/false is never a number here
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidGameStateError(f"{key!r} must be an integer, got {value!r}")
    return value


def _parse_coord(data: Dict[str, Any]) -> Coord:
    return Coord(_parse_int(data, "x"), _parse_int(data, "y"))


def _parse_snake(data: Dict[str, Any]) -> Snake:
    return Snake(
        id=str(data.get("id", "")),
        body=tuple(_parse_coord(c) for c in data.get("body") or []),
        name=data.get("name", ""),
        health=_parse_int(data, "health", default=100),
    )
