"""
Safety filter - which of the four moves will not kill us this turn.
"""

from typing import List, Optional

from domain.constants import UP, DOWN, LEFT, RIGHT, Direction
from domain.game_state import Board
from domain.snake import Snake
from services.move_trace import TraceEvent, Tracer, log_trace


def neck_direction(snake: Snake) -> Optional[Direction]:
    """
    The move that would put the head back onto the neck, or None for a
    one-cell snake (or a stacked start where neck and head coincide).
    """
    head, neck = snake.head, snake.neck
    if neck is None:
        return None
    if neck.x < head.x:
        # Neck is left of head, don't move left
        return LEFT
    if neck.x > head.x:
        # Neck is right of head, don't move right
        return RIGHT
    if neck.y < head.y:
        # Neck is below head, don't move down
        return DOWN
    if neck.y > head.y:
        # Neck is above head, don't move up
        return UP
    return None


def safe_moves(you: Snake, board: Board, tracer: Tracer = log_trace) -> List[Direction]:
    """
    Return the moves that do not immediately collide, in canonical order.

    A move is dropped if it reverses onto the neck, leaves the board, or lands
    on any snake cell as it is *before* this turn's movement. Tails are not
    assumed to vacate, so a tail cell is never considered free.
    """
    head = you.head
    reverse = neck_direction(you)
    own_body = set(you.body)
    occupied = set(board.occupied())

    moves: List[Direction] = []
    for direction in Direction:
        nxt = head.go(direction)
        reason = None
        if direction is reverse:
            reason = "neck"
        elif not board.in_bounds(nxt):
            reason = "wall"
        elif nxt in own_body:
            reason = "self"
        elif nxt in occupied:
            reason = "snake"

        if reason is not None:
            tracer(TraceEvent("unsafe_move", {"direction": direction, "reason": reason}))
            continue
        moves.append(direction)

    return moves
