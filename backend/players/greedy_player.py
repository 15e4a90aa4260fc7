"""
Greedy player - one-step food seeking on top of the safety filter.

Each turn the player filters the four moves down to the safe ones, picks the
nearest food and then walks a fixed priority of rules to close the gap to it.
It never looks more than one move ahead, so it can wander into dead ends or
oscillate in tight spaces; that is the expected behavior of this player.
"""

import random
from typing import Any, Dict, Optional, Sequence

from domain.constants import UP, DOWN, LEFT, RIGHT, DEFAULT_MOVE, Direction
from domain.coord import Coord, manhattan
from domain.game_state import GameState
from services.move_trace import TraceEvent, Tracer, log_trace
from .base import Player
from .food import nearest_food
from .safety import safe_moves


def _toward_x(xdiff: int) -> Optional[Direction]:
    # xdiff > 0 means the target is to the left of the head
    if xdiff > 0:
        return LEFT
    if xdiff < 0:
        return RIGHT
    return None


def _toward_y(ydiff: int) -> Optional[Direction]:
    # ydiff > 0 means the target is below the head
    if ydiff > 0:
        return DOWN
    if ydiff < 0:
        return UP
    return None


def select_move(
    safe: Sequence[Direction],
    head: Coord,
    target: Optional[Coord],
    rng: random.Random,
    tracer: Tracer = log_trace,
    legacy_vertical_gate: bool = False,
) -> Direction:
    """
    Choose one move from the safe set, heading for target when there is one.

    Args:
        safe: the safe moves for this turn
        head: current head position
        target: food to head for, or None to skip straight to a random move
        rng: random source for the fallback
        tracer: receives a move_chosen event describing the decision
        legacy_vertical_gate: only count DOWN as vertical capability, which
            matches earlier releases of this snake, whose gate looked for "top"

    Returns:
        A member of safe, or DEFAULT_MOVE when safe is empty.
    """
    safe_set = set(safe)
    ordered = [d for d in Direction if d in safe_set]
    details: Dict[str, Any] = {"safe": ordered}

    def chosen(direction: Direction, branch: str) -> Direction:
        tracer(TraceEvent("move_chosen", dict(details, direction=direction, branch=branch)))
        return direction

    if target is not None:
        xdiff = head.x - target.x
        ydiff = head.y - target.y
        min_diff = min(abs(xdiff), abs(ydiff))
        # true if we should close the horizontal gap first
        prefer_x = abs(xdiff) == min_diff and xdiff != 0
        can_move_x = LEFT in safe_set or RIGHT in safe_set
        if legacy_vertical_gate:
            can_move_y = DOWN in safe_set
        else:
            can_move_y = UP in safe_set or DOWN in safe_set
        details.update(
            target=target, xdiff=xdiff, ydiff=ydiff, min_diff=min_diff,
            prefer_x=prefer_x, can_move_x=can_move_x, can_move_y=can_move_y,
        )

        move_x = _toward_x(xdiff)
        move_y = _toward_y(ydiff)

        if prefer_x and can_move_x and xdiff != 0:
            if move_x in safe_set:
                return chosen(move_x, "food_x")
            only_move = next(d for d in ordered if d.is_horizontal)
            # don't move in x if it takes us further away, unless it's all we have
            x_move_good = manhattan(head.go(only_move), target) < manhattan(head, target)
            if x_move_good or not can_move_y:
                return chosen(only_move, "food_x_fallback")
            if move_y in safe_set:
                return chosen(move_y, "food_y_after_x")

        if can_move_y and ydiff == 0:
            if move_x in safe_set:
                return chosen(move_x, "food_x_aligned")

        if not prefer_x and can_move_y and ydiff != 0:
            if move_y in safe_set:
                return chosen(move_y, "food_y")
            only_move = next(d for d in ordered if d.is_vertical)
            return chosen(only_move, "food_y_fallback")

        if not prefer_x and not can_move_y:
            if xdiff == 0 and move_y in safe_set:
                return chosen(move_y, "food_blocked_y")
            if move_x in safe_set:
                return chosen(move_x, "food_blocked_x")

    if ordered:
        return chosen(rng.choice(ordered), "random")

    tracer(TraceEvent("no_safe_move", {"direction": DEFAULT_MOVE}))
    return chosen(DEFAULT_MOVE, "no_safe_move")


class GreedyPlayer(Player):
    """
    Heads for the nearest food, never taking a move the safety filter rejects
    while a safe one exists.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        tracer: Optional[Tracer] = None,
        legacy_vertical_gate: bool = False,
    ):
        self.rng = rng or random.Random()
        self.tracer = tracer or log_trace
        self.legacy_vertical_gate = legacy_vertical_gate

    def get_move(self, game_state: GameState) -> Direction:
        you = game_state.you
        self.tracer(TraceEvent("turn", {"turn": game_state.turn, "head": you.head, "food": list(game_state.board.food)}))

        safe = safe_moves(you, game_state.board, tracer=self.tracer)
        target = nearest_food(you.head, game_state.board.food, tracer=self.tracer)
        return select_move(
            safe,
            you.head,
            target,
            self.rng,
            tracer=self.tracer,
            legacy_vertical_gate=self.legacy_vertical_gate,
        )
