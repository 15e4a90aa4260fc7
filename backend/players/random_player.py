"""
Random player implementation - picks random safe moves.
"""

import random
from typing import Optional

from domain.constants import DEFAULT_MOVE, Direction
from domain.game_state import GameState
from services.move_trace import TraceEvent, Tracer, log_trace
from .base import Player
from .safety import safe_moves


class RandomPlayer(Player):
    """
    A baseline that ignores food and picks any direction the safety filter allows.
    """

    def __init__(self, rng: Optional[random.Random] = None, tracer: Optional[Tracer] = None):
        self.rng = rng or random.Random()
        self.tracer = tracer or log_trace

    def get_move(self, game_state: GameState) -> Direction:
        valid_moves = safe_moves(game_state.you, game_state.board, tracer=self.tracer)

        # If no valid moves, go with the default (we'll die anyway)
        if not valid_moves:
            self.tracer(TraceEvent("no_safe_move", {"direction": DEFAULT_MOVE}))
            return DEFAULT_MOVE

        direction = self.rng.choice(valid_moves)
        self.tracer(TraceEvent("move_chosen", {"direction": direction, "branch": "random", "safe": valid_moves}))
        return direction
