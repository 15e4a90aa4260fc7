"""
Domain entities for the greedy Battlesnake.

This module contains the core game entities that are independent of
infrastructure concerns (HTTP transport, JSON, configuration).
"""

from .constants import UP, DOWN, LEFT, RIGHT, VALID_MOVES, DEFAULT_MOVE, Direction
from .coord import Coord, manhattan
from .errors import InvalidGameStateError
from .snake import Snake
from .game_state import Board, GameState, game_id_from_payload

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'DEFAULT_MOVE', 'Direction',
    'Coord', 'manhattan',
    'InvalidGameStateError',
    'Snake',
    'Board',
    'GameState',
    'game_id_from_payload',
]
