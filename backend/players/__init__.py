"""
Player implementations for the greedy Battlesnake.

This module contains the move kernel (safety filter, food locator, move
selector) and the players built on top of it.
"""

from .base import Player
from .safety import safe_moves, neck_direction
from .food import nearest_food
from .greedy_player import GreedyPlayer, select_move
from .random_player import RandomPlayer
from .variant_registry import get_player_class, list_variants, AVAILABLE_VARIANTS

__all__ = [
    'Player',
    'safe_moves',
    'neck_direction',
    'nearest_food',
    'select_move',
    'GreedyPlayer',
    'RandomPlayer',
    'get_player_class',
    'list_variants',
    'AVAILABLE_VARIANTS',
]
