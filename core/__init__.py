"""
Core game algebra: sides, game values and structural operations.
"""

from .side import Side, check_side
from .game import (
    Game, height, integer, nimber,
    ZERO, ONE, TWO, MINUS_ONE, STAR, UP, DOWN, HALF,
)
from .operations import negate, game_sum, minus, sum_all

__all__ = [
    "Side", "check_side",
    "Game", "height", "integer", "nimber",
    "ZERO", "ONE", "TWO", "MINUS_ONE", "STAR", "UP", "DOWN", "HALF",
    "negate", "game_sum", "minus", "sum_all",
]
