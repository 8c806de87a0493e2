"""
combigame - Combinatorial Game Theory Framework
===============================================

A Python implementation of the algebra of two-player, perfect-information
games under normal play, with exact win and comparison analysis.

Key Features:
-------------
1. Immutable game values built bottom-up { left options | right options }
2. Negation, disjunctive sum and difference of games
3. Generic minimax win analysis for either side and either starting player
4. Four-way outcome classification (Left, Right, First, Second player wins)
5. Comparison of games (>, <, =, ||) and equivalence classes

Usage:
------
    from combigame import ONE, STAR, ZERO, game_sum
    from combigame.algorithms import OutcomeSolver
    from combigame.analysis import compare, eq, ComparisonAnalyzer

    # Build and combine games
    g = game_sum(STAR, STAR)
    eq(g, ZERO)                 # True, although g != ZERO structurally

    # Classify positions
    solver = OutcomeSolver()
    solver.outcome(STAR)        # Outcome.FIRST

    # Compare a collection of games
    analyzer = ComparisonAnalyzer([ZERO, ONE, STAR, g])
    print(analyzer.generate_report())

License: MIT
"""

__version__ = "1.0.0"

from .core.side import Side
from .core.game import (
    Game, height, integer, nimber,
    ZERO, ONE, TWO, MINUS_ONE, STAR, UP, DOWN, HALF,
)
from .core.operations import negate, game_sum, minus, sum_all
from .algorithms.outcome import (
    Outcome, OutcomeSolver, wins, always_wins,
    left_wins_going_first, left_wins_going_second,
    right_wins_going_first, right_wins_going_second,
    left_wins, right_wins, first_wins, second_wins, outcome,
)
from .analysis.comparison import (
    Ordering, gt, lt, eq, incomp, ge, le, compare,
    comparison_matrix, ComparisonAnalyzer,
)

__all__ = [
    "Side",
    "Game",
    "height",
    "integer",
    "nimber",
    "ZERO", "ONE", "TWO", "MINUS_ONE", "STAR", "UP", "DOWN", "HALF",
    "negate",
    "game_sum",
    "minus",
    "sum_all",
    "Outcome",
    "OutcomeSolver",
    "wins",
    "always_wins",
    "left_wins_going_first",
    "left_wins_going_second",
    "right_wins_going_first",
    "right_wins_going_second",
    "left_wins",
    "right_wins",
    "first_wins",
    "second_wins",
    "outcome",
    "Ordering",
    "gt", "lt", "eq", "incomp", "ge", "le",
    "compare",
    "comparison_matrix",
    "ComparisonAnalyzer",
]
