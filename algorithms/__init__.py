"""
Algorithms for solving combinatorial games.

Available:
- OutcomeSolver: memoising minimax evaluation of the win predicates
- wins / always_wins and the left, right, first and second player
  predicates derived from it
- outcome: the four-way outcome classification
"""

from .outcome import (
    Outcome,
    OutcomeSolver,
    wins,
    always_wins,
    left_wins_going_first,
    left_wins_going_second,
    right_wins_going_first,
    right_wins_going_second,
    left_wins,
    right_wins,
    first_wins,
    second_wins,
    outcome,
)

__all__ = [
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
]
