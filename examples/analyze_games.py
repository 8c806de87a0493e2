#!/usr/bin/env python3
"""
Example: Analyzing Small Combinatorial Games
============================================

This script demonstrates how to:
1. Build games from named values and iconic builders
2. Classify positions into outcome classes
3. Compare games through their difference
4. Report on a whole collection of games

Usage:
    python examples/analyze_games.py

Expected output: Outcome classes, comparisons and a comparison report.
"""

import logging

from combigame import (
    ZERO, ONE, TWO, MINUS_ONE, STAR, UP, HALF,
    integer, nimber, game_sum, negate,
)
from combigame.algorithms import OutcomeSolver
from combigame.analysis import compare, ComparisonAnalyzer


def classify_named_values(solver: OutcomeSolver):
    """Print the outcome class of each named value."""
    print("=" * 60)
    print("Outcome Classes")
    print("=" * 60)

    for name, game in [("0", ZERO), ("1", ONE), ("2", TWO),
                       ("-1", MINUS_ONE), ("*", STAR), ("↑", UP)]:
        print(f"  {name:>3}: {solver.outcome(game).name}")


def compare_examples(solver: OutcomeSolver):
    """Print a few classic comparisons."""
    print("\n" + "=" * 60)
    print("Comparisons")
    print("=" * 60)

    examples = [
        ("1", ONE, "0", ZERO),
        ("-1", MINUS_ONE, "0", ZERO),
        ("* + *", game_sum(STAR, STAR), "0", ZERO),
        ("*", STAR, "0", ZERO),
        ("1/2 + 1/2", game_sum(HALF, HALF), "1", ONE),
        ("↑", UP, "*", STAR),
        ("*1 + *2", game_sum(nimber(1), nimber(2)), "*3", nimber(3)),
        ("-(2)", negate(TWO), "-2", integer(-2)),
    ]

    for left_name, left, right_name, right in examples:
        ordering = compare(left, right, solver)
        print(f"  {left_name:>10} {ordering.symbol:<2} {right_name}")


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    solver = OutcomeSolver()
    classify_named_values(solver)
    compare_examples(solver)

    print()
    analyzer = ComparisonAnalyzer(
        [ZERO, ONE, MINUS_ONE, STAR, UP, game_sum(STAR, STAR), HALF],
        names=["0", "1", "-1", "*", "↑", "*+*", "1/2"],
        solver=solver,
    )
    print(analyzer.generate_report())

    solver.log_stats()


if __name__ == "__main__":
    main()
