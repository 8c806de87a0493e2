"""
Game Comparison
===============

Orders games by playing their difference.

For games G and H, let D = G - H. The outcome class of D decides how G
relates to H:

- Left wins D whoever starts     ->  G > H
- Right wins D whoever starts    ->  G < H
- Second player wins D           ->  G = H (equivalent in every sum)
- First player wins D            ->  G || H (incomparable, "fuzzy")

Exactly one relation holds for every pair.

Equivalence here is game-value equivalence, not structural equality:
STAR + STAR is equivalent to ZERO but not == to it.
"""

import logging
from enum import Enum
from typing import Dict, List, Optional, Sequence

import numpy as np

from ..core.game import Game
from ..core.operations import minus
from ..algorithms.outcome import Outcome, OutcomeSolver, resolve_solver

logger = logging.getLogger(__name__)


class Ordering(Enum):
    """How one game compares to another. Values are matrix codes."""
    EQUAL = 0
    GREATER = 1
    LESS = -1
    INCOMPARABLE = 2

    @property
    def symbol(self) -> str:
        symbols = {
            Ordering.EQUAL: "=",
            Ordering.GREATER: ">",
            Ordering.LESS: "<",
            Ordering.INCOMPARABLE: "||",
        }
        return symbols[self]

    def reversed(self) -> 'Ordering':
        """The ordering seen from the other game."""
        if self == Ordering.GREATER:
            return Ordering.LESS
        if self == Ordering.LESS:
            return Ordering.GREATER
        return self


_ORDERING_BY_OUTCOME: Dict[Outcome, Ordering] = {
    Outcome.LEFT: Ordering.GREATER,
    Outcome.RIGHT: Ordering.LESS,
    Outcome.SECOND: Ordering.EQUAL,
    Outcome.FIRST: Ordering.INCOMPARABLE,
}


def gt(first: Game, second: Game,
       solver: Optional[OutcomeSolver] = None) -> bool:
    """first > second: Left always wins first - second."""
    return resolve_solver(solver).left_wins(minus(first, second))


def lt(first: Game, second: Game,
       solver: Optional[OutcomeSolver] = None) -> bool:
    """first < second: Right always wins first - second."""
    return resolve_solver(solver).right_wins(minus(first, second))


def eq(first: Game, second: Game,
       solver: Optional[OutcomeSolver] = None) -> bool:
    """first = second: the second player always wins first - second."""
    return resolve_solver(solver).second_wins(minus(first, second))


def incomp(first: Game, second: Game,
           solver: Optional[OutcomeSolver] = None) -> bool:
    """first || second: the first player always wins first - second."""
    return resolve_solver(solver).first_wins(minus(first, second))


def ge(first: Game, second: Game,
       solver: Optional[OutcomeSolver] = None) -> bool:
    """first >= second."""
    return compare(first, second, solver) in (Ordering.GREATER, Ordering.EQUAL)


def le(first: Game, second: Game,
       solver: Optional[OutcomeSolver] = None) -> bool:
    """first <= second."""
    return compare(first, second, solver) in (Ordering.LESS, Ordering.EQUAL)


def compare(first: Game, second: Game,
            solver: Optional[OutcomeSolver] = None) -> Ordering:
    """Single relation holding between two games."""
    return _ORDERING_BY_OUTCOME[resolve_solver(solver).outcome(minus(first, second))]


def comparison_matrix(games: Sequence[Game],
                      solver: Optional[OutcomeSolver] = None) -> np.ndarray:
    """
    Pairwise comparison table.

    Entry [i, j] is the Ordering value of games[i] against games[j]
    (0 equal, 1 greater, -1 less, 2 incomparable). Only the upper
    triangle is solved; the lower triangle follows by reversal.
    """
    solver = resolve_solver(solver)
    n = len(games)
    matrix = np.zeros((n, n), dtype=np.int8)

    for i in range(n):
        for j in range(i + 1, n):
            ordering = compare(games[i], games[j], solver)
            matrix[i, j] = ordering.value
            matrix[j, i] = ordering.reversed().value

    logger.debug("Built %dx%d comparison matrix (%d evaluations)",
                 n, n, solver.evaluations)
    return matrix


class ComparisonAnalyzer:
    """
    Analyzer for a collection of games.

    Provides:
    - Outcome class of each game
    - Pairwise comparison matrix
    - Grouping into game-value equivalence classes
    - Plain-text report

    A single OutcomeSolver is shared by every query, so positions that
    occur in several differences are solved once.
    """

    def __init__(self,
                 games: Sequence[Game],
                 names: Optional[Sequence[str]] = None,
                 solver: Optional[OutcomeSolver] = None):
        """
        Initialize analyzer.

        Args:
            games: Games to analyze
            names: Display names (defaults to each game's repr)
            solver: Solver to share (a new one if omitted)
        """
        self.games = list(games)
        if names is None:
            names = [repr(game) for game in self.games]
        if len(names) != len(self.games):
            raise ValueError(
                f"got {len(names)} names for {len(self.games)} games"
            )
        self.names = list(names)
        self.solver = resolve_solver(solver)
        self._matrix: Optional[np.ndarray] = None

    def matrix(self) -> np.ndarray:
        """Pairwise comparison matrix (computed once)."""
        if self._matrix is None:
            self._matrix = comparison_matrix(self.games, self.solver)
        return self._matrix

    def outcomes(self) -> List[Outcome]:
        return [self.solver.outcome(game) for game in self.games]

    def outcome_counts(self) -> Dict[Outcome, int]:
        """Number of games in each outcome class."""
        counts = {result: 0 for result in Outcome}
        for result in self.outcomes():
            counts[result] += 1
        return counts

    def equivalence_classes(self) -> List[List[int]]:
        """
        Indices of games grouped by game-value equivalence.

        Classes and their members appear in first-seen order.
        """
        matrix = self.matrix()
        classes: List[List[int]] = []

        for i in range(len(self.games)):
            for members in classes:
                if matrix[members[0], i] == Ordering.EQUAL.value:
                    members.append(i)
                    break
            else:
                classes.append([i])

        return classes

    def generate_report(self) -> str:
        """Generate comparison report."""
        matrix = self.matrix()
        outcomes = self.outcomes()
        width = max((len(name) for name in self.names), default=1)

        lines = [
            "=" * 60,
            "Game Comparison Report",
            "=" * 60,
            "",
            "Outcome Classes:",
        ]
        for name, result in zip(self.names, outcomes):
            lines.append(f"  {name:<{width}}  {result.name}")

        lines += ["", "Pairwise Comparison (row vs column):"]
        lines.append("  " + " " * width + "  "
                     + " ".join(f"{j:>2}" for j in range(len(self.games))))
        for i, name in enumerate(self.names):
            cells = " ".join(
                f"{Ordering(int(code)).symbol:>2}" for code in matrix[i]
            )
            lines.append(f"  {name:<{width}}  {cells}")

        lines += ["", "Equivalence Classes:"]
        for members in self.equivalence_classes():
            lines.append("  " + " = ".join(self.names[i] for i in members))

        stats = self.solver.get_stats()
        lines += [
            "",
            "Search Statistics:",
            f"  Evaluations: {stats['evaluations']}",
            f"  Cached Positions: {stats['cache_size']}",
            f"  Hit Rate: {stats['hit_rate']:.2%}",
            "",
            "=" * 60,
        ]

        return "\n".join(lines)
