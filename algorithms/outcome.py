"""
Outcome Analysis
================

Determines who wins a game under optimal play.

Every predicate derives from a single generic minimax recursion:

    wins(s, first, G)
        s == first:  some move m in G.options(first) has wins(s, other, m)
        otherwise:   every move m in G.options(first) has wins(s, other, m)

An empty "some" is False and an empty "every" is True, which is the normal
play convention: a player who must move and cannot, loses.

Outcome Classes:
- LEFT:   Left wins whoever moves first         (G > 0)
- RIGHT:  Right wins whoever moves first        (G < 0)
- FIRST:  the player to move wins (N-position)  (G || 0)
- SECOND: the player not to move wins (P)       (G = 0)

Exactly one class holds for every game, since a finite game of perfect
information is determined.
"""

import logging
from collections import OrderedDict
from enum import Enum, auto
from typing import Dict, Iterator, Optional, Tuple

from ..core.side import Side, check_side
from ..core.game import Game

logger = logging.getLogger(__name__)

# (side, first, game): does side win game when first moves first?
Position = Tuple[Side, Side, Game]


class Outcome(Enum):
    """Four outcome classes of a normal-play game."""
    LEFT = auto()
    RIGHT = auto()
    FIRST = auto()
    SECOND = auto()


def _moves(key: Position) -> Iterator[Game]:
    """Options of the side to move in a position."""
    _, first, game = key
    return iter(game.left if first == Side.LEFT else game.right)


class OutcomeSolver:
    """
    Memoising evaluator for the win predicates.

    The cache maps (side, first, game) to the result of wins(). Games are
    immutable, so an entry never goes stale and is never invalidated;
    max_cache_entries only bounds memory by evicting the least recently
    used entry.

    One solver can be shared across many queries (e.g. every pair of a
    comparison table) so that common sub-positions are solved once.

    Usage:
        solver = OutcomeSolver()
        solver.left_wins(ONE)           # True
        solver.outcome(STAR)            # Outcome.FIRST
        solver.get_stats()
    """

    def __init__(self,
                 memoize: bool = True,
                 max_cache_entries: Optional[int] = None):
        """
        Initialize solver.

        Args:
            memoize: Cache results of wins() across the whole search
            max_cache_entries: LRU bound on the cache (None = unbounded)
        """
        if max_cache_entries is not None and max_cache_entries <= 0:
            raise ValueError(
                f"max_cache_entries must be positive, got {max_cache_entries}"
            )

        self.memoize = memoize
        self.max_cache_entries = max_cache_entries

        self.cache: "OrderedDict[Position, bool]" = OrderedDict()

        # Search statistics
        self.evaluations = 0
        self.cache_hits = 0
        self.cache_misses = 0
        self.evictions = 0

    def wins(self, side: Side, first: Side, game: Game) -> bool:
        """
        Does `side` win `game` when `first` makes the first move?
        """
        check_side(side, "side")
        check_side(first, "first")
        if not isinstance(game, Game):
            raise TypeError(f"game must be a Game, got {type(game).__name__}")

        return self._wins(side, first, game)

    def _lookup(self, key: Position) -> Optional[bool]:
        """Cached result for a position, or None if it must be searched."""
        self.evaluations += 1
        if not self.memoize:
            return None

        if key in self.cache:
            self.cache_hits += 1
            if self.max_cache_entries is not None:
                self.cache.move_to_end(key)
            return self.cache[key]

        self.cache_misses += 1
        return None

    def _wins(self, side: Side, first: Side, game: Game) -> bool:
        """
        Minimax search over an explicit stack.

        Each frame holds a position and an iterator over the mover's
        options. A frame for an existential position (side == first)
        stops at the first winning reply, a universal one at the first
        losing reply; an exhausted iterator gives False and True
        respectively, exactly like any() and all().
        """
        root = (side, first, game)
        known = self._lookup(root)
        if known is not None:
            return known

        stack = [(root, _moves(root))]
        child: Optional[bool] = None
        while stack:
            key, moves = stack[-1]
            decisive = key[0] == key[1]

            result = decisive if child == decisive else None
            child = None
            if result is None:
                for move in moves:
                    move_key = (key[0], key[1].other(), move)
                    known = self._lookup(move_key)
                    if known is None:
                        stack.append((move_key, _moves(move_key)))
                        break
                    if known == decisive:
                        result = decisive
                        break
                else:
                    result = not decisive

                if result is None:
                    continue

            stack.pop()
            if self.memoize:
                self._store(key, result)
            child = result

        return child

    def _store(self, key: Position, result: bool) -> None:
        if (self.max_cache_entries is not None
                and len(self.cache) >= self.max_cache_entries):
            evicted, _ = self.cache.popitem(last=False)
            self.evictions += 1
            logger.debug("Evicted %r from outcome cache (height %d)",
                         evicted[:2], evicted[2].height)
        self.cache[key] = result

    def always_wins(self, side: Side, game: Game) -> bool:
        """`side` wins whoever moves first."""
        check_side(side)
        return self.wins(side, side, game) and self.wins(side, side.other(), game)

    def left_wins_going_first(self, game: Game) -> bool:
        """Left moves first and wins."""
        return self.wins(Side.LEFT, Side.LEFT, game)

    def left_wins_going_second(self, game: Game) -> bool:
        """Right moves first and Left still wins."""
        return self.wins(Side.LEFT, Side.RIGHT, game)

    def right_wins_going_first(self, game: Game) -> bool:
        """Right moves first and wins."""
        return self.wins(Side.RIGHT, Side.RIGHT, game)

    def right_wins_going_second(self, game: Game) -> bool:
        """Left moves first and Right still wins."""
        return self.wins(Side.RIGHT, Side.LEFT, game)

    def left_wins(self, game: Game) -> bool:
        """Left wins whoever moves first (G > 0)."""
        return self.always_wins(Side.LEFT, game)

    def right_wins(self, game: Game) -> bool:
        """Right wins whoever moves first (G < 0)."""
        return self.always_wins(Side.RIGHT, game)

    def first_wins(self, game: Game) -> bool:
        """Whoever moves first wins."""
        return (self.left_wins_going_first(game)
                and self.right_wins_going_first(game))

    def second_wins(self, game: Game) -> bool:
        """Whoever moves second wins."""
        return (self.left_wins_going_second(game)
                and self.right_wins_going_second(game))

    def outcome(self, game: Game) -> Outcome:
        """
        Classify a game into its outcome class.

        Raises RuntimeError if the four predicates do not single out
        exactly one class, which would mean the predicates disagree
        with each other.
        """
        holding = [
            result for result, holds in (
                (Outcome.LEFT, self.left_wins(game)),
                (Outcome.RIGHT, self.right_wins(game)),
                (Outcome.FIRST, self.first_wins(game)),
                (Outcome.SECOND, self.second_wins(game)),
            ) if holds
        ]

        if len(holding) != 1:
            raise RuntimeError(
                f"outcome classes {holding} hold for {game!r}; expected exactly one"
            )
        return holding[0]

    def get_stats(self) -> Dict:
        """Get search statistics."""
        lookups = self.cache_hits + self.cache_misses
        return {
            "evaluations": self.evaluations,
            "cache_hits": self.cache_hits,
            "cache_misses": self.cache_misses,
            "cache_size": len(self.cache),
            "evictions": self.evictions,
            "hit_rate": self.cache_hits / lookups if lookups else 0.0,
        }

    def log_stats(self, level: int = logging.INFO) -> None:
        """Log a one-line summary of the search statistics."""
        stats = self.get_stats()
        logger.log(
            level,
            "Outcome search: %d evaluations, %d cached positions, "
            "hit rate %.1f%%, %d evictions",
            stats["evaluations"], stats["cache_size"],
            100.0 * stats["hit_rate"], stats["evictions"],
        )


# Module-level predicates. Without an explicit solver each call runs on a
# fresh one, so these are referentially transparent.

def resolve_solver(solver: Optional[OutcomeSolver]) -> OutcomeSolver:
    """The given solver, or a fresh one."""
    return solver if solver is not None else OutcomeSolver()


def wins(side: Side, first: Side, game: Game,
         solver: Optional[OutcomeSolver] = None) -> bool:
    """Does `side` win `game` when `first` moves first?"""
    return resolve_solver(solver).wins(side, first, game)


def always_wins(side: Side, game: Game,
                solver: Optional[OutcomeSolver] = None) -> bool:
    return resolve_solver(solver).always_wins(side, game)


def left_wins_going_first(game: Game,
                          solver: Optional[OutcomeSolver] = None) -> bool:
    return resolve_solver(solver).left_wins_going_first(game)


def left_wins_going_second(game: Game,
                           solver: Optional[OutcomeSolver] = None) -> bool:
    return resolve_solver(solver).left_wins_going_second(game)


def right_wins_going_first(game: Game,
                           solver: Optional[OutcomeSolver] = None) -> bool:
    return resolve_solver(solver).right_wins_going_first(game)


def right_wins_going_second(game: Game,
                            solver: Optional[OutcomeSolver] = None) -> bool:
    return resolve_solver(solver).right_wins_going_second(game)


def left_wins(game: Game, solver: Optional[OutcomeSolver] = None) -> bool:
    return resolve_solver(solver).left_wins(game)


def right_wins(game: Game, solver: Optional[OutcomeSolver] = None) -> bool:
    return resolve_solver(solver).right_wins(game)


def first_wins(game: Game, solver: Optional[OutcomeSolver] = None) -> bool:
    return resolve_solver(solver).first_wins(game)


def second_wins(game: Game, solver: Optional[OutcomeSolver] = None) -> bool:
    return resolve_solver(solver).second_wins(game)


def outcome(game: Game, solver: Optional[OutcomeSolver] = None) -> Outcome:
    return resolve_solver(solver).outcome(game)
