"""
Game Module: Positions and Named Values
=======================================

Implements the recursive game representation of combinatorial game theory.

A game is given entirely by the positions each player may move to:

    G = { left options | right options }

Construction Discipline:
- Options must already exist before the game that references them
- Games are frozen once built, so no game can contain itself
- Every option is strictly shorter than its parent, which is what makes
  every recursion over games terminate

Two notions of equality must not be confused:
- Structural equality (==): same tree shape
- Game-value equivalence (analysis.comparison.eq): same behaviour in every sum
"""

from dataclasses import dataclass, field
from typing import Tuple

from .side import Side, check_side


@dataclass(frozen=True)
class Game:
    """
    Immutable game value.

    Attributes:
        left: Positions Left can move to (ordered, possibly empty)
        right: Positions Right can move to (ordered, possibly empty)
        height: Maximum nesting depth, 1 for the terminal game
    """
    left: Tuple['Game', ...] = ()
    right: Tuple['Game', ...] = ()

    # Derived once at construction from the (already built) options
    height: int = field(init=False, repr=False, compare=False)
    _hash: int = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        left = tuple(self.left)
        right = tuple(self.right)

        for option in left + right:
            if not isinstance(option, Game):
                raise TypeError(
                    f"game options must be Game instances, got {type(option).__name__}"
                )

        object.__setattr__(self, "left", left)
        object.__setattr__(self, "right", right)
        object.__setattr__(
            self, "height",
            1 + max((option.height for option in left + right), default=0)
        )
        object.__setattr__(self, "_hash", hash((left, right)))

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, other: object) -> bool:
        """Structural equality, compared over an explicit stack."""
        if self is other:
            return True
        if not isinstance(other, Game):
            return NotImplemented

        pending = [(self, other)]
        seen = set()
        while pending:
            first, second = pending.pop()
            if first is second:
                continue
            if (first._hash != second._hash
                    or first.height != second.height
                    or len(first.left) != len(second.left)
                    or len(first.right) != len(second.right)):
                return False

            key = (id(first), id(second))
            if key in seen:
                continue
            seen.add(key)
            pending.extend(zip(first.left, second.left))
            pending.extend(zip(first.right, second.right))
        return True

    def options(self, side: Side) -> Tuple['Game', ...]:
        """Get the positions the given side can move to."""
        check_side(side)
        return self.left if side == Side.LEFT else self.right

    def is_terminal(self) -> bool:
        """Check if neither player has a move."""
        return not self.left and not self.right

    def __neg__(self) -> 'Game':
        from .operations import negate
        return negate(self)

    def __add__(self, other: 'Game') -> 'Game':
        if not isinstance(other, Game):
            return NotImplemented
        from .operations import game_sum
        return game_sum(self, other)

    def __sub__(self, other: 'Game') -> 'Game':
        if not isinstance(other, Game):
            return NotImplemented
        from .operations import minus
        return minus(self, other)

    def __repr__(self) -> str:
        """
        Brace notation, e.g. {0, * | 1}.

        Sums share sub-positions, so the written-out tree can be
        exponentially larger than the game. Past REPR_MAX_HEIGHT or
        REPR_MAX_LENGTH characters the compact <Game height=h> is used.
        """
        text = None
        if self.height <= REPR_MAX_HEIGHT:
            text = _render(self, REPR_MAX_LENGTH)
        return text if text is not None else f"<Game height={self.height}>"


# Limits for the brace notation
REPR_MAX_HEIGHT = 20
REPR_MAX_LENGTH = 200


def _render(game: Game, budget: int):
    """Brace notation within budget characters, or None if it does not fit."""
    name = _NAMES.get(game)
    if name is not None:
        return name if len(name) <= budget else None

    used = 3  # "{", "|" and "}"
    sides = []
    for options in (game.left, game.right):
        texts = []
        for option in options:
            text = _render(option, budget - used)
            if text is None:
                return None
            texts.append(text)
            used += len(text) + 2
        sides.append(", ".join(texts))

    left, right = sides
    text = (
        "{" + (left + " " if left else "") + "|"
        + (" " + right if right else "") + "}"
    )
    return text if len(text) <= budget else None


def height(game: Game) -> int:
    """
    Maximum nesting depth of a game.

    height(g) = 1 + max(0, heights of all options of g)

    The terminal game has height 1. Used as a termination bound and as a
    cheap size metric for derived games.
    """
    return game.height


# Named values
ZERO = Game()
ONE = Game(left=(ZERO,))
TWO = Game(left=(ONE,))
MINUS_ONE = Game(right=(ZERO,))
STAR = Game(left=(ZERO,), right=(ZERO,))
UP = Game(left=(ZERO,), right=(STAR,))
DOWN = Game(left=(STAR,), right=(ZERO,))
HALF = Game(left=(ZERO,), right=(ONE,))

_NAMES = {
    ZERO: "0",
    ONE: "1",
    TWO: "2",
    MINUS_ONE: "-1",
    STAR: "*",
    UP: "↑",
    DOWN: "↓",
    HALF: "1/2",
}


def integer(n: int) -> Game:
    """
    Build the canonical game for an integer.

    0 = {|},  n = {n-1 |} for n > 0,  n = {| n+1} for n < 0
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"integer() expects an int, got {type(n).__name__}")

    game = ZERO
    for _ in range(abs(n)):
        game = Game(left=(game,)) if n > 0 else Game(right=(game,))
    return game


def nimber(n: int) -> Game:
    """
    Build the nimber *n, the value of a single Nim heap of size n.

    *n = {*0, *1, ..., *(n-1) | *0, *1, ..., *(n-1)}
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"nimber() expects an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"nimber() expects a non-negative heap size, got {n}")

    heaps = []
    for _ in range(n):
        heaps.append(Game(heaps, heaps))
    return Game(heaps, heaps)
