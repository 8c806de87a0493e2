"""
Game Operations: Negation, Sum and Difference
=============================================

Structural transformations that build new games from existing ones.

Operations:
- negate(G): swap the roles of Left and Right everywhere in G
- game_sum(G, H): disjunctive sum, the mover picks one component and
  moves in it while the other is left untouched
- minus(G, H): G + (-H), the difference used by every comparison

Termination:
- negate recurses on a single strictly shorter game
- game_sum replaces exactly one of its two arguments by one of that
  argument's options, so height(G) + height(H) strictly decreases on
  every call
No fuel or depth bound is needed because every game is finite by
construction.

Both operations memoise per call, so a sub-position reached along several
paths is built once and shared in the result. They walk the game over an
explicit stack, so deep games do not hit the interpreter recursion limit.
"""

from functools import reduce
from typing import Dict, Iterable, List, Tuple

from .game import Game, ZERO


def _check_game(value: object, name: str) -> Game:
    if not isinstance(value, Game):
        raise TypeError(f"{name} must be a Game, got {type(value).__name__}")
    return value


def negate(game: Game) -> Game:
    """
    Role-swapped game.

    -G = { -G^R | -G^L }

    Involutive: negate(negate(G)) == G structurally.
    """
    _check_game(game, "game")
    return _negate(game, {})


def _negate(game: Game, memo: Dict[Game, Game]) -> Game:
    """Post-order walk over an explicit stack, filling memo bottom-up."""
    stack = [game]
    while stack:
        current = stack[-1]
        if current in memo:
            stack.pop()
            continue

        pending = [option for option in current.left + current.right
                   if option not in memo]
        if pending:
            stack.extend(pending)
            continue

        stack.pop()
        memo[current] = Game(
            left=[memo[option] for option in current.right],
            right=[memo[option] for option in current.left],
        )
    return memo[game]


def game_sum(first: Game, second: Game) -> Game:
    """
    Disjunctive sum of two games.

    G + H = { G^L + H, G + H^L | G^R + H, G + H^R }

    Options keep their order: moves in the first component come before
    moves in the second.
    """
    _check_game(first, "first")
    _check_game(second, "second")
    return _sum(first, second, {})


Pair = Tuple[Game, Game]


def _sum_options(first: Game, second: Game) -> Tuple[List[Pair], List[Pair]]:
    """Component pairs reachable in one move, left then right."""
    left = ([(option, second) for option in first.left]
            + [(first, option) for option in second.left])
    right = ([(option, second) for option in first.right]
             + [(first, option) for option in second.right])
    return left, right


def _sum(first: Game, second: Game, memo: Dict[Pair, Game]) -> Game:
    """Post-order walk over component pairs, filling memo bottom-up."""
    root = (first, second)
    stack = [root]
    while stack:
        pair = stack[-1]
        if pair in memo:
            stack.pop()
            continue

        left, right = _sum_options(*pair)
        pending = [option for option in left + right if option not in memo]
        if pending:
            stack.extend(pending)
            continue

        stack.pop()
        memo[pair] = Game(
            left=[memo[option] for option in left],
            right=[memo[option] for option in right],
        )
    return memo[root]


def minus(first: Game, second: Game) -> Game:
    """Game difference G - H = G + (-H)."""
    return game_sum(first, negate(second))


def sum_all(games: Iterable[Game]) -> Game:
    """Sum any number of games left to right (0 for none)."""
    return reduce(game_sum, games, ZERO)
