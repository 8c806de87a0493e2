"""
Sides Module
============

The two players of a partizan game. By convention Left moves to a
game's left options and Right moves to its right options.
"""

from enum import Enum, auto


class Side(Enum):
    """Two-player perfect-information game."""
    LEFT = auto()   # Positive player (Blue in Hackenbush terms)
    RIGHT = auto()  # Negative player (Red in Hackenbush terms)

    def other(self) -> 'Side':
        return Side.RIGHT if self == Side.LEFT else Side.LEFT

    def __repr__(self) -> str:
        return "L" if self == Side.LEFT else "R"


def check_side(value: object, name: str = "side") -> Side:
    """Reject anything that is not a Side."""
    if not isinstance(value, Side):
        raise TypeError(f"{name} must be a Side, got {type(value).__name__}")
    return value
