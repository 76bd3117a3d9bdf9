"""Core game logic for Lines of Action."""

from .state import (
    BOARD_SIZE,
    DIRECTIONS,
    Direction,
    GameResult,
    Move,
    Piece,
    col,
    in_bounds,
    row,
    square_name,
)
from .board import INITIAL_PIECES, Board, IllegalMoveError

__all__ = [
    "Board",
    "BOARD_SIZE",
    "DIRECTIONS",
    "Direction",
    "GameResult",
    "IllegalMoveError",
    "INITIAL_PIECES",
    "Move",
    "Piece",
    "col",
    "in_bounds",
    "row",
    "square_name",
]
