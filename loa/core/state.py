from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import TYPE_CHECKING, Optional, Tuple

if TYPE_CHECKING:
    from .board import Board

BOARD_SIZE = 8

SQUARE_PATTERN = re.compile(r"^[a-h][1-8]$")
MOVE_PATTERN = re.compile(r"^([a-h][1-8])-([a-h][1-8])$")


class Piece(IntEnum):
    EMPTY = 0
    DARK = 1
    LIGHT = 2

    def opposite(self) -> "Piece":
        if self == Piece.DARK:
            return Piece.LIGHT
        if self == Piece.LIGHT:
            return Piece.DARK
        return Piece.EMPTY

    @property
    def abbrev(self) -> str:
        return _ABBREVIATIONS[self]

    @property
    def full_name(self) -> str:
        return _FULL_NAMES[self]

    @staticmethod
    def parse(text: str) -> "Piece":
        key = text.strip().lower()
        for piece in Piece:
            if key in (piece.abbrev, piece.full_name):
                return piece
        if key == "dark":
            return Piece.DARK
        if key == "light":
            return Piece.LIGHT
        raise ValueError(f"Unknown piece: {text!r}")


_ABBREVIATIONS = {Piece.EMPTY: "-", Piece.DARK: "b", Piece.LIGHT: "w"}
_FULL_NAMES = {Piece.EMPTY: "empty", Piece.DARK: "black", Piece.LIGHT: "white"}


class Direction(Enum):
    N = (0, 1)
    S = (0, -1)
    E = (1, 0)
    W = (-1, 0)
    NE = (1, 1)
    NW = (-1, 1)
    SE = (1, -1)
    SW = (-1, -1)

    @property
    def dc(self) -> int:
        return self.value[0]

    @property
    def dr(self) -> int:
        return self.value[1]

    def succ(self) -> "Direction":
        index = DIRECTIONS.index(self)
        return DIRECTIONS[(index + 1) % len(DIRECTIONS)]

    def opposite(self) -> "Direction":
        return Direction((-self.dc, -self.dr))


# Enumeration order used for legal-move generation.
DIRECTIONS: Tuple[Direction, ...] = (
    Direction.N,
    Direction.S,
    Direction.E,
    Direction.W,
    Direction.NE,
    Direction.NW,
    Direction.SE,
    Direction.SW,
)


class GameResult(Enum):
    ONGOING = "ongoing"
    DARK_WIN = "dark_win"
    LIGHT_WIN = "light_win"
    DRAW = "draw"


def in_bounds(col: int, row: int) -> bool:
    return 1 <= col <= BOARD_SIZE and 1 <= row <= BOARD_SIZE


def col(square: str) -> int:
    """Column number (1-8) of a square designator such as ``"c4"``."""
    if not SQUARE_PATTERN.match(square):
        raise ValueError(f"Bad square designator: {square!r}")
    return ord(square[0]) - ord("a") + 1


def row(square: str) -> int:
    """Row number (1-8) of a square designator such as ``"c4"``."""
    if not SQUARE_PATTERN.match(square):
        raise ValueError(f"Bad square designator: {square!r}")
    return ord(square[1]) - ord("0")


def square_name(c: int, r: int) -> str:
    if not in_bounds(c, r):
        raise ValueError(f"Square ({c}, {r}) is off the board.")
    return f"{chr(ord('a') + c - 1)}{r}"


def line_direction(col0: int, row0: int, col1: int, row1: int) -> Optional[Direction]:
    """Unit direction from the first square towards the second, if they share a line."""
    dc = col1 - col0
    dr = row1 - row0
    if dc == 0 and dr == 0:
        return None
    if dc != 0 and dr != 0 and abs(dc) != abs(dr):
        return None
    return Direction(((dc > 0) - (dc < 0), (dr > 0) - (dr < 0)))


@dataclass(frozen=True)
class Move:
    """A straight-line relocation from (col0, row0) to (col1, row1).

    ``moved`` and ``captured`` are snapshots of the origin and destination
    contents taken when the move was built; they make the move undoable but do
    not take part in equality, so the same relocation compares equal across
    positions.
    """

    col0: int
    row0: int
    col1: int
    row1: int
    moved: Piece = field(default=Piece.EMPTY, compare=False)
    captured: Piece = field(default=Piece.EMPTY, compare=False)

    @staticmethod
    def create(col0: int, row0: int, col1: int, row1: int, board: "Board") -> Optional["Move"]:
        """Return the move between two squares of BOARD, or None if it cannot exist."""
        if not (in_bounds(col0, row0) and in_bounds(col1, row1)):
            return None
        if col0 != col1 and row0 != row1 and abs(col1 - col0) != abs(row1 - row0):
            return None
        return Move(col0, row0, col1, row1, board.get(col0, row0), board.get(col1, row1))

    @staticmethod
    def parse(text: str, board: "Board") -> Optional["Move"]:
        match = MOVE_PATTERN.match(text.strip())
        if match is None:
            return None
        origin, dest = match.groups()
        return Move.create(col(origin), row(origin), col(dest), row(dest), board)

    def length(self) -> int:
        return max(abs(self.col1 - self.col0), abs(self.row1 - self.row0))

    def direction(self) -> Optional[Direction]:
        return line_direction(self.col0, self.row0, self.col1, self.row1)

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.col0, self.row0, self.col1, self.row1)

    def __str__(self) -> str:
        return f"{square_name(self.col0, self.row0)}-{square_name(self.col1, self.row1)}"
