from __future__ import annotations

from typing import Iterator, List, Optional, Sequence

import numpy as np

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
)

O = Piece.EMPTY
B = Piece.DARK
W = Piece.LIGHT

# Row 1 first: INITIAL_PIECES[row - 1][col - 1] is the square at (col, row).
INITIAL_PIECES: Sequence[Sequence[Piece]] = (
    (O, B, B, B, B, B, B, O),
    (W, O, O, O, O, O, O, W),
    (W, O, O, O, O, O, O, W),
    (W, O, O, O, O, O, O, W),
    (W, O, O, O, O, O, O, W),
    (W, O, O, O, O, O, O, W),
    (W, O, O, O, O, O, O, W),
    (O, B, B, B, B, B, B, O),
)


class IllegalMoveError(ValueError):
    pass


def _check_square(c: int, r: int) -> None:
    # Numpy would wrap 0 and negative indices round to the far edge.
    if not in_bounds(c, r):
        raise ValueError(f"Square ({c}, {r}) is off the board.")


class Board:
    """State of a game of Lines of Action.

    Squares are addressed as (col, row) with 1 <= col, row <= 8; column 1 is
    file ``a`` and row 1 is the bottom rank. The grid is stored as an int8
    array indexed ``[row - 1, col - 1]``.
    """

    def __init__(
        self,
        contents: Optional[Sequence[Sequence[Piece]]] = None,
        turn: Piece = Piece.DARK,
    ) -> None:
        self._grid = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
        self._turn = Piece.DARK
        self._moves: List[Move] = []
        self.initialize(INITIAL_PIECES if contents is None else contents, turn)

    @classmethod
    def empty(cls, turn: Piece = Piece.DARK) -> "Board":
        board = cls(turn=turn)
        board._grid[:, :] = Piece.EMPTY
        return board

    def initialize(self, contents: Sequence[Sequence[Piece]], turn: Piece) -> None:
        """Set the grid to CONTENTS (row 1 first) with TURN to move."""
        grid = np.asarray(contents, dtype=np.int8)
        if grid.shape != (BOARD_SIZE, BOARD_SIZE):
            raise ValueError(f"Board contents must be {BOARD_SIZE}x{BOARD_SIZE}, got {grid.shape}")
        self._moves.clear()
        self._grid = grid.copy()
        self._turn = Piece(turn)

    def clear(self) -> None:
        """Return to the standard opening position with dark to move."""
        self.initialize(INITIAL_PIECES, Piece.DARK)

    def copy(self) -> "Board":
        other = Board.__new__(Board)
        other._grid = self._grid.copy()
        other._turn = self._turn
        other._moves = list(self._moves)
        return other

    # ------------------------------------------------------------------
    @property
    def turn(self) -> Piece:
        return self._turn

    @property
    def grid(self) -> np.ndarray:
        return self._grid.copy()

    @property
    def history(self) -> List[Move]:
        return list(self._moves)

    def moves_made(self) -> int:
        return len(self._moves)

    def get(self, c: int, r: int) -> Piece:
        _check_square(c, r)
        return Piece(int(self._grid[r - 1, c - 1]))

    def get_square(self, square: str) -> Piece:
        return self.get(col(square), row(square))

    def set(self, c: int, r: int, piece: Piece, next_turn: Optional[Piece] = None) -> None:
        """Put PIECE on (c, r), and make NEXT_TURN the side to move if given."""
        _check_square(c, r)
        self._grid[r - 1, c - 1] = piece
        if next_turn is not None:
            self._turn = Piece(next_turn)

    # ------------------------------------------------------------------
    def is_legal(self, move: Optional[Move]) -> bool:
        if self._turn == Piece.EMPTY:
            return False
        if move is None:
            return False
        if not (in_bounds(move.col0, move.row0) and in_bounds(move.col1, move.row1)):
            return False
        if self.get(move.col0, move.row0) != self._turn:
            return False
        direction = move.direction()
        if direction is None:
            return False
        if self.line_count(move.col0, move.row0, direction) != move.length():
            return False
        return not self._blocked(move, direction)

    def apply(self, move: Move) -> None:
        """Make MOVE, which must be legal and built from the current position."""
        if not self.is_legal(move):
            raise IllegalMoveError(f"Illegal move: {move}")
        if (
            self.get(move.col0, move.row0) != move.moved
            or self.get(move.col1, move.row1) != move.captured
        ):
            raise IllegalMoveError(f"Move {move} does not match the board contents.")
        self._grid[move.row1 - 1, move.col1 - 1] = move.moved
        self._grid[move.row0 - 1, move.col0 - 1] = Piece.EMPTY
        self._moves.append(move)
        self._turn = self._turn.opposite()

    def undo(self) -> Move:
        """Retract the last move and return it."""
        if not self._moves:
            raise IllegalMoveError("No moves to undo.")
        move = self._moves.pop()
        self._grid[move.row1 - 1, move.col1 - 1] = move.captured
        self._grid[move.row0 - 1, move.col0 - 1] = move.moved
        self._turn = self._turn.opposite()
        return move

    def legal_moves(self) -> Iterator[Move]:
        """Lazily generate the legal moves of the side to move.

        Squares are scanned row by row from the bottom, left to right, and each
        piece tries the directions in DIRECTIONS order. The line rule fixes the
        distance, so each (square, direction) pair yields at most one move.
        """
        turn = self._turn
        for r in range(1, BOARD_SIZE + 1):
            for c in range(1, BOARD_SIZE + 1):
                if self._grid[r - 1, c - 1] != turn:
                    continue
                for direction in DIRECTIONS:
                    distance = self.line_count(c, r, direction)
                    move = Move.create(
                        c, r, c + distance * direction.dc, r + distance * direction.dr, self
                    )
                    if self.is_legal(move):
                        yield move

    def __iter__(self) -> Iterator[Move]:
        return self.legal_moves()

    def has_legal_move(self) -> bool:
        return next(self.legal_moves(), None) is not None

    # ------------------------------------------------------------------
    def line_count(self, c: int, r: int, direction: Direction) -> int:
        """Number of pieces on the whole line through (c, r) parallel to DIRECTION."""
        count = 1 if self._grid[r - 1, c - 1] != Piece.EMPTY else 0
        count += self._count_ray(c, r, direction)
        count += self._count_ray(c, r, direction.opposite())
        return count

    def _count_ray(self, c: int, r: int, direction: Direction) -> int:
        count = 0
        c, r = c + direction.dc, r + direction.dr
        while in_bounds(c, r):
            if self._grid[r - 1, c - 1] != Piece.EMPTY:
                count += 1
            c, r = c + direction.dc, r + direction.dr
        return count

    def _blocked(self, move: Move, direction: Direction) -> bool:
        if self._grid[move.row1 - 1, move.col1 - 1] == self._turn:
            return True
        opponent = self._turn.opposite()
        c, r = move.col0 + direction.dc, move.row0 + direction.dr
        while (c, r) != (move.col1, move.row1):
            if self._grid[r - 1, c - 1] == opponent:
                return True
            c, r = c + direction.dc, r + direction.dr
        return False

    # ------------------------------------------------------------------
    def connected_components(self, side: Piece) -> int:
        """Count the 8-connected groups formed by SIDE's pieces (0 if it has none)."""
        occupied = self._grid == int(side)
        visited = np.zeros_like(occupied)
        components = 0
        for start_row, start_col in np.argwhere(occupied):
            if visited[start_row, start_col]:
                continue
            components += 1
            visited[start_row, start_col] = True
            stack = [(int(start_row), int(start_col))]
            while stack:
                r, c = stack.pop()
                for direction in DIRECTIONS:
                    nr, nc = r + direction.dr, c + direction.dc
                    if not (0 <= nr < BOARD_SIZE and 0 <= nc < BOARD_SIZE):
                        continue
                    if occupied[nr, nc] and not visited[nr, nc]:
                        visited[nr, nc] = True
                        stack.append((nr, nc))
        return components

    def is_contiguous(self, side: Piece) -> bool:
        return self.connected_components(side) == 1

    def game_over(self) -> bool:
        return self.is_contiguous(Piece.DARK) or self.is_contiguous(Piece.LIGHT)

    def winner(self) -> Piece:
        # Light is checked first, so a move joining both sides counts for light.
        if self.is_contiguous(Piece.LIGHT):
            return Piece.LIGHT
        if self.is_contiguous(Piece.DARK):
            return Piece.DARK
        return Piece.EMPTY

    def result(self) -> GameResult:
        winner = self.winner()
        if winner == Piece.LIGHT:
            return GameResult.LIGHT_WIN
        if winner == Piece.DARK:
            return GameResult.DARK_WIN
        return GameResult.ONGOING

    # ------------------------------------------------------------------
    def __str__(self) -> str:
        lines = ["==="]
        for r in range(BOARD_SIZE, 0, -1):
            cells = " ".join(self.get(c, r).abbrev for c in range(1, BOARD_SIZE + 1))
            lines.append(f"    {cells}")
        lines.append(f"Next move: {self._turn.full_name}")
        lines.append("===")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Board(turn={self._turn.name}, moves={len(self._moves)})\n{self}"
