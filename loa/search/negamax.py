from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import FrozenSet, Optional, Set, Tuple

from loa.core import Board, Move

logger = logging.getLogger(__name__)

WIN = 10**9
LOSS = -WIN
# -INF is below every reachable score, so the first evaluated move becomes the best.
INF = WIN + 1


@dataclass
class SearchConfig:
    max_depth: int = 2
    history_capacity: int = 16
    cutoff_margin: int = 10_000


def evaluate(board: Board) -> int:
    """Static score of BOARD, seen by the side that just moved into it.

    Returns LOSS if the side to move is already contiguous, otherwise the
    largest connected-component count among the sides that still have pieces.
    """
    turn = board.turn
    if board.is_contiguous(turn):
        return LOSS
    return max(board.connected_components(turn), board.connected_components(turn.opposite()))


class SearchEngine:
    """Fixed-depth negamax player with a single cutoff bound.

    Two sets of moves persist on the engine: ``_seen`` holds every move
    examined during the current search, anywhere in the tree, and is emptied
    when a search starts; ``_recent`` holds the moves chosen by previous
    searches and may be explored again but never chosen.
    """

    def __init__(self, config: Optional[SearchConfig] = None) -> None:
        self.config = config or SearchConfig()
        self._seen: Set[Move] = set()
        self._recent: Set[Move] = set()
        self.nodes = 0

    @property
    def recent_moves(self) -> FrozenSet[Move]:
        return frozenset(self._recent)

    def reset(self) -> None:
        self._seen.clear()
        self._recent.clear()

    # ------------------------------------------------------------------
    def select_move(self, board: Board, max_depth: Optional[int] = None) -> Optional[Move]:
        """Pick a move for the side to move on BOARD, leaving BOARD unchanged.

        Returns None only when there is no legal move.
        """
        depth = self.config.max_depth if max_depth is None else max_depth
        if depth < 0:
            raise ValueError("max_depth must be non-negative.")

        self._seen.clear()
        self.nodes = 0
        cutoff = WIN - self.config.cutoff_margin
        score, move = self._negamax(board, depth, cutoff)

        if move is None:
            # Every candidate was filtered by the move sets.
            move = next(board.legal_moves(), None)
            if move is None:
                logger.debug("No legal move for %s", board.turn.full_name)
                return None

        if len(self._recent) > self.config.history_capacity:
            self._recent.clear()
        self._recent.add(move)
        logger.debug(
            "%s plays %s (score=%d, depth=%d, nodes=%d)",
            board.turn.full_name,
            move,
            score,
            depth,
            self.nodes,
        )
        return move

    # ------------------------------------------------------------------
    def _negamax(self, board: Board, depth: int, cutoff: int) -> Tuple[int, Optional[Move]]:
        if depth == 0:
            return self._leaf(board, cutoff)

        mover = board.turn
        best_score = -INF
        best_move: Optional[Move] = None
        for move in board.legal_moves():
            if move in self._seen:
                continue
            self._seen.add(move)
            board.apply(move)
            self.nodes += 1
            if board.is_contiguous(mover):
                board.undo()
                return WIN, move
            child_score, child_move = self._negamax(board, depth - 1, -best_score)
            board.undo()

            # A reply line with nothing left to examine says nothing about MOVE.
            if child_move is None or move in self._recent:
                continue
            score = -child_score
            if score > best_score:
                best_score = score
                best_move = move
                if best_score >= cutoff:
                    break
        return best_score, best_move

    def _leaf(self, board: Board, cutoff: int) -> Tuple[int, Optional[Move]]:
        best_score = -INF
        best_move: Optional[Move] = None
        for move in board.legal_moves():
            if move in self._seen:
                continue
            self._seen.add(move)
            board.apply(move)
            self.nodes += 1
            score = evaluate(board)
            board.undo()
            if score > best_score:
                best_score = score
                best_move = move
                if best_score >= cutoff:
                    break
        return best_score, best_move
