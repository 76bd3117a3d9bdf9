from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np
from tqdm.auto import trange

from loa.core import Board, GameResult, IllegalMoveError, Move, Piece
from loa.search import SearchConfig, SearchEngine

logger = logging.getLogger(__name__)


class Player:
    """Chooses moves for whichever side is to move on the board it is given."""

    def choose(self, board: Board) -> Optional[Move]:
        raise NotImplementedError


class RandomPlayer(Player):
    """Uniform choice among the legal moves, used as a baseline."""

    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        self.rng = rng or np.random.default_rng()

    def choose(self, board: Board) -> Optional[Move]:
        moves = list(board.legal_moves())
        if not moves:
            return None
        return moves[int(self.rng.integers(len(moves)))]


class SearchPlayer(Player):
    def __init__(self, engine: Optional[SearchEngine] = None, *, depth: Optional[int] = None) -> None:
        self.engine = engine or SearchEngine()
        self.depth = depth

    @classmethod
    def from_config(cls, config: SearchConfig) -> "SearchPlayer":
        return cls(SearchEngine(config))

    def choose(self, board: Board) -> Optional[Move]:
        return self.engine.select_move(board, self.depth)


@dataclass
class MatchConfig:
    games: int = 10
    max_ply: int = 400
    depth: int = 2
    opponent: str = "random"
    opponent_depth: int = 1
    alternate_colours: bool = True
    seed: Optional[int] = None


@dataclass
class GameRecord:
    result: GameResult
    moves: List[Move] = field(default_factory=list)
    final_board: Optional[Board] = None

    @property
    def length(self) -> int:
        return len(self.moves)

    def winner(self) -> Piece:
        if self.result == GameResult.DARK_WIN:
            return Piece.DARK
        if self.result == GameResult.LIGHT_WIN:
            return Piece.LIGHT
        return Piece.EMPTY


@dataclass
class MatchResult:
    games_played: int
    player_a_wins: int
    player_b_wins: int
    draws: int
    average_length: float

    def winrate_a(self) -> float:
        return self.player_a_wins / max(1, self.games_played)

    def winrate_b(self) -> float:
        return self.player_b_wins / max(1, self.games_played)


def play_game(
    dark: Player,
    light: Player,
    *,
    board: Optional[Board] = None,
    max_ply: int = 400,
) -> GameRecord:
    """Play one game from BOARD (the standard opening by default).

    The game ends when either side is contiguous, when the side to move has
    no move, or after MAX_PLY moves; the last two are draws.
    """
    board = board.copy() if board is not None else Board()
    players = {Piece.DARK: dark, Piece.LIGHT: light}
    start = board.moves_made()

    result = GameResult.DRAW
    while True:
        if board.game_over():
            result = board.result()
            break
        if board.moves_made() - start >= max_ply:
            break
        move = players[board.turn].choose(board.copy())
        if move is None:
            logger.debug("%s has no move; game drawn", board.turn.full_name)
            break
        if not board.is_legal(move):
            raise IllegalMoveError(f"{board.turn.full_name} chose illegal move {move}")
        board.apply(move)

    moves = board.history[start:]
    logger.debug("Game finished: %s after %d moves", result.value, len(moves))
    return GameRecord(result=result, moves=moves, final_board=board)


def play_match(
    player_a: Player,
    player_b: Player,
    *,
    games: int,
    max_ply: int = 400,
    alternate_colours: bool = True,
    progress: bool = False,
) -> MatchResult:
    """Play GAMES games; player A takes dark in the first and, if alternating, every other one."""
    a_wins = 0
    b_wins = 0
    draws = 0
    total_ply = 0

    for index in trange(games, desc="Games", disable=not progress):
        a_is_dark = not (alternate_colours and index % 2 == 1)
        if a_is_dark:
            record = play_game(player_a, player_b, max_ply=max_ply)
        else:
            record = play_game(player_b, player_a, max_ply=max_ply)
        total_ply += record.length

        winner = record.winner()
        if winner == Piece.EMPTY:
            draws += 1
        elif (winner == Piece.DARK) == a_is_dark:
            a_wins += 1
        else:
            b_wins += 1

    return MatchResult(
        games_played=games,
        player_a_wins=a_wins,
        player_b_wins=b_wins,
        draws=draws,
        average_length=total_ply / max(1, games),
    )
