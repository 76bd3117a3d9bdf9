"""Lines of Action board engine and automated player."""

from . import core, evaluation, search
from .core import (
    BOARD_SIZE,
    Board,
    Direction,
    GameResult,
    IllegalMoveError,
    Move,
    Piece,
)
from .evaluation import (
    GameRecord,
    MatchConfig,
    MatchResult,
    Player,
    RandomPlayer,
    SearchPlayer,
    play_game,
    play_match,
)
from .search import SearchConfig, SearchEngine, evaluate

__all__ = [
    "core",
    "evaluation",
    "search",
    "BOARD_SIZE",
    "Board",
    "Direction",
    "GameResult",
    "IllegalMoveError",
    "Move",
    "Piece",
    "GameRecord",
    "MatchConfig",
    "MatchResult",
    "Player",
    "RandomPlayer",
    "SearchPlayer",
    "play_game",
    "play_match",
    "SearchConfig",
    "SearchEngine",
    "evaluate",
]
