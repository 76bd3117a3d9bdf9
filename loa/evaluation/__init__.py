"""Automated games and matches between players."""

from .match import (
    GameRecord,
    MatchConfig,
    MatchResult,
    Player,
    RandomPlayer,
    SearchPlayer,
    play_game,
    play_match,
)

__all__ = [
    "GameRecord",
    "MatchConfig",
    "MatchResult",
    "Player",
    "RandomPlayer",
    "SearchPlayer",
    "play_game",
    "play_match",
]
