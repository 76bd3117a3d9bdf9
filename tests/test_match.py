import numpy as np
import pytest

from loa.core import Board, GameResult, IllegalMoveError, Move, Piece
from loa.evaluation import (
    MatchResult,
    Player,
    RandomPlayer,
    SearchPlayer,
    play_game,
    play_match,
)
from loa.search import SearchConfig, SearchEngine


class IllegalPlayer(Player):
    def choose(self, board: Board):
        return Move.create(2, 1, 2, 2, board)


def test_random_game_respects_ply_limit():
    dark = RandomPlayer(np.random.default_rng(0))
    light = RandomPlayer(np.random.default_rng(1))
    record = play_game(dark, light, max_ply=20)

    assert record.length <= 20
    assert record.result in (GameResult.DARK_WIN, GameResult.LIGHT_WIN, GameResult.DRAW)
    if record.result == GameResult.DRAW:
        assert record.length == 20
    else:
        assert record.final_board.game_over()


def test_game_from_finished_position_has_no_moves():
    board = Board.empty(Piece.LIGHT)
    for c in range(2, 8):
        board.set(c, 4, Piece.DARK)
    board.set(1, 1, Piece.LIGHT)
    board.set(8, 8, Piece.LIGHT)

    record = play_game(RandomPlayer(), RandomPlayer(), board=board)

    assert record.result == GameResult.DARK_WIN
    assert record.winner() == Piece.DARK
    assert record.length == 0


def test_play_game_does_not_modify_given_board():
    board = Board()
    play_game(RandomPlayer(np.random.default_rng(3)), RandomPlayer(np.random.default_rng(4)), board=board, max_ply=4)
    assert board.moves_made() == 0
    assert np.array_equal(board.grid, Board().grid)


def test_search_player_wins_in_one():
    board = Board.empty(Piece.DARK)
    board.set(1, 1, Piece.DARK)
    board.set(2, 1, Piece.DARK)
    board.set(4, 2, Piece.DARK)
    board.set(8, 8, Piece.LIGHT)
    board.set(8, 6, Piece.LIGHT)

    player = SearchPlayer(SearchEngine(SearchConfig(max_depth=1)))
    record = play_game(player, RandomPlayer(np.random.default_rng(0)), board=board)

    assert record.result == GameResult.DARK_WIN
    assert record.length == 1


def test_illegal_choice_raises():
    with pytest.raises(IllegalMoveError):
        play_game(IllegalPlayer(), RandomPlayer(), max_ply=2)


def test_play_match_counts_games():
    player_a = SearchPlayer.from_config(SearchConfig(max_depth=0))
    player_b = RandomPlayer(np.random.default_rng(7))
    result = play_match(player_a, player_b, games=2, max_ply=10)

    assert result.games_played == 2
    assert result.player_a_wins + result.player_b_wins + result.draws == 2
    assert 0 < result.average_length <= 10


def test_match_result_winrates():
    result = MatchResult(games_played=4, player_a_wins=3, player_b_wins=1, draws=0, average_length=12.0)
    assert result.winrate_a() == pytest.approx(0.75)
    assert result.winrate_b() == pytest.approx(0.25)
    empty = MatchResult(games_played=0, player_a_wins=0, player_b_wins=0, draws=0, average_length=0.0)
    assert empty.winrate_a() == 0.0
