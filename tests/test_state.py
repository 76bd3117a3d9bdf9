import pytest

from loa.core import DIRECTIONS, Board, Direction, Move, Piece, col, row, square_name


def test_piece_opposite() -> None:
    assert Piece.DARK.opposite() == Piece.LIGHT
    assert Piece.LIGHT.opposite() == Piece.DARK
    assert Piece.EMPTY.opposite() == Piece.EMPTY


def test_piece_parse_and_names() -> None:
    assert Piece.parse("b") == Piece.DARK
    assert Piece.parse("White") == Piece.LIGHT
    assert Piece.parse("dark") == Piece.DARK
    assert Piece.parse("light") == Piece.LIGHT
    assert Piece.parse("-") == Piece.EMPTY
    assert Piece.DARK.abbrev == "b"
    assert Piece.LIGHT.full_name == "white"
    with pytest.raises(ValueError):
        Piece.parse("x")


def test_direction_successor_order_wraps() -> None:
    order = [Direction.N]
    for _ in range(len(DIRECTIONS) - 1):
        order.append(order[-1].succ())
    assert tuple(order) == DIRECTIONS
    assert Direction.SW.succ() == Direction.N
    assert Direction.NE.opposite() == Direction.SW
    assert (Direction.SE.dc, Direction.SE.dr) == (1, -1)


def test_square_helpers() -> None:
    assert col("c4") == 3
    assert row("c4") == 4
    assert square_name(3, 4) == "c4"
    for bad in ("i1", "a9", "a0", "c", "c44", "C4"):
        with pytest.raises(ValueError):
            col(bad)
        with pytest.raises(ValueError):
            row(bad)
    with pytest.raises(ValueError):
        square_name(9, 1)


def test_move_parse() -> None:
    board = Board()
    move = Move.parse("  c1-c3 ", board)
    assert move is not None
    assert move.as_tuple() == (3, 1, 3, 3)
    assert move.moved == Piece.DARK
    assert move.captured == Piece.EMPTY
    assert str(move) == "c1-c3"
    for bad in ("", "c1c3", "z9-a1", "c1-c9", "c1 - c3", "c1-c3-c5"):
        assert Move.parse(bad, board) is None


def test_move_length_and_direction() -> None:
    board = Board()
    assert Move.create(2, 1, 8, 1, board).length() == 6
    diagonal = Move.create(4, 8, 7, 5, board)
    assert diagonal.length() == 3
    assert diagonal.direction() == Direction.SE
    assert Move.create(3, 1, 1, 3, board).direction() == Direction.NW


def test_move_equality_ignores_pieces() -> None:
    a = Move(1, 1, 1, 3, Piece.DARK, Piece.EMPTY)
    b = Move(1, 1, 1, 3, Piece.LIGHT, Piece.LIGHT)
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    assert a != Move(1, 1, 3, 1)
