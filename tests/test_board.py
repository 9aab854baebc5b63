import pytest

from eight_queens.helpers.board import OFF_BOARD, Board, Position, Queen


@pytest.mark.parametrize("row, col, expected", [
    (-1, 0, False),
    (0, -1, False),
    (0, 0, True),
    (7, 7, True),
    (7, 0, True),
    (8, 0, False),
    (0, 8, False),
])
def test_is_on_board_boundaries(row, col, expected):
    assert Board().is_on_board(Position(row, col)) is expected


def test_initialize_puts_every_queen_off_board():
    board = Board()
    assert [q.row for q in board] == list(range(8))
    assert board.columns() == [OFF_BOARD] * 8


def test_initialize_is_idempotent():
    board = Board()
    board[3].col = 5
    board.initialize()
    first = board.columns()
    board.initialize()
    assert board.columns() == first == [OFF_BOARD] * 8


def test_occupies():
    queen = Queen(2, 5)
    assert Board.occupies(queen, Position(2, 5))
    assert not Board.occupies(queen, Position(2, 4))
    assert not Board.occupies(queen, Position(3, 5))


@pytest.mark.parametrize("k", [1, 3, 7])
def test_diagonal_points_mirror_each_other(k):
    p = Position(0, 4)
    right = Board.diagonal_point(p, k)
    left = Board.diagonal_point(p, -k)
    assert right != left
    assert right.row == left.row == p.row + k
    assert (right.col, left.col) == (p.col + k, p.col - k)


def test_diagonal_point_may_leave_the_board():
    point = Board.diagonal_point(Position(6, 0), -2)
    assert point == Position(8, -2)
    assert not Board().is_on_board(point)


def test_diagonal_point_rejects_zero_offset():
    with pytest.raises(ValueError):
        Board.diagonal_point(Position(0, 0), 0)


def test_invalid_size():
    with pytest.raises(ValueError):
        Board(0)


def test_from_columns_rejects_out_of_range_column():
    with pytest.raises(ValueError):
        Board.from_columns([0, 8, 1, 2, 3, 4, 5, 6])


def test_is_solved():
    assert Board.from_columns([0, 4, 7, 5, 2, 6, 1, 3]).is_solved()
    assert not Board.from_columns([0, 1, 2, 3, 4, 5, 6, 7]).is_solved()
    assert not Board.from_columns([0, 4, 7, 5, 2, 6, 1, -1]).is_solved()
