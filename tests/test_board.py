import numpy as np
import pytest

from classic_tetris.game.board import EMPTY, FLOOR, Board


def _fill_row(board, row, skip=(), tag=1):
    board.occupy([i for i in board.row_indices(row) if i % board.width not in skip], tag)


def test_new_board_has_sentinel_row():
    board = Board()
    assert board.size == 210
    assert not any(board.is_occupied(i) for i in range(200))
    assert all(board.is_occupied(i) for i in range(200, 210))
    assert board.tag_at(205) == FLOOR


def test_is_occupied_outside_array_is_false():
    board = Board()
    assert not board.is_occupied(-1)
    assert not board.is_occupied(210)


def test_row_complete_only_when_all_ten_cells_occupied():
    board = Board()
    board.occupy(range(190, 199), 2)
    assert not board.is_row_complete(19)
    board.occupy([199], 2)
    assert board.is_row_complete(19)


def test_occupy_rejects_sentinel_and_empty_tag():
    board = Board()
    with pytest.raises(AssertionError):
        board.occupy([200], 1)
    with pytest.raises(AssertionError):
        board.occupy([10], EMPTY)


def test_clear_single_row_shifts_rows_above():
    board = Board()
    _fill_row(board, 19)
    board.occupy([183], 2)
    board.occupy([7], 5)

    assert board.clear_lines() == [19]

    assert board.tag_at(193) == 2
    assert board.tag_at(17) == 5
    assert not any(board.is_occupied(i) for i in board.row_indices(0))
    assert sum(board.is_occupied(i) for i in range(200)) == 2


def test_clear_two_adjacent_rows():
    board = Board()
    _fill_row(board, 18)
    _fill_row(board, 19)
    board.occupy([170], 3)

    assert board.clear_lines() == [19, 18]
    assert board.tag_at(190) == 3
    assert sum(board.is_occupied(i) for i in range(200)) == 1


def test_clear_separated_rows_keeps_order_of_remaining_rows():
    board = Board()
    _fill_row(board, 19)
    board.occupy([180], 4)
    _fill_row(board, 17)
    board.occupy([165], 5)

    assert board.clear_lines() == [19, 17]

    assert board.tag_at(190) == 4
    assert board.tag_at(185) == 5
    assert sum(board.is_occupied(i) for i in range(200)) == 2


def test_clear_lines_never_touches_sentinel():
    board = Board()
    _fill_row(board, 19)
    board.clear_lines()
    assert np.all(board.cells[200:] == FLOOR)


def test_compact_after_clear_inserts_empty_top_row():
    board = Board()
    board.occupy(range(0, 10), 1)
    board.occupy([55], 2)
    board.compact_after_clear([9])
    assert board.tag_at(15) == 1
    assert board.tag_at(65) == 2
    assert not any(board.is_occupied(i) for i in range(10))


def test_fits():
    board = Board()
    board.occupy([15], 1)
    assert board.fits([4, 5, 14, 24])
    assert not board.fits([5, 15, 25, 35])
    assert not board.fits([195, 196, 205, 206])
    assert not board.fits([-6, -5, 4, 5])
    # Cells that wrapped around the right wall
    assert not board.fits([8, 9, 10, 11])


def test_get_grid_returns_visible_copy():
    board = Board()
    grid = board.get_grid()
    assert grid.shape == (20, 10)
    grid[0, 0] = 3
    assert not board.is_occupied(0)
