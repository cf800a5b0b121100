from __future__ import annotations

import pytest

from eltetris.board import Board, GridOrder, full_row_mask, grid_to_masks
from eltetris.errors import MalformedBoardError


def _empty_grid(rows: int = 20, columns: int = 10) -> list[list[object]]:
    return [[None] * columns for _ in range(rows)]


def test_new_board_is_empty_with_full_row_constant() -> None:
    board = Board()
    assert board.rows == [0] * 20
    assert board.full_row == 0b1111111111
    assert full_row_mask(6) == 63


def test_ingest_top_down_grid_puts_last_row_at_bottom() -> None:
    grid = _empty_grid()
    grid[-1] = ["z"] * 9 + [None]
    grid[-2][0] = "gb"

    board = Board()
    board.ingest(grid)

    assert board.rows[0] == 0b0111111111
    assert board.rows[1] == 0b1
    assert all(mask == 0 for mask in board.rows[2:])


def test_ingest_bottom_up_keeps_row_order() -> None:
    grid = [[0] * 10 for _ in range(20)]
    grid[0][9] = 1

    board = Board.from_grid(grid, order=GridOrder.BOTTOM_UP)

    assert board.rows[0] == 1 << 9
    assert board.is_filled(0, 9)
    assert not board.is_filled(19, 9)


def test_ingest_is_idempotent() -> None:
    grid = _empty_grid()
    grid[-1] = [1, 0, 1, 1, 0, 0, 1, 1, 1, 0]
    grid[-3][4] = "t"

    once = Board()
    once.ingest(grid)
    twice = Board()
    twice.ingest(grid)
    twice.ingest(grid)

    assert once == twice


def test_ragged_grid_is_rejected_and_board_unchanged() -> None:
    board = Board()
    board.rows[0] = 0b11
    grid = _empty_grid()
    grid[5] = [None] * 9

    with pytest.raises(MalformedBoardError):
        board.ingest(grid)
    assert board.rows[0] == 0b11


def test_grid_with_wrong_row_count_is_rejected() -> None:
    with pytest.raises(MalformedBoardError):
        grid_to_masks(_empty_grid(rows=19), columns=10, rows=20)


def test_malformed_board_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        Board.from_grid(_empty_grid(columns=11))


def test_to_grid_round_trips_through_ingest() -> None:
    board = Board()
    board.rows[0] = 0b1011001101
    board.rows[3] = 0b1000000001

    grid = board.to_grid()

    assert grid.shape == (20, 10)
    assert list(grid[-1]) == [1, 0, 1, 1, 0, 0, 1, 1, 0, 1]
    assert Board.from_grid(grid) == board


def test_copy_is_independent() -> None:
    board = Board()
    clone = board.copy()
    clone.rows[0] = 1
    assert board.rows[0] == 0


def test_column_heights_and_render() -> None:
    board = Board(columns=4, rows=4)
    board.rows[0] = 0b0011
    board.rows[2] = 0b0001

    assert board.column_heights() == [3, 1, 0, 0]
    assert board.render().splitlines() == ["....", "#...", "....", "##.."]


def test_is_filled_rejects_out_of_bounds() -> None:
    with pytest.raises(IndexError):
        Board().is_filled(20, 0)


def test_ingest_wide_grid_keeps_high_columns() -> None:
    grid = _empty_grid(columns=70)
    grid[-1][63] = "z"
    grid[-1][65] = "z"

    board = Board.from_grid(grid, columns=70)

    assert board.rows[0] == (1 << 63) | (1 << 65)
    assert board.is_filled(0, 65)


@pytest.mark.parametrize("grid", [[None] * 20, 5])
def test_grid_without_sized_rows_is_rejected(grid: object) -> None:
    board = Board()
    board.rows[0] = 0b101

    with pytest.raises(MalformedBoardError):
        board.ingest(grid)  # type: ignore[arg-type]
    assert board.rows[0] == 0b101
