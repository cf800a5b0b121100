from __future__ import annotations

import logging

import pytest

from eltetris.board import Board
from eltetris.errors import NoViableMoveError, UnknownPieceError
from eltetris.evaluation import evaluate
from eltetris.pieces import PIECES, TetrominoType
from eltetris.selector import candidates, select_move
from eltetris.simulator import simulate


def _score_at(board: Board, shape: TetrominoType, index: int, column: int) -> float:
    rows = list(board.rows)
    placement = simulate(rows, PIECES[shape][index], column, board.columns)
    return evaluate(placement, rows, board.columns)


def test_candidates_follow_orientation_then_column_order() -> None:
    square = list(candidates("O", 10))
    assert square == [(0, PIECES[TetrominoType.O][0], col) for col in range(9)]

    t_moves = [(index, col) for index, _, col in candidates(TetrominoType.T, 10)]
    assert len(t_moves) == 8 + 9 + 8 + 9
    assert t_moves == sorted(t_moves)


def test_square_on_empty_board_prefers_left_corner_on_tie() -> None:
    board = Board()
    move = select_move(board, TetrominoType.O)

    assert (move.orientation_index, move.column) == (0, 0)
    # The right corner scores exactly the same; the earlier candidate wins.
    assert _score_at(board, TetrominoType.O, 0, 8) == move.score


def test_selection_is_deterministic_and_pure() -> None:
    board = Board()
    board.rows[0] = 0b0110011101
    board.rows[1] = 0b0000010001
    before = list(board.rows)

    first = select_move(board, "s")
    second = select_move(board, "S")

    assert first == second
    assert board.rows == before


def test_best_move_beats_every_other_candidate() -> None:
    board = Board()
    board.rows[0] = 0b1101111011
    board.rows[1] = 0b0100011000
    move = select_move(board, TetrominoType.L)

    for index, _, column in candidates(TetrominoType.L, board.columns):
        rows = list(board.rows)
        placement = simulate(rows, PIECES[TetrominoType.L][index], column, board.columns)
        if placement.game_over:
            continue
        assert evaluate(placement, rows, board.columns) <= move.score


def test_vertical_i_fills_single_gap() -> None:
    board = Board()
    board.rows[0] = 0b0111111111

    move = select_move(board, TetrominoType.I)

    assert (move.orientation_index, move.column) == (1, 9)


def test_no_viable_move_raises_with_fallback(caplog) -> None:
    board = Board()
    board.rows[19] = board.full_row

    with caplog.at_level(logging.WARNING, logger="eltetris.selector"):
        with pytest.raises(NoViableMoveError) as excinfo:
            select_move(board, TetrominoType.T)

    error = excinfo.value
    assert error.piece is TetrominoType.T
    assert error.fallback is not None
    assert (error.fallback.orientation_index, error.fallback.column) == (0, 0)
    assert "ends the game" in caplog.text


def test_unknown_piece_is_rejected() -> None:
    with pytest.raises(UnknownPieceError):
        select_move(Board(), "Q")


def test_board_narrower_than_piece_is_rejected() -> None:
    with pytest.raises(ValueError):
        select_move(Board(columns=1), TetrominoType.T)
