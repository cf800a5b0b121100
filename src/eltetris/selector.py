"""Exhaustive move selection over every orientation and column."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Tuple

from .board import Board
from .errors import NoViableMoveError
from .evaluation import EL_TETRIS_WEIGHTS, Weights, evaluate
from .pieces import Orientation, PieceLike, orientations, piece_type
from .simulator import simulate


LOGGER = logging.getLogger(__name__)

# Starting score; any candidate that avoids game over beats it.
WORST_SCORE = -100000.0


@dataclass(frozen=True)
class Move:
    """Chosen placement for a piece."""

    orientation_index: int
    orientation: Orientation
    column: int
    score: float = WORST_SCORE


def candidates(piece: PieceLike, columns: int) -> Iterator[Tuple[int, Orientation, int]]:
    """Yield ``(orientation_index, orientation, column)`` in evaluation order.

    Orientations come in catalog order and columns from left to right.  The
    order decides ties, so it is part of the selector's contract.
    """

    for index, orientation in enumerate(orientations(piece)):
        for column in range(columns - orientation.width + 1):
            yield index, orientation, column


def select_move(
    board: Board, piece: PieceLike, weights: Weights = EL_TETRIS_WEIGHTS
) -> Move:
    """Return the best scoring placement of ``piece`` on ``board``.

    ``board`` is never modified; every candidate is simulated on a copy.  A
    candidate only replaces the current best when it scores strictly higher,
    so the earliest of several equal candidates wins.

    Raises:
        UnknownPieceError: If ``piece`` is not a tetromino.
        NoViableMoveError: If every placement ends the game.
        ValueError: If no orientation of ``piece`` fits the board width.
    """

    shape = piece_type(piece)
    first = next(candidates(shape, board.columns), None)
    if first is None:
        raise ValueError(f"Board is too narrow for piece {shape.value}")

    best = None
    best_score = WORST_SCORE
    for index, orientation, column in candidates(shape, board.columns):
        rows = list(board.rows)
        placement = simulate(rows, orientation, column, board.columns)
        if placement.game_over:
            continue
        value = evaluate(placement, rows, board.columns, weights)
        if value > best_score:
            best_score = value
            best = Move(index, orientation, column, value)

    if best is None:
        fallback = Move(*first)
        LOGGER.warning("Every placement of %s ends the game", shape.value)
        raise NoViableMoveError(shape, fallback)

    LOGGER.debug(
        "Selected %s orientation=%d column=%d score=%.4f",
        shape.value,
        best.orientation_index,
        best.column,
        best.score,
    )
    return best


__all__ = ["Move", "WORST_SCORE", "candidates", "select_move"]
