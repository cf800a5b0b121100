"""Placement engine owning the committed board.

The integration layer that talks to the game session drives the engine with
three calls per piece:

1. :meth:`Engine.ingest_board` with the session's occupancy grid,
2. :meth:`Engine.select_move` with the falling piece,
3. :meth:`Engine.commit_move` with the chosen orientation and column.

Turning the decision into key presses is left to the caller (see
:mod:`eltetris.controls`).  The engine performs no locking; one caller must
serialise access to an instance.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from .board import Board
from .config import EngineConfig
from .pieces import PieceLike, TetrominoType, orientations, piece_type
from .selector import Move, select_move
from .simulator import simulate


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommitResult:
    """Result of making a placement permanent."""

    rows_cleared: int
    game_over: bool
    landing_row: int


class Engine:
    """Chooses and applies placements on a single committed board."""

    def __init__(self, config: Optional[EngineConfig] = None) -> None:
        self.config = config or EngineConfig()
        self.board = Board(self.config.columns, self.config.rows)
        self._last_piece: Optional[TetrominoType] = None
        self._rows_completed = 0
        self._moves = 0

    # ------------------------------------------------------------------
    # Public accessors
    # ------------------------------------------------------------------
    @property
    def rows_completed(self) -> int:
        return self._rows_completed

    @property
    def moves(self) -> int:
        return self._moves

    # ------------------------------------------------------------------
    # Session interface
    # ------------------------------------------------------------------
    def ingest_board(self, grid: Sequence[Sequence[Any]]) -> None:
        """Replace the committed board with the session's occupancy grid.

        Raises:
            MalformedBoardError: If ``grid`` does not match the board size.
        """

        self.board.ingest(grid, self.config.grid_order)

    def select_move(self, piece: PieceLike) -> Move:
        """Return the best placement of ``piece`` without touching the board.

        Raises:
            UnknownPieceError: If ``piece`` is not a tetromino.
            NoViableMoveError: If every placement ends the game.
        """

        shape = piece_type(piece)
        self._last_piece = shape
        return select_move(self.board, shape, self.config.weights)

    def commit_move(
        self,
        orientation_index: int,
        column: int,
        piece: Optional[PieceLike] = None,
    ) -> CommitResult:
        """Drop a piece onto the committed board.

        ``piece`` defaults to the piece of the previous :meth:`select_move`
        call.  The board is left unchanged when the placement ends the game.
        """

        if piece is None:
            if self._last_piece is None:
                raise RuntimeError("No piece selected; pass the piece to commit")
            shape = self._last_piece
        else:
            shape = piece_type(piece)

        variants = orientations(shape)
        if not 0 <= orientation_index < len(variants):
            raise ValueError(
                f"Orientation {orientation_index} not valid for piece {shape.value}"
            )

        placement = simulate(
            self.board.rows, variants[orientation_index], column, self.board.columns
        )
        self._moves += 1
        if placement.game_over:
            LOGGER.info("Game over after %d moves", self._moves)
        else:
            self._rows_completed += placement.rows_cleared
            if placement.rows_cleared:
                LOGGER.debug(
                    "Cleared %d rows (total %d)",
                    placement.rows_cleared,
                    self._rows_completed,
                )
        return CommitResult(
            rows_cleared=placement.rows_cleared,
            game_over=placement.game_over,
            landing_row=placement.landing_row,
        )

    def play(self, piece: PieceLike) -> CommitResult:
        """Select the best placement for ``piece`` and commit it."""

        move = self.select_move(piece)
        return self.commit_move(move.orientation_index, move.column, piece)

    def reset(self) -> None:
        """Return to an empty board and zero the counters."""

        self.board.clear()
        self._last_piece = None
        self._rows_completed = 0
        self._moves = 0


__all__ = ["Engine", "CommitResult"]
