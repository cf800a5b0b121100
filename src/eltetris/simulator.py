"""Drop simulation for a single oriented piece.

:func:`simulate` mutates the row list it is given.  The move selector passes a
scratch copy for every candidate while the engine passes its committed board.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .board import full_row_mask
from .pieces import Orientation


@dataclass(frozen=True)
class Placement:
    """Outcome of dropping one piece."""

    landing_row: int
    rows_cleared: int
    game_over: bool
    height: int
    board: Optional[Tuple[int, ...]] = None


def landing_row(rows: Sequence[int], piece_rows: Sequence[int]) -> int:
    """Return the row where ``piece_rows`` comes to rest.

    Candidate rows are scanned from the top of the usable range down to the
    floor.  The piece settles one row above the first candidate that
    overlaps locked cells, or on row ``0`` when nothing is in the way.
    """

    height = len(piece_rows)
    for row in range(len(rows) - height, -1, -1):
        for offset, mask in enumerate(piece_rows):
            if rows[row + offset] & mask:
                return row + 1
    return 0


def _remove_row(rows: List[int], index: int) -> None:
    for row in range(index, len(rows) - 1):
        rows[row] = rows[row + 1]
    rows[-1] = 0


def clear_rows(rows: List[int], start: int, stop: int, full_row: int) -> int:
    """Remove full rows within ``start..stop-1`` and return how many went."""

    cleared = 0
    row = start
    while row < stop - cleared:
        if rows[row] == full_row:
            _remove_row(rows, row)
            cleared += 1
        else:
            row += 1
    return cleared


def simulate(
    rows: List[int], orientation: Orientation, column: int, columns: int
) -> Placement:
    """Drop ``orientation`` at ``column`` onto ``rows``.

    Raises:
        ValueError: If the piece would stick out of the board.
    """

    if column < 0 or column + orientation.width > columns:
        raise ValueError(
            f"Column {column} is out of range for a piece {orientation.width} wide"
        )

    piece_rows = orientation.shifted(column)
    height = orientation.height
    row = landing_row(rows, piece_rows)
    if row + height > len(rows):
        return Placement(landing_row=row, rows_cleared=0, game_over=True, height=height)

    for offset, mask in enumerate(piece_rows):
        rows[row + offset] |= mask

    cleared = clear_rows(rows, row, row + height, full_row_mask(columns))
    return Placement(
        landing_row=row,
        rows_cleared=cleared,
        game_over=False,
        height=height,
        board=tuple(rows),
    )


__all__ = ["Placement", "landing_row", "clear_rows", "simulate"]
