"""Bitmask board representation for the playfield.

The board is a fixed-length list of integer row masks.  Index ``0`` is the
bottom row and bit ``j`` of a mask is column ``j`` (least significant bit is
the leftmost column).  The number of rows never changes: clearing a row shifts
everything above it down by one slot and leaves an empty row at the top.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, List, Sequence

import numpy as np
from numpy.typing import NDArray

from .errors import MalformedBoardError


# Dimensions of the standard playfield.
WIDTH = 10
HEIGHT = 20

Grid = NDArray[np.uint8]


class GridOrder(str, Enum):
    """Row order of an externally supplied occupancy grid."""

    TOP_DOWN = "top_down"
    BOTTOM_UP = "bottom_up"


def full_row_mask(columns: int) -> int:
    """Return the mask of a completely occupied row ``columns`` wide."""

    return (1 << columns) - 1


def grid_to_masks(
    grid: Sequence[Sequence[Any]],
    columns: int,
    rows: int,
    order: GridOrder = GridOrder.TOP_DOWN,
) -> List[int]:
    """Convert an external occupancy grid into bottom-indexed row masks.

    A cell counts as occupied when it is truthy, so both ``None``/letter grids
    and ``0``/``1`` grids are accepted.

    Raises:
        MalformedBoardError: If ``grid`` is not ``rows`` x ``columns``.
    """

    try:
        if len(grid) != rows:
            raise MalformedBoardError(f"Grid has {len(grid)} rows, expected {rows}")
        for index, row in enumerate(grid):
            if len(row) != columns:
                raise MalformedBoardError(
                    f"Grid row {index} has {len(row)} cells, expected {columns}"
                )
    except TypeError as exc:
        raise MalformedBoardError(f"Grid is not a sequence of rows: {exc}") from exc

    occupied = np.array([[bool(cell) for cell in row] for row in grid], dtype=bool)
    if order == GridOrder.TOP_DOWN:
        occupied = occupied[::-1]
    masks: List[int] = []
    for line in occupied.reshape(rows, columns):
        mask = 0
        for col in np.flatnonzero(line):
            mask |= 1 << int(col)
        masks.append(mask)
    return masks


class Board:
    """Playfield holding one integer mask per row."""

    def __init__(self, columns: int = WIDTH, rows: int = HEIGHT) -> None:
        self.columns = columns
        self.height = rows
        self.full_row = full_row_mask(columns)
        self.rows: List[int] = [0] * rows

    @classmethod
    def from_grid(
        cls,
        grid: Sequence[Sequence[Any]],
        columns: int = WIDTH,
        rows: int = HEIGHT,
        order: GridOrder = GridOrder.TOP_DOWN,
    ) -> "Board":
        board = cls(columns, rows)
        board.ingest(grid, order)
        return board

    def ingest(
        self, grid: Sequence[Sequence[Any]], order: GridOrder = GridOrder.TOP_DOWN
    ) -> None:
        """Replace the occupancy with ``grid``.

        The board is left untouched if the grid is malformed.
        """

        self.rows = grid_to_masks(grid, self.columns, self.height, order)

    def copy(self) -> "Board":
        """Return a scratch copy sharing no state with this board."""

        clone = Board(self.columns, self.height)
        clone.rows = list(self.rows)
        return clone

    def clear(self) -> None:
        self.rows = [0] * self.height

    def is_filled(self, row: int, col: int) -> bool:
        """Return ``True`` if ``(row, col)`` is occupied.

        Raises:
            IndexError: If the coordinates are outside the board.
        """

        if 0 <= row < self.height and 0 <= col < self.columns:
            return bool((self.rows[row] >> col) & 1)
        raise IndexError("Cell out of bounds")

    def column_heights(self) -> List[int]:
        heights = [0] * self.columns
        for row, mask in enumerate(self.rows):
            for col in range(self.columns):
                if (mask >> col) & 1:
                    heights[col] = row + 1
        return heights

    def to_grid(self) -> Grid:
        """Return a ``uint8`` occupancy grid with the top row first."""

        grid = np.zeros((self.height, self.columns), dtype=np.uint8)
        for row, mask in enumerate(self.rows):
            for col in range(self.columns):
                grid[self.height - 1 - row, col] = (mask >> col) & 1
        return grid

    def render(self) -> str:
        """Return an ASCII dump of the board, top row first."""

        return "\n".join(
            "".join("#" if cell else "." for cell in line) for line in self.to_grid()
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.columns == other.columns and self.rows == other.rows

    def __repr__(self) -> str:
        return f"Board(columns={self.columns}, rows={self.height})"


__all__ = ["WIDTH", "HEIGHT", "Board", "GridOrder", "full_row_mask", "grid_to_masks"]
