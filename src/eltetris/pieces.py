"""Static catalog of the seven tetrominoes and their orientations.

Every orientation is stored as a stack of row masks, bottom row first, with
the least significant bit being the leftmost column.  Orientation ``0`` is the
spawn orientation and each following index is one clockwise rotation further.
The catalog is built once at import time and exposed read-only.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Sequence, Tuple, Union

from .errors import UnknownPieceError


class TetrominoType(str, Enum):
    """Enumeration of the seven standard tetromino shapes."""

    I = "I"
    O = "O"
    T = "T"
    S = "S"
    Z = "Z"
    J = "J"
    L = "L"


PieceLike = Union[TetrominoType, str]


@dataclass(frozen=True)
class Orientation:
    """One rotational variant of a piece."""

    rows: Tuple[int, ...]
    width: int
    height: int

    @property
    def cells(self) -> int:
        return sum(bin(mask).count("1") for mask in self.rows)

    def shifted(self, column: int) -> Tuple[int, ...]:
        """Return the row masks moved ``column`` cells to the right."""

        return tuple(mask << column for mask in self.rows)


def _parse(drawing: Sequence[str]) -> Orientation:
    """Build an :class:`Orientation` from rows drawn top first.

    ``X`` marks an occupied cell, anything else is empty.
    """

    masks = []
    for line in reversed(drawing):
        mask = 0
        for col, char in enumerate(line):
            if char == "X":
                mask |= 1 << col
        masks.append(mask)
    width = max(len(line) for line in drawing)
    return Orientation(rows=tuple(masks), width=width, height=len(drawing))


_DRAWINGS: Dict[TetrominoType, Tuple[Tuple[str, ...], ...]] = {
    TetrominoType.I: (
        ("XXXX",),
        ("X", "X", "X", "X"),
    ),
    TetrominoType.O: (
        ("XX", "XX"),
    ),
    TetrominoType.T: (
        (".X.", "XXX"),
        ("X.", "XX", "X."),
        ("XXX", ".X."),
        (".X", "XX", ".X"),
    ),
    TetrominoType.S: (
        (".XX", "XX."),
        ("X.", "XX", ".X"),
    ),
    TetrominoType.Z: (
        ("XX.", ".XX"),
        (".X", "XX", "X."),
    ),
    TetrominoType.J: (
        ("X..", "XXX"),
        ("XX", "X.", "X."),
        ("XXX", "..X"),
        (".X", ".X", "XX"),
    ),
    TetrominoType.L: (
        ("..X", "XXX"),
        ("X.", "X.", "XX"),
        ("XXX", "X.."),
        ("XX", ".X", ".X"),
    ),
}


PIECES: Mapping[TetrominoType, Tuple[Orientation, ...]] = MappingProxyType(
    {
        shape: tuple(_parse(drawing) for drawing in drawings)
        for shape, drawings in _DRAWINGS.items()
    }
)


def piece_type(piece: PieceLike) -> TetrominoType:
    """Return the :class:`TetrominoType` for ``piece``.

    Symbols are matched case-insensitively so the lowercase letters used by
    game clients (``"t"``, ``"o"``) are accepted.

    Raises:
        UnknownPieceError: If ``piece`` does not name a tetromino.
    """

    if isinstance(piece, TetrominoType):
        return piece
    if isinstance(piece, str):
        try:
            return TetrominoType(piece.upper())
        except ValueError:
            pass
    raise UnknownPieceError(piece)


def orientations(piece: PieceLike) -> Tuple[Orientation, ...]:
    """Return the orientations of ``piece`` in rotation order."""

    return PIECES[piece_type(piece)]


def random_piece(rng: Optional[random.Random] = None) -> TetrominoType:
    """Draw a piece uniformly at random."""

    return (rng or random).choice(list(TetrominoType))


__all__ = [
    "TetrominoType",
    "Orientation",
    "PIECES",
    "piece_type",
    "orientations",
    "random_piece",
]
