"""Exceptions raised by the placement engine."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:  # pragma: no cover
    from .selector import Move


class EngineError(Exception):
    """Base class for every error raised by :mod:`eltetris`."""


class MalformedBoardError(EngineError, ValueError):
    """An external grid is not a rectangle matching the board dimensions."""


class UnknownPieceError(EngineError, LookupError):
    """A piece identity is not part of the catalog."""

    def __init__(self, piece: object) -> None:
        super().__init__(f"Unknown piece: {piece!r}")
        self.piece = piece


class NoViableMoveError(EngineError):
    """Every placement of ``piece`` ends the game.

    ``fallback`` holds the first enumerated candidate (orientation ``0``,
    column ``0``) so callers that prefer to keep playing can still commit it.
    """

    def __init__(self, piece: object, fallback: Optional["Move"] = None) -> None:
        super().__init__(f"No placement of {getattr(piece, 'value', piece)} avoids game over")
        self.piece = piece
        self.fallback = fallback


__all__ = [
    "EngineError",
    "MalformedBoardError",
    "UnknownPieceError",
    "NoViableMoveError",
]
