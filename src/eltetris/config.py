"""Engine configuration."""

from __future__ import annotations

from dataclasses import dataclass

from .board import HEIGHT, WIDTH, GridOrder
from .evaluation import EL_TETRIS_WEIGHTS, Weights


@dataclass(frozen=True)
class EngineConfig:
    """Board dimensions, external grid layout and evaluation weights.

    ``grid_order`` describes how the game session lays out the occupancy grid
    handed to :meth:`Engine.ingest_board`.  Session clients report the top
    row first, so that is the default.
    """

    columns: int = WIDTH
    rows: int = HEIGHT
    grid_order: GridOrder = GridOrder.TOP_DOWN
    weights: Weights = EL_TETRIS_WEIGHTS

    def __post_init__(self) -> None:
        if self.columns < 4:
            raise ValueError("Board must be at least 4 columns wide")
        if self.rows < 4:
            raise ValueError("Board must be at least 4 rows tall")
        object.__setattr__(self, "grid_order", GridOrder(self.grid_order))


__all__ = ["EngineConfig"]
