"""Placement engine for an automated falling-block puzzle player."""

from .board import Board, GridOrder
from .config import EngineConfig
from .controls import Key, plan_keys
from .engine import CommitResult, Engine
from .errors import EngineError, MalformedBoardError, NoViableMoveError, UnknownPieceError
from .evaluation import EL_TETRIS_WEIGHTS, FeatureVector, Weights, evaluate
from .pieces import PIECES, Orientation, TetrominoType, orientations
from .selector import Move, select_move
from .simulator import Placement, simulate

__all__ = [
    "Board",
    "GridOrder",
    "EngineConfig",
    "Engine",
    "CommitResult",
    "Move",
    "Placement",
    "Orientation",
    "TetrominoType",
    "PIECES",
    "Weights",
    "FeatureVector",
    "EL_TETRIS_WEIGHTS",
    "Key",
    "EngineError",
    "MalformedBoardError",
    "UnknownPieceError",
    "NoViableMoveError",
    "orientations",
    "simulate",
    "evaluate",
    "select_move",
    "plan_keys",
]
