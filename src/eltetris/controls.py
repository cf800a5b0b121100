"""Key sequences that realise a placement decision.

A freshly spawned piece sits at a fixed column that depends on its
orientation once rotated.  :func:`plan_keys` rotates first, then shifts the
piece sideways to the target column and finally hard drops it.  Assigning
frames or sub-frames to the keys is up to the caller.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import List, Mapping, Tuple

from .board import WIDTH
from .pieces import PieceLike, TetrominoType, orientations, piece_type


class Key(str, Enum):
    MOVE_LEFT = "moveLeft"
    MOVE_RIGHT = "moveRight"
    ROTATE_CW = "rotateCW"
    ROTATE_180 = "rotate180"
    ROTATE_CCW = "rotateCCW"
    HARD_DROP = "hardDrop"


# Leftmost column occupied by a spawned piece after rotating into each
# orientation (standard 10-wide field).
SPAWN_COLUMNS: Mapping[TetrominoType, Tuple[int, ...]] = MappingProxyType(
    {
        TetrominoType.I: (3, 5),
        TetrominoType.O: (4,),
        TetrominoType.T: (3, 4, 3, 3),
        TetrominoType.S: (3, 4),
        TetrominoType.Z: (3, 4),
        TetrominoType.J: (3, 4, 3, 3),
        TetrominoType.L: (3, 4, 3, 3),
    }
)

_ROTATION_KEYS = {
    1: [Key.ROTATE_CW],
    2: [Key.ROTATE_180],
    3: [Key.ROTATE_CCW],
}


def plan_keys(piece: PieceLike, orientation_index: int, column: int) -> List[Key]:
    """Return the keys that place ``piece`` at ``orientation_index``/``column``.

    Spawn columns are those of the standard field, so ``column`` is checked
    against a board :data:`~eltetris.board.WIDTH` cells wide.

    Raises:
        ValueError: If the orientation does not exist or the piece would
            stick out of the field.
    """

    shape = piece_type(piece)
    if not 0 <= orientation_index < len(orientations(shape)):
        raise ValueError(
            f"Orientation {orientation_index} not valid for piece {shape.value}"
        )

    width = orientations(shape)[orientation_index].width
    if not 0 <= column <= WIDTH - width:
        raise ValueError(f"Column {column} is out of range for piece {shape.value}")

    keys: List[Key] = list(_ROTATION_KEYS.get(orientation_index, []))
    delta = column - SPAWN_COLUMNS[shape][orientation_index]
    step = Key.MOVE_RIGHT if delta > 0 else Key.MOVE_LEFT
    keys.extend([step] * abs(delta))
    keys.append(Key.HARD_DROP)
    return keys


__all__ = ["Key", "SPAWN_COLUMNS", "plan_keys"]
