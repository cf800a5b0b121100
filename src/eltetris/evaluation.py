"""Board evaluation with the El-Tetris feature set.

Six features are computed on the bitmask rows right after a simulated
placement and combined linearly:

``landing_height``
    Vertical centre of the piece that was just placed.
``rows_cleared``
    Lines removed by the placement.
``row_transitions``
    Empty/occupied changes along each row; both side walls count as occupied.
``column_transitions``
    Empty/occupied changes along each column from the floor upwards; the floor
    counts as occupied, nothing is assumed above the top row.
``holes``
    Empty cells with an occupied cell somewhere above them.
``well_sums``
    For every well cell, the cell itself plus the empty cells directly below
    it, which yields ``1 + 2 + ... + n`` for a well ``n`` deep.

The default weights are the tuned El-Tetris constants.  Higher scores are
better; no normalisation is applied.
"""

from __future__ import annotations

from dataclasses import astuple, dataclass, fields
from typing import Sequence

from .simulator import Placement


@dataclass(frozen=True)
class Weights:
    """Linear weights for each feature."""

    landing_height: float
    rows_cleared: float
    row_transitions: float
    column_transitions: float
    holes: float
    well_sums: float


EL_TETRIS_WEIGHTS = Weights(
    landing_height=-4.500158825082766,
    rows_cleared=3.4181268101392694,
    row_transitions=-3.2178882868487753,
    column_transitions=-9.348695305445199,
    holes=-7.899265427351652,
    well_sums=-3.3855972247263626,
)


@dataclass(frozen=True)
class FeatureVector:
    """Raw feature values for one evaluated board."""

    landing_height: float
    rows_cleared: int
    row_transitions: int
    column_transitions: int
    holes: int
    well_sums: int


FEATURE_NAMES = [field.name for field in fields(FeatureVector)]


def landing_height(placement: Placement) -> float:
    return placement.landing_row + (placement.height - 1) / 2


def row_transitions(rows: Sequence[int], columns: int) -> int:
    transitions = 0
    for mask in rows:
        last_bit = 1
        for col in range(columns):
            bit = (mask >> col) & 1
            if bit != last_bit:
                transitions += 1
            last_bit = bit
        if last_bit == 0:
            transitions += 1
    return transitions


def column_transitions(rows: Sequence[int], columns: int) -> int:
    transitions = 0
    for col in range(columns):
        last_bit = 1
        for mask in rows:
            bit = (mask >> col) & 1
            if bit != last_bit:
                transitions += 1
            last_bit = bit
    return transitions


def holes(rows: Sequence[int], columns: int) -> int:
    """Count covered empty cells using a running mask from the top down."""

    if not rows:
        return 0
    count = 0
    covered = 0
    previous = rows[-1]
    for mask in reversed(rows[:-1]):
        covered = ~mask & (previous | covered)
        count += bin(covered & ((1 << columns) - 1)).count("1")
        previous = mask
    return count


def _is_filled(mask: int, col: int, columns: int) -> bool:
    if col < 0 or col >= columns:
        return True
    return bool((mask >> col) & 1)


def well_sums(rows: Sequence[int], columns: int) -> int:
    total = 0
    for col in range(columns):
        for row in range(len(rows) - 1, -1, -1):
            mask = rows[row]
            if (
                (mask >> col) & 1
                or not _is_filled(mask, col - 1, columns)
                or not _is_filled(mask, col + 1, columns)
            ):
                continue
            total += 1
            for below in range(row - 1, -1, -1):
                if (rows[below] >> col) & 1:
                    break
                total += 1
    return total


def features(placement: Placement, rows: Sequence[int], columns: int) -> FeatureVector:
    return FeatureVector(
        landing_height=landing_height(placement),
        rows_cleared=placement.rows_cleared,
        row_transitions=row_transitions(rows, columns),
        column_transitions=column_transitions(rows, columns),
        holes=holes(rows, columns),
        well_sums=well_sums(rows, columns),
    )


def score(feature_vector: FeatureVector, weights: Weights = EL_TETRIS_WEIGHTS) -> float:
    return sum(value * weight for value, weight in zip(astuple(feature_vector), astuple(weights)))


def evaluate(
    placement: Placement,
    rows: Sequence[int],
    columns: int,
    weights: Weights = EL_TETRIS_WEIGHTS,
) -> float:
    """Return the weighted score of ``rows`` after ``placement``."""

    return score(features(placement, rows, columns), weights)


__all__ = [
    "Weights",
    "EL_TETRIS_WEIGHTS",
    "FeatureVector",
    "FEATURE_NAMES",
    "landing_height",
    "row_transitions",
    "column_transitions",
    "holes",
    "well_sums",
    "features",
    "score",
    "evaluate",
]
