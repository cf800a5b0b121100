"""Self-play demo for the placement engine.

Run with: `python -m eltetris`

Pieces are drawn uniformly at random and placed by the engine until the game
ends or the piece budget runs out.  Pass ``--help`` for options.
"""

from __future__ import annotations

import argparse
import logging
import random
from typing import List, Optional

from .config import EngineConfig
from .engine import Engine
from .errors import NoViableMoveError
from .pieces import random_piece


LOGGER = logging.getLogger("eltetris")


def run(engine: Engine, pieces: int, rng: random.Random) -> bool:
    """Play up to ``pieces`` pieces and return ``True`` if the game ended."""

    for _ in range(pieces):
        piece = random_piece(rng)
        try:
            result = engine.play(piece)
        except NoViableMoveError as exc:
            LOGGER.info("No safe placement for %s", exc.piece.value)
            return True
        if result.game_over:
            return True
    return False


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--pieces", type=int, default=1000, help="Maximum number of pieces to play.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the piece generator.")
    parser.add_argument("--columns", type=int, default=10, help="Board width.")
    parser.add_argument("--rows", type=int, default=20, help="Board height.")
    parser.add_argument(
        "--show-board",
        action="store_true",
        help="Print the final board.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")

    engine = Engine(EngineConfig(columns=args.columns, rows=args.rows))
    ended = run(engine, args.pieces, random.Random(args.seed))
    LOGGER.info(
        "%s after %d moves, %d rows cleared",
        "Game over" if ended else "Stopped",
        engine.moves,
        engine.rows_completed,
    )
    if args.show_board:
        print(engine.board.render())


if __name__ == "__main__":
    main()
