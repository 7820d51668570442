from __future__ import annotations

import argparse
import logging
import sys

from . import config
from .game import SnakeGame, run_game
from .input import KeyboardProbe
from .rng import RandomSource

logger = logging.getLogger("tilesnake")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="tilesnake", description="Grid Snake. Arrows steer, R restarts, Esc quits.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement (default: monotonic clock).")
    parser.add_argument(
        "--scale",
        type=int,
        choices=(1, 2, 3, 4),
        default=config.WINDOW_SCALE,
        help="Window scale relative to the 320x240 logical screen.",
    )
    parser.add_argument("--fps", type=int, default=config.FPS, help="Host frames per second.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug messages.")
    args = parser.parse_args(argv)
    if args.fps <= 0:
        parser.error("--fps must be positive")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    rng = RandomSource(args.seed)
    logger.info("starting on a %dx%d grid, seed %d", config.GRID_W, config.GRID_H, rng.seed)
    game = SnakeGame(KeyboardProbe(), rng)
    try:
        run_game(game, scale=args.scale, fps=args.fps)
    except Exception:
        logger.exception("game aborted")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
