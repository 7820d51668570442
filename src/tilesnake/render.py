from __future__ import annotations

from . import config
from .geometry import DEFAULT_GRID, Grid
from .state import Snapshot


def draw_snapshot(prims, snap: Snapshot, grid: Grid = DEFAULT_GRID) -> None:
    prims.clear(config.BLACK)

    for p in snap.body:
        prims.rect(*grid.tile_rect(p), config.GREEN)

    prims.rect(*grid.tile_rect(snap.food), config.RED)

    if snap.game_over:
        prims.text("Game Over", *config.GAME_OVER_POS, config.WHITE)
        prims.text("Press 'R' to restart", *config.RESTART_HINT_POS, config.WHITE)

    prims.text(f"Score: {snap.score}", *config.SCORE_POS, config.WHITE)
