from __future__ import annotations

import logging

import pygame

from . import config, logic
from .geometry import DEFAULT_GRID, Grid
from .input import is_quit_event
from .primitives import SoftPrimitives
from .render import draw_snapshot
from .rng import RandomSource

logger = logging.getLogger(__name__)


class SnakeGame:
    """The three calls a host loop makes each frame: layout, update, draw."""

    def __init__(self, probe, rng: RandomSource, grid: Grid = DEFAULT_GRID):
        self.probe = probe
        self.rng = rng
        self.grid = grid
        self.state = logic.new_game(rng, grid)

    def layout(self, outside_w: int, outside_h: int) -> tuple[int, int]:
        return config.SCREEN_W, config.SCREEN_H

    def update(self) -> None:
        logic.update(self.state, self.probe, self.rng, self.grid)

    def draw(self, prims) -> None:
        draw_snapshot(prims, self.state.snapshot(), self.grid)


def run_game(game: SnakeGame, scale: int = config.WINDOW_SCALE, fps: int = config.FPS) -> None:
    pygame.init()
    try:
        window_size = (config.SCREEN_W * scale, config.SCREEN_H * scale)
        screen = pygame.display.set_mode(window_size)
        pygame.display.set_caption(config.TITLE)
        render_surf = pygame.Surface(game.layout(*window_size))
        prims = SoftPrimitives(render_surf)
        clock = pygame.time.Clock()
        logger.info("window %dx%d, logical %dx%d", *window_size, *render_surf.get_size())

        while True:
            events = pygame.event.get()
            if any(is_quit_event(event) for event in events):
                logger.info("quit, score %d", game.state.score)
                return
            game.probe.poll(events)

            game.update()
            game.draw(prims)

            scaled = pygame.transform.scale(render_surf, window_size)
            screen.blit(scaled, (0, 0))
            pygame.display.flip()
            clock.tick(fps)
    finally:
        pygame.quit()
