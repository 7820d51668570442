import numpy as np
import pygame

from tilesnake import config
from tilesnake.geometry import Point
from tilesnake.primitives import ArrayPrimitives, SoftPrimitives, render_text
from tilesnake.render import draw_snapshot
from tilesnake.state import Snapshot


def surface():
    return ArrayPrimitives(config.SCREEN_W, config.SCREEN_H)


def has_white(prims, x0, y0, x1, y1):
    region = prims.color[y0:y1, x0:x1]
    return bool(np.all(region == config.WHITE, axis=2).any())


class TestArrayPrimitives:
    def test_clear_and_rect(self):
        prims = ArrayPrimitives(20, 10)
        prims.clear((1, 2, 3))
        prims.rect(5, 5, 5, 5, config.RED)
        assert prims.pixel(0, 0) == (1, 2, 3)
        assert prims.pixel(5, 5) == config.RED
        assert prims.pixel(9, 9) == config.RED
        assert prims.pixel(10, 9) == (1, 2, 3)

    def test_rect_is_clipped(self):
        prims = ArrayPrimitives(20, 10)
        prims.rect(18, -3, 10, 5, config.GREEN)
        prims.rect(100, 100, 5, 5, config.GREEN)
        assert prims.pixel(19, 0) == config.GREEN
        assert prims.pixel(19, 2) == (0, 0, 0)


class TestDrawSnapshot:
    def test_body_food_and_background(self):
        prims = surface()
        draw_snapshot(prims, Snapshot((Point(0, 0), Point(1, 0)), Point(3, 3), 0, False))
        assert prims.pixel(0, 0) == config.GREEN
        assert prims.pixel(9, 4) == config.GREEN
        assert prims.pixel(15, 15) == config.RED
        assert prims.pixel(19, 19) == config.RED
        assert prims.pixel(20, 20) == config.BLACK
        assert prims.pixel(160, 60) == config.BLACK

    def test_food_drawn_over_body(self):
        prims = surface()
        draw_snapshot(prims, Snapshot((Point(2, 2),), Point(2, 2), 0, False))
        assert prims.pixel(10, 10) == config.RED

    def test_score_at_bottom_left(self):
        prims = surface()
        draw_snapshot(prims, Snapshot((Point(30, 10),), Point(40, 10), 12, False))
        assert has_white(prims, 0, config.SCREEN_H - 25, 100, config.SCREEN_H)
        assert not has_white(prims, 100, 100, 220, 140)

    def test_game_over_overlay(self):
        prims = surface()
        draw_snapshot(prims, Snapshot((Point(64, 24),), Point(1, 1), 3, True))
        assert has_white(prims, 100, 100, 220, 140)

    def test_head_off_grid_is_clipped(self):
        prims = surface()
        draw_snapshot(prims, Snapshot((Point(-1, 0), Point(0, 0)), Point(5, 5), 0, True))
        assert prims.pixel(0, 0) == config.GREEN

    def test_draws_again_after_pygame_quit(self):
        """Text still renders after a full pygame init/quit cycle."""
        snap = Snapshot((Point(10, 10),), Point(20, 20), 4, True)
        prims = surface()
        draw_snapshot(prims, snap)
        pygame.init()
        pygame.quit()

        again = surface()
        draw_snapshot(again, snap)
        assert np.array_equal(prims.color, again.color)


def soft_surface():
    return SoftPrimitives(pygame.Surface((config.SCREEN_W, config.SCREEN_H)))


def rgb_at(prims, x, y):
    return tuple(prims.surface.get_at((x, y)))[:3]


def white_rows(prims):
    # surfarray is (w, h, c)
    pixels = pygame.surfarray.array3d(prims.surface)
    white = np.all(pixels == config.WHITE, axis=2)
    return np.nonzero(white.any(axis=0))[0]


class TestSoftPrimitives:
    def test_clear_and_rect(self):
        prims = soft_surface()
        prims.clear(config.BLACK)
        prims.rect(15, 10, 5, 5, config.RED)
        assert rgb_at(prims, 15, 10) == config.RED
        assert rgb_at(prims, 19, 14) == config.RED
        assert rgb_at(prims, 20, 14) == config.BLACK
        assert rgb_at(prims, 14, 10) == config.BLACK

    def test_text_sits_on_baseline(self):
        prims = soft_surface()
        prims.clear(config.BLACK)
        prims.text("Score: 8", 10, 100, config.WHITE)
        _, ascent = render_text("Score: 8", config.WHITE)
        rows = white_rows(prims)
        assert rows.size > 0
        assert rows.min() >= 100 - ascent
        assert rows.min() < 100

    def test_draw_snapshot_on_surface(self):
        prims = soft_surface()
        draw_snapshot(prims, Snapshot((Point(0, 0), Point(1, 0)), Point(3, 3), 2, False))
        assert rgb_at(prims, 0, 0) == config.GREEN
        assert rgb_at(prims, 9, 4) == config.GREEN
        assert rgb_at(prims, 15, 15) == config.RED
        assert rgb_at(prims, 160, 60) == config.BLACK
        assert white_rows(prims).min() >= config.SCREEN_H - 25

    def test_game_over_text_on_surface(self):
        prims = soft_surface()
        draw_snapshot(prims, Snapshot((Point(64, 24),), Point(1, 1), 0, True))
        rows = white_rows(prims)
        assert ((rows >= 100) & (rows < 140)).any()
