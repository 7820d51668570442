from __future__ import annotations

# Logical resolution; the window shows it at WINDOW_SCALE.
SCREEN_W, SCREEN_H = 320, 240
TILE = 5
GRID_W = SCREEN_W // TILE
GRID_H = SCREEN_H // TILE

WINDOW_SCALE = 2
WINDOW_W = SCREEN_W * WINDOW_SCALE
WINDOW_H = SCREEN_H * WINDOW_SCALE
TITLE = "Snake Game"
FPS = 60

# Frames per simulation step. Lower is faster.
START_SPEED = 10
MIN_SPEED = 2

BLACK = (0, 0, 0)
GREEN = (0, 255, 0)
RED = (255, 0, 0)
WHITE = (255, 255, 255)

FONT_SIZE = 16
# Text anchors are baselines, relative to the logical screen.
GAME_OVER_POS = (SCREEN_W // 2 - 40, SCREEN_H // 2)
RESTART_HINT_POS = (SCREEN_W // 2 - 60, SCREEN_H // 2 + 16)
SCORE_POS = (5, SCREEN_H - 5)
