from __future__ import annotations

import logging
from itertools import islice

from . import config
from .food import Food
from .geometry import DEFAULT_GRID, Grid
from .input import ARROWS
from .snake import Snake
from .state import GameState

logger = logging.getLogger(__name__)


def new_game(rng, grid: Grid = DEFAULT_GRID) -> GameState:
    return GameState(Snake.new(grid), Food.at_random(rng, grid))


def restart(state: GameState, rng, grid: Grid = DEFAULT_GRID) -> None:
    state.snake = Snake.new(grid)
    state.food = Food.at_random(rng, grid)
    state.score = 0
    state.game_over = False
    state.speed = config.START_SPEED
    state.update_counter = 0
    logger.info("restarted")


def advance(state: GameState) -> None:
    state.snake.move()


def latch_direction(state: GameState, probe) -> None:
    """Accept the first held arrow perpendicular to the current heading.

    Takes effect on the next advance.
    """
    current = state.snake.direction
    for name, heading in ARROWS:
        if not probe.is_held(name):
            continue
        if (heading.x != 0 and current.x == 0) or (heading.y != 0 and current.y == 0):
            state.snake.turn(heading)
            return


def _end_game(state: GameState, reason: str) -> None:
    if not state.game_over:
        logger.info("game over (%s), score %d", reason, state.score)
    state.game_over = True
    state.speed = config.START_SPEED


def check_walls(state: GameState, grid: Grid = DEFAULT_GRID) -> None:
    if not grid.contains(state.snake.head):
        _end_game(state, "wall")


def check_self(state: GameState) -> None:
    head = state.snake.head
    if head in islice(state.snake.body, 1, None):
        _end_game(state, "self")


def eat_food(state: GameState, rng, grid: Grid = DEFAULT_GRID) -> None:
    if state.snake.head != state.food.position:
        return
    state.score += 1
    state.snake.grow_counter = 1
    state.food = Food.at_random(rng, grid)
    if state.speed > config.MIN_SPEED:
        state.speed -= 1
    logger.debug("ate food, score %d, next food at %r", state.score, state.food.position)


def step(state: GameState, probe, rng, grid: Grid = DEFAULT_GRID) -> None:
    advance(state)
    latch_direction(state, probe)
    check_walls(state, grid)
    check_self(state)
    if not state.game_over:
        eat_food(state, rng, grid)


def update(state: GameState, probe, rng, grid: Grid = DEFAULT_GRID) -> None:
    """Run one host frame: restart on R while over, else step every `speed` frames."""
    if state.game_over:
        if probe.was_just_pressed("r"):
            restart(state, rng, grid)
        return

    state.update_counter += 1
    if state.update_counter < state.speed:
        return
    state.update_counter = 0
    step(state, probe, rng, grid)
