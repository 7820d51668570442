from __future__ import annotations

from collections import namedtuple

from . import config
from .food import Food
from .snake import Snake

Snapshot = namedtuple("Snapshot", ["body", "food", "score", "game_over"])
# body: tuple[Point, ...], head is first element.
# food: Point
# score: int
# game_over: bool


class GameState:
    def __init__(self, snake: Snake, food: Food):
        self.snake = snake
        self.food = food
        self.score = 0
        self.game_over = False
        self.update_counter = 0
        self.speed = config.START_SPEED

    def snapshot(self) -> Snapshot:
        return Snapshot(
            body=tuple(self.snake.body),
            food=self.food.position,
            score=self.score,
            game_over=self.game_over,
        )
