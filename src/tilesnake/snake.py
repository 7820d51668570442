from __future__ import annotations

from collections import deque

from .geometry import DEFAULT_GRID, Grid, Point

RIGHT = Point(1, 0)


class Snake:
    def __init__(self, init_pos: Point, direction: Point = RIGHT):
        self.body: deque[Point] = deque([init_pos])
        self.direction = direction
        self.grow_counter = 0

    @classmethod
    def new(cls, grid: Grid = DEFAULT_GRID) -> Snake:
        return cls(grid.center())

    @property
    def head(self) -> Point:
        return self.body[0]

    def __len__(self) -> int:
        return len(self.body)

    def turn(self, direction: Point) -> None:
        if not direction.is_unit_axis():
            raise ValueError(f"direction must be a unit axis vector, got {direction!r}")
        self.direction = direction

    def move(self) -> None:
        """Push a new head one cell ahead; keep the tail while growth is pending."""
        if not self.body:
            raise RuntimeError("cannot move a snake with an empty body")
        self.body.appendleft(self.body[0] + self.direction)
        if self.grow_counter > 0:
            self.grow_counter -= 1
        else:
            self.body.pop()
