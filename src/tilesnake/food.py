from __future__ import annotations

from .geometry import DEFAULT_GRID, Grid, Point


class Food:
    def __init__(self, position: Point):
        self.position = position

    @classmethod
    def at_random(cls, rng, grid: Grid = DEFAULT_GRID) -> Food:
        # May land under the snake; it is then eaten on the next pass of the head.
        return cls(Point(rng.int_below(grid.width), rng.int_below(grid.height)))

    def __repr__(self):
        return f"Food({self.position!r})"
