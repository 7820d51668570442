from __future__ import annotations

from collections import namedtuple

from . import config


class Point:
    """Integer grid cell, also used as a unit heading."""

    __slots__ = ("_x", "_y")

    def __init__(self, x: int = 0, y: int = 0):
        self._x, self._y = x, y

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __repr__(self):
        return f"Point({self.x}, {self.y})"

    def is_unit_axis(self) -> bool:
        return abs(self.x) + abs(self.y) == 1


class Grid(namedtuple("Grid", ["width", "height", "tile"])):
    """Playfield of width x height cells, each tile x tile pixels."""

    __slots__ = ()

    @classmethod
    def from_screen(cls, screen_w: int, screen_h: int, tile: int) -> Grid:
        return cls(screen_w // tile, screen_h // tile, tile)

    def center(self) -> Point:
        return Point(self.width // 2, self.height // 2)

    def contains(self, p: Point) -> bool:
        return 0 <= p.x < self.width and 0 <= p.y < self.height

    def tile_rect(self, p: Point) -> tuple[int, int, int, int]:
        return (p.x * self.tile, p.y * self.tile, self.tile, self.tile)


DEFAULT_GRID = Grid.from_screen(config.SCREEN_W, config.SCREEN_H, config.TILE)
