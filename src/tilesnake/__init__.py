from .game import SnakeGame, run_game
from .geometry import DEFAULT_GRID, Grid, Point
from .primitives import ArrayPrimitives, SoftPrimitives
from .rng import RandomSource
from .state import GameState, Snapshot

__all__ = [
    "SnakeGame",
    "run_game",
    "DEFAULT_GRID",
    "Grid",
    "Point",
    "ArrayPrimitives",
    "SoftPrimitives",
    "RandomSource",
    "GameState",
    "Snapshot",
]
