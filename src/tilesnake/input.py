from __future__ import annotations

import pygame

from .geometry import Point

# Evaluation order for held arrows; the first acceptable one wins a tick.
ARROWS = (
    ("left", Point(-1, 0)),
    ("right", Point(1, 0)),
    ("up", Point(0, -1)),
    ("down", Point(0, 1)),
)

KEY_MAP = {
    "left": pygame.K_LEFT,
    "right": pygame.K_RIGHT,
    "up": pygame.K_UP,
    "down": pygame.K_DOWN,
    "r": pygame.K_r,
}

QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)


class KeyboardProbe:
    """Reads arrow keys as held levels and R as a press edge.

    Feed each frame's events to poll() before the kernel runs. A press edge
    is reported once, then consumed.
    """

    def __init__(self, get_pressed=None):
        self._get_pressed = get_pressed or pygame.key.get_pressed
        self._pressed = None
        self._edges: set[str] = set()

    def poll(self, events) -> None:
        self._edges.clear()
        for event in events:
            if event.type != pygame.KEYDOWN:
                continue
            for name, key in KEY_MAP.items():
                if event.key == key:
                    self._edges.add(name)
        self._pressed = self._get_pressed()

    def is_held(self, name: str) -> bool:
        if self._pressed is None:
            return False
        return bool(self._pressed[KEY_MAP[name]])

    def was_just_pressed(self, name: str) -> bool:
        if name in self._edges:
            self._edges.discard(name)
            return True
        return False


def is_quit_event(event) -> bool:
    if event.type == pygame.QUIT:
        return True
    return event.type == pygame.KEYDOWN and event.key in QUIT_KEYS
