import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from tilesnake.geometry import DEFAULT_GRID


class ScriptedProbe:
    """Input probe driven by the test: held arrows and one-shot presses."""

    def __init__(self, held=()):
        self.held = set(held)
        self.edges = set()

    def poll(self, events):
        pass

    def press(self, name):
        self.edges.add(name)

    def is_held(self, name):
        return name in self.held

    def was_just_pressed(self, name):
        if name in self.edges:
            self.edges.discard(name)
            return True
        return False


class ScriptedRandom:
    """Returns the given values in order, then `fallback`."""

    def __init__(self, values=(), fallback=0):
        self.values = list(values)
        self.fallback = fallback
        self.calls = []

    def int_below(self, n):
        value = self.values.pop(0) if self.values else self.fallback
        assert 0 <= value < n
        self.calls.append(n)
        return value


@pytest.fixture
def probe():
    return ScriptedProbe()


@pytest.fixture
def grid():
    return DEFAULT_GRID
