from __future__ import annotations

import logging
import random
import time

logger = logging.getLogger(__name__)


class RandomSource:
    """Uniform integers for food placement, from a private generator."""

    def __init__(self, seed: int | None = None):
        if seed is None:
            seed = time.monotonic_ns()
        self.seed = seed
        self._random = random.Random(seed)
        logger.debug("random source seeded with %d", seed)

    def int_below(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"upper bound must be positive, got {n}")
        return self._random.randrange(n)
