# file: src/module2_channel/random_source.py

"""
Shared random source for loss and error-injection draws.

Wraps a numpy Generator behind a lock so concurrent pipeline runs can draw
from one source. Seed it to make a sequence of runs reproducible.
"""

import threading
from typing import Optional

import numpy as np


class RandomSource:
    """
    Thread-safe source of uniform draws.

    Parameters:
        seed (int, optional): Seed for numpy's default bit generator.
            None draws fresh OS entropy.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._generator = np.random.default_rng(seed)
        self._lock = threading.Lock()

    def percent_draw(self) -> float:
        """Uniform draw in [0, 100)."""
        with self._lock:
            return float(self._generator.random()) * 100.0

    def choice_index(self, n: int) -> int:
        """Uniform integer in [0, n)."""
        if n < 1:
            raise ValueError(f"n must be >= 1, got {n}")
        with self._lock:
            return int(self._generator.integers(0, n))

    def spawn(self) -> "RandomSource":
        """
        Derive an independent child source.

        The child has its own generator and lock, so it can be handed to a
        single worker without contending with the parent.
        """
        with self._lock:
            child_seed = int(self._generator.integers(0, 2**63 - 1))
        return RandomSource(seed=child_seed)
