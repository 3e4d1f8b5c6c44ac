# thresholdlab/data/rng.py
from __future__ import annotations

import math
from typing import Callable

# Numerical Recipes LCG parameters
LCG_MULTIPLIER = 1664525
LCG_INCREMENT = 1013904223
LCG_MODULUS = 2**32


class SeededRandom:
    """
    Deterministic uniform stream on [0, 1) driven by a 32-bit LCG.

        state = (state * 1664525 + 1013904223) mod 2**32
        out   = state / 2**32

    The same seed always reproduces the same infinite sequence, which is what
    keeps the synthetic datasets fixed without storing them anywhere.
    Negative seeds are folded into [0, 2**32) by Python's modulo.
    """

    def __init__(self, seed: int) -> None:
        self.seed = int(seed)
        self._state = self.seed % LCG_MODULUS

    @property
    def state(self) -> int:
        return self._state

    def next(self) -> float:
        self._state = (self._state * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
        return self._state / LCG_MODULUS

    def __call__(self) -> float:
        return self.next()

    def __repr__(self) -> str:
        return f"SeededRandom(seed={self.seed}, state={self._state})"


class GaussianSampler:
    """
    Box-Muller transform over a uniform source (cosine branch only).

    Args:
        uniform: zero-argument callable returning floats in [0, 1),
            typically a SeededRandom.

    Notes:
        - Two uniform draws are consumed per sample; the sine branch is
          discarded rather than cached.
        - Exact zeros are redrawn because log(0) is undefined.
        - Output is unbounded; callers clamp to their own range.
    """

    def __init__(self, uniform: Callable[[], float]) -> None:
        self.uniform = uniform

    def _nonzero(self) -> float:
        x = 0.0
        while x == 0.0:
            x = self.uniform()
        return x

    def next(self, mean: float = 0.0, std_dev: float = 1.0) -> float:
        u = self._nonzero()
        v = self._nonzero()
        z = math.sqrt(-2.0 * math.log(u)) * math.cos(2.0 * math.pi * v)
        return z * std_dev + mean
