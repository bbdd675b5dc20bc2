"""Randomness sources for climatology jitter."""

import random
from typing import Protocol


class JitterSource(Protocol):
    def __call__(self) -> float: ...


class RandomJitter:
    """Uniform noise in [0, max_jitter)."""

    def __init__(self, max_jitter: float = 10.0, seed: int | None = None):
        if max_jitter <= 0:
            raise ValueError(f"max_jitter must be positive, got {max_jitter}")
        self.max_jitter = max_jitter
        self._rng = random.Random(seed)

    def __call__(self) -> float:
        return self._rng.random() * self.max_jitter


class FixedJitter:
    """Always returns the same value. Used for reproducible scoring."""

    def __init__(self, value: float = 0.0):
        self.value = value

    def __call__(self) -> float:
        return self.value
