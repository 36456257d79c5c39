"""Random source for the simulation.

Every stochastic decision in the engine (yield rounding, order and event
spawning, weather) goes through a Chance instance, so a seeded Chance makes
a whole simulation reproducible.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import TypeVar

from pixel_farm.core.logging import get_logger


logger = get_logger(__name__)

T = TypeVar("T")


class Chance:
    """Seedable random source with game-flavored helpers.

    Example:
        >>> chance = Chance(seed=42)
        >>> chance.roll(0.15)
        False
    """

    def __init__(self, *, seed: int | None = None) -> None:
        """Initialize the random source.

        Args:
            seed: Optional random seed for reproducible runs.
        """
        self._seed = seed
        self._rng = random.Random(seed)
        logger.debug("Chance initialized", seed=seed)

    @property
    def seed(self) -> int | None:
        return self._seed

    def random(self) -> float:
        """Uniform float in [0, 1)."""
        return self._rng.random()

    def roll(self, probability: float) -> bool:
        """Bernoulli trial that succeeds with the given probability."""
        if probability <= 0:
            return False
        if probability >= 1:
            return True
        return self._rng.random() < probability

    def randint(self, low: int, high: int) -> int:
        """Uniform integer in [low, high], both inclusive."""
        return self._rng.randint(low, high)

    def choice(self, options: Sequence[T]) -> T:
        """Uniformly pick one element of a non-empty sequence."""
        return self._rng.choice(options)

    def weighted(self, options: Sequence[T], weights: Sequence[float]) -> T:
        """Pick one element with relative weights."""
        return self._rng.choices(options, weights=weights, k=1)[0]


__all__ = ["Chance"]
