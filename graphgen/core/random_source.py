"""
Random Source

Single seedable random generator shared by every stochastic decision of a
generator (attribute values, edge orientation). Identical seed and identical
call sequence give identical draws.

Each draw method consumes exactly one value from the underlying stream and
increments ``draw_count``.
"""

import random
import logging
from typing import Optional

logger = logging.getLogger(__name__)


class RandomSource:
    """Owned, reseedable RNG. No global random state touched."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._seed = seed
        self._rng = random.Random(seed)
        self._draws = 0

    @property
    def seed(self) -> Optional[int]:
        """Last seed applied, or None when seeded from system entropy."""
        return self._seed

    @property
    def draw_count(self) -> int:
        """Number of draws since construction or the last reseed."""
        return self._draws

    def set_seed(self, seed: int) -> None:
        """Reseed, discarding any prior draw state."""
        logger.debug(f"Reseeding random source with {seed}")
        self._seed = seed
        self._rng.seed(seed)
        self._draws = 0

    def next_double(self) -> float:
        """Return a uniform float in [0, 1)."""
        self._draws += 1
        return self._rng.random()

    def next_float(self) -> float:
        """Return a uniform float in [0, 1). Used for coin-flip style decisions."""
        self._draws += 1
        return self._rng.random()

    def next_bool(self) -> bool:
        """Return True or False with equal probability."""
        self._draws += 1
        return self._rng.random() < 0.5

    def uniform(self, low: float, high: float) -> float:
        """Return ``low + (high - low) * u`` for a single uniform draw ``u``."""
        return low + (high - low) * self.next_double()

    def get_rng(self) -> random.Random:
        """
        Underlying ``random.Random`` instance.

        Draws taken directly from it are not counted in ``draw_count``.
        """
        return self._rng

    def __repr__(self) -> str:
        return f"RandomSource(seed={self._seed!r}, draws={self._draws})"
