"""
Seedable Uniform(0, 1) random number generator.

Every consumer of randomness in the package receives an explicit generator
handle instead of touching numpy's global random state.
"""

from typing import Optional

import numpy as np

from ..config import get_config
from ..logger import get_logger

logger = get_logger(__name__)


class UniformGenerator:
    """
    Uniform random numbers in the half-open interval [0, 1).

    Thin owner of a ``numpy.random.Generator``. Two generators created with
    the same seed produce the same stream.
    """

    def __init__(self, seed: Optional[int] = None):
        """
        Args:
            seed: Seed value. Falls back to the ``random.seed`` config entry.
        """
        if seed is None:
            seed = get_config('random', 'seed')
        self._seed = seed
        self._rng = np.random.default_rng(seed)
        logger.debug(f"UniformGenerator seeded with {seed}")

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def next(self) -> float:
        """Draw a single value from [0, 1)."""
        return float(self._rng.random())

    def sample(self, size: int) -> np.ndarray:
        """Draw ``size`` independent values from [0, 1)."""
        return self._rng.random(size)

    def set_seed(self, seed: int) -> None:
        """Reset the generator, discarding its previous state."""
        self._seed = seed
        self._rng = np.random.default_rng(seed)

    def __repr__(self) -> str:
        return f"UniformGenerator(seed={self._seed})"
