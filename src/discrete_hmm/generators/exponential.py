"""
Exponential random number generator built on the uniform generator.
"""

import numpy as np

from ..exceptions import InvalidArgumentError
from ..logger import get_sampling_logger
from .uniform import UniformGenerator

logger = get_sampling_logger()


class ExponentialGenerator:
    """
    Exponential random numbers with a given rate (inverse mean).

    Samples are produced by inversion: ``-ln(U) / rate`` with U drawn from
    a :class:`UniformGenerator`.

    Example:
        >>> generator = ExponentialGenerator(5.0, seed=1)
        >>> value = generator.next()
    """

    def __init__(self, rate: float, seed: int = 0):
        """
        Args:
            rate: Rate value, must be greater than zero
            seed: Seed for the underlying uniform generator (default: 0)

        Raises:
            InvalidArgumentError: If rate is not positive
        """
        if rate <= 0:
            raise InvalidArgumentError(f"Rate value should be greater than zero, got {rate}")

        self._rate = float(rate)
        self._uniform = UniformGenerator(seed)

        logger.debug(f"ExponentialGenerator created: rate={self._rate}, seed={seed}")

    @property
    def rate(self) -> float:
        return self._rate

    @property
    def mean(self) -> float:
        return 1.0 / self._rate

    @property
    def variance(self) -> float:
        return 1.0 / (self._rate * self._rate)

    def next(self) -> float:
        """Generate the next exponential random number."""
        return -np.log(self._uniform.next()) / self._rate

    def sample(self, size: int) -> np.ndarray:
        """Generate ``size`` exponential random numbers at once."""
        return -np.log(self._uniform.sample(size)) / self._rate

    def set_seed(self, seed: int) -> None:
        """Replace the underlying uniform generator with a freshly seeded one."""
        self._uniform = UniformGenerator(seed)

    def __repr__(self) -> str:
        return f"ExponentialGenerator(rate={self._rate})"
