"""
Ergodic (fully connected) topology.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from ..exceptions import InvalidArgumentError
from ..generators.uniform import UniformGenerator
from ..logger import get_topology_logger

logger = get_topology_logger()


@dataclass(frozen=True)
class ErgodicTopology:
    """
    Fully connected topology: every state can reach every other state.

    Attributes:
        n_states: Number of hidden states (> 0)
        random: Draw transition weights from a uniform generator instead of
            using 1/n_states everywhere.
    """

    n_states: int
    random: bool = False

    def __post_init__(self):
        if isinstance(self.n_states, bool) or not isinstance(self.n_states, (int, np.integer)):
            raise InvalidArgumentError(
                f"Number of states should be an integer, got {self.n_states!r}")

        if self.n_states <= 0:
            raise InvalidArgumentError(
                f"Number of states should be higher than zero, got {self.n_states}")

    @property
    def initial(self) -> np.ndarray:
        """Uniform initial state probabilities."""
        return np.ones(self.n_states) / self.n_states

    def build(self, rng: Optional[UniformGenerator] = None) -> Tuple[np.ndarray, np.ndarray]:
        """
        Create the transition matrix and initial state probabilities.

        Returns:
            Tuple of (A, pi), both freshly allocated
        """
        n = self.n_states

        if self.random:
            if rng is None:
                rng = UniformGenerator()

            A = np.empty((n, n))
            for i in range(n):
                weights = rng.sample(n)
                A[i, :] = weights / weights.sum()
        else:
            A = np.ones((n, n)) / n

        logger.debug(f"Built ergodic topology: states={n}, random={self.random}")

        return A, self.initial
