"""
Forward (left-to-right) topology.

Forward topologies allow only non-decreasing state transitions, bounded by a
maximum jump distance ("deepness"). They are the usual choice for models of
sequences that progress through phases, such as spoken words or gestures.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from ..exceptions import InvalidArgumentError
from ..generators.uniform import UniformGenerator
from ..logger import get_topology_logger

logger = get_topology_logger()


@dataclass(frozen=True)
class ForwardTopology:
    """
    Forward-only state transition topology.

    With 3 states and full deepness the uniform transition matrix is::

        [[1/3, 1/3, 1/3],
         [0,   1/2, 1/2],
         [0,   0,   1  ]]

    Chains always start in state 0.

    Attributes:
        n_states: Number of hidden states (> 0)
        deepness: Maximum number of states reachable from any state, counting
            itself (1 <= deepness <= n_states). Defaults to n_states.
        random: Draw transition weights from a uniform generator instead of
            spreading them equally.
    """

    n_states: int
    deepness: Optional[int] = None
    random: bool = False

    def __post_init__(self):
        if isinstance(self.n_states, bool) or not isinstance(self.n_states, (int, np.integer)):
            raise InvalidArgumentError(
                f"Number of states should be an integer, got {self.n_states!r}")

        if self.n_states <= 0:
            raise InvalidArgumentError(
                f"Number of states should be higher than zero, got {self.n_states}")

        if self.deepness is None:
            object.__setattr__(self, 'deepness', self.n_states)

        if isinstance(self.deepness, bool) or not isinstance(self.deepness, (int, np.integer)):
            raise InvalidArgumentError(
                f"Deepness level should be an integer, got {self.deepness!r}")

        if self.deepness > self.n_states:
            raise InvalidArgumentError(
                f"Deepness level should be lesser or equal to the number of states "
                f"({self.deepness} > {self.n_states})")

        if self.deepness < 1:
            raise InvalidArgumentError(f"Deepness level should be at least 1, got {self.deepness}")

    @property
    def initial(self) -> np.ndarray:
        """Initial state probabilities: all mass on state 0."""
        pi = np.zeros(self.n_states)
        pi[0] = 1.0
        return pi

    def build(self, rng: Optional[UniformGenerator] = None) -> Tuple[np.ndarray, np.ndarray]:
        """
        Create the transition matrix and initial state probabilities.

        Args:
            rng: Uniform generator used in random mode. A generator seeded
                from configuration is created when omitted.

        Returns:
            Tuple of (A, pi), both freshly allocated
        """
        n = self.n_states
        A = np.zeros((n, n))

        if self.random:
            if rng is None:
                rng = UniformGenerator()

            for i in range(n):
                window = min(self.deepness, n - i)
                weights = rng.sample(window)
                A[i, i:i + window] = weights / weights.sum()
        else:
            for i in range(n):
                window = min(self.deepness, n - i)
                A[i, i:i + window] = 1.0 / window

        logger.debug(f"Built forward topology: states={n}, deepness={self.deepness}, "
                     f"random={self.random}")

        return A, self.initial
