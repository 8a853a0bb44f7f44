"""
Custom topology built from user-supplied matrices.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from ..exceptions import InvalidArgumentError
from ..generators.uniform import UniformGenerator


@dataclass(frozen=True, eq=False)
class CustomTopology:
    """
    Topology given directly by a transition matrix and initial probabilities.

    Stochastic properties are checked by the model that consumes the
    topology; here only the shapes are validated.
    """

    transitions: np.ndarray
    initial: np.ndarray

    def __post_init__(self):
        A = np.array(self.transitions, dtype=float)
        pi = np.array(self.initial, dtype=float)

        if A.ndim != 2 or A.shape[0] != A.shape[1] or A.shape[0] == 0:
            raise InvalidArgumentError(f"Transition matrix must be square and non-empty, got shape {A.shape}")

        if pi.shape != (A.shape[0],):
            raise InvalidArgumentError(
                f"Initial probabilities shape {pi.shape} doesn't match expected ({A.shape[0]},)")

        object.__setattr__(self, 'transitions', A)
        object.__setattr__(self, 'initial', pi)

    @property
    def n_states(self) -> int:
        return self.transitions.shape[0]

    def build(self, rng: Optional[UniformGenerator] = None) -> Tuple[np.ndarray, np.ndarray]:
        """Return copies of the supplied (A, pi). ``rng`` is ignored."""
        return self.transitions.copy(), self.initial.copy()
