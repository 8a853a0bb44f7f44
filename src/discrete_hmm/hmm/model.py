"""
Discrete Hidden Markov Model.

This module implements a discrete-output HMM defined by a transition matrix
A, an emission matrix B and initial state probabilities pi, and answers the
three classic queries: decoding (Viterbi), evaluation (forward algorithm)
and greedy next-symbol prediction.
"""

import numpy as np
from typing import Optional, Sequence, Tuple, Union

from ..config import get_config
from ..exceptions import InvalidArgumentError
from ..generators.uniform import UniformGenerator
from ..logger import get_hmm_logger
from ..topology import Topology, CustomTopology, ErgodicTopology
from .forward import forward
from .predictor import Prediction, predict
from .viterbi import viterbi

logger = get_hmm_logger()


class HiddenMarkovModel:
    """
    Discrete Hidden Markov Model with N states and M symbols.

    The model owns copies of its parameters. Inference never modifies them;
    only :meth:`set_parameters` replaces them, after validation.

    Example:
        >>> from discrete_hmm.topology import ForwardTopology
        >>> model = HiddenMarkovModel(ForwardTopology(3), 4)
        >>> path, probability = model.decode([0, 1, 3])
    """

    def __init__(self, topology: Topology, emissions: Union[int, Sequence, np.ndarray],
                 rng: Optional[UniformGenerator] = None):
        """
        Initialize the model from a topology and emission probabilities.

        Args:
            topology: Factory for the transition matrix and initial probabilities
            emissions: Emission matrix [n_states, n_symbols], or the number of
                symbols to start from uniform emissions
            rng: Uniform generator passed to randomized topologies

        Raises:
            InvalidArgumentError: If dimensions don't match or the parameters
                are not stochastic
        """
        A, pi = topology.build(rng)
        n_states = A.shape[0]

        if isinstance(emissions, (int, np.integer)):
            if emissions <= 0:
                raise InvalidArgumentError(
                    f"Number of symbols should be higher than zero, got {emissions}")
            B = np.ones((n_states, int(emissions))) / emissions
        else:
            B = np.array(emissions, dtype=float)

        if B.ndim != 2 or B.shape[0] != n_states or B.shape[1] == 0:
            raise InvalidArgumentError(
                f"B shape {B.shape} doesn't match expected ({n_states}, n_symbols)")

        self.n_states = n_states
        self.n_symbols = B.shape[1]

        self._validate(pi, A, B)

        self._pi = pi
        self._A = A
        self._B = B

        logger.debug(f"Initialized HiddenMarkovModel with {self.n_states} states "
                     f"and {self.n_symbols} symbols")

    @classmethod
    def from_parameters(cls, transitions, emissions, initial) -> "HiddenMarkovModel":
        """Create a model from raw transition, emission and initial probabilities."""
        return cls(CustomTopology(transitions, initial), emissions)

    @classmethod
    def ergodic(cls, n_states: int, n_symbols: int,
                rng: Optional[UniformGenerator] = None) -> "HiddenMarkovModel":
        """Create a fully connected model with uniform emissions."""
        return cls(ErgodicTopology(n_states), n_symbols, rng=rng)

    @property
    def transitions(self) -> np.ndarray:
        """Copy of the transition matrix A [n_states, n_states]."""
        return self._A.copy()

    @property
    def emissions(self) -> np.ndarray:
        """Copy of the emission matrix B [n_states, n_symbols]."""
        return self._B.copy()

    @property
    def probabilities(self) -> np.ndarray:
        """Copy of the initial state probabilities pi [n_states]."""
        return self._pi.copy()

    def _validate(self, pi: np.ndarray, A: np.ndarray, B: np.ndarray) -> None:
        tolerance = get_config('hmm', 'tolerance')
        if tolerance is None:
            tolerance = 1e-10

        if not np.allclose(pi.sum(), 1.0, rtol=0.0, atol=tolerance):
            raise InvalidArgumentError(f"Initial probabilities sum to {pi.sum()}, expected 1.0")

        if np.any(pi < 0):
            raise InvalidArgumentError("Initial probabilities contain negative values")

        row_sums_A = A.sum(axis=1)
        if not np.allclose(row_sums_A, 1.0, rtol=0.0, atol=tolerance):
            raise InvalidArgumentError(f"Transition matrix rows don't sum to 1.0: {row_sums_A}")

        if np.any(A < 0):
            raise InvalidArgumentError("Transition matrix contains negative values")

        row_sums_B = B.sum(axis=1)
        if not np.allclose(row_sums_B, 1.0, rtol=0.0, atol=tolerance):
            raise InvalidArgumentError(f"Emission matrix rows don't sum to 1.0: {row_sums_B}")

        if np.any(B < 0):
            raise InvalidArgumentError("Emission matrix contains negative values")

    def validate_stochastic_matrices(self) -> bool:
        """
        Validate that all probability matrices satisfy stochastic properties.

        Parameters are always checked on the way in; this re-checks them
        against the currently configured ``hmm.tolerance``, e.g. after the
        tolerance has been tightened.

        Returns:
            bool: True if all matrices are valid stochastic matrices

        Raises:
            InvalidArgumentError: If any matrix violates stochastic properties
        """
        self._validate(self._pi, self._A, self._B)
        logger.debug("All stochastic matrix properties validated successfully")
        return True

    def get_parameters(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Get current model parameters.

        Returns:
            Tuple of (pi, A, B) copies
        """
        return self._pi.copy(), self._A.copy(), self._B.copy()

    def set_parameters(self, pi, A, B) -> None:
        """
        Replace model parameters, e.g. after external re-estimation.

        Not synchronized: callers must not run inference on this model from
        another thread while parameters are being replaced.

        Args:
            pi: Initial state probabilities [n_states]
            A: Transition matrix [n_states, n_states]
            B: Emission matrix [n_states, n_symbols]

        Raises:
            InvalidArgumentError: If dimensions don't match the model or the
                parameters are not stochastic
        """
        pi = np.array(pi, dtype=float)
        A = np.array(A, dtype=float)
        B = np.array(B, dtype=float)

        if pi.shape != (self.n_states,):
            raise InvalidArgumentError(f"pi shape {pi.shape} doesn't match expected ({self.n_states},)")

        if A.shape != (self.n_states, self.n_states):
            raise InvalidArgumentError(
                f"A shape {A.shape} doesn't match expected ({self.n_states}, {self.n_states})")

        if B.shape != (self.n_states, self.n_symbols):
            raise InvalidArgumentError(
                f"B shape {B.shape} doesn't match expected ({self.n_states}, {self.n_symbols})")

        self._validate(pi, A, B)

        self._pi = pi
        self._A = A
        self._B = B

        logger.debug("Model parameters updated and validated")

    def _check_sequence(self, sequence) -> np.ndarray:
        """Convert a sequence to an index array, rejecting invalid symbols."""
        if sequence is None:
            raise InvalidArgumentError("Observation sequence cannot be None")

        observations = np.asarray(sequence)

        if observations.ndim != 1:
            raise InvalidArgumentError(
                f"Observation sequence must be one-dimensional, got shape {observations.shape}")

        if observations.size == 0:
            return observations.astype(int)

        if not np.issubdtype(observations.dtype, np.integer):
            raise InvalidArgumentError("Observations must be integer symbol indices")

        if np.any(observations < 0) or np.any(observations >= self.n_symbols):
            raise InvalidArgumentError(f"Observations must be in range [0, {self.n_symbols - 1}]")

        return observations

    def decode(self, sequence, logarithm: bool = False) -> Tuple[np.ndarray, float]:
        """
        Find the most likely state path for an observation sequence.

        Args:
            sequence: Observation indices
            logarithm: Return the log-probability instead of the probability

        Returns:
            Tuple of:
            - path: Most likely state indices (empty for an empty sequence)
            - probability: Probability of that path; 0.0 for an empty sequence
        """
        observations = self._check_sequence(sequence)

        if len(observations) == 0:
            return np.zeros(0, dtype=int), 0.0

        path, best_cost = viterbi(self._pi, self._A, self._B, observations)

        probability = -best_cost if logarithm else float(np.exp(-best_cost))
        return path, probability

    def evaluate(self, sequence, logarithm: bool = False) -> float:
        """
        Compute the probability of an observation sequence.

        Args:
            sequence: Observation indices
            logarithm: Return the log-likelihood instead of the probability

        Returns:
            Sequence probability (or log-likelihood); 0.0 for an empty sequence
        """
        observations = self._check_sequence(sequence)

        if len(observations) == 0:
            return 0.0

        log_likelihood = forward(self._pi, self._A, self._B, observations).log_likelihood

        return log_likelihood if logarithm else float(np.exp(log_likelihood))

    def predict(self, sequence, horizon: int, logarithm: bool = False) -> Prediction:
        """
        Greedily forecast the next ``horizon`` symbols after a sequence.

        Args:
            sequence: Observed prefix, at least one symbol long
            horizon: Number of symbols to forecast (>= 0)
            logarithm: Report the log-probability instead of the probability

        Returns:
            Prediction with the forecast symbols, their per-step symbol
            distributions and the probability of prefix plus forecast

        Raises:
            InvalidArgumentError: If the prefix is empty or horizon is not a
                non-negative integer
        """
        observations = self._check_sequence(sequence)

        if len(observations) == 0:
            raise InvalidArgumentError("Prediction requires at least one observed symbol")

        if isinstance(horizon, bool) or not isinstance(horizon, (int, np.integer)):
            raise InvalidArgumentError(f"Horizon must be an integer, got {horizon!r}")

        if horizon < 0:
            raise InvalidArgumentError(f"Horizon must be non-negative, got {horizon}")

        result = predict(self._pi, self._A, self._B, observations, horizon)

        if logarithm:
            return result
        return result._replace(probability=float(np.exp(result.probability)))

    def predict_next(self, sequence) -> Tuple[int, np.ndarray]:
        """
        Forecast the single most likely next symbol.

        Returns:
            Tuple of (symbol, distribution over all symbols)
        """
        result = self.predict(sequence, 1)
        return int(result.symbols[0]), result.probabilities[0]

    def __repr__(self) -> str:
        """String representation of the HMM."""
        return f"HiddenMarkovModel(n_states={self.n_states}, n_symbols={self.n_symbols})"
