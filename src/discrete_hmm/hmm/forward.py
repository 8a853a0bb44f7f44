"""
Scaled forward algorithm (alpha pass).

Each step of the recursion is renormalized to sum to one, which keeps the
values in range over long sequences and turns every row of the result into
the state belief given the observations so far. The product of the scaling
coefficients is the sequence probability, so the log-likelihood is the sum
of their logarithms.
"""

from typing import NamedTuple

import numpy as np

from ..logger import get_hmm_logger

logger = get_hmm_logger()


class ForwardResult(NamedTuple):
    """
    Output of the forward algorithm.

    Attributes:
        alpha: Scaled forward probabilities [T, n_states]; each row sums to 1
            unless the observations are impossible under the model
        scaling: Scaling coefficients c_t [T]
        log_likelihood: ln P(observations | model); 0.0 for an empty sequence
    """
    alpha: np.ndarray
    scaling: np.ndarray
    log_likelihood: float


def forward(pi: np.ndarray, A: np.ndarray, B: np.ndarray, observations: np.ndarray) -> ForwardResult:
    """
    Compute scaled forward probabilities.

    Args:
        pi: Initial state probabilities [n_states]
        A: Transition matrix [n_states, n_states]
        B: Emission matrix [n_states, n_symbols]
        observations: Sequence of observation indices [T]

    Returns:
        ForwardResult with alpha, scaling coefficients and log-likelihood
    """
    T = len(observations)
    n_states = A.shape[0]

    alpha = np.zeros((T, n_states))
    scaling = np.zeros(T)
    log_likelihood = 0.0

    for t in range(T):
        if t == 0:
            step = pi * B[:, observations[0]]
        else:
            step = (alpha[t - 1] @ A) * B[:, observations[t]]

        c = step.sum()
        scaling[t] = c

        if c > 0:
            alpha[t] = step / c
            log_likelihood += np.log(c)
        else:
            # Impossible observation: every later row stays at zero
            log_likelihood = -np.inf
            break

    logger.debug(f"Forward pass completed: T={T}, log_likelihood={log_likelihood:.6f}")

    return ForwardResult(alpha, scaling, float(log_likelihood))
