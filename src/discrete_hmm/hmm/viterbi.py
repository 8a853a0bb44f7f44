"""
Viterbi decoding in cost space.

Probabilities are replaced by costs ``-ln(p)`` so that products become sums
and the most likely path is the one of minimum total cost. A zero probability
becomes an infinite cost and flows through ordinary float arithmetic.
"""

from typing import Tuple

import numpy as np

from ..logger import get_hmm_logger

logger = get_hmm_logger()


def negative_log(matrix: np.ndarray) -> np.ndarray:
    """Element-wise ``-ln(matrix)`` with ``-ln(0) = +inf``."""
    with np.errstate(divide='ignore'):
        return -np.log(matrix)


def viterbi(pi: np.ndarray, A: np.ndarray, B: np.ndarray, observations: np.ndarray) -> Tuple[np.ndarray, float]:
    """
    Find the most likely state path for a non-empty observation sequence.

    Ties between equal costs always go to the lowest state index, both when
    choosing a predecessor and when choosing the final state.

    Args:
        pi: Initial state probabilities [n_states]
        A: Transition matrix [n_states, n_states]
        B: Emission matrix [n_states, n_symbols]
        observations: Sequence of observation indices [T], T >= 1

    Returns:
        Tuple of:
        - path: Most likely state indices [T]
        - best_cost: ``-ln`` of the path probability (``inf`` if impossible)
    """
    T = len(observations)
    n_states = A.shape[0]

    cost_pi = negative_log(pi)
    cost_A = negative_log(A)
    cost_B = negative_log(B)

    cost = np.zeros((T, n_states))
    backpointer = np.zeros((T, n_states), dtype=int)

    # Base
    cost[0] = cost_pi + cost_B[:, observations[0]]

    # Induction: candidates[i, j] is the cost of reaching j from i
    for t in range(1, T):
        candidates = cost[t - 1][:, np.newaxis] + cost_A
        best_source = np.argmin(candidates, axis=0)
        backpointer[t] = best_source
        cost[t] = candidates[best_source, np.arange(n_states)] + cost_B[:, observations[t]]

    # Termination
    path = np.zeros(T, dtype=int)
    path[T - 1] = int(np.argmin(cost[T - 1]))
    best_cost = float(cost[T - 1, path[T - 1]])

    # Backtrace
    for t in range(T - 2, -1, -1):
        path[t] = backpointer[t + 1, path[t + 1]]

    logger.debug(f"Viterbi completed: T={T}, best_cost={best_cost:.6f}")

    return path, best_cost
