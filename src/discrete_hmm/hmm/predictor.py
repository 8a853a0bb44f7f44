"""
Greedy multi-step symbol forecasting.

Starting from the state belief left by the forward pass over an observed
prefix, each step scores every symbol by its one-step-ahead probability,
commits to the best one and conditions the belief on that choice only. The
forecast is therefore locally optimal per step, not the jointly most likely
continuation.
"""

from typing import NamedTuple

import numpy as np

from ..logger import get_hmm_logger
from .forward import forward

logger = get_hmm_logger()


class Prediction(NamedTuple):
    """
    Output of a multi-step forecast.

    Attributes:
        symbols: Greedily chosen symbols [horizon]
        probabilities: Per-step symbol distributions [horizon, n_symbols]
        probability: Probability of prefix plus forecast (log if requested)
    """
    symbols: np.ndarray
    probabilities: np.ndarray
    probability: float


def predict(pi: np.ndarray, A: np.ndarray, B: np.ndarray, observations: np.ndarray,
            horizon: int) -> Prediction:
    """
    Forecast the next ``horizon`` symbols after a non-empty observed prefix.

    Args:
        pi: Initial state probabilities [n_states]
        A: Transition matrix [n_states, n_states]
        B: Emission matrix [n_states, n_symbols]
        observations: Observed prefix [T], T >= 1
        horizon: Number of symbols to forecast (>= 0)

    Returns:
        Prediction whose ``probability`` field holds the log-likelihood of
        the prefix followed by the forecast symbols
    """
    n_symbols = B.shape[1]

    result = forward(pi, A, B, observations)
    belief = result.alpha[-1]
    log_likelihood = result.log_likelihood

    symbols = np.zeros(horizon, dtype=int)
    probabilities = np.zeros((horizon, n_symbols))

    for t in range(horizon):
        propagated = belief @ A

        # weighted[i, s] = P(state i next, symbol s emitted | history)
        weighted = propagated[:, np.newaxis] * B
        weights = weighted.sum(axis=0)

        # argmax keeps the first of several equal weights
        chosen = int(np.argmax(weights))
        symbols[t] = chosen

        total = weights.sum()
        if total > 0:
            probabilities[t] = weights / total

        if weights[chosen] > 0:
            belief = weighted[:, chosen] / weights[chosen]
            log_likelihood += np.log(weights[chosen])
        else:
            belief = weighted[:, chosen]
            log_likelihood = -np.inf

    logger.debug(f"Predicted {horizon} symbols: {symbols.tolist()}, "
                 f"log_likelihood={log_likelihood:.6f}")

    return Prediction(symbols, probabilities, float(log_likelihood))
