"""
Hidden Markov Model module.

Discrete HMM with Viterbi decoding, scaled forward evaluation and greedy prediction.
"""

from .model import HiddenMarkovModel
from .forward import forward, ForwardResult
from .viterbi import viterbi
from .predictor import predict, Prediction

__all__ = [
    "HiddenMarkovModel",
    "forward",
    "ForwardResult",
    "viterbi",
    "predict",
    "Prediction"
]
