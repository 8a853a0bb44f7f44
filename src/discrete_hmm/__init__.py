"""
discrete-hmm: Discrete Hidden Markov Model inference engine

A Python library for building HMM topologies and answering the classic
queries over discrete observation sequences: decoding, evaluation and
next-symbol prediction.
"""

__version__ = "0.1.0"
__author__ = "discrete-hmm Development Team"

from .config import get_config, set_config
from .logger import get_logger
from .exceptions import DiscreteHMMError, InvalidArgumentError
from .hmm import HiddenMarkovModel, Prediction
from .topology import ForwardTopology, ErgodicTopology, CustomTopology
from .generators import UniformGenerator, ExponentialGenerator

__all__ = [
    "get_config",
    "set_config",
    "get_logger",
    "DiscreteHMMError",
    "InvalidArgumentError",
    "HiddenMarkovModel",
    "Prediction",
    "ForwardTopology",
    "ErgodicTopology",
    "CustomTopology",
    "UniformGenerator",
    "ExponentialGenerator",
    "__version__"
]
