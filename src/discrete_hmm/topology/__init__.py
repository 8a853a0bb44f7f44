"""
Topology module.

Stateless factories for transition matrices and initial state distributions.
"""

from typing import Union

from .forward import ForwardTopology
from .ergodic import ErgodicTopology
from .custom import CustomTopology

Topology = Union[ForwardTopology, ErgodicTopology, CustomTopology]

__all__ = [
    "Topology",
    "ForwardTopology",
    "ErgodicTopology",
    "CustomTopology"
]
