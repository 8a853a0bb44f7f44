"""
Random number generators.

Explicitly seeded uniform source and the exponential sampler built on it.
"""

from .uniform import UniformGenerator
from .exponential import ExponentialGenerator

__all__ = [
    "UniformGenerator",
    "ExponentialGenerator"
]
