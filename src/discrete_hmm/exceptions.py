"""
Exception hierarchy for the discrete HMM engine.
"""


class DiscreteHMMError(Exception):
    """Base exception for the discrete HMM engine."""
    pass


class InvalidArgumentError(DiscreteHMMError, ValueError):
    """Invalid counts, shapes, probabilities or observation sequences."""
    pass


class ConfigurationError(DiscreteHMMError, ValueError):
    """Configuration file loading or parsing failures."""
    pass
