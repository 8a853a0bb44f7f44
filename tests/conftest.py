"""
Test configuration and fixtures for discrete-hmm.

This file contains pytest configuration and shared fixtures
for testing the discrete HMM engine.
"""

import itertools
import tempfile
from pathlib import Path

import numpy as np
import pytest

from discrete_hmm.config import reset_config
from discrete_hmm.hmm.model import HiddenMarkovModel


@pytest.fixture(autouse=True)
def clean_config():
    """Restore default configuration after every test."""
    yield
    reset_config()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def start_then_ones_parameters():
    """
    Forward model for "a 0 followed by any number of 1s".

    State 0 emits the leading 0, state 1 the first 1, and state 2 absorbs
    the tail, mostly emitting 1s.
    """
    pi = np.array([1.0, 0.0, 0.0])
    A = np.array([
        [0.0, 1.0, 0.0],
        [0.0, 0.0, 1.0],
        [0.0, 0.0, 1.0]
    ])
    B = np.array([
        [1.0, 0.0],
        [0.0, 1.0],
        [0.043, 0.957]
    ])
    return pi, A, B


@pytest.fixture
def start_then_ones_model(start_then_ones_parameters):
    """Worked-scenario model built from fixed parameters."""
    pi, A, B = start_then_ones_parameters
    return HiddenMarkovModel.from_parameters(A, B, pi)


@pytest.fixture
def fever_model():
    """Two-state healthy/fever model over normal(0), cold(1), dizzy(2)."""
    return HiddenMarkovModel.from_parameters(
        transitions=[[0.7, 0.3], [0.4, 0.6]],
        emissions=[[0.5, 0.4, 0.1], [0.1, 0.3, 0.6]],
        initial=[0.6, 0.4]
    )


def random_stochastic(rng: np.random.Generator, rows: int, columns: int) -> np.ndarray:
    """Random row-stochastic matrix."""
    matrix = rng.random((rows, columns)) + 0.05
    return matrix / matrix.sum(axis=1, keepdims=True)


def make_random_model(seed: int, n_states: int, n_symbols: int) -> HiddenMarkovModel:
    """Random fully specified model for property tests."""
    rng = np.random.default_rng(seed)
    A = random_stochastic(rng, n_states, n_states)
    B = random_stochastic(rng, n_states, n_symbols)
    pi = random_stochastic(rng, 1, n_states)[0]
    return HiddenMarkovModel.from_parameters(A, B, pi)


def brute_force_paths(model: HiddenMarkovModel, sequence):
    """Yield (path, probability) for every explicit state path."""
    pi, A, B = model.get_parameters()
    T = len(sequence)

    for path in itertools.product(range(model.n_states), repeat=T):
        probability = pi[path[0]] * B[path[0], sequence[0]]
        for t in range(1, T):
            probability *= A[path[t - 1], path[t]] * B[path[t], sequence[t]]
        yield path, probability


@pytest.fixture
def random_model_factory():
    """Factory fixture for seeded random models."""
    return make_random_model


@pytest.fixture
def brute_force():
    """Brute-force path enumeration helper."""
    return brute_force_paths


def pytest_configure(config):
    """Configure pytest."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
