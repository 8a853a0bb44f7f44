"""
Integration tests for the HMM inference engine.

Tests check the worked "0 followed by 1s" scenario and properties that tie
decoding, evaluation and prediction together on random models.
"""

import numpy as np
import pytest

from discrete_hmm.generators import UniformGenerator
from discrete_hmm.hmm.model import HiddenMarkovModel
from discrete_hmm.topology import ForwardTopology


pytestmark = pytest.mark.integration


class TestStartThenOnesScenario:
    """Forward model representing a 0 followed by any number of 1s."""

    @pytest.mark.parametrize("sequence,expected", [
        ([0, 1], 0.999),
        ([0, 1, 1, 1], 0.916),
        ([1, 1], 0.000),
        ([1, 0, 0, 0], 0.000),
        ([0, 1, 0, 1, 1, 1, 1, 1, 1], 0.034),
    ])
    def test_evaluate(self, start_then_ones_model, sequence, expected):
        assert start_then_ones_model.evaluate(sequence) == pytest.approx(expected, abs=0.01)

    def test_parameters_respect_forward_structure(self, start_then_ones_model):
        A = start_then_ones_model.transitions

        assert np.all(np.tril(A, k=-1) == 0.0)
        np.testing.assert_array_equal(start_then_ones_model.probabilities, [1.0, 0.0, 0.0])

    def test_decode(self, start_then_ones_model):
        path, probability = start_then_ones_model.decode([0, 1, 1, 1])

        np.testing.assert_array_equal(path, [0, 1, 2, 2])
        assert probability == pytest.approx(0.957 ** 2)

    def test_decode_impossible_sequence(self, start_then_ones_model):
        path, probability = start_then_ones_model.decode([1, 1])
        _, log_probability = start_then_ones_model.decode([1, 1], logarithm=True)

        assert len(path) == 2
        assert probability == 0.0
        assert log_probability == -np.inf

    def test_predict_continues_with_ones(self, start_then_ones_model):
        result = start_then_ones_model.predict([0, 1], 2)

        np.testing.assert_array_equal(result.symbols, [1, 1])
        np.testing.assert_allclose(result.probabilities, [[0.043, 0.957], [0.043, 0.957]])
        assert result.probability == pytest.approx(start_then_ones_model.evaluate([0, 1, 1, 1]))

    def test_predict_after_leading_zero(self, start_then_ones_model):
        symbol, distribution = start_then_ones_model.predict_next([0])

        assert symbol == 1
        np.testing.assert_allclose(distribution, [0.0, 1.0])


class TestRandomModelProperties:
    """Cross-checks between the algorithms on seeded random models."""

    @pytest.mark.parametrize("seed", range(6))
    @pytest.mark.parametrize("n_states", [1, 2, 3])
    def test_evaluate_matches_brute_force(self, random_model_factory, brute_force, seed, n_states):
        model = random_model_factory(seed, n_states, 3)
        rng = np.random.default_rng(100 + seed)

        for length in range(1, 5):
            sequence = rng.integers(0, 3, size=length).tolist()
            expected = sum(p for _, p in brute_force(model, sequence))

            assert model.evaluate(sequence) == pytest.approx(expected, rel=1e-9)

    @pytest.mark.parametrize("seed", range(6))
    def test_decode_matches_brute_force(self, random_model_factory, brute_force, seed):
        model = random_model_factory(seed, 3, 4)
        sequence = np.random.default_rng(seed).integers(0, 4, size=4).tolist()

        best_path, best_probability = max(brute_force(model, sequence), key=lambda item: item[1])
        path, probability = model.decode(sequence)

        np.testing.assert_array_equal(path, best_path)
        assert probability == pytest.approx(best_probability, rel=1e-9)

    @pytest.mark.parametrize("seed", range(10))
    def test_total_probability_dominates_best_path(self, random_model_factory, seed):
        model = random_model_factory(seed, 4, 3)
        sequence = np.random.default_rng(seed).integers(0, 3, size=12)

        _, log_probability = model.decode(sequence, logarithm=True)

        assert model.evaluate(sequence) >= np.exp(log_probability)

    @pytest.mark.parametrize("seed", range(5))
    def test_predict_probability_matches_evaluation(self, random_model_factory, seed):
        """The greedy forecast probability is the joint probability of prefix and forecast."""
        model = random_model_factory(seed, 3, 4)
        prefix = np.random.default_rng(seed).integers(0, 4, size=5).tolist()

        result = model.predict(prefix, 4, logarithm=True)
        extended = prefix + result.symbols.tolist()

        assert result.probability == pytest.approx(model.evaluate(extended, logarithm=True))

    @pytest.mark.parametrize("seed", range(5))
    def test_predict_zero_horizon_equals_evaluate(self, random_model_factory, seed):
        model = random_model_factory(seed, 3, 2)
        prefix = [0, 1, 1, 0]

        result = model.predict(prefix, 0)

        assert len(result.symbols) == 0
        assert result.probabilities.shape == (0, 2)
        assert result.probability == model.evaluate(prefix)

    def test_random_forward_model_end_to_end(self):
        """Randomized forward topology with uniform emissions."""
        model = HiddenMarkovModel(ForwardTopology(4, deepness=2, random=True), 3,
                                  rng=UniformGenerator(5))
        sequence = [0, 2, 1, 1, 0]

        path, _ = model.decode(sequence)

        # Forward chains never move backwards or jump further than deepness allows
        assert path[0] == 0
        assert np.all(np.diff(path) >= 0)
        assert np.all(np.diff(path) < 2)
        assert model.evaluate(sequence) == pytest.approx((1 / 3) ** len(sequence))
