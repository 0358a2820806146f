"""Tests for the barycentric evaluator: accuracy, node coincidence, and batch eval."""

import math
import warnings

import numpy as np
import pytest

from pybarycentric import (
    CHEBYSHEV,
    EQUISPACED,
    evaluate,
    evaluate_batch,
    generate_nodes,
    generate_weights,
    runge,
    sample,
)
from conftest import DENSE_GRID, basis, cubic, exp_sin, quintic


# ---------------------------------------------------------------------------
# Interpolation property
# ---------------------------------------------------------------------------

class TestInterpolationProperty:
    @pytest.mark.parametrize("scheme", [EQUISPACED, CHEBYSHEV])
    @pytest.mark.parametrize("n", [1, 2, 7, 15, 32])
    def test_exact_at_every_node(self, scheme, n):
        nodes, weights, samples = basis(n, scheme)
        for k in range(n + 1):
            assert evaluate(nodes, weights, samples, nodes[k]) == samples[k]

    def test_right_endpoint_degree_15(self, runge_equi_15):
        nodes, weights, samples = runge_equi_15
        assert evaluate(nodes, weights, samples, 1.0) == runge(1.0)

    def test_within_tolerance_short_circuits(self, runge_cheb_32):
        nodes, weights, samples = runge_cheb_32
        t = nodes[5] + 1e-16
        assert evaluate(nodes, weights, samples, t) == samples[5]

    def test_custom_tolerance(self, runge_cheb_32):
        nodes, weights, samples = runge_cheb_32
        t = nodes[3] + 1e-9
        assert evaluate(nodes, weights, samples, t, eps=1e-8) == samples[3]
        assert evaluate(nodes, weights, samples, t) == pytest.approx(samples[3], abs=1e-7)

    @pytest.mark.parametrize("scheme", [EQUISPACED, CHEBYSHEV])
    def test_zero_tolerance_exact_node(self, scheme):
        nodes, weights, samples = basis(4, scheme)
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            for k in range(5):
                assert evaluate(nodes, weights, samples, nodes[k], eps=0.0) == samples[k]
            batch = evaluate_batch(nodes, weights, samples, nodes, eps=0.0)
        np.testing.assert_array_equal(batch, samples)

    def test_zero_tolerance_off_node(self, runge_cheb_32):
        nodes, weights, samples = runge_cheb_32
        t = nodes[5] + 1e-9
        assert evaluate(nodes, weights, samples, t, eps=0.0) == pytest.approx(samples[5], abs=1e-7)
        assert evaluate(nodes, weights, samples, t, eps=0.0) != samples[5]


# ---------------------------------------------------------------------------
# Accuracy
# ---------------------------------------------------------------------------

class TestPolynomialExactness:
    @pytest.mark.parametrize("scheme", [EQUISPACED, CHEBYSHEV])
    @pytest.mark.parametrize("n", [3, 5, 8])
    def test_cubic_reproduced(self, scheme, n):
        nodes, weights, samples = basis(n, scheme, cubic)
        for t in (-0.93, -0.41, 0.123, 0.5551, 0.97):
            assert evaluate(nodes, weights, samples, t) == pytest.approx(cubic(t), abs=1e-12)

    @pytest.mark.parametrize("scheme", [EQUISPACED, CHEBYSHEV])
    def test_quintic_reproduced(self, scheme):
        nodes, weights, samples = basis(5, scheme, quintic)
        for t in (-0.77, -0.01, 0.33, 0.91):
            assert evaluate(nodes, weights, samples, t) == pytest.approx(quintic(t), abs=1e-12)

    def test_constant_with_single_node(self):
        nodes, weights, samples = basis(0, CHEBYSHEV, lambda x: 2.5)
        assert evaluate(nodes, weights, samples, 0.3) == pytest.approx(2.5)
        assert evaluate(nodes, weights, samples, -0.8) == pytest.approx(2.5)

    def test_linear_midpoint(self):
        nodes = generate_nodes(1, EQUISPACED)
        weights = generate_weights(1, EQUISPACED)
        samples = sample(nodes, runge)
        assert nodes.tolist() == [-1.0, 1.0]
        assert weights.tolist() == [1.0, -1.0]
        expected = (runge(-1.0) + runge(1.0)) / 2
        assert evaluate(nodes, weights, samples, 0.0) == pytest.approx(expected, abs=1e-15)

    def test_entire_function_converges(self):
        nodes, weights, samples = basis(30, CHEBYSHEV, exp_sin)
        errors = [abs(evaluate(nodes, weights, samples, t) - exp_sin(t))
                  for t in DENSE_GRID[::7]]
        assert max(errors) < 1e-12


class TestSymmetry:
    @pytest.mark.parametrize("scheme,n", [(EQUISPACED, 10), (CHEBYSHEV, 16), (CHEBYSHEV, 33)])
    def test_runge_even(self, scheme, n):
        nodes, weights, samples = basis(n, scheme)
        for t in (0.05, 0.31, 0.5, 0.777, 0.99):
            left = evaluate(nodes, weights, samples, -t)
            right = evaluate(nodes, weights, samples, t)
            assert left == pytest.approx(right, abs=1e-12)


class TestRungePhenomenon:
    def test_chebyshev_beats_equispaced(self):
        errors = {}
        for scheme in (EQUISPACED, CHEBYSHEV):
            nodes, weights, samples = basis(32, scheme)
            approx = evaluate_batch(nodes, weights, samples, DENSE_GRID)
            errors[scheme] = np.max(np.abs(approx - runge(DENSE_GRID)))
        assert errors[CHEBYSHEV] < 1e-2
        assert errors[EQUISPACED] > 1.0
        assert errors[EQUISPACED] > 1e3 * errors[CHEBYSHEV]

    def test_equispaced_error_grows_at_boundary(self):
        nodes, weights, samples = basis(15, EQUISPACED)
        approx = evaluate_batch(nodes, weights, samples, DENSE_GRID)
        err = np.abs(approx - runge(DENSE_GRID))
        center = np.abs(DENSE_GRID) < 0.2
        edge = np.abs(DENSE_GRID) > 0.8
        assert err[edge].max() > 10 * err[center].max()


# ---------------------------------------------------------------------------
# Batch evaluation
# ---------------------------------------------------------------------------

class TestEvaluateBatch:
    def test_matches_pointwise(self, runge_cheb_32):
        nodes, weights, samples = runge_cheb_32
        ts = np.linspace(-0.99, 0.99, 57)
        batch = evaluate_batch(nodes, weights, samples, ts)
        assert batch.shape == ts.shape
        for t, b in zip(ts, batch):
            assert abs(b - evaluate(nodes, weights, samples, t)) < 1e-13

    def test_node_hits(self, runge_equi_15):
        nodes, weights, samples = runge_equi_15
        ts = np.array([nodes[0], 0.123, nodes[9], nodes[15]])
        batch = evaluate_batch(nodes, weights, samples, ts)
        assert np.all(np.isfinite(batch))
        assert batch[0] == samples[0]
        assert batch[2] == samples[9]
        assert batch[3] == samples[15]

    def test_preserves_shape(self, runge_cheb_32):
        nodes, weights, samples = runge_cheb_32
        ts = np.linspace(-1, 1, 12).reshape(3, 4)
        assert evaluate_batch(nodes, weights, samples, ts).shape == (3, 4)

    def test_scalar_input(self, runge_cheb_32):
        nodes, weights, samples = runge_cheb_32
        out = evaluate_batch(nodes, weights, samples, 0.25)
        assert out.shape == ()
        assert float(out) == pytest.approx(evaluate(nodes, weights, samples, 0.25), abs=1e-13)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class TestValidation:
    def test_length_mismatch(self):
        nodes = generate_nodes(4, CHEBYSHEV)
        weights = generate_weights(5, CHEBYSHEV)
        samples = sample(nodes, runge)
        with pytest.raises(ValueError, match="Length mismatch"):
            evaluate(nodes, weights, samples, 0.1)

    def test_samples_mismatch_batch(self):
        nodes, weights, samples = basis(4, EQUISPACED)
        with pytest.raises(ValueError, match="Length mismatch"):
            evaluate_batch(nodes, weights, samples[:-1], [0.1, 0.2])

    def test_not_1d(self):
        nodes, weights, samples = basis(3, EQUISPACED)
        with pytest.raises(ValueError, match="1-D"):
            evaluate(nodes.reshape(2, 2), weights, samples, 0.1)

    def test_empty(self):
        with pytest.raises(ValueError, match="At least one node"):
            evaluate([], [], [], 0.0)

    def test_sample_rejects_nan(self):
        nodes = generate_nodes(3, EQUISPACED)
        with pytest.raises(ValueError, match="NaN or Inf"):
            sample(nodes, lambda x: math.nan if x > 0 else 1.0)

    def test_samples_read_only(self):
        samples = sample(generate_nodes(3, CHEBYSHEV), runge)
        with pytest.raises(ValueError):
            samples[0] = 1.0


# ---------------------------------------------------------------------------
# Optional JIT kernel
# ---------------------------------------------------------------------------

class TestJit:
    def test_matches_numpy_path(self, runge_cheb_32):
        pytest.importorskip("numba")
        nodes, weights, samples = runge_cheb_32
        for t in (-0.87, -0.2, 0.0031, 0.64):
            v1 = evaluate(nodes, weights, samples, t)
            v2 = evaluate(nodes, weights, samples, t, use_jit=True)
            assert abs(v1 - v2) < 1e-13

    def test_node_coincidence_before_kernel(self, runge_equi_15):
        pytest.importorskip("numba")
        nodes, weights, samples = runge_equi_15
        assert evaluate(nodes, weights, samples, nodes[4], use_jit=True) == samples[4]
