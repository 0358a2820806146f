"""Shared test fixtures for pybarycentric tests."""

import math

import numpy as np
import pytest

from pybarycentric import (
    BarycentricInterpolant,
    generate_nodes,
    generate_weights,
    runge,
    sample,
)


# ---------------------------------------------------------------------------
# Test functions
# ---------------------------------------------------------------------------

def cubic(x):
    """x^3 - 2x + 1"""
    return x**3 - 2.0 * x + 1.0


def quintic(x):
    """Degree-5 polynomial with mixed-sign coefficients."""
    return 0.5 * x**5 - x**4 + 3.0 * x**2 - 0.25


def exp_sin(x):
    """exp(x) * sin(3x), entire."""
    return math.exp(x) * math.sin(3.0 * x)


def basis(n, scheme, f=runge):
    """Nodes, weights and samples of *f* for one degree and scheme."""
    nodes = generate_nodes(n, scheme)
    weights = generate_weights(n, scheme)
    return nodes, weights, sample(nodes, f)


DENSE_GRID = np.linspace(-1.0, 1.0, 1001)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def runge_equi_15():
    """Degree-15 equispaced basis with Runge samples."""
    return basis(15, "equispaced")


@pytest.fixture
def runge_cheb_32():
    """Degree-32 Chebyshev basis with Runge samples."""
    return basis(32, "chebyshev")


@pytest.fixture
def interp_runge_cheb():
    """Pre-built degree-32 Chebyshev interpolant of the Runge function."""
    p = BarycentricInterpolant(runge, 32, scheme="chebyshev")
    p.build(verbose=False)
    return p


@pytest.fixture
def interp_exp_sin():
    """Pre-built degree-24 Chebyshev interpolant of exp(x) sin(3x) on [0, 2]."""
    p = BarycentricInterpolant(exp_sin, 24, scheme="chebyshev", domain=(0.0, 2.0))
    p.build(verbose=False)
    return p
