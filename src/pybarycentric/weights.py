"""Barycentric weights for equispaced and Chebyshev node sets.

Weights depend only on the node distribution, never on the function being
interpolated, so they are computed once per degree and reused.
"""

from __future__ import annotations

import numpy as np

from pybarycentric.nodes import EQUISPACED, _check_degree, _check_scheme, _frozen


def binomial(n: int, k: int) -> int:
    """Exact binomial coefficient C(n, k).

    Uses the multiplicative recurrence ``C(n, j) = C(n, j-1) (n-j+1) / j``
    on Python integers; every step divides exactly, so no factorial is ever
    formed and nothing overflows.

    >>> binomial(15, 8)
    6435
    """
    if n < 0 or k < 0:
        raise ValueError(f"binomial requires n >= 0 and k >= 0, got ({n}, {k})")
    if k > n:
        return 0
    k = min(k, n - k)
    c = 1
    for j in range(1, k + 1):
        c = c * (n - j + 1) // j
    return c


def _binomial_row(n: int) -> list:
    """All of C(n, 0), ..., C(n, n) in one pass of the recurrence."""
    row = [1]
    for k in range(1, n + 1):
        row.append(row[-1] * (n - k + 1) // k)
    return row


def generate_weights(n: int, scheme: str) -> np.ndarray:
    """Generate barycentric weights aligned with :func:`generate_nodes`.

    Parameters
    ----------
    n : int
        Polynomial degree (>= 0).
    scheme : ``'equispaced'`` or ``'chebyshev'``
        Must match the scheme used for the nodes.

    Returns
    -------
    ndarray
        Read-only array of shape ``(n + 1,)``; ``weights[k]`` belongs to
        ``nodes[k]``.

        - equispaced: ``(-1)^k C(n, k)``
        - chebyshev: ``0.5, -1, 1, ..., 0.5 (-1)^n``

    Raises
    ------
    OverflowError
        If equispaced binomial coefficients exceed the double range
        (``n`` above roughly 1020).
    """
    n = _check_degree(n)
    scheme = _check_scheme(scheme)

    signs = np.where(np.arange(n + 1) % 2 == 0, 1.0, -1.0)

    if scheme == EQUISPACED:
        try:
            magnitudes = np.array([float(c) for c in _binomial_row(n)])
        except OverflowError as exc:
            raise OverflowError(
                f"Equispaced weights for n={n} exceed the float range; "
                f"use the Chebyshev scheme for this degree"
            ) from exc
        return _frozen(signs * magnitudes)

    weights = signs.copy()
    weights[0] *= 0.5
    if n > 0:
        weights[n] *= 0.5
    return _frozen(weights)


def compute_barycentric_weights(nodes: np.ndarray) -> np.ndarray:
    """Compute barycentric weights for arbitrary distinct nodes.

    Parameters
    ----------
    nodes : ndarray
        Interpolation nodes of shape (n,).

    Returns
    -------
    ndarray
        Barycentric weights w_i = 1 / prod_{j!=i} (x_i - x_j).
    """
    nodes = np.asarray(nodes, dtype=float)
    n = len(nodes)
    weights = np.ones(n)
    for i in range(n):
        for j in range(n):
            if j != i:
                weights[i] /= (nodes[i] - nodes[j])
    return weights
