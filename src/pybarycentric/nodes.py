"""Interpolation node generation on the reference interval [-1, 1].

Two schemes are supported:

- ``"equispaced"``: ``x_k = -1 + 2k/n``, strictly increasing.
- ``"chebyshev"``: Chebyshev points of the second kind (extrema form)
  ``x_k = cos(pi k / n)``, strictly decreasing from 1 to -1.

References
----------
- Berrut & Trefethen (2004), "Barycentric Lagrange Interpolation",
  SIAM Review 46(3):501-517, Sections 5 and 6
"""

from __future__ import annotations

import numpy as np

EQUISPACED = "equispaced"
CHEBYSHEV = "chebyshev"
SCHEMES = (EQUISPACED, CHEBYSHEV)


def _check_degree(n) -> int:
    """Validate a polynomial degree and return it as a Python int."""
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise TypeError(f"n must be int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    return int(n)


def _check_scheme(scheme: str) -> str:
    if scheme not in SCHEMES:
        raise ValueError(
            f"scheme must be 'equispaced' or 'chebyshev', got {scheme!r}"
        )
    return scheme


def _frozen(values: np.ndarray) -> np.ndarray:
    values.setflags(write=False)
    return values


def generate_nodes(n: int, scheme: str) -> np.ndarray:
    """Generate the ``n + 1`` interpolation nodes of a degree-``n`` basis.

    Parameters
    ----------
    n : int
        Polynomial degree (>= 0).
    scheme : ``'equispaced'`` or ``'chebyshev'``
        Node distribution.

    Returns
    -------
    ndarray
        Read-only array of shape ``(n + 1,)``. Equispaced nodes increase,
        Chebyshev nodes decrease. For ``n = 0`` the single node is the
        scheme's ``k = 0`` point (-1 or 1).

    Raises
    ------
    TypeError
        If *n* is not an integer.
    ValueError
        If *n* is negative or *scheme* is unknown.

    Examples
    --------
    >>> generate_nodes(2, "equispaced").tolist()
    [-1.0, 0.0, 1.0]
    >>> generate_nodes(0, "chebyshev").tolist()
    [1.0]
    """
    n = _check_degree(n)
    scheme = _check_scheme(scheme)

    if n == 0:
        ref = -1.0 if scheme == EQUISPACED else 1.0
        return _frozen(np.array([ref]))

    k = np.arange(n + 1, dtype=float)
    if scheme == EQUISPACED:
        nodes = -1.0 + 2.0 * k / n
    else:
        nodes = np.cos(np.pi * k / n)
    return _frozen(nodes)


def map_to_domain(nodes: np.ndarray, lo: float, hi: float) -> np.ndarray:
    """Affinely map nodes from [-1, 1] onto ``[lo, hi]``.

    Reference endpoints land exactly on *lo* and *hi*. Barycentric weights
    computed for the reference nodes stay valid for the mapped ones, since
    the map only rescales every weight by the same factor.

    Raises
    ------
    ValueError
        If ``lo >= hi``.
    """
    if lo >= hi:
        raise ValueError(f"Domain bounds must satisfy lo < hi, got [{lo}, {hi}]")
    nodes = np.asarray(nodes, dtype=float)
    if lo == -1.0 and hi == 1.0:
        return _frozen(nodes.copy())
    mapped = 0.5 * (lo + hi) + 0.5 * (hi - lo) * nodes
    # Pin the endpoints; the affine formula can be off by an ulp there.
    mapped[nodes == -1.0] = lo
    mapped[nodes == 1.0] = hi
    return _frozen(mapped)
