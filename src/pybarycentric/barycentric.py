"""One-dimensional barycentric Lagrange interpolation.

This module implements the evaluator: given nodes, barycentric weights and
function samples, the interpolating polynomial is evaluated in O(n) by the
second (true) barycentric formula

.. math::

    p(t) = \\frac{\\sum_k \\frac{w_k}{t - x_k} f_k}{\\sum_k \\frac{w_k}{t - x_k}}

Nodes and weights are computed once per degree and scheme and can be shared
read-only across any number of evaluations and threads.

References
----------
- Berrut & Trefethen (2004), "Barycentric Lagrange Interpolation",
  SIAM Review 46(3):501-517
- Trefethen (2013), "Approximation Theory and Approximation Practice",
  SIAM, Chapters 3-5
"""

from __future__ import annotations

import os
import time
import warnings
from typing import Callable, Tuple

import numpy as np

from pybarycentric.nodes import (
    CHEBYSHEV,
    _check_degree,
    _check_scheme,
    _frozen,
    generate_nodes,
    map_to_domain,
)
from pybarycentric.weights import generate_weights

DEFAULT_TOLERANCE = 1e-15


def _check_aligned(nodes, weights, samples) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Validate that nodes, weights and samples pair up index-for-index."""
    nodes = np.asarray(nodes, dtype=float)
    weights = np.asarray(weights, dtype=float)
    samples = np.asarray(samples, dtype=float)
    for name, arr in (("nodes", nodes), ("weights", weights), ("samples", samples)):
        if arr.ndim != 1:
            raise ValueError(f"{name} must be 1-D, got shape {arr.shape}")
    if not (len(nodes) == len(weights) == len(samples)):
        raise ValueError(
            f"Length mismatch: {len(nodes)} nodes, {len(weights)} weights, "
            f"{len(samples)} samples"
        )
    if len(nodes) == 0:
        raise ValueError("At least one node is required")
    return nodes, weights, samples


def _coincident(diff: np.ndarray, eps: float) -> np.ndarray:
    """Mask of node distances that count as a hit; zero always does."""
    return (np.abs(diff) < eps) | (diff == 0)


def sample(nodes: np.ndarray, f: Callable[[float], float]) -> np.ndarray:
    """Evaluate *f* at every node.

    Parameters
    ----------
    nodes : ndarray
        Interpolation nodes.
    f : callable
        Scalar function ``f(x) -> float``, called once per node.

    Returns
    -------
    ndarray
        Read-only array with ``samples[k] = f(nodes[k])``.

    Raises
    ------
    ValueError
        If any sample is NaN or Inf.
    """
    samples = np.array([f(float(x)) for x in np.asarray(nodes, dtype=float)],
                       dtype=float)
    if not np.isfinite(samples).all():
        raise ValueError("Function returned NaN or Inf at a node")
    return _frozen(samples)


def evaluate(nodes: np.ndarray, weights: np.ndarray, samples: np.ndarray,
             t: float, eps: float = DEFAULT_TOLERANCE,
             use_jit: bool = False) -> float:
    """Evaluate the barycentric interpolant at a single point.

    Parameters
    ----------
    nodes : ndarray
        Interpolation nodes.
    weights : ndarray
        Barycentric weights, ``weights[k]`` paired with ``nodes[k]``.
    samples : ndarray
        Function values at nodes.
    t : float
        Evaluation point.
    eps : float, optional
        If ``|t - nodes[k]| < eps`` the sample at the first such node is
        returned as is. Default is 1e-15. An exact hit is returned even
        when *eps* is 0.
    use_jit : bool, optional
        Run the summation through the Numba kernel. Requires the ``jit``
        extra.

    Returns
    -------
    float
        Interpolated value p(t).

    Raises
    ------
    ValueError
        If the three arrays are not 1-D of equal, non-zero length.
    """
    nodes, weights, samples = _check_aligned(nodes, weights, samples)

    diff = t - nodes
    exact = np.flatnonzero(_coincident(diff, eps))
    if len(exact) > 0:
        return float(samples[exact[0]])

    if use_jit:
        from pybarycentric._jit import barycentric_sum_jit
        return float(barycentric_sum_jit(float(t), nodes, weights, samples))

    w_over_diff = weights / diff
    return float(np.dot(w_over_diff, samples) / np.sum(w_over_diff))


def evaluate_batch(nodes: np.ndarray, weights: np.ndarray, samples: np.ndarray,
                   ts, eps: float = DEFAULT_TOLERANCE) -> np.ndarray:
    """Evaluate the interpolant at many points at once.

    Builds the ``(len(ts), n + 1)`` matrix of ``w_k / (t - x_k)`` and
    contracts it with the samples in one BLAS call. Points within *eps* of
    a node take that node's sample, as in :func:`evaluate`.

    Returns
    -------
    ndarray
        Interpolated values with the same shape as *ts*.
    """
    nodes, weights, samples = _check_aligned(nodes, weights, samples)
    ts = np.asarray(ts, dtype=float)
    flat = ts.reshape(-1)

    diff = flat[:, np.newaxis] - nodes
    close = _coincident(diff, eps)
    with np.errstate(divide="ignore", invalid="ignore"):
        w_over_diff = weights / diff
        result = (w_over_diff @ samples) / w_over_diff.sum(axis=1)

    hit = close.any(axis=1)
    if hit.any():
        first = np.argmax(close, axis=1)
        result[hit] = samples[first[hit]]
    return result.reshape(ts.shape)


class BarycentricInterpolant:
    """Polynomial interpolant of a 1-D function in barycentric form.

    Nodes and weights are generated at construction; :meth:`build` samples
    the function. Evaluation is then O(n) per point.

    Parameters
    ----------
    function : callable
        Function to interpolate. Signature: ``f(x) -> float``.
    n : int
        Polynomial degree; the interpolant uses ``n + 1`` nodes.
    scheme : ``'chebyshev'`` or ``'equispaced'``, optional
        Node distribution. Default is ``'chebyshev'``.
    domain : (float, float), optional
        Interval ``(lo, hi)`` to interpolate on. Default is ``(-1, 1)``.

    Examples
    --------
    >>> from pybarycentric import runge
    >>> p = BarycentricInterpolant(runge, 32)
    >>> p.build(verbose=False)
    >>> abs(p.eval(0.3) - runge(0.3)) < 1e-3
    True
    """

    def __init__(
        self,
        function: Callable,
        n: int,
        scheme: str = CHEBYSHEV,
        domain: Tuple[float, float] = (-1.0, 1.0),
    ):
        self.function = function
        self.n = _check_degree(n)
        self.scheme = _check_scheme(scheme)
        lo, hi = domain
        self.domain = (float(lo), float(hi))

        self.nodes = map_to_domain(generate_nodes(self.n, scheme), lo, hi)
        self.weights = generate_weights(self.n, scheme)

        self.values: np.ndarray | None = None
        self.build_time: float = 0.0
        self.n_evaluations: int = 0
        self._cached_error_estimate: float | None = None

    @property
    def n_nodes(self) -> int:
        """Number of interpolation nodes (``n + 1``)."""
        return self.n + 1

    def build(self, verbose: bool = True) -> None:
        """Sample the function at every node.

        Parameters
        ----------
        verbose : bool, optional
            If True, print build progress. Default is True.
        """
        if self.function is None:
            raise RuntimeError(
                "Cannot build: no function assigned. "
                "This object was created via from_values() or load()."
            )
        if verbose:
            print(f"Building degree-{self.n} {self.scheme} interpolant "
                  f"({self.n_nodes:,} evaluations)...")

        start = time.time()
        self._cached_error_estimate = None
        self.values = sample(self.nodes, self.function)
        self.n_evaluations = self.n_nodes
        self.build_time = time.time() - start

        if verbose:
            print(f"  Built in {self.build_time:.3f}s")

    def _check_built(self) -> None:
        if self.values is None:
            raise RuntimeError("Call build() first")

    def eval(self, t: float, eps: float = DEFAULT_TOLERANCE) -> float:
        """Evaluate the interpolant at *t*.

        Raises
        ------
        RuntimeError
            If ``build()`` has not been called.
        """
        self._check_built()
        return evaluate(self.nodes, self.weights, self.values, t, eps)

    def eval_batch(self, ts, eps: float = DEFAULT_TOLERANCE) -> np.ndarray:
        """Evaluate at an array of points; returns an array of the same shape."""
        self._check_built()
        return evaluate_batch(self.nodes, self.weights, self.values, ts, eps)

    def __call__(self, t):
        if np.ndim(t) == 0:
            return self.eval(t)
        return self.eval_batch(t)

    # ------------------------------------------------------------------
    # Error measures
    # ------------------------------------------------------------------

    def max_error(self, function: Callable | None = None,
                  n_points: int = 1001) -> float:
        """Maximum absolute error on a uniform grid over the domain.

        Parameters
        ----------
        function : callable, optional
            Reference function. Defaults to the function the interpolant
            was built from.
        n_points : int, optional
            Number of grid points, endpoints included. Default is 1001.
        """
        self._check_built()
        reference = function if function is not None else self.function
        if reference is None:
            raise RuntimeError(
                "No reference function: pass one explicitly after "
                "from_values() or load()."
            )
        grid = np.linspace(self.domain[0], self.domain[1], n_points)
        exact = np.array([reference(float(x)) for x in grid], dtype=float)
        return float(np.max(np.abs(self.eval_batch(grid) - exact)))

    def error_estimate(self) -> float:
        """Estimate the sup-norm interpolation error (Chebyshev scheme).

        Returns the magnitude of the highest Chebyshev coefficient of the
        interpolant, obtained from the samples at the Chebyshev extrema
        with a type-I DCT (`scipy.fft.dct`):

        .. math::

            c_n = \\frac{1}{2n} \\left( f_0 + (-1)^n f_n
                  + 2 \\sum_{k=1}^{n-1} (-1)^k f_k \\right)

        Raises
        ------
        RuntimeError
            If ``build()`` has not been called.
        ValueError
            If the interpolant uses equispaced nodes.
        """
        self._check_built()
        if self.scheme != CHEBYSHEV:
            raise ValueError(
                "error_estimate() requires Chebyshev nodes, "
                f"got scheme={self.scheme!r}; use max_error() instead"
            )

        if self._cached_error_estimate is not None:
            return self._cached_error_estimate

        if self.n == 0:
            estimate = abs(float(self.values[0]))
        else:
            from scipy.fft import dct

            coeffs = dct(np.asarray(self.values), type=1) / self.n
            estimate = abs(float(coeffs[-1])) / 2

        self._cached_error_estimate = estimate
        return estimate

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    _ARCHIVE_KEYS = ("version", "n", "scheme", "domain", "values")

    def save(self, path: str | os.PathLike) -> None:
        """Write the samples and basis description to a ``.npz`` archive.

        Only ``n``, the scheme, the domain and the samples are stored; nodes
        and weights are regenerated on :meth:`load`. The function itself is
        not saved.

        Raises
        ------
        RuntimeError
            If the interpolant has not been built yet.
        """
        from pybarycentric._version import __version__

        if self.values is None:
            raise RuntimeError("Nothing to save: call build() first.")
        # A file handle stops numpy from appending ".npz" to the name.
        with open(os.fspath(path), "wb") as f:
            np.savez(
                f,
                version=np.array(__version__),
                n=np.array(self.n),
                scheme=np.array(self.scheme),
                domain=np.array(self.domain, dtype=float),
                values=np.asarray(self.values),
            )

    @classmethod
    def load(cls, path: str | os.PathLike) -> "BarycentricInterpolant":
        """Rebuild an interpolant from an archive written by :meth:`save`.

        The result evaluates immediately; its ``function`` is ``None``.
        Archives are read with ``allow_pickle=False``.

        Warns
        -----
        UserWarning
            If the archive came from another pybarycentric version.

        Raises
        ------
        ValueError
            If the file lacks any of the expected arrays.
        """
        from pybarycentric._version import __version__

        with np.load(os.fspath(path), allow_pickle=False) as archive:
            missing = [key for key in cls._ARCHIVE_KEYS if key not in archive.files]
            if missing:
                raise ValueError(
                    f"{os.fspath(path)} is not an interpolant archive "
                    f"(missing {', '.join(missing)})"
                )
            version = str(archive["version"])
            n = int(archive["n"])
            scheme = str(archive["scheme"])
            lo, hi = (float(v) for v in archive["domain"])
            values = archive["values"]

        if version != __version__:
            warnings.warn(
                f"{os.fspath(path)} was written by pybarycentric {version}; "
                f"reading it with {__version__}.",
                UserWarning,
                stacklevel=2,
            )
        return cls.from_values(values, n, scheme, (lo, hi))

    # ------------------------------------------------------------------
    # Pre-computed values: nodes first, values later
    # ------------------------------------------------------------------

    @staticmethod
    def nodes(
        n: int,
        scheme: str = CHEBYSHEV,
        domain: Tuple[float, float] = (-1.0, 1.0),
    ) -> dict:
        """Generate nodes and weights without evaluating any function.

        Evaluate your function at ``info['nodes']`` externally, then pass
        the results to :meth:`from_values`.

        Returns
        -------
        dict
            ``'nodes'`` : nodes mapped to *domain*, in generation order.

            ``'weights'`` : barycentric weights paired with the nodes.

            ``'shape'`` : expected shape of the values array, ``(n + 1,)``.

        Examples
        --------
        >>> info = BarycentricInterpolant.nodes(4, "equispaced", (0, 2))
        >>> info['nodes'].tolist()
        [0.0, 0.5, 1.0, 1.5, 2.0]
        """
        lo, hi = domain
        nodes = map_to_domain(generate_nodes(n, scheme), lo, hi)
        return {
            "nodes": nodes,
            "weights": generate_weights(n, scheme),
            "shape": (len(nodes),),
        }

    @classmethod
    def from_values(
        cls,
        values,
        n: int,
        scheme: str = CHEBYSHEV,
        domain: Tuple[float, float] = (-1.0, 1.0),
    ) -> "BarycentricInterpolant":
        """Create an interpolant from pre-computed samples.

        ``values[k]`` must be the function evaluated at
        ``BarycentricInterpolant.nodes(n, scheme, domain)['nodes'][k]``.

        Raises
        ------
        ValueError
            If *values* has the wrong shape or contains NaN or Inf.
        """
        obj = cls(None, n, scheme, domain)
        values = np.array(values, dtype=float)
        if values.shape != (obj.n_nodes,):
            raise ValueError(
                f"values.shape={values.shape} does not match "
                f"n + 1 = {obj.n_nodes} nodes"
            )
        if not np.isfinite(values).all():
            raise ValueError("values contains NaN or Inf")
        obj.values = _frozen(values)
        return obj

    # ------------------------------------------------------------------
    # Printing
    # ------------------------------------------------------------------

    def __repr__(self) -> str:
        built = self.values is not None
        return (
            f"BarycentricInterpolant("
            f"n={self.n}, "
            f"scheme={self.scheme!r}, "
            f"built={built})"
        )

    def __str__(self) -> str:
        built = self.values is not None
        status = "built" if built else "not built"
        lo, hi = self.domain

        lines = [
            f"BarycentricInterpolant (degree {self.n}, {self.scheme}, {status})",
            f"  Nodes:       {self.n_nodes}",
            f"  Domain:      [{lo:g}, {hi:g}]",
        ]

        if built:
            lines.append(
                f"  Build:       {self.build_time:.3f}s, "
                f"{self.n_evaluations:,} evaluations"
            )
            if self.scheme == CHEBYSHEV:
                lines.append(f"  Error est:   {self.error_estimate():.2e}")

        return "\n".join(lines)
