"""Console tables and plot-data files for interpolants.

The files written by :func:`write_plot_data` are plain whitespace-separated
columns, readable by gnuplot or ``numpy.loadtxt``::

    plot 'interp_plot.dat' u 1:2 w l title 'f(x)', \\
         'interp_plot.dat' u 1:3 w l title 'Interpolation', \\
         'interp_nodes.dat' u 1:2 w p pt 7 title 'Nodes'
"""

from __future__ import annotations

import os

import numpy as np

from pybarycentric.barycentric import _check_aligned

PLOT_FORMAT = "% .10f"


def format_table(nodes, weights, samples, precision: int = 2) -> str:
    """Format nodes, weights and samples as three rows of fixed-point numbers.

    >>> print(format_table([-1, 1], [1, -1], [0.5, 0.5]))
    -1.00 1.00
    1.00 -1.00
    0.50 0.50
    """
    nodes, weights, samples = _check_aligned(nodes, weights, samples)
    rows = []
    for values in (nodes, weights, samples):
        rows.append(" ".join(f"{v:.{precision}f}" for v in values))
    return "\n".join(rows)


def plot_data(interpolant, n_points: int = 500) -> np.ndarray:
    """Tabulate ``(x, f_true, f_interp)`` on a uniform grid over the domain.

    Parameters
    ----------
    interpolant : BarycentricInterpolant
        A built interpolant that still holds its function.
    n_points : int, optional
        Number of grid intervals; ``n_points + 1`` rows are produced.

    Returns
    -------
    ndarray
        Array of shape ``(n_points + 1, 3)``.
    """
    if interpolant.function is None:
        raise RuntimeError(
            "Interpolant has no function to tabulate; it was created via "
            "from_values() or load()."
        )
    lo, hi = interpolant.domain
    x = np.linspace(lo, hi, n_points + 1)
    f_true = np.array([interpolant.function(float(xi)) for xi in x], dtype=float)
    f_interp = interpolant.eval_batch(x)
    return np.column_stack([x, f_true, f_interp])


def write_plot_data(
    interpolant,
    plot_path: str | os.PathLike,
    nodes_path: str | os.PathLike | None = None,
    n_points: int = 500,
) -> None:
    """Write plot triples and, optionally, the ``(node, sample)`` pairs.

    Parameters
    ----------
    interpolant : BarycentricInterpolant
        A built interpolant that still holds its function.
    plot_path : str or path-like
        Destination for the ``(x, f_true, f_interp)`` rows.
    nodes_path : str or path-like, optional
        Destination for the ``(node, sample)`` rows.
    n_points : int, optional
        Number of grid intervals. Default is 500.
    """
    np.savetxt(os.fspath(plot_path), plot_data(interpolant, n_points),
               fmt=PLOT_FORMAT)
    if nodes_path is not None:
        np.savetxt(
            os.fspath(nodes_path),
            np.column_stack([interpolant.nodes, interpolant.values]),
            fmt=PLOT_FORMAT,
        )
