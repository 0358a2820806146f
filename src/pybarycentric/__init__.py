"""pybarycentric: Barycentric Lagrange interpolation on equispaced and Chebyshev nodes.

Provides node and weight generators for equispaced and Chebyshev
(second-kind) node sets, the stable O(n) barycentric evaluator, and the
:class:`BarycentricInterpolant` class bundling them for one function.

Example
-------
>>> from pybarycentric import generate_nodes, generate_weights, sample, evaluate, runge
>>> nodes = generate_nodes(32, "chebyshev")
>>> weights = generate_weights(32, "chebyshev")
>>> samples = sample(nodes, runge)
>>> abs(evaluate(nodes, weights, samples, 0.3) - runge(0.3)) < 1e-3
True
"""

from pybarycentric._version import __version__
from pybarycentric.barycentric import (
    DEFAULT_TOLERANCE,
    BarycentricInterpolant,
    evaluate,
    evaluate_batch,
    sample,
)
from pybarycentric.functions import runge
from pybarycentric.nodes import CHEBYSHEV, EQUISPACED, SCHEMES, generate_nodes, map_to_domain
from pybarycentric.report import format_table, plot_data, write_plot_data
from pybarycentric.weights import binomial, compute_barycentric_weights, generate_weights

__all__ = [
    "BarycentricInterpolant",
    "CHEBYSHEV",
    "DEFAULT_TOLERANCE",
    "EQUISPACED",
    "SCHEMES",
    "binomial",
    "compute_barycentric_weights",
    "evaluate",
    "evaluate_batch",
    "format_table",
    "generate_nodes",
    "generate_weights",
    "map_to_domain",
    "plot_data",
    "runge",
    "sample",
    "write_plot_data",
    "__version__",
]
