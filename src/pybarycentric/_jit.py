"""Numba JIT-compiled kernel for barycentric interpolation.

Requires the optional dependency: pip install pybarycentric[jit]
"""

import numpy as np
from numba import njit


@njit(cache=True)
def barycentric_sum_jit(t: float, nodes: np.ndarray, weights: np.ndarray,
                        samples: np.ndarray) -> float:
    """Sum the second-form barycentric quotient in a compiled loop.

    The caller has already ruled out ``t`` landing on a node, so every
    ``t - nodes[k]`` is nonzero here.

    Parameters
    ----------
    t : float
        Evaluation point, off every node.
    nodes : ndarray
        Interpolation nodes.
    weights : ndarray
        Barycentric weights.
    samples : ndarray
        Function values at nodes.

    Returns
    -------
    float
        Interpolated value.
    """
    numerator = 0.0
    denominator = 0.0

    for k in range(len(nodes)):
        w_k = weights[k] / (t - nodes[k])
        numerator += w_k * samples[k]
        denominator += w_k

    return numerator / denominator
