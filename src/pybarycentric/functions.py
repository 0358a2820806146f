"""Reference test functions."""

import numpy as np


def runge(x):
    """Runge function ``1 / (1 + 16 x^2)``, scalar or array input."""
    if np.ndim(x) == 0:
        x = float(x)
        return 1.0 / (1.0 + 16.0 * x * x)
    x = np.asarray(x, dtype=float)
    return 1.0 / (1.0 + 16.0 * x * x)
