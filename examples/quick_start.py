"""Quick start example: interpolate a 1D function on Chebyshev nodes."""

import math

from pybarycentric import BarycentricInterpolant


def f(x):
    """A smooth function: sin(x) * exp(-x / 2)."""
    return math.sin(x) * math.exp(-x / 2)


# Build interpolant
p = BarycentricInterpolant(f, n=20, scheme="chebyshev", domain=(-3, 3))
p.build()

# Evaluate at a test point
x = 1.0
exact = f(x)
approx = p.eval(x)

print(f"Exact:  {exact:.10f}")
print(f"Approx: {approx:.10f}")
print(f"Error:  {abs(approx - exact):.2e}")

print(f"\nMax error on [-3, 3]: {p.max_error():.2e}")
print(f"Error estimate:       {p.error_estimate():.2e}")
