"""Runge phenomenon: equispaced versus Chebyshev nodes for 1/(1+16x^2)."""

from pybarycentric import (
    BarycentricInterpolant,
    format_table,
    runge,
    write_plot_data,
)

# Basis tables for a small equispaced interpolant
small = BarycentricInterpolant(runge, 15, scheme="equispaced")
small.build(verbose=False)
print(format_table(small.nodes, small.weights, small.values))
print(f"\np(-1.0) = {small.eval(-1.0): 1.2f}")

# Compare the two node families at the same degree
print(f"\n{'n':>4} {'equispaced':>14} {'chebyshev':>14}")
for n in (4, 8, 16, 32):
    equi = BarycentricInterpolant(runge, n, scheme="equispaced")
    cheb = BarycentricInterpolant(runge, n, scheme="chebyshev")
    equi.build(verbose=False)
    cheb.build(verbose=False)
    print(f"{n:>4} {equi.max_error():>14.3e} {cheb.max_error():>14.3e}")

cheb = BarycentricInterpolant(runge, 32)
cheb.build()
print(cheb)

write_plot_data(cheb, "interp_plot.dat", "interp_nodes.dat")
print("\nData for plotting written to interp_plot.dat and interp_nodes.dat")
