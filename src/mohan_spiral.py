"""
Mohan Spiral Model
Closed-form inductance of a sharp-cornered planar rectangular spiral

Current-sheet expression of Mohan et al. (IEEE JSSC 34(10), 1999):
L = mu0 * N^2 * d_avg * c1/2 * (ln(c2/rho) + c3*rho + c4*rho^2)
with c1=1.0, c2=2.46, c3=0, c4=0.2 and arithmetic-mean side lengths as diameters.
"""

import numpy as np

from filament_inductance import MU0

RHO_MIN = 1e-6
RHO_MAX = 0.999999


def mohan_rectangular_spiral(inner_a: float, inner_b: float,
                             outer_a: float, outer_b: float, turns: float) -> float:
    """
    Inductance of a rectangular spiral from its arithmetic-mean diameters (H)

    The result already contains the N² factor.

    Args:
        inner_a, inner_b: Inner side lengths (mm)
        outer_a, outer_b: Outer side lengths (mm)
        turns: Number of turns N
    """
    d_out = (outer_a + outer_b) / 2
    d_in = (inner_a + inner_b) / 2
    if d_out <= d_in or turns <= 0:
        return 0.0

    # Fill ratio
    rho = (d_out - d_in) / (d_out + d_in)
    rho = float(np.clip(rho, RHO_MIN, RHO_MAX))

    d_avg = ((d_out + d_in) / 2) / 1000  # m
    bracket = np.log(2.46 / rho) + 0.2 * rho ** 2
    return float(MU0 * turns ** 2 * (d_avg / 2) * bracket)
