"""
Coil Inductance Solver
Filament summation for circular windings, Mohan/filament blending for
rounded-rectangular windings
"""

import logging
from typing import Dict, Any

from coil_parameters import CoilDesign
from coil_geometry import CoilGeometry
from filament_inductance import filament_sum
from mohan_spiral import mohan_rectangular_spiral

logger = logging.getLogger(__name__)

METHOD_CIRCULAR = 'Filament method (self + mutual) for circular loops'
METHOD_BLENDED = ('Mohan (rectangular, arithmetic-mean diameters) ↔ Circular (filament) '
                  'smooth blending by R; multilayer coupling applied')

# Exponent of the inter-layer coupling decay
COUPLING_EXPONENT = 1.5


def smoothstep(s: float) -> float:
    """Cubic 0→1 ramp with zero slope at both ends, input clamped to [0, 1]"""
    s = min(1.0, max(0.0, s))
    return 3 * s * s - 2 * s * s * s


def multilayer_coupling_scale(layers: int, d_avg: float, vertical_pitch: float) -> float:
    """
    N²-like factor for stacking identical layers along the axis

    Goes from layers² for tightly packed layers towards layers as the
    layer spacing grows relative to the coil diameter.

    Args:
        layers: Number of layers
        d_avg: Average coil diameter (mm)
        vertical_pitch: Axial layer-to-layer distance (mm)
    """
    if layers <= 1:
        return 1.0
    d = max(1e-9, d_avg)
    scale = float(layers)  # self terms
    for delta in range(1, layers):
        kz = 1 / (1 + ((delta * vertical_pitch) / d) ** COUPLING_EXPONENT)
        scale += 2 * (layers - delta) * kz
    return scale


class CoilInductanceSolver:
    """Computes coil inductance from the winding geometry"""

    def __init__(self, design: CoilDesign, geometry: CoilGeometry):
        self.design = design
        self.geometry = geometry

    def solve(self) -> Dict[str, Any]:
        """
        Calculate inductance

        Returns:
            Dictionary with 'inductance' (H), 'method' and solver diagnostics
        """
        if self.geometry.is_circular:
            return self.solve_circular()
        return self.solve_rounded_rectangle()

    def solve_circular(self) -> Dict[str, Any]:
        """Exact double sum over all turn/layer filaments"""
        loops = self.geometry.filaments()
        inductance = filament_sum(loops, self.geometry.wire_radius)
        logger.debug("Circular path: %d loops, L=%.6e H", len(loops), inductance)
        return {
            'inductance': inductance,
            'method': METHOD_CIRCULAR,
            'filaments': len(loops),
        }

    def circle_endpoint(self) -> float:
        """Single-layer filament sum for the full-circle limit of the corner radius (H)"""
        loops = self.geometry.filaments(layers=1)
        return filament_sum(loops, self.geometry.wire_radius)

    def solve_rounded_rectangle(self) -> Dict[str, Any]:
        """Blend sharp-corner Mohan estimate towards the full-circle endpoint"""
        coil = self.design.coil
        turns = self.design.winding.turns
        envelope = self.geometry.envelope()

        l_square = mohan_rectangular_spiral(coil.inner_a, coil.inner_b,
                                            envelope.outer_a, envelope.outer_b, turns)
        l_circle_end = self.circle_endpoint()

        progress = coil.corner_progress()
        weight = smoothstep(progress)
        l_single = l_square - (l_square - l_circle_end) * weight

        d_in = (coil.inner_a + coil.inner_b) / 2
        d_out = (envelope.outer_a + envelope.outer_b) / 2
        d_avg = 0.5 * (d_in + d_out)
        scale = multilayer_coupling_scale(self.design.winding.layers, d_avg, self.geometry.vertical_pitch)

        # l_single already carries N², only the layer factor is applied here
        inductance = l_single * scale
        logger.debug("Blend path: s=%.4f f=%.4f L_sq=%.6e L_circ=%.6e scale=%.4f",
                     progress, weight, l_square, l_circle_end, scale)

        return {
            'inductance': float(inductance),
            'method': METHOD_BLENDED,
            'l_square': l_square,
            'l_circle_end': l_circle_end,
            'progress': progress,
            'blend_weight': weight,
            'l_single_layer': float(l_single),
            'coupling_scale': scale,
        }

