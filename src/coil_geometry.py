"""
Coil Geometry Module
Expands the winding into filament loops, wire length and outer envelope
"""

import logging
from typing import List, Optional

import numpy as np

from coil_parameters import CoilDesign, Envelope
from coil_parts import RoundedRectangularCoil
from filament_inductance import Filament

logger = logging.getLogger(__name__)


def build_circular_loops(inner_diameter: float, wire_width: float,
                         horizontal_pitch: float, vertical_pitch: float,
                         turns: int, layers: int) -> List[Filament]:
    """
    Create one filament per turn and layer of a circular winding

    Loops are ordered layer by layer, turns from the inside out.

    Args:
        inner_diameter: Former diameter (mm)
        wire_width: Radial wire size (mm)
        horizontal_pitch: Radial turn-to-turn distance (mm)
        vertical_pitch: Axial layer-to-layer distance (mm)
        turns: Turns per layer
        layers: Number of layers

    Returns:
        List of filaments in metres
    """
    loops = []
    for j in range(layers):
        for i in range(turns):
            r = inner_diameter / 2 + i * horizontal_pitch + wire_width / 2
            z = j * vertical_pitch
            loops.append(Filament(radius=r / 1000, height=z / 1000))
    return loops


def rounded_turn_length(inner_a: float, inner_b: float, corner_radius: float, offset: float) -> float:
    """
    Centre-line length of one rounded-rectangle turn (mm)

    Args:
        inner_a, inner_b: Former side lengths (mm)
        corner_radius: Former corner radius (mm)
        offset: Distance from the former to the wire centre line (mm)
    """
    cur_a = inner_a + 2 * offset
    cur_b = inner_b + 2 * offset
    cur_r = corner_radius + offset
    straight_a = max(0.0, cur_a - 2 * cur_r)
    straight_b = max(0.0, cur_b - 2 * cur_r)
    return 2 * (straight_a + straight_b) + 2 * np.pi * cur_r


def circular_turn_length(inner_diameter: float, offset: float) -> float:
    """Centre-line length of one circular turn (mm)"""
    return np.pi * (inner_diameter + 2 * offset)


class CoilGeometry:
    """Handles geometric calculations for a wound coil"""

    def __init__(self, design: CoilDesign):
        self.design = design
        self.wire = design.wire
        self.coil = design.coil
        self.winding = design.winding

    @property
    def is_circular(self) -> bool:
        """Circular former, or rounded rectangle whose corners close into a circle"""
        return self.coil.is_circular()

    @property
    def horizontal_pitch(self) -> float:
        return self.winding.horizontal_pitch(self.wire)

    @property
    def vertical_pitch(self) -> float:
        return self.winding.vertical_pitch(self.wire)

    @property
    def wire_radius(self) -> float:
        """Effective conductor radius (m)"""
        return self.wire.effective_radius / 1000

    def turn_offsets(self) -> np.ndarray:
        """Distance from the former to each turn's centre line (mm)"""
        return np.arange(self.winding.turns) * self.horizontal_pitch + self.wire.width / 2

    def filaments(self, layers: Optional[int] = None) -> List[Filament]:
        """
        Filament loops of the equivalent circular winding

        Args:
            layers: Override the layer count (1 gives the single-layer set in the z=0 plane)
        """
        if layers is None:
            layers = self.winding.layers
        loops = build_circular_loops(self.coil.equivalent_diameter(), self.wire.width,
                                     self.horizontal_pitch, self.vertical_pitch,
                                     self.winding.turns, layers)
        logger.debug("Built %d filaments (%d turns x %d layers)", len(loops), self.winding.turns, layers)
        return loops

    def single_layer_length(self) -> float:
        """Wire length of one layer (mm)"""
        offsets = self.turn_offsets()
        if self.is_circular:
            diameter = self.coil.equivalent_diameter()
            return float(sum(circular_turn_length(diameter, off) for off in offsets))

        coil: RoundedRectangularCoil = self.coil
        return float(sum(rounded_turn_length(coil.inner_a, coil.inner_b, coil.corner_radius, off)
                         for off in offsets))

    def total_length(self) -> float:
        """
        Total wire length (mm)
        Every layer is taken to be as long as the first one
        """
        return self.single_layer_length() * self.winding.layers

    def envelope(self) -> Envelope:
        """Outer dimensions of the finished winding"""
        radial = self.winding.radial_thickness(self.wire)
        height = self.winding.winding_height(self.wire)

        if self.is_circular:
            outer = self.coil.equivalent_diameter() + 2 * radial
            return Envelope(shape='circular', outer_a=outer, outer_b=outer,
                            height=height, radial_thickness=radial)

        coil: RoundedRectangularCoil = self.coil
        return Envelope(shape='rectangular',
                        outer_a=coil.inner_a + 2 * radial,
                        outer_b=coil.inner_b + 2 * radial,
                        height=height, radial_thickness=radial)
