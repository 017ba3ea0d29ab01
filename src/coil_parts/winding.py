"""
Winding Component
Turn and layer layout of the coil
"""

from dataclasses import dataclass

from .wire import WireSpec


@dataclass(frozen=True)
class WindingSpec:
    """
    Winding configuration
    Turns are stacked radially within a layer, layers are stacked along the axis
    """
    turns: int = 10
    layers: int = 1
    horizontal_spacing: float = 0.0  # mm between adjacent turns
    vertical_spacing: float = 0.0  # mm between adjacent layers

    def horizontal_pitch(self, wire: WireSpec) -> float:
        """Radial distance between turn centres (mm)"""
        return wire.width + self.horizontal_spacing

    def vertical_pitch(self, wire: WireSpec) -> float:
        """Axial distance between layer centres (mm)"""
        return wire.thickness + self.vertical_spacing

    def radial_thickness(self, wire: WireSpec) -> float:
        """Radial build of the winding (mm)"""
        return self.turns * wire.width + max(0.0, (self.turns - 1) * self.horizontal_spacing)

    def winding_height(self, wire: WireSpec) -> float:
        """Axial build of the winding (mm)"""
        return self.layers * wire.thickness + max(0.0, (self.layers - 1) * self.vertical_spacing)

    def __repr__(self):
        return f"WindingSpec(turns={self.turns}, layers={self.layers})"
