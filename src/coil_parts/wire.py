"""
Wire Component
Round and rectangular magnet wire cross-sections
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

import numpy as np


class WireSpec(ABC):
    """
    Base class for wire cross-sections
    All dimensions in mm
    """

    shape: str = ''

    @property
    @abstractmethod
    def width(self) -> float:
        """Radial size of one turn (mm)"""

    @property
    @abstractmethod
    def thickness(self) -> float:
        """Axial size of one layer (mm)"""

    @property
    @abstractmethod
    def cross_section_area(self) -> float:
        """Conductor area (mm²)"""

    @property
    def effective_radius(self) -> float:
        """Radius of the circle with the same area as the conductor (mm)"""
        return float(np.sqrt(self.cross_section_area / np.pi))


@dataclass(frozen=True)
class RoundWire(WireSpec):
    """Round wire given by its bare diameter"""
    diameter: float  # mm

    shape = 'round'

    @property
    def width(self) -> float:
        return self.diameter

    @property
    def thickness(self) -> float:
        return self.diameter

    @property
    def cross_section_area(self) -> float:
        return np.pi * (self.diameter / 2) ** 2

    @property
    def effective_radius(self) -> float:
        return self.diameter / 2

    def __repr__(self):
        return f"RoundWire(d={self.diameter}mm)"


@dataclass(frozen=True)
class RectangularWire(WireSpec):
    """
    Rectangular (flat) wire
    Width lies in the winding plane, thickness along the coil axis
    """
    width_mm: float
    thickness_mm: float

    shape = 'rectangular'

    @property
    def width(self) -> float:
        return self.width_mm

    @property
    def thickness(self) -> float:
        return self.thickness_mm

    @property
    def cross_section_area(self) -> float:
        return self.width_mm * self.thickness_mm

    def __repr__(self):
        return f"RectangularWire({self.width_mm}x{self.thickness_mm}mm)"
