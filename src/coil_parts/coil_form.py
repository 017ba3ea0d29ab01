"""
Coil Former Component
Inner shape the winding is wound on: circle or rounded rectangle
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class CoilForm(ABC):
    """Base class for coil formers (dimensions in mm)"""

    shape: str = ''

    @abstractmethod
    def is_circular(self) -> bool:
        """True when the winding must be treated as concentric circles"""

    @abstractmethod
    def equivalent_diameter(self) -> float:
        """Inner diameter used by the circular filament model (mm)"""


@dataclass(frozen=True)
class CircularCoil(CoilForm):
    """Circular former"""
    inner_diameter: float  # mm

    shape = 'circular'

    def is_circular(self) -> bool:
        return True

    def equivalent_diameter(self) -> float:
        return self.inner_diameter

    def __repr__(self):
        return f"CircularCoil(ID={self.inner_diameter}mm)"


@dataclass(frozen=True)
class RoundedRectangularCoil(CoilForm):
    """
    Rectangular former with filleted corners
    A corner radius of half the short side turns the shape into a circle
    """
    inner_a: float  # mm
    inner_b: float  # mm
    corner_radius: float = 0.0  # mm

    shape = 'rectangular'

    @property
    def short_side(self) -> float:
        return min(self.inner_a, self.inner_b)

    def is_circular(self) -> bool:
        # At 2R == min(A, B) the corners already meet: the shape is a circle
        return 2 * self.corner_radius >= self.short_side

    def equivalent_diameter(self) -> float:
        return self.short_side

    def corner_progress(self) -> float:
        """Corner radius as a fraction of its full-circle value (0 = sharp, 1 = circle)"""
        return self.corner_radius / (self.short_side / 2)

    def __repr__(self):
        return f"RoundedRectangularCoil({self.inner_a}x{self.inner_b}mm, R={self.corner_radius}mm)"
