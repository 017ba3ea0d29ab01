"""
Electrical Properties
DC resistance and wire mass from material constants and wire length
"""

from coil_parts import Material, WireSpec
from coil_parts.material import REFERENCE_TEMPERATURE


class ElectricalPropertiesCalculator:
    """Resistance and mass of a given length of wire"""

    def __init__(self, material: Material, wire: WireSpec):
        self.material = material
        self.wire = wire

    @property
    def area_mm2(self) -> float:
        return self.wire.cross_section_area

    @property
    def area_m2(self) -> float:
        return self.wire.cross_section_area / 1_000_000

    def dc_resistance(self, length_m: float) -> float:
        """DC resistance at 20°C (Ohm)"""
        return self.material.resistivity * length_m / self.area_m2

    def resistance_at(self, length_m: float, temperature: float) -> float:
        """DC resistance corrected linearly to the given temperature (Ohm)"""
        delta_t = temperature - REFERENCE_TEMPERATURE
        return self.dc_resistance(length_m) * (1 + self.material.temp_coefficient * delta_t)

    def wire_mass(self, length_mm: float) -> float:
        """Conductor mass (g), density in g/cm³ times volume in mm³ / 1000"""
        return self.material.density * self.area_mm2 * length_mm / 1000
