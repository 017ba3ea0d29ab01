"""
Coil Parameters Module
Defines the design inputs and calculated results for a wound coil
"""

from dataclasses import dataclass, field, asdict
from typing import Dict, Any, Optional

from coil_parts import (Material, get_material, WireSpec, RoundWire, CoilForm,
                        CircularCoil, WindingSpec)
from coil_parts.material import REFERENCE_TEMPERATURE


@dataclass
class CoilDesign:
    """Container for all coil design parameters (lengths in mm)"""

    material: str = 'copper'
    wire: WireSpec = field(default_factory=lambda: RoundWire(diameter=0.5))
    coil: CoilForm = field(default_factory=lambda: CircularCoil(inner_diameter=10.0))
    winding: WindingSpec = field(default_factory=lambda: WindingSpec(turns=10, layers=1,
                                                                     horizontal_spacing=0.1))

    # Operating temperature for the resistance figure
    temperature: float = REFERENCE_TEMPERATURE  # °C

    def get_material(self) -> Material:
        """Resolve the material name against the material table"""
        return get_material(self.material)

    def to_dict(self) -> Dict[str, Any]:
        """Flatten design into parameter-name: value pairs"""
        params: Dict[str, Any] = {
            'material': self.material,
            'temperature': self.temperature,
            'wire_shape': self.wire.shape,
            'coil_shape': self.coil.shape,
        }
        for name, value in asdict(self.wire).items():
            params[f"wire_{name.replace('_mm', '')}"] = value
        for name, value in asdict(self.coil).items():
            params[f"coil_{name}"] = value
        for name, value in asdict(self.winding).items():
            params[f"winding_{name}"] = value
        return params


@dataclass(frozen=True)
class Envelope:
    """Outer dimensions of the wound coil (mm)"""
    shape: str  # 'circular' or 'rectangular'
    outer_a: float
    outer_b: float
    height: float
    radial_thickness: float

    def describe(self) -> str:
        if self.shape == 'circular':
            return f"⌀ {self.outer_a:.2f} × {self.height:.2f} mm"
        return f"{self.outer_a:.2f} × {self.outer_b:.2f} × {self.height:.2f} mm"


@dataclass(frozen=True)
class CoilResult:
    """Calculated coil properties (SI units)"""

    envelope_description: str
    total_wire_length: float  # m
    dc_resistance: float  # Ohm
    wire_mass: float  # g
    inductance: float  # H
    method_description: str

    envelope: Optional[Envelope] = None
    material_name: str = ''
    temperature: float = REFERENCE_TEMPERATURE  # °C
    diagnostics: Dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary"""
        return {
            'envelope': self.envelope_description,
            'total_wire_length_m': self.total_wire_length,
            'dc_resistance_ohm': self.dc_resistance,
            'wire_mass_g': self.wire_mass,
            'inductance_h': self.inductance,
            'method': self.method_description,
            'material': self.material_name,
            'temperature_c': self.temperature,
        }

    def format_output(self) -> str:
        """Format result for display"""
        if self.inductance * 1000 >= 1:
            inductance, unit = self.inductance * 1e3, 'mH'
        else:
            inductance, unit = self.inductance * 1e6, 'µH'

        output = "=== COIL PROPERTIES ===\n\n"
        output += f"Coil Size:        {self.envelope_description}\n"
        output += f"Wire Length:      {self.total_wire_length:.3f} m\n"
        output += f"DC Resistance:    {self.dc_resistance:.4f} Ohm ({self.temperature:.0f} °C)\n"
        output += f"Wire Weight:      {self.wire_mass:.1f} g\n"
        output += f"Inductance:       {inductance:.3f} {unit}\n\n"

        output += "--- Method ---\n"
        output += f"{self.method_description}\n"
        if self.material_name:
            output += f"Material:         {self.material_name}\n"

        return output
