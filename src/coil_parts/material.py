"""
Conductor Materials
Resistivity, density and temperature coefficient of winding metals at 20°C
"""

from dataclasses import dataclass
from typing import Dict, Final


REFERENCE_TEMPERATURE: Final[float] = 20.0  # °C


@dataclass(frozen=True)
class Material:
    """Conductor material constants"""
    name: str
    resistivity: float  # Ohm-m at 20°C
    density: float  # g/cm³
    temp_coefficient: float  # 1/°C


MATERIALS: Final[Dict[str, Material]] = {
    'copper': Material(name='Copper', resistivity=1.724e-8, density=8.96, temp_coefficient=0.00393),
    'aluminum': Material(name='Aluminum', resistivity=2.82e-8, density=2.70, temp_coefficient=0.00403),
    'silver': Material(name='Silver', resistivity=1.59e-8, density=10.49, temp_coefficient=0.0038),
}


def get_material(name: str) -> Material:
    """
    Look up a material by name (case-insensitive)

    Raises:
        KeyError: if the material is not in MATERIALS
    """
    key = str(name).strip().lower()
    if key not in MATERIALS:
        raise KeyError(f"Unknown material '{name}'. Known materials: {', '.join(sorted(MATERIALS))}")
    return MATERIALS[key]
