"""
Coil Calculator
Runs geometry, inductance and electrical calculations for a coil design
"""

import logging
from dataclasses import replace
from typing import Dict, Iterable, Mapping, Union

import numpy as np
import pandas as pd

from coil_parameters import CoilDesign, CoilResult
from coil_geometry import CoilGeometry
from coil_parts import RoundedRectangularCoil
from electrical import ElectricalPropertiesCalculator
from inductance_solver import CoilInductanceSolver
from validation import InvalidGeometry, validate_design

logger = logging.getLogger(__name__)


def calculate_coil(design: CoilDesign) -> CoilResult:
    """
    Calculate all coil properties

    Args:
        design: Coil design parameters (mm)

    Returns:
        CoilResult in SI units (m, Ohm, g, H)

    Raises:
        InvalidGeometry: if any design parameter is out of range
    """
    validate_design(design)
    material = design.get_material()

    geometry = CoilGeometry(design)
    total_length_mm = geometry.total_length()
    total_length_m = total_length_mm / 1000
    envelope = geometry.envelope()

    solution = CoilInductanceSolver(design, geometry).solve()

    electrical = ElectricalPropertiesCalculator(material, design.wire)
    resistance = electrical.resistance_at(total_length_m, design.temperature)
    mass = electrical.wire_mass(total_length_mm)

    diagnostics = {k: float(v) for k, v in solution.items() if k not in ('inductance', 'method')}

    return CoilResult(
        envelope_description=envelope.describe(),
        total_wire_length=total_length_m,
        dc_resistance=resistance,
        wire_mass=mass,
        inductance=solution['inductance'],
        method_description=solution['method'],
        envelope=envelope,
        material_name=material.name,
        temperature=design.temperature,
        diagnostics=diagnostics,
    )


def run_batch(designs: Union[Mapping[str, CoilDesign], Iterable[CoilDesign]]) -> pd.DataFrame:
    """
    Evaluate independent designs into one table

    Invalid designs produce a row with the error message instead of results.

    Args:
        designs: Designs keyed by name, or a plain sequence of designs

    Returns:
        DataFrame indexed by design name
    """
    if not isinstance(designs, Mapping):
        designs = {f"design_{i + 1}": d for i, d in enumerate(designs)}

    rows: Dict[str, Dict] = {}
    for name, design in designs.items():
        row = design.to_dict()
        try:
            row.update(calculate_coil(design).to_dict())
            row['error'] = ''
        except InvalidGeometry as e:
            logger.warning("Design %s rejected: %s", name, e)
            row['error'] = str(e)
        rows[name] = row

    logger.info("Evaluated %d designs", len(rows))
    return pd.DataFrame.from_dict(rows, orient='index')


def sweep_corner_radius(design: CoilDesign, n_points: int = 21) -> pd.DataFrame:
    """
    Inductance of a rounded-rectangular design as the corner radius runs
    from a sharp corner to the full circle

    Args:
        design: Design with a RoundedRectangularCoil former
        n_points: Number of radii including both ends

    Returns:
        DataFrame with corner_radius, progress, inductance, dc_resistance and method columns
    """
    coil = design.coil
    if not isinstance(coil, RoundedRectangularCoil):
        raise InvalidGeometry('coil', 'Corner radius sweep needs a rounded-rectangular coil.')

    radii = np.linspace(0.0, coil.short_side / 2, n_points)
    records = []
    for radius in radii:
        point = replace(design, coil=replace(coil, corner_radius=float(radius)))
        result = calculate_coil(point)
        records.append({
            'corner_radius': float(radius),
            'progress': float(radius) / (coil.short_side / 2),
            'inductance': result.inductance,
            'dc_resistance': result.dc_resistance,
            'total_wire_length': result.total_wire_length,
            'method': result.method_description,
        })
    return pd.DataFrame.from_records(records)
