"""
Design Validation
Rejects non-physical coil designs before any calculation runs
"""

import numpy as np

from coil_parameters import CoilDesign
from coil_parts import (MATERIALS, RoundWire, RectangularWire, CircularCoil,
                        RoundedRectangularCoil)


class InvalidGeometry(ValueError):
    """Raised for a design parameter outside its physical range"""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message


def _positive(value) -> bool:
    # False for NaN and inf as well as for non-positive values
    return bool(np.isfinite(value) and value > 0)


def _non_negative(value) -> bool:
    return bool(np.isfinite(value) and value >= 0)


def validate_design(design: CoilDesign) -> None:
    """
    Check a design and raise on the first invalid parameter

    Raises:
        InvalidGeometry: naming the offending field
    """
    if str(design.material).strip().lower() not in MATERIALS:
        raise InvalidGeometry('material', f"Unknown wire material '{design.material}'.")

    winding = design.winding
    if not _positive(winding.turns):
        raise InvalidGeometry('turns', 'Number of turns and layers must be greater than 0.')
    if not _positive(winding.layers):
        raise InvalidGeometry('layers', 'Number of turns and layers must be greater than 0.')
    if not _non_negative(winding.horizontal_spacing):
        raise InvalidGeometry('horizontal_spacing', 'Horizontal spacing cannot be negative.')
    if not _non_negative(winding.vertical_spacing):
        raise InvalidGeometry('vertical_spacing', 'Vertical spacing cannot be negative.')

    wire = design.wire
    if isinstance(wire, RoundWire):
        if not _positive(wire.diameter):
            raise InvalidGeometry('wire_diameter', 'Wire diameter must be greater than 0.')
    elif isinstance(wire, RectangularWire):
        if not _positive(wire.width_mm):
            raise InvalidGeometry('wire_width', 'Wire dimensions must be greater than 0.')
        if not _positive(wire.thickness_mm):
            raise InvalidGeometry('wire_thickness', 'Wire dimensions must be greater than 0.')
    else:
        raise InvalidGeometry('wire', f"Unsupported wire type {type(wire).__name__}.")

    coil = design.coil
    if isinstance(coil, CircularCoil):
        if not _positive(coil.inner_diameter):
            raise InvalidGeometry('coil_inner_diameter', 'Coil inner diameter must be greater than 0.')
    elif isinstance(coil, RoundedRectangularCoil):
        if not _positive(coil.inner_a):
            raise InvalidGeometry('coil_inner_a', 'Coil inner dimensions must be greater than 0.')
        if not _positive(coil.inner_b):
            raise InvalidGeometry('coil_inner_b', 'Coil inner dimensions must be greater than 0.')
        if not _non_negative(coil.corner_radius):
            raise InvalidGeometry('coil_corner_radius', 'Corner radius cannot be negative.')
    else:
        raise InvalidGeometry('coil', f"Unsupported coil shape {type(coil).__name__}.")

    if not np.isfinite(design.temperature):
        raise InvalidGeometry('temperature', 'Operating temperature must be a finite number.')
