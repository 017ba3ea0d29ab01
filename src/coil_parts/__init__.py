"""
Coil Parts Module
Component classes describing a wound coil: material, wire, former and winding
"""

from .material import Material, MATERIALS, get_material
from .wire import WireSpec, RoundWire, RectangularWire
from .coil_form import CoilForm, CircularCoil, RoundedRectangularCoil
from .winding import WindingSpec

__all__ = [
    'Material', 'MATERIALS', 'get_material',
    'WireSpec', 'RoundWire', 'RectangularWire',
    'CoilForm', 'CircularCoil', 'RoundedRectangularCoil',
    'WindingSpec',
]
