"""
Excel Parameter Importer
Reads coil designs from Excel files, one design per sheet
"""

import logging
import os
import zipfile
from typing import Any, Dict, Optional

import pandas as pd
from openpyxl.utils.exceptions import InvalidFileException

from coil_parameters import CoilDesign
from coil_parts import (RoundWire, RectangularWire, CircularCoil,
                        RoundedRectangularCoil, WindingSpec)
from validation import InvalidGeometry

logger = logging.getLogger(__name__)

PARAMETER_UNITS = {
    'material': '',
    'temperature': 'degC',
    'wire_shape': '',
    'wire_diameter': 'mm',
    'wire_width': 'mm',
    'wire_thickness': 'mm',
    'coil_shape': '',
    'coil_inner_diameter': 'mm',
    'coil_inner_a': 'mm',
    'coil_inner_b': 'mm',
    'coil_corner_radius': 'mm',
    'winding_turns': '',
    'winding_layers': '',
    'winding_horizontal_spacing': 'mm',
    'winding_vertical_spacing': 'mm',
}


class ExcelParameterImporter:
    """
    Import coil designs from an Excel file
    Each sheet holds one design as Parameter | Units | Value rows
    """

    def __init__(self, excel_path: str):
        """
        Initialize importer with path to Excel file

        Args:
            excel_path: Path to Excel file containing parameters
        """
        self.excel_path = excel_path
        self.data: Dict[str, pd.DataFrame] = {}

    def load_excel(self) -> bool:
        """
        Load all sheets from Excel file

        Returns:
            True if successful, False otherwise
        """
        try:
            xl_file = pd.ExcelFile(self.excel_path)
            for sheet_name in xl_file.sheet_names:
                self.data[sheet_name] = xl_file.parse(sheet_name)
            return True
        except (OSError, ValueError, zipfile.BadZipFile, InvalidFileException) as e:
            logger.error("Error loading Excel file %s: %s", self.excel_path, e)
            return False

    def _read_parameter_sheet(self, sheet_name: str) -> Dict[str, Any]:
        """
        Read a parameter sheet with Parameter, Units, Value columns

        Args:
            sheet_name: Name of the sheet to read

        Returns:
            Dictionary of parameter: value pairs
        """
        df = self.data.get(sheet_name)
        if df is None:
            return {}

        params = {}
        for _, row in df.iterrows():
            param_col = row.get('Parameter')
            value = row.get('Value')

            if pd.notna(param_col) and pd.notna(value):
                param_name = str(param_col).strip().lower()
                if param_name not in PARAMETER_UNITS:
                    logger.warning("Sheet %s: ignoring unknown parameter '%s'", sheet_name, param_name)
                    continue

                if isinstance(value, str):
                    value = value.strip()
                    try:
                        value = float(value)
                    except ValueError:
                        pass  # Keep as string

                params[param_name] = value

        return params

    def import_design(self, sheet_name: str) -> CoilDesign:
        """Build a coil design from one parameter sheet, defaults fill the gaps"""
        params = self._read_parameter_sheet(sheet_name)
        return design_from_parameters(params)

    def import_all(self) -> Dict[str, CoilDesign]:
        """
        Import every sheet of the Excel file
        Sheets with unreadable values are logged and skipped

        Returns:
            Dictionary of sheet name: CoilDesign
        """
        if not self.load_excel():
            return {}

        designs = {}
        for name in self.data:
            try:
                designs[name] = self.import_design(name)
            except InvalidGeometry as e:
                logger.warning("Sheet %s: skipped, invalid %s: %s", name, e.field, e)
        logger.info("Imported %d designs from %s", len(designs), os.path.basename(self.excel_path))
        return designs


def _number(params: Dict[str, Any], name: str, default: float) -> float:
    value = params.get(name, default)
    try:
        return float(value)
    except (TypeError, ValueError):
        raise InvalidGeometry(name, f"Parameter {name} must be a number, got {value!r}.") from None


def _count(params: Dict[str, Any], name: str, default: int) -> int:
    """Whole-number parameter such as a turn or layer count"""
    value = _number(params, name, default)
    if not value.is_integer():
        raise InvalidGeometry(name, f"Parameter {name} must be a whole number, got {value!r}.")
    return int(value)


def design_from_parameters(params: Dict[str, Any]) -> CoilDesign:
    """
    Create a CoilDesign from flat parameter names (as produced by CoilDesign.to_dict)

    Args:
        params: Parameter name: value pairs, missing entries take CoilDesign defaults

    Raises:
        InvalidGeometry: for a non-numeric value or a fractional turn or layer count
    """
    default = CoilDesign()

    wire_shape = str(params.get('wire_shape', 'round')).lower()
    if wire_shape == 'rectangular':
        wire = RectangularWire(width_mm=_number(params, 'wire_width', 1.0),
                               thickness_mm=_number(params, 'wire_thickness', 0.5))
    else:
        wire = RoundWire(diameter=_number(params, 'wire_diameter', default.wire.width))

    coil_shape = str(params.get('coil_shape', 'circular')).lower()
    if coil_shape == 'rectangular':
        coil = RoundedRectangularCoil(inner_a=_number(params, 'coil_inner_a', 20.0),
                                      inner_b=_number(params, 'coil_inner_b', 15.0),
                                      corner_radius=_number(params, 'coil_corner_radius', 0.0))
    else:
        coil = CircularCoil(inner_diameter=_number(params, 'coil_inner_diameter',
                                                   default.coil.equivalent_diameter()))

    winding = WindingSpec(
        turns=_count(params, 'winding_turns', default.winding.turns),
        layers=_count(params, 'winding_layers', default.winding.layers),
        horizontal_spacing=_number(params, 'winding_horizontal_spacing', default.winding.horizontal_spacing),
        vertical_spacing=_number(params, 'winding_vertical_spacing', default.winding.vertical_spacing),
    )

    return CoilDesign(
        material=str(params.get('material', default.material)).lower(),
        wire=wire,
        coil=coil,
        winding=winding,
        temperature=_number(params, 'temperature', default.temperature),
    )


def export_designs_to_excel(designs: Dict[str, CoilDesign], excel_path: str) -> None:
    """
    Write designs as parameter sheets readable by ExcelParameterImporter

    Args:
        designs: Sheet name: CoilDesign
        excel_path: Output .xlsx path
    """
    with pd.ExcelWriter(excel_path) as writer:
        for name, design in designs.items():
            rows = [{'Parameter': k, 'Units': PARAMETER_UNITS.get(k, ''), 'Value': v}
                    for k, v in design.to_dict().items()]
            pd.DataFrame(rows).to_excel(writer, sheet_name=name, index=False)


def load_designs_from_excel(excel_path: str) -> Optional[Dict[str, CoilDesign]]:
    """
    Load every design in an Excel file

    Returns:
        Dictionary of designs or None if the file does not exist
    """
    if not os.path.exists(excel_path):
        logger.error("Excel file not found at %s", excel_path)
        return None

    importer = ExcelParameterImporter(excel_path)
    return importer.import_all()
