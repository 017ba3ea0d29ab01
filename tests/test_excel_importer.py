"""
Tests for Excel design import and export
"""

import unittest
import os
import sys
import tempfile

import pandas as pd

# Add src directory to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from coil_parameters import CoilDesign
from coil_parts import RectangularWire, RoundedRectangularCoil, WindingSpec, RoundWire, CircularCoil
from excel_importer import (ExcelParameterImporter, design_from_parameters,
                            export_designs_to_excel, load_designs_from_excel)
from validation import InvalidGeometry


class TestDesignFromParameters(unittest.TestCase):
    """Test conversion of flat parameters into designs"""

    def test_defaults(self):
        self.assertEqual(design_from_parameters({}), CoilDesign())

    def test_round_trip_dict(self):
        design = CoilDesign(material='silver',
                            wire=RectangularWire(width_mm=1.0, thickness_mm=0.5),
                            coil=RoundedRectangularCoil(inner_a=20.0, inner_b=15.0, corner_radius=2.5),
                            winding=WindingSpec(turns=5, layers=2, horizontal_spacing=0.1,
                                                vertical_spacing=0.2),
                            temperature=80.0)
        self.assertEqual(design_from_parameters(design.to_dict()), design)

    def test_numeric_strings(self):
        design = design_from_parameters({'winding_turns': '12', 'wire_diameter': '0.8'})
        self.assertEqual(design.winding.turns, 12)
        self.assertEqual(design.wire, RoundWire(diameter=0.8))

    def test_non_numeric_count_rejected(self):
        with self.assertRaises(InvalidGeometry) as ctx:
            design_from_parameters({'winding_turns': 'ten'})
        self.assertEqual(ctx.exception.field, 'winding_turns')

    def test_fractional_count_rejected(self):
        for name in ('winding_turns', 'winding_layers'):
            with self.subTest(name=name):
                with self.assertRaises(InvalidGeometry) as ctx:
                    design_from_parameters({name: 2.7})
                self.assertEqual(ctx.exception.field, name)

    def test_whole_float_count_accepted(self):
        self.assertEqual(design_from_parameters({'winding_layers': 3.0}).winding.layers, 3)

    def test_non_numeric_dimension_rejected(self):
        with self.assertRaises(InvalidGeometry) as ctx:
            design_from_parameters({'wire_diameter': 'thin'})
        self.assertEqual(ctx.exception.field, 'wire_diameter')


class TestExcelImporter(unittest.TestCase):
    """Test reading designs from workbooks"""

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmpdir.name, 'coils.xlsx')

    def tearDown(self):
        self.tmpdir.cleanup()

    def test_export_then_import(self):
        designs = {
            'circular': CoilDesign(),
            'flat': CoilDesign(material='aluminum',
                               wire=RectangularWire(width_mm=2.0, thickness_mm=0.3),
                               coil=RoundedRectangularCoil(inner_a=40.0, inner_b=25.0, corner_radius=4.0),
                               winding=WindingSpec(turns=8, layers=3, vertical_spacing=0.05)),
        }
        export_designs_to_excel(designs, self.path)
        loaded = load_designs_from_excel(self.path)
        self.assertEqual(set(loaded), {'circular', 'flat'})
        self.assertEqual(loaded['circular'], designs['circular'])
        self.assertEqual(loaded['flat'], designs['flat'])

    def test_unknown_parameters_ignored(self):
        rows = pd.DataFrame([
            {'Parameter': 'coil_inner_diameter', 'Units': 'mm', 'Value': 25},
            {'Parameter': 'colour', 'Units': '', 'Value': 'red'},
            {'Parameter': 'winding_turns', 'Units': '', 'Value': 4},
        ])
        with pd.ExcelWriter(self.path) as writer:
            rows.to_excel(writer, sheet_name='coil', index=False)

        importer = ExcelParameterImporter(self.path)
        self.assertTrue(importer.load_excel())
        design = importer.import_design('coil')
        self.assertEqual(design.coil, CircularCoil(inner_diameter=25.0))
        self.assertEqual(design.winding.turns, 4)

    def test_missing_file(self):
        self.assertIsNone(load_designs_from_excel(os.path.join(self.tmpdir.name, 'missing.xlsx')))
        self.assertFalse(ExcelParameterImporter(os.path.join(self.tmpdir.name, 'missing.xlsx')).load_excel())

    def test_corrupt_workbook(self):
        with open(self.path, 'wb') as f:
            f.write(b'PK\x03\x04' + b'not really a workbook' * 8)
        self.assertFalse(ExcelParameterImporter(self.path).load_excel())
        self.assertEqual(load_designs_from_excel(self.path), {})

    def test_invalid_sheet_skipped(self):
        good = pd.DataFrame([{'Parameter': 'winding_turns', 'Units': '', 'Value': 4}])
        bad = pd.DataFrame([{'Parameter': 'winding_turns', 'Units': '', 'Value': 'ten'}])
        with pd.ExcelWriter(self.path) as writer:
            good.to_excel(writer, sheet_name='good', index=False)
            bad.to_excel(writer, sheet_name='bad', index=False)

        with self.assertLogs('excel_importer', level='WARNING'):
            loaded = load_designs_from_excel(self.path)
        self.assertEqual(set(loaded), {'good'})
        self.assertEqual(loaded['good'].winding.turns, 4)


if __name__ == '__main__':
    unittest.main()
