"""
Tests for coil visualization and the command-line runner
"""

import unittest
import io
import os
import sys
import tempfile
from contextlib import redirect_stdout

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np

# Add src and scripts directories to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'scripts'))

from coil_parameters import CoilDesign
from coil_parts import RectangularWire, RoundedRectangularCoil, WindingSpec
from coil_calculator import calculate_coil, sweep_corner_radius
from display_coil import CoilDisplay, display_coil, plot_inductance_sweep, rounded_rectangle_outline
import main as cli


class TestCoilDisplay(unittest.TestCase):
    """Test plotting functions"""

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.design = CoilDesign(wire=RectangularWire(width_mm=1.0, thickness_mm=0.5),
                                 coil=RoundedRectangularCoil(inner_a=20.0, inner_b=15.0, corner_radius=3.0),
                                 winding=WindingSpec(turns=5, layers=2))

    def tearDown(self):
        plt.close('all')
        self.tmpdir.cleanup()

    def test_outline_bounds(self):
        outline = rounded_rectangle_outline(20.0, 10.0, 2.0)
        self.assertAlmostEqual(np.max(outline[:, 0]), 10.0)
        self.assertAlmostEqual(np.max(outline[:, 1]), 5.0)

    def test_plot_patches(self):
        display = CoilDisplay(self.design)
        fig, (ax_top, ax_side) = display.plot()
        self.assertIsNotNone(fig)
        # Former plus one outline per turn
        self.assertEqual(len(ax_top.patches), 1 + 5)
        # One conductor per turn and layer
        self.assertEqual(len(ax_side.patches), 5 * 2)

    def test_save(self):
        path = os.path.join(self.tmpdir.name, 'coil.png')
        display_coil(self.design, calculate_coil(self.design), show=False, save_path=path)
        self.assertTrue(os.path.exists(path))

    def test_sweep_plot(self):
        sweep = sweep_corner_radius(self.design, n_points=5)
        ax = plot_inductance_sweep(sweep)
        self.assertEqual(len(ax.lines), 1)


class TestCommandLine(unittest.TestCase):
    """Test scripts/main.py"""

    def run_cli(self, *argv):
        out = io.StringIO()
        with redirect_stdout(out):
            code = cli.main(list(argv))
        return code, out.getvalue()

    def test_default_design(self):
        code, text = self.run_cli()
        self.assertEqual(code, 0)
        self.assertIn('Inductance', text)

    def test_rectangular_sweep(self):
        code, text = self.run_cli('--coil-shape', 'rectangular', '--wire-shape', 'rectangular',
                                  '-n', '5', '--sweep', '3')
        self.assertEqual(code, 0)
        self.assertIn('corner_radius', text)

    def test_invalid_design(self):
        code, _ = self.run_cli('--turns', '0')
        self.assertEqual(code, 2)

    def test_nan_wire_diameter(self):
        code, text = self.run_cli('--wire-diameter', 'nan')
        self.assertEqual(code, 2)
        self.assertEqual(text, '')

    def test_corrupt_excel(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, 'coils.xlsx')
            with open(path, 'wb') as f:
                f.write(b'PK\x03\x04' + b'garbage' * 16)
            code, _ = self.run_cli('--excel', path)
        self.assertEqual(code, 1)


if __name__ == '__main__':
    unittest.main()
