"""
Coil Designer - Command Line
Calculates coil properties from command-line parameters or an Excel file
"""

import sys
import os
# Add src directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))

import argparse
import logging

from coil_parameters import CoilDesign
from coil_parts import (MATERIALS, RoundWire, RectangularWire, CircularCoil,
                        RoundedRectangularCoil, WindingSpec)
from coil_calculator import calculate_coil, run_batch, sweep_corner_radius
from excel_importer import load_designs_from_excel
from validation import InvalidGeometry


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Coil resistance, weight and inductance calculator")
    parser.add_argument('--excel', help="Excel file with one design per sheet")
    parser.add_argument('--material', default='copper', choices=sorted(MATERIALS))
    parser.add_argument('--temperature', type=float, default=20.0, help="Operating temperature (°C)")

    wire = parser.add_argument_group('wire (mm)')
    wire.add_argument('--wire-shape', choices=['round', 'rectangular'], default='round')
    wire.add_argument('--wire-diameter', type=float, default=0.5)
    wire.add_argument('--wire-width', type=float, default=1.0)
    wire.add_argument('--wire-thickness', type=float, default=0.5)

    coil = parser.add_argument_group('coil former (mm)')
    coil.add_argument('--coil-shape', choices=['circular', 'rectangular'], default='circular')
    coil.add_argument('--inner-diameter', type=float, default=10.0)
    coil.add_argument('--inner-a', type=float, default=20.0)
    coil.add_argument('--inner-b', type=float, default=15.0)
    coil.add_argument('--corner-radius', type=float, default=0.0)

    winding = parser.add_argument_group('winding')
    winding.add_argument('-n', '--turns', type=int, default=10)
    winding.add_argument('-m', '--layers', type=int, default=1)
    winding.add_argument('--horizontal-spacing', type=float, default=0.1, help="mm")
    winding.add_argument('--vertical-spacing', type=float, default=0.0, help="mm")

    parser.add_argument('--sweep', type=int, metavar='N',
                        help="Print an N-point corner radius sweep (rectangular coils)")
    parser.add_argument('--plot', metavar='PATH', help="Save a drawing of the coil")
    parser.add_argument('-v', '--verbose', action='store_true')
    return parser


def design_from_args(args) -> CoilDesign:
    """Build a CoilDesign from parsed arguments"""
    if args.wire_shape == 'rectangular':
        wire = RectangularWire(width_mm=args.wire_width, thickness_mm=args.wire_thickness)
    else:
        wire = RoundWire(diameter=args.wire_diameter)

    if args.coil_shape == 'rectangular':
        coil = RoundedRectangularCoil(inner_a=args.inner_a, inner_b=args.inner_b,
                                      corner_radius=args.corner_radius)
    else:
        coil = CircularCoil(inner_diameter=args.inner_diameter)

    winding = WindingSpec(turns=args.turns, layers=args.layers,
                          horizontal_spacing=args.horizontal_spacing,
                          vertical_spacing=args.vertical_spacing)
    return CoilDesign(material=args.material, wire=wire, coil=coil, winding=winding,
                      temperature=args.temperature)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s - %(levelname)s - %(message)s')

    if args.excel:
        designs = load_designs_from_excel(args.excel)
        if not designs:
            return 1
        table = run_batch(designs)
        print(table.to_string())
        return 0

    design = design_from_args(args)
    try:
        result = calculate_coil(design)
    except InvalidGeometry as e:
        logging.error("Invalid %s: %s", e.field, e)
        return 2

    print(result.format_output())

    if args.sweep:
        try:
            print(sweep_corner_radius(design, args.sweep).to_string(index=False))
        except InvalidGeometry as e:
            logging.error("%s", e)
            return 2

    if args.plot:
        from display_coil import display_coil
        display_coil(design, result, show=False, save_path=args.plot)

    return 0


if __name__ == "__main__":
    sys.exit(main())
