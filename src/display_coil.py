"""
Coil Display Module
Visualizes coil winding layout and corner-radius sweeps
"""

import logging
from typing import Optional

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Circle, Rectangle, Polygon
import pandas as pd

from coil_parameters import CoilDesign, CoilResult
from coil_geometry import CoilGeometry
from coil_parts import RoundWire

logger = logging.getLogger(__name__)


def rounded_rectangle_outline(a: float, b: float, r: float, n_arc: int = 16) -> np.ndarray:
    """
    Closed outline of a rounded rectangle centred on the origin

    Args:
        a, b: Side lengths (mm)
        r: Corner radius (mm), limited to half the short side
        n_arc: Points per corner arc

    Returns:
        (N, 2) array of x, y coordinates
    """
    r = min(max(r, 0.0), min(a, b) / 2)
    cx, cy = a / 2 - r, b / 2 - r
    points = []
    # Corners counter-clockwise starting top-right
    for (sx, sy), start in zip([(1, 1), (-1, 1), (-1, -1), (1, -1)],
                               [0, np.pi / 2, np.pi, 3 * np.pi / 2]):
        theta = np.linspace(start, start + np.pi / 2, n_arc)
        points.append(np.column_stack([sx * cx + r * np.cos(theta),
                                       sy * cy + r * np.sin(theta)]))
    return np.vstack(points)


class CoilDisplay:
    """
    Visualize coil winding
    Top view of every turn and axial cross-section of the wire bundle
    """

    def __init__(self, design: CoilDesign, result: Optional[CoilResult] = None):
        """
        Initialize coil display

        Args:
            design: Coil design to draw
            result: Optional calculated result shown in the annotation box
        """
        self.design = design
        self.result = result
        self.geometry = CoilGeometry(design)
        self.fig = None
        self.ax_top = None
        self.ax_side = None

    def plot(self, show_dimensions: bool = True):
        """
        Create top view and cross-section plots

        Args:
            show_dimensions: Whether to display dimension annotations
        """
        self.fig, (self.ax_top, self.ax_side) = plt.subplots(1, 2, figsize=(14, 7))
        for ax in (self.ax_top, self.ax_side):
            ax.set_aspect('equal')
            ax.grid(True, alpha=0.3)

        self._draw_top_view()
        self._draw_cross_section()

        if show_dimensions:
            self.ax_top.set_xlabel('X (mm)', fontsize=12)
            self.ax_top.set_ylabel('Y (mm)', fontsize=12)
            self.ax_top.set_title('Coil - Top View', fontsize=14, fontweight='bold')
            self.ax_side.set_xlabel('Radius (mm)', fontsize=12)
            self.ax_side.set_ylabel('Height (mm)', fontsize=12)
            self.ax_side.set_title('Winding Cross Section', fontsize=14, fontweight='bold')
            self._draw_dimensions()

        plt.tight_layout()
        return self.fig, (self.ax_top, self.ax_side)

    def _turn_outline(self, offset: float) -> np.ndarray:
        """Centre line of the turn at a radial offset from the former"""
        coil = self.design.coil
        if self.geometry.is_circular:
            d = coil.equivalent_diameter() + 2 * offset
            return rounded_rectangle_outline(d, d, d / 2, n_arc=32)
        return rounded_rectangle_outline(coil.inner_a + 2 * offset, coil.inner_b + 2 * offset,
                                         coil.corner_radius + offset)

    def _draw_top_view(self):
        """Draw former outline and the centre line of each turn"""
        outline = self._turn_outline(0.0)
        self.ax_top.add_patch(Polygon(outline, closed=True, facecolor='whitesmoke',
                                      edgecolor='black', linewidth=1.5, zorder=1))

        for offset in self.geometry.turn_offsets():
            turn = self._turn_outline(offset)
            self.ax_top.add_patch(Polygon(turn, closed=True, fill=False,
                                          edgecolor='darkorange', linewidth=1.0, zorder=2))

        limit = np.max(np.abs(self._turn_outline(self.geometry.envelope().radial_thickness))) * 1.1
        self.ax_top.set_xlim(-limit, limit)
        self.ax_top.set_ylim(-limit, limit)
        self.ax_top.plot(0, 0, 'k+', markersize=8)

    def _draw_cross_section(self):
        """Draw every conductor in the r-z half plane"""
        wire = self.design.wire
        inner_r = self.design.coil.equivalent_diameter() / 2
        for loop in self.geometry.filaments():
            r = loop.radius * 1000
            z = loop.height * 1000 + wire.thickness / 2
            if isinstance(wire, RoundWire):
                patch = Circle((r, z), wire.diameter / 2, facecolor='peru', edgecolor='saddlebrown')
            else:
                patch = Rectangle((r - wire.width / 2, z - wire.thickness / 2), wire.width,
                                  wire.thickness, facecolor='peru', edgecolor='saddlebrown')
            self.ax_side.add_patch(patch)

        envelope = self.geometry.envelope()
        self.ax_side.axvline(x=inner_r, color='k', linewidth=1, linestyle='--', alpha=0.6)
        margin = max(envelope.radial_thickness, envelope.height) * 0.2
        self.ax_side.set_xlim(inner_r - margin, inner_r + envelope.radial_thickness + margin)
        self.ax_side.set_ylim(-margin, envelope.height + margin)

    def _draw_dimensions(self):
        """Add dimension annotations"""
        envelope = self.geometry.envelope()
        winding = self.design.winding
        dims = [
            f"Size: {envelope.describe()}",
            f"Turns x Layers: {winding.turns} x {winding.layers}",
            f"Wire: {self.design.wire!r}",
        ]
        if self.result is not None:
            dims.append(f"L: {self.result.inductance * 1e6:.3f} µH")
            dims.append(f"R: {self.result.dc_resistance:.4f} Ohm")

        self.ax_top.text(0.02, 0.98, "\n".join(dims), transform=self.ax_top.transAxes,
                         fontsize=9, va='top',
                         bbox=dict(boxstyle='round', facecolor='wheat', alpha=0.8))

    def save(self, filename: str, dpi: int = 300):
        """
        Save plot to file

        Args:
            filename: Output filename (e.g., 'coil_layout.png')
            dpi: Resolution in dots per inch
        """
        if self.fig:
            self.fig.savefig(filename, dpi=dpi, bbox_inches='tight')
            logger.info("Coil plot saved to: %s", filename)

    def show(self):
        """Display the plot"""
        if self.fig:
            plt.show()


def plot_inductance_sweep(sweep: pd.DataFrame, ax=None):
    """
    Plot inductance against corner radius

    Args:
        sweep: Output of coil_calculator.sweep_corner_radius
        ax: Optional axes to draw into

    Returns:
        The axes used
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 5))
    ax.plot(sweep['corner_radius'], sweep['inductance'] * 1e6, 'o-', color='navy')
    ax.set_xlabel('Corner radius (mm)')
    ax.set_ylabel('Inductance (µH)')
    ax.set_title('Inductance vs Corner Radius')
    ax.grid(True, alpha=0.3)
    return ax


def display_coil(design: CoilDesign, result: Optional[CoilResult] = None,
                 show: bool = True, save_path: Optional[str] = None):
    """
    Convenience function to display coil geometry

    Args:
        design: Coil design to visualize
        result: Optional calculation result for the annotation box
        show: Whether to display the plot interactively
        save_path: Optional path to save the plot

    Returns:
        CoilDisplay instance
    """
    display = CoilDisplay(design, result)
    display.plot()

    if save_path:
        display.save(save_path)

    if show:
        display.show()

    return display
