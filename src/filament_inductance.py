"""
Filament Inductance Module
Self and mutual inductance of coaxial circular current filaments
"""

import logging
from dataclasses import dataclass
from typing import Final, Sequence

import numpy as np

logger = logging.getLogger(__name__)

MU0: Final[float] = 4 * np.pi * 1e-7  # Permeability of free space (H/m)

# Abramowitz & Stegun 17.3.34 / 17.3.36, |error| < 2e-8
_K_A: Final = (1.38629436112, 0.09666344259, 0.03590092383, 0.03742563713, 0.01451196212)
_K_B: Final = (0.5, 0.12498593597, 0.06880248576, 0.03328355346, 0.00441787012)
_E_C: Final = (1.0, 0.44325141463, 0.06260601220, 0.04757383546, 0.01736506451)
_E_D: Final = (0.24998368310, 0.09200180037, 0.04069697526, 0.0112720893, 0.00287315302)


@dataclass(frozen=True)
class Filament:
    """Zero cross-section circular loop on the coil axis"""
    radius: float  # m
    height: float  # m (axial position)


def _poly(coeffs: Sequence[float], x: float) -> float:
    """Horner evaluation of c0 + c1*x + ... + c4*x^4"""
    result = 0.0
    for c in reversed(coeffs):
        result = result * x + c
    return result


def _complementary(k2: float) -> float:
    if not 0.0 <= k2 < 1.0:
        raise ValueError(f"Elliptic integral parameter must lie in [0, 1), got {k2}")
    return 1.0 - k2


def elliptic_k(k2: float) -> float:
    """
    Complete elliptic integral of the first kind K(m)

    Args:
        k2: Parameter m = k², 0 <= m < 1
    """
    m1 = _complementary(k2)
    return _poly(_K_A, m1) - _poly(_K_B, m1) * np.log(m1)


def elliptic_e(k2: float) -> float:
    """
    Complete elliptic integral of the second kind E(m)

    Args:
        k2: Parameter m = k², 0 <= m < 1
    """
    m1 = _complementary(k2)
    return _poly(_E_C, m1) - m1 * np.log(m1) * _poly(_E_D, m1)


def self_inductance(radius: float, wire_radius: float) -> float:
    """
    Self inductance of a single circular loop of round wire (H)

    Args:
        radius: Loop radius (m)
        wire_radius: Conductor radius (m)
    """
    if radius <= 0 or wire_radius <= 0:
        return 0.0
    return MU0 * radius * (np.log(8 * radius / wire_radius) - 1.75)


def mutual_inductance(r1: float, r2: float, z: float) -> float:
    """
    Maxwell mutual inductance of two coaxial circular filaments (H)

    Args:
        r1: Radius of first loop (m)
        r2: Radius of second loop (m)
        z: Axial separation (m)
    """
    if r1 <= 0 or r2 <= 0:
        return 0.0
    k2 = (4 * r1 * r2) / ((r1 + r2) ** 2 + z ** 2)
    if k2 >= 1:
        # Coincident loops
        return 0.0
    k = np.sqrt(k2)
    return (MU0 * np.sqrt(r1 * r2) / k) * ((2 - k2) * elliptic_k(k2) - 2 * elliptic_e(k2))


def filament_sum(filaments: Sequence[Filament], wire_radius: float) -> float:
    """
    Total inductance of series-connected filaments: sum of self terms plus
    twice every pairwise mutual term

    Args:
        filaments: Loops making up the winding
        wire_radius: Effective conductor radius (m)
    """
    total = 0.0
    count = len(filaments)
    for i in range(count):
        fi = filaments[i]
        total += self_inductance(fi.radius, wire_radius)
        for j in range(i + 1, count):
            fj = filaments[j]
            total += 2 * mutual_inductance(fi.radius, fj.radius, abs(fi.height - fj.height))
    logger.debug("Filament sum over %d loops (%d pairs): %.6e H", count, count * (count - 1) // 2, total)
    return float(total)
