"""Hydrostatic loads on the dam, per unit length.

Both functions expect *water_density* as a weight density (kN/m³ or
lb/ft³).  Use :func:`pydam.units.to_weight_density` beforehand.

uplift_force
    U = γ_w (h_heel + h_toe) / 2 · b, linear head from heel to toe.
pressure_force
    P = γ_w h_w² / 2, resultant of the triangular pressure diagram,
    acting h_w / 3 above the base.
"""

from __future__ import annotations


def uplift_area(base_width: float, heel_uplift: float, toe_uplift: float) -> float:
    """Area of the uplift-head diagram under the base."""
    if heel_uplift == 0 and toe_uplift == 0:
        return 0.0
    return (heel_uplift + toe_uplift) / 2 * base_width


def uplift_force(
    base_width: float,
    heel_uplift: float,
    toe_uplift: float,
    water_density: float,
) -> float:
    """Resultant uplift force on the base.

    Args:
        base_width: Base width *b*.
        heel_uplift: Uplift head at the heel.
        toe_uplift: Uplift head at the toe.
        water_density: Weight density γ_w.

    Returns:
        Uplift force.  Exactly ``0.0`` when both heads are zero.
    """
    area = uplift_area(base_width, heel_uplift, toe_uplift)
    if area == 0:
        return 0.0
    return water_density * area


def pressure_force(water_level: float, water_density: float) -> float:
    """Horizontal hydrostatic force on the upstream face."""
    return water_density * water_level * water_level / 2
