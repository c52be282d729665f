"""Water density conversion and display units.

Two water-density units are interconvertible:

``kg/m³``
    Mass density ρ.
``kN/m³``
    Weight density γ = ρ g / 1000.

``lb/ft³`` is accepted as an imperial weight density but is never
converted; the formulas assume lengths and densities share one unit
system.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)

GRAVITY = 9.81  # m/s²


class DensityUnit(str, Enum):
    """Supported water-density units."""

    KG_PER_M3 = "kg/m³"
    KN_PER_M3 = "kN/m³"
    LB_PER_FT3 = "lb/ft³"

    @property
    def is_weight_density(self) -> bool:
        return self is not DensityUnit.KG_PER_M3


class UnitSystem(str, Enum):
    """Display unit system.  Does not change any formula."""

    METRIC = "metric"
    IMPERIAL = "imperial"


@dataclass(frozen=True)
class DisplayUnits:
    """Unit suffixes used when reporting results."""

    length: str
    area: str
    force: str
    moment: str
    density: str


_DISPLAY_UNITS = {
    UnitSystem.METRIC: DisplayUnits(
        length="m", area="m²", force="kN", moment="kNm", density="kN/m³",
    ),
    UnitSystem.IMPERIAL: DisplayUnits(
        length="ft", area="ft²", force="lb", moment="lb-ft", density="lb/ft³",
    ),
}


def display_units(unit_system: UnitSystem | str) -> DisplayUnits:
    """Return the unit suffixes for *unit_system*."""
    return _DISPLAY_UNITS[UnitSystem(unit_system)]


def convert_water_density(
    density: float,
    from_unit: DensityUnit | str,
    to_unit: DensityUnit | str,
) -> float:
    """Convert a water density between ``kg/m³`` and ``kN/m³``.

    Args:
        density: Value expressed in *from_unit*.
        from_unit: Unit of *density*.
        to_unit: Target unit.

    Returns:
        The converted density.  Identical units return *density*
        untouched.  Any pair other than ``kg/m³`` ↔ ``kN/m³`` also
        returns *density* untouched and logs a warning.
    """
    from_unit = DensityUnit(from_unit)
    to_unit = DensityUnit(to_unit)

    if from_unit is to_unit:
        return density
    if from_unit is DensityUnit.KG_PER_M3 and to_unit is DensityUnit.KN_PER_M3:
        return density * GRAVITY / 1000.0
    if from_unit is DensityUnit.KN_PER_M3 and to_unit is DensityUnit.KG_PER_M3:
        return density * 1000.0 / GRAVITY

    logger.warning(
        "No conversion from %s to %s; density %r returned unchanged",
        from_unit.value, to_unit.value, density,
    )
    return density


def to_weight_density(
    density: float,
    unit: DensityUnit | str,
) -> tuple[float, DensityUnit]:
    """Express *density* as a weight density.

    Mass densities (``kg/m³``) are converted to ``kN/m³``; weight
    densities pass through.

    Returns:
        ``(value, unit)`` with *unit* a weight-density unit.
    """
    unit = DensityUnit(unit)
    if unit.is_weight_density:
        return density, unit
    return (
        convert_water_density(density, unit, DensityUnit.KN_PER_M3),
        DensityUnit.KN_PER_M3,
    )
