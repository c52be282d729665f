"""Default input values.

Seeds for a new calculation form.  None of these values is assumed by
the engine; change them freely.

Usage::

    from pydam.materials import default_water_density
    default_water_density("kg/m³")  # 1000.0
"""

from __future__ import annotations

from typing import Any

from pydam.units.conversion import DensityUnit, UnitSystem

# ------------------------------------------------------------------
# Concrete
# ------------------------------------------------------------------

CONCRETE_DENSITY = {
    UnitSystem.METRIC: 23.5,       # kN/m³
    UnitSystem.IMPERIAL: 149.76,   # lb/ft³
}

# ------------------------------------------------------------------
# Water
# ------------------------------------------------------------------

WATER_DENSITY = {
    DensityUnit.KN_PER_M3: 9.81,
    DensityUnit.KG_PER_M3: 1000.0,
    DensityUnit.LB_PER_FT3: 62.4,
}

# ------------------------------------------------------------------
# Foundation interface
# ------------------------------------------------------------------

FRICTION_COEFFICIENT = 0.7


def default_concrete_density(unit_system: UnitSystem | str = UnitSystem.METRIC) -> float:
    """Typical concrete unit weight for *unit_system*."""
    return CONCRETE_DENSITY[UnitSystem(unit_system)]


def default_water_density(unit: DensityUnit | str = DensityUnit.KN_PER_M3) -> float:
    """Fresh water density expressed in *unit*."""
    return WATER_DENSITY[DensityUnit(unit)]


def default_inputs(
    profile: Any = "rectangle",
    unit_system: UnitSystem | str = UnitSystem.METRIC,
) -> dict[str, Any]:
    """Starting values for a form, keyed like :class:`~pydam.statics.DamInputs`.

    Dimensions are left out; only densities, friction and uplift are
    seeded.
    """
    unit_system = UnitSystem(unit_system)
    water_unit = (
        DensityUnit.KN_PER_M3
        if unit_system is UnitSystem.METRIC
        else DensityUnit.LB_PER_FT3
    )
    return {
        "profile": profile,
        "concrete_density": default_concrete_density(unit_system),
        "water_density": default_water_density(water_unit),
        "water_density_unit": water_unit,
        "friction_coefficient": FRICTION_COEFFICIENT,
        "heel_uplift": 0.0,
        "toe_uplift": 0.0,
        "unit_system": unit_system,
    }
