"""Units: water-density conversion and display suffixes."""

from pydam.units.conversion import (
    GRAVITY,
    DensityUnit,
    UnitSystem,
    DisplayUnits,
    display_units,
    convert_water_density,
    to_weight_density,
)

__all__ = [
    "GRAVITY",
    "DensityUnit",
    "UnitSystem",
    "DisplayUnits",
    "display_units",
    "convert_water_density",
    "to_weight_density",
]
