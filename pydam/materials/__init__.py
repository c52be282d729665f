"""Materials: default densities and friction coefficient."""

from pydam.materials.library import (
    CONCRETE_DENSITY,
    WATER_DENSITY,
    FRICTION_COEFFICIENT,
    default_concrete_density,
    default_water_density,
    default_inputs,
)

__all__ = [
    "CONCRETE_DENSITY",
    "WATER_DENSITY",
    "FRICTION_COEFFICIENT",
    "default_concrete_density",
    "default_water_density",
    "default_inputs",
]
