"""Loads: hydrostatic uplift and pressure."""

from pydam.loads.hydrostatic import uplift_area, uplift_force, pressure_force

__all__ = [
    "uplift_area",
    "uplift_force",
    "pressure_force",
]
