"""
pydam: sliding and overturning stability of gravity dam sections.

Subpackages
-----------
units
    Water-density conversion and display units.
geometry
    Section profiles, areas and centroids.
loads
    Hydrostatic uplift and pressure.
materials
    Default densities and friction coefficient.
statics
    Input/result records, equilibrium and safety factors.
solver
    Inverse analysis for a target safety factor.
analysis
    Full calculation pipeline.
visualization
    Section plotting.
"""

from pydam import (
    units,
    geometry,
    loads,
    materials,
    statics,
    solver,
    analysis,
    visualization,
)
from pydam.analysis import calculate_stability
from pydam.statics import DamInputs, SolveFor, SolveRequest, StabilityResults

__version__ = "0.1.0"

__all__ = [
    "units",
    "geometry",
    "loads",
    "materials",
    "statics",
    "solver",
    "analysis",
    "visualization",
    "calculate_stability",
    "DamInputs",
    "SolveFor",
    "SolveRequest",
    "StabilityResults",
]
