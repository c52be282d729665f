"""Statics: input and result records, equilibrium and safety factors.

Example::

    from pydam.statics import DamInputs, evaluate

    inputs = DamInputs(
        profile="rectangle",
        base_width=10, height=8, water_level=6,
        concrete_density=23.5, water_density=9.81,
        friction_coefficient=0.7,
    )
    results = evaluate(inputs)
    results.safety_factor_overturning  # 26.62
"""

from pydam.statics.inputs import DamInputs, SolveFor, SolveRequest
from pydam.statics.results import (
    CalculationStep,
    IntermediateResults,
    SolvedParameter,
    StabilityResults,
)
from pydam.statics.safety import SafetyStatus, evaluate_safety_status, format_number
from pydam.statics.equilibrium import (
    evaluate,
    intermediate,
    reactions,
    overturning_safety_factor,
    sliding_safety_factor,
)

__all__ = [
    "DamInputs",
    "SolveFor",
    "SolveRequest",
    "CalculationStep",
    "IntermediateResults",
    "SolvedParameter",
    "StabilityResults",
    "SafetyStatus",
    "evaluate_safety_status",
    "format_number",
    "evaluate",
    "intermediate",
    "reactions",
    "overturning_safety_factor",
    "sliding_safety_factor",
]
