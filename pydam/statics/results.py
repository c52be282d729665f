"""Result records of a stability calculation."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydam.statics.inputs import SolveFor
from pydam.statics.safety import SafetyStatus, evaluate_safety_status
from pydam.units.conversion import UnitSystem


@dataclass(frozen=True)
class CalculationStep:
    """One line of the derivation trace.

    Attributes:
        title: Short name of the quantity.
        formula: Symbolic formula.
        explanation: The formula with the actual numbers substituted.
        value: Resulting value.
        unit: Display unit of *value* (empty for dimensionless).
    """

    title: str
    formula: str
    explanation: str
    value: float
    unit: str = ""


@dataclass(frozen=True)
class SolvedParameter:
    """Outcome of a solve run.

    Attributes:
        name: The solved input.
        value: Value substituted into the final calculation.
        target_safety_factor: Safety factor that was aimed for.
        method: ``"closed_form"``, ``"bisection"`` or ``"brentq"``.
        iterations: Root-finder iterations (0 for closed form).
        converged: Whether the target was met within tolerance.
    """

    name: SolveFor
    value: float
    target_safety_factor: float
    method: str
    iterations: int = 0
    converged: bool = True


@dataclass(frozen=True)
class IntermediateResults:
    """Forces, moments and resultant location of one section.

    Forces and moments are per unit length of dam.  Moments are taken
    about the heel; ``location_of_resultant`` is measured from the heel.
    """

    volume: float
    self_weight: float
    center_of_gravity: float
    hydrostatic_uplift: float
    hydrostatic_pressure: float
    vertical_reaction: float
    horizontal_reaction: float
    righting_moment: float
    pressure_moment: float
    uplift_moment: float
    overturning_moment: float
    location_of_resultant: float


@dataclass(frozen=True)
class StabilityResults(IntermediateResults):
    """Complete output of :func:`pydam.analysis.calculate_stability`.

    Attributes:
        safety_factor_overturning: Righting over overturning moment.
        safety_factor_sliding: μ R_y / R_x, or ``None`` when not
            evaluated (no friction coefficient, or no horizontal load).
        steps: Ordered derivation trace.
        solved_parameter: Set in solve mode.
        unit_system: Units used for the step labels.
    """

    safety_factor_overturning: float
    safety_factor_sliding: float | None = None
    steps: tuple[CalculationStep, ...] = ()
    solved_parameter: SolvedParameter | None = None
    unit_system: UnitSystem = UnitSystem.METRIC

    @property
    def overturning_status(self) -> SafetyStatus:
        return evaluate_safety_status(self.safety_factor_overturning)

    @property
    def sliding_status(self) -> SafetyStatus | None:
        if self.safety_factor_sliding is None:
            return None
        return evaluate_safety_status(self.safety_factor_sliding)

    def to_dict(self) -> dict[str, Any]:
        """Plain-Python view (enums as their values) for serialization."""
        return _plain(dataclasses.asdict(self))


def _plain(obj: Any) -> Any:
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, dict):
        return {k: _plain(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_plain(v) for v in obj]
    return obj
