"""End-to-end stability calculation.

:func:`calculate_stability` is the single entry point used by the
presentation layer.  Without a solve request it is :func:`evaluate`.
With one, the unknown is solved first, substituted into a copy of the
inputs, and the full calculation is re-run on that copy, so every
reported force, moment and safety factor corresponds to the solved
value.  A step describing the numerical method is placed first in the
derivation trace.
"""

from __future__ import annotations

import dataclasses
import logging

from pydam.solver.inverse import (
    BASE_WIDTH_FLOOR,
    BASE_WIDTH_HEIGHT_RATIO,
    SOLVER_MAX_ITER,
    SOLVER_TOLERANCE,
    SolveResult,
    find_parameter,
)
from pydam.statics.equilibrium import evaluate
from pydam.statics.inputs import DamInputs, SolveFor, SolveRequest
from pydam.statics.results import CalculationStep, SolvedParameter, StabilityResults
from pydam.statics.safety import format_number as fmt
from pydam.units.conversion import display_units

logger = logging.getLogger(__name__)


def calculate_stability(
    inputs: DamInputs,
    method: str = "bisection",
) -> StabilityResults:
    """Compute forces, moments and safety factors for one section.

    Args:
        inputs: Validated inputs, optionally carrying a solve request.
        method: Root finder for water level / base width solves,
            ``"bisection"`` or ``"brentq"``.

    Returns:
        :class:`~pydam.statics.StabilityResults`.

    Raises:
        MissingDimensionError: Trapezoid without crest width, or a
            fixed length missing.
        UnsupportedProfileError: Unknown profile.
        DegenerateReactionError: Zero vertical reaction.
    """
    request = inputs.solve
    if request is None:
        return evaluate(inputs)

    found = find_parameter(
        inputs, request.unknown, request.target_safety_factor, method=method
    )
    solved_inputs = inputs.replace(**{request.unknown.value: found.value}, solve=None)
    logger.debug("Substituted %s = %.6g", request.unknown.value, found.value)

    results = evaluate(solved_inputs)
    method_step = _method_step(inputs, request, found)

    return dataclasses.replace(
        results,
        steps=(method_step, *results.steps),
        solved_parameter=SolvedParameter(
            name=request.unknown,
            value=found.value,
            target_safety_factor=request.target_safety_factor,
            method=found.method,
            iterations=found.iterations,
            converged=found.converged,
        ),
    )


def _method_step(
    inputs: DamInputs,
    request: SolveRequest,
    found: SolveResult,
) -> CalculationStep:
    u = display_units(inputs.unit_system)
    target = fmt(request.target_safety_factor)
    name = request.unknown.label

    if request.unknown is SolveFor.FRICTION_COEFFICIENT:
        if found.safety_factor is None:
            explanation = (
                f"No horizontal thrust (Rx = 0), so the sliding factor is not "
                f"applicable and FS_s = {target} cannot be targeted: "
                f"μ = {fmt(found.value, 4)}"
            )
        else:
            explanation = (
                f"Sliding factor is linear in μ, so it is solved directly for "
                f"FS_s = {target}: μ = {fmt(found.value, 4)}"
            )
            if not found.converged:
                explanation += " (negative: uplift exceeds self weight)"
        return CalculationStep(
            f"Solve for {name}",
            "μ = FS_target × Rx / Ry",
            explanation,
            found.value,
        )

    if request.unknown is SolveFor.WATER_LEVEL:
        bracket = f"[0, {fmt(inputs.height)}] {u.length}"
    else:
        bracket = (
            f"[{fmt(BASE_WIDTH_FLOOR)}, "
            f"{fmt(inputs.height * BASE_WIDTH_HEIGHT_RATIO)}] {u.length}"
        )
    method = "Bisection" if found.method == "bisection" else "Brent's method"
    outcome = (
        f"converged in {found.iterations} iterations"
        if found.converged
        else f"did not reach the target within {SOLVER_MAX_ITER} iterations; "
        f"best estimate used (FS_o = {fmt(found.safety_factor)})"
    )
    return CalculationStep(
        f"Solve for {name}",
        f"find x in {bracket} with |FS_o(x) − {target}| < {SOLVER_TOLERANCE}",
        f"{method} on the overturning safety factor {outcome}: "
        f"{request.unknown.value} = {fmt(found.value, 4)} {u.length}",
        found.value,
        u.length,
    )
