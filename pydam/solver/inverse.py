"""Inverse stability analysis: solve for one unknown input.

Given a target safety factor, find the value of one input that
achieves it while every other input stays fixed:

friction_coefficient
    Closed form against the sliding factor:
    μ = FS_target · R_x / R_y.  Without water thrust (R_x = 0) the
    sliding factor does not apply; μ = 0 is returned unconverged.  A
    negative μ (uplift exceeding self weight) is also unconverged.

water_level
    Bisection on the overturning factor over [0, h].  Raising the
    water level lowers the factor.

base_width
    Bisection on the overturning factor over [0.1, 10 h].  Widening
    the base raises the factor.

Bisection evaluates the bracket midpoint, stops once the factor is
within ``tol`` of the target, and otherwise halves the bracket for at
most ``max_iter`` iterations.  It never raises for an unreachable
target: the midpoint converges towards a bracket end and the result is
flagged ``converged=False``.

``method="brentq"`` uses :func:`scipy.optimize.brentq` on the same
bracket instead.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from pydam.exceptions import DegenerateReactionError, MissingDimensionError
from pydam.statics.equilibrium import overturning_safety_factor, reactions
from pydam.statics.inputs import DamInputs, SolveFor

logger = logging.getLogger(__name__)

SOLVER_TOLERANCE = 1e-3
SOLVER_MAX_ITER = 100
BASE_WIDTH_FLOOR = 0.1
BASE_WIDTH_HEIGHT_RATIO = 10.0


@dataclass
class SolveResult:
    """Outcome of :func:`find_parameter`.

    Attributes:
        value: Solved input value (best approximation if not converged).
        safety_factor: Safety factor obtained at *value*.
        iterations: Iterations used (0 for the closed form).
        converged: Whether the target was met within tolerance.
        method: ``"closed_form"``, ``"bisection"`` or ``"brentq"``.
    """

    value: float
    safety_factor: float | None
    iterations: int
    converged: bool
    method: str


def find_parameter(
    inputs: DamInputs,
    unknown: SolveFor | str,
    target_safety_factor: float,
    method: str = "bisection",
    tol: float = SOLVER_TOLERANCE,
    max_iter: int = SOLVER_MAX_ITER,
) -> SolveResult:
    """Solve for *unknown* so that its safety factor equals the target.

    Args:
        inputs: Section inputs.  The value of the *unknown* field is
            ignored; every other field must be set.
        unknown: Input to solve for.
        target_safety_factor: Required safety factor (> 0).
        method: ``"bisection"`` or ``"brentq"``.  Ignored for the
            friction coefficient.
        tol: Absolute tolerance on the safety factor.
        max_iter: Iteration cap.

    Returns:
        :class:`SolveResult`.

    Raises:
        ValueError: Non-positive target or unknown *method*.
        MissingDimensionError: A required fixed input is absent.
        DegenerateReactionError: Friction solve with zero vertical
            reaction.
    """
    unknown = SolveFor(unknown)
    if target_safety_factor is None or not target_safety_factor > 0:
        raise ValueError(
            f"target_safety_factor must be > 0, got {target_safety_factor!r}"
        )

    if unknown is SolveFor.FRICTION_COEFFICIENT:
        return _solve_friction(inputs, target_safety_factor)

    methods: dict[str, Callable[..., SolveResult]] = {
        "bisection": _bisect,
        "brentq": _brentq,
    }
    if method not in methods:
        raise ValueError(
            f"Unknown method {method!r}. Choose from {list(methods)}"
        )

    if inputs.height is None:
        raise MissingDimensionError("height is required to bracket the search")

    if unknown is SolveFor.WATER_LEVEL:
        lo, hi = 0.0, inputs.height
        decreasing = True
    else:
        lo, hi = BASE_WIDTH_FLOOR, inputs.height * BASE_WIDTH_HEIGHT_RATIO
        decreasing = False

    def factor(x: float) -> float:
        return overturning_safety_factor(inputs.replace(**{unknown.value: x}))

    result = methods[method](factor, target_safety_factor, lo, hi, decreasing, tol, max_iter)

    if result.converged:
        logger.debug(
            "Solved %s = %.6g in %d %s iterations",
            unknown.value, result.value, result.iterations, result.method,
        )
    else:
        logger.warning(
            "Target safety factor %.4g not reached for %s in [%.4g, %.4g]; "
            "returning best estimate %.6g (FS = %.4g)",
            target_safety_factor, unknown.value, lo, hi,
            result.value, result.safety_factor,
        )
    return result


def solve(
    inputs: DamInputs,
    unknown: SolveFor | str,
    target_safety_factor: float,
) -> float:
    """Value of *unknown* that achieves *target_safety_factor*.

    Shorthand for ``find_parameter(...).value`` with bisection.
    """
    return find_parameter(inputs, unknown, target_safety_factor).value


def _solve_friction(inputs: DamInputs, target: float) -> SolveResult:
    R_y, R_x = reactions(inputs)
    if R_y == 0:
        raise DegenerateReactionError(
            "Vertical reaction is zero; no friction coefficient can resist sliding"
        )
    if R_x == 0:
        logger.warning(
            "No horizontal thrust; sliding factor is not applicable and "
            "target %.4g cannot be met by a friction coefficient", target,
        )
        return SolveResult(0.0, None, 0, False, "closed_form")

    mu = target * R_x / R_y
    if mu < 0:
        logger.warning(
            "Uplift exceeds self weight (Ry = %.4g); friction coefficient "
            "%.4g for target %.4g is not physical", R_y, mu, target,
        )
    return SolveResult(
        value=mu,
        safety_factor=target,
        iterations=0,
        converged=mu >= 0,
        method="closed_form",
    )


def _bisect(
    factor: Callable[[float], float],
    target: float,
    lo: float,
    hi: float,
    decreasing: bool,
    tol: float,
    max_iter: int,
) -> SolveResult:
    """Midpoint bisection on a monotonic safety-factor function."""
    mid, fs = 0.5 * (lo + hi), float("nan")
    for it in range(1, max_iter + 1):
        mid = 0.5 * (lo + hi)
        fs = factor(mid)
        if abs(fs - target) < tol:
            return SolveResult(mid, fs, it, True, "bisection")

        # Move the bracket towards the side that brings fs to target
        if (fs > target) == decreasing:
            lo = mid
        else:
            hi = mid

    return SolveResult(mid, fs, max_iter, False, "bisection")


def _brentq(
    factor: Callable[[float], float],
    target: float,
    lo: float,
    hi: float,
    decreasing: bool,
    tol: float,
    max_iter: int,
) -> SolveResult:
    """Brent's method; falls back to the nearer bracket end."""
    from scipy.optimize import brentq

    def residual(x: float) -> float:
        return factor(x) - target

    r_lo, r_hi = residual(lo), residual(hi)
    if r_lo * r_hi > 0:
        x = lo if abs(r_lo) < abs(r_hi) else hi
        return SolveResult(x, factor(x), 0, False, "brentq")

    root, info = brentq(
        residual, lo, hi,
        xtol=1e-12, maxiter=max_iter, full_output=True, disp=False,
    )
    fs = factor(root)
    return SolveResult(
        root, fs, info.iterations, bool(info.converged) and abs(fs - target) < tol, "brentq"
    )
