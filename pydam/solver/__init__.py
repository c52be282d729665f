"""Solver: inverse analysis for a target safety factor."""

from pydam.solver.inverse import (
    SOLVER_TOLERANCE,
    SOLVER_MAX_ITER,
    BASE_WIDTH_FLOOR,
    BASE_WIDTH_HEIGHT_RATIO,
    SolveResult,
    find_parameter,
    solve,
)

__all__ = [
    "SOLVER_TOLERANCE",
    "SOLVER_MAX_ITER",
    "BASE_WIDTH_FLOOR",
    "BASE_WIDTH_HEIGHT_RATIO",
    "SolveResult",
    "find_parameter",
    "solve",
]
