"""Rigid-body equilibrium of a gravity dam section.

The section is loaded by its self weight W, the base uplift U and the
upstream hydrostatic thrust P.  Moments are taken about the heel:

    R_y = W − U                     R_x = P
    M_R = W x_cg                    M_P = P h_w / 3
    M_U = U x_cg                    M_O = M_P + M_U
    x_R = (M_R − M_O) / R_y
    FS_sliding     = μ R_y / R_x
    FS_overturning = M_R / M_O

The uplift moment uses the self-weight centroid x_cg as its lever arm
rather than the centroid of the uplift diagram.  This is exact only
for uniform uplift (heel head equal to toe head).

Degenerate cases:

- R_y = 0 raises :class:`~pydam.exceptions.DegenerateReactionError`.
- R_x = 0 or μ unknown leaves FS_sliding as ``None``.
- M_O = 0 divides M_R by 1 instead, so FS_overturning equals M_R.
"""

from __future__ import annotations

import dataclasses
from typing import Any

from pydam.exceptions import DegenerateReactionError, MissingDimensionError
from pydam.geometry.profiles import StructureProfile, centroid_offset, volume
from pydam.loads.hydrostatic import pressure_force, uplift_force
from pydam.statics.inputs import DamInputs
from pydam.statics.results import (
    CalculationStep,
    IntermediateResults,
    StabilityResults,
)
from pydam.statics.safety import format_number as fmt
from pydam.units.conversion import DensityUnit, display_units, to_weight_density


def _required(inputs: DamInputs, name: str) -> float:
    value = getattr(inputs, name)
    if value is None:
        raise MissingDimensionError(f"{name} is required for this calculation")
    return value


def _statics(inputs: DamInputs) -> dict[str, Any]:
    """Every derived quantity except the resultant location."""
    b = _required(inputs, "base_width")
    h = _required(inputs, "height")
    h_w = _required(inputs, "water_level")
    gamma_w, _ = to_weight_density(inputs.water_density, inputs.water_density_unit)

    area = volume(inputs.profile, b, h, inputs.crest_width)
    W = inputs.concrete_density * area
    U = uplift_force(b, inputs.heel_uplift, inputs.toe_uplift, gamma_w)
    P = pressure_force(h_w, gamma_w)
    x_cg = centroid_offset(inputs.profile, b, inputs.crest_width)

    M_R = W * x_cg
    M_P = P * (h_w / 3)
    M_U = U * x_cg

    return dict(
        volume=area,
        self_weight=W,
        center_of_gravity=x_cg,
        hydrostatic_uplift=U,
        hydrostatic_pressure=P,
        vertical_reaction=W - U,
        horizontal_reaction=P,
        righting_moment=M_R,
        pressure_moment=M_P,
        uplift_moment=M_U,
        overturning_moment=M_P + M_U,
    )


def _overturning_factor(righting_moment: float, overturning_moment: float) -> float:
    # A zero overturning moment is reported as M_R / 1.
    return righting_moment / (overturning_moment if overturning_moment != 0 else 1)


def _sliding_factor(
    friction_coefficient: float | None,
    vertical_reaction: float,
    horizontal_reaction: float,
) -> float | None:
    if friction_coefficient is None or horizontal_reaction == 0:
        return None
    return friction_coefficient * vertical_reaction / horizontal_reaction


def intermediate(inputs: DamInputs) -> IntermediateResults:
    """Forces, moments and resultant location for *inputs*.

    Raises:
        MissingDimensionError: A length or the trapezoid crest width
            is missing.
        DegenerateReactionError: The vertical reaction is zero.
    """
    q = _statics(inputs)
    if q["vertical_reaction"] == 0:
        raise DegenerateReactionError(
            "Vertical reaction is zero (uplift balances self weight); "
            "the resultant location is undefined"
        )
    location = (q["righting_moment"] - q["overturning_moment"]) / q["vertical_reaction"]
    return IntermediateResults(**q, location_of_resultant=location)


def reactions(inputs: DamInputs) -> tuple[float, float]:
    """Vertical and horizontal reactions ``(R_y, R_x)``."""
    q = _statics(inputs)
    return q["vertical_reaction"], q["horizontal_reaction"]


def overturning_safety_factor(inputs: DamInputs) -> float:
    """FS against overturning, without building a derivation trace."""
    q = _statics(inputs)
    return _overturning_factor(q["righting_moment"], q["overturning_moment"])


def sliding_safety_factor(inputs: DamInputs) -> float | None:
    """FS against sliding, or ``None`` if it cannot be evaluated."""
    R_y, R_x = reactions(inputs)
    return _sliding_factor(inputs.friction_coefficient, R_y, R_x)


def evaluate(inputs: DamInputs) -> StabilityResults:
    """Run the full stability check and record each derivation step.

    Steps are appended in a fixed order: volume, self weight, uplift,
    pressure, vertical and horizontal reactions, centre of gravity,
    righting, pressure, uplift and overturning moments, resultant
    location, sliding factor (when evaluated) and overturning factor.

    Args:
        inputs: Fully specified inputs.  A pending solve request is
            ignored; use :func:`pydam.analysis.calculate_stability`
            to honour it.

    Returns:
        :class:`StabilityResults` with ``solved_parameter`` unset.
    """
    r = intermediate(inputs)
    u = display_units(inputs.unit_system)
    gamma_w, w_unit = to_weight_density(inputs.water_density, inputs.water_density_unit)
    b, h_w = inputs.base_width, inputs.water_level
    heel, toe = inputs.heel_uplift, inputs.toe_uplift

    fs_sliding = _sliding_factor(
        inputs.friction_coefficient, r.vertical_reaction, r.horizontal_reaction
    )
    fs_overturning = _overturning_factor(r.righting_moment, r.overturning_moment)

    steps: list[CalculationStep] = []

    area_formula, area_text = _volume_text(inputs)
    steps.append(CalculationStep(
        "Volume of Dam Section",
        area_formula,
        f"{area_text} = {fmt(r.volume)} {u.area} per unit length",
        r.volume,
        u.area,
    ))
    steps.append(CalculationStep(
        "Self-Weight of Dam",
        "W = γ_c × A",
        f"W = {fmt(inputs.concrete_density)} × {fmt(r.volume)} = {fmt(r.self_weight)} {u.force}",
        r.self_weight,
        u.force,
    ))

    density_note = ""
    if inputs.water_density_unit is DensityUnit.KG_PER_M3:
        density_note = (
            f" (γ_w = {fmt(inputs.water_density)} kg/m³ × 9.81 / 1000"
            f" = {fmt(gamma_w, 4)} {w_unit.value})"
        )
    if r.hydrostatic_uplift == 0:
        uplift_text = "No uplift head at heel or toe, so U = 0"
    else:
        uplift_text = (
            f"U = {fmt(gamma_w)} × ({fmt(heel)} + {fmt(toe)}) / 2 × {fmt(b)}"
            f" = {fmt(r.hydrostatic_uplift)} {u.force}"
        )
    steps.append(CalculationStep(
        "Hydrostatic Uplift",
        "U = γ_w × (h_heel + h_toe) / 2 × b",
        uplift_text + density_note,
        r.hydrostatic_uplift,
        u.force,
    ))
    steps.append(CalculationStep(
        "Hydrostatic Pressure",
        "P = γ_w × h_w² / 2",
        f"Triangular pressure diagram: P = {fmt(gamma_w)} × {fmt(h_w)}² / 2"
        f" = {fmt(r.hydrostatic_pressure)} {u.force}" + density_note,
        r.hydrostatic_pressure,
        u.force,
    ))
    steps.append(CalculationStep(
        "Vertical Reaction (Ry)",
        "Ry = W − U",
        f"Ry = {fmt(r.self_weight)} − {fmt(r.hydrostatic_uplift)}"
        f" = {fmt(r.vertical_reaction)} {u.force}",
        r.vertical_reaction,
        u.force,
    ))
    steps.append(CalculationStep(
        "Horizontal Reaction (Rx)",
        "Rx = P",
        f"The base resists the full water thrust: Rx = {fmt(r.horizontal_reaction)} {u.force}",
        r.horizontal_reaction,
        u.force,
    ))
    steps.append(CalculationStep(
        "Center of Gravity",
        _centroid_formula(inputs.profile),
        f"Centroid lies {fmt(r.center_of_gravity)} {u.length} from the heel",
        r.center_of_gravity,
        u.length,
    ))
    steps.append(CalculationStep(
        "Righting Moment",
        "M_R = W × x_cg",
        f"M_R = {fmt(r.self_weight)} × {fmt(r.center_of_gravity)}"
        f" = {fmt(r.righting_moment)} {u.moment}",
        r.righting_moment,
        u.moment,
    ))
    steps.append(CalculationStep(
        "Pressure Moment",
        "M_P = P × h_w / 3",
        f"Thrust acts {fmt(h_w / 3)} {u.length} above the base: M_P = "
        f"{fmt(r.hydrostatic_pressure)} × {fmt(h_w / 3)} = {fmt(r.pressure_moment)} {u.moment}",
        r.pressure_moment,
        u.moment,
    ))
    steps.append(CalculationStep(
        "Uplift Moment",
        "M_U = U × x_cg",
        f"Uplift taken through the section centroid: M_U = {fmt(r.hydrostatic_uplift)}"
        f" × {fmt(r.center_of_gravity)} = {fmt(r.uplift_moment)} {u.moment}",
        r.uplift_moment,
        u.moment,
    ))
    steps.append(CalculationStep(
        "Overturning Moment",
        "M_O = M_P + M_U",
        f"M_O = {fmt(r.pressure_moment)} + {fmt(r.uplift_moment)}"
        f" = {fmt(r.overturning_moment)} {u.moment}",
        r.overturning_moment,
        u.moment,
    ))
    steps.append(CalculationStep(
        "Location of Resultant",
        "x_R = (M_R − M_O) / Ry",
        f"x_R = ({fmt(r.righting_moment)} − {fmt(r.overturning_moment)})"
        f" / {fmt(r.vertical_reaction)} = {fmt(r.location_of_resultant)} {u.length} from the heel",
        r.location_of_resultant,
        u.length,
    ))
    if fs_sliding is not None:
        steps.append(CalculationStep(
            "Safety Factor against Sliding",
            "FS_s = μ × Ry / Rx",
            f"FS_s = {fmt(inputs.friction_coefficient)} × {fmt(r.vertical_reaction)}"
            f" / {fmt(r.horizontal_reaction)} = {fmt(fs_sliding)}",
            fs_sliding,
        ))
    if r.overturning_moment == 0:
        overturning_text = (
            f"No overturning moment; FS_o reported as M_R / 1 = {fmt(fs_overturning)}"
        )
    else:
        overturning_text = (
            f"FS_o = {fmt(r.righting_moment)} / {fmt(r.overturning_moment)}"
            f" = {fmt(fs_overturning)}"
        )
    steps.append(CalculationStep(
        "Safety Factor against Overturning",
        "FS_o = M_R / M_O",
        overturning_text,
        fs_overturning,
    ))

    return StabilityResults(
        **dataclasses.asdict(r),
        safety_factor_overturning=fs_overturning,
        safety_factor_sliding=fs_sliding,
        steps=tuple(steps),
        unit_system=inputs.unit_system,
    )


def _volume_text(inputs: DamInputs) -> tuple[str, str]:
    b, h, c = inputs.base_width, inputs.height, inputs.crest_width
    if inputs.profile is StructureProfile.RECTANGLE:
        return "A = b × h", f"A = {fmt(b)} × {fmt(h)}"
    if inputs.profile is StructureProfile.TRIANGLE:
        return "A = b × h / 2", f"A = {fmt(b)} × {fmt(h)} / 2"
    return "A = (b + c) / 2 × h", f"A = ({fmt(b)} + {fmt(c)}) / 2 × {fmt(h)}"


def _centroid_formula(profile: StructureProfile) -> str:
    if profile is StructureProfile.RECTANGLE:
        return "x_cg = b / 2"
    if profile is StructureProfile.TRIANGLE:
        return "x_cg = b / 3"
    return "x_cg = (b + 2c) / (3 (b + c)) × b"
