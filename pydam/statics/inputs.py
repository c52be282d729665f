"""Input record for a stability calculation.

A :class:`DamInputs` describes one cross-section and its loading.  In
solve mode exactly one of ``water_level``, ``base_width`` or
``friction_coefficient`` is the unknown, named by a
:class:`SolveRequest`; that field may then be ``None``.

Example::

    inputs = DamInputs(
        profile="rectangle",
        base_width=10, height=8, water_level=6,
        concrete_density=23.5, water_density=9.81,
        friction_coefficient=0.7,
    )
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from pydam.exceptions import InputValidationError
from pydam.geometry.profiles import StructureProfile
from pydam.units.conversion import DensityUnit, UnitSystem


class SolveFor(str, Enum):
    """Input that can be solved for."""

    WATER_LEVEL = "water_level"
    BASE_WIDTH = "base_width"
    FRICTION_COEFFICIENT = "friction_coefficient"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()


@dataclass(frozen=True)
class SolveRequest:
    """Unknown input and the safety factor it must achieve.

    The water level and base width are solved against the overturning
    factor, the friction coefficient against the sliding factor.
    """

    unknown: SolveFor
    target_safety_factor: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "unknown", SolveFor(self.unknown))
        target = self.target_safety_factor
        if target is None or not target > 0:
            raise ValueError(f"target_safety_factor must be > 0, got {target!r}")


# camelCase keys used by the form layer
_ALIASES = {
    "structureType": "profile",
    "structure_type": "profile",
    "baseWidth": "base_width",
    "waterLevel": "water_level",
    "crestWidth": "crest_width",
    "concreteDensity": "concrete_density",
    "waterDensity": "water_density",
    "waterDensityUnit": "water_density_unit",
    "frictionCoefficient": "friction_coefficient",
    "heelUplift": "heel_uplift",
    "toeUplift": "toe_uplift",
    "unitSystem": "unit_system",
    "solveFor": "solve_for",
    "targetSafetyFactor": "target_safety_factor",
}

# form-layer spelling of each solvable field
_SOLVE_NAMES = {
    "waterLevel": SolveFor.WATER_LEVEL,
    "baseWidth": SolveFor.BASE_WIDTH,
    "frictionCoefficient": SolveFor.FRICTION_COEFFICIENT,
}

_DEFAULTED = ("heel_uplift", "toe_uplift", "water_density_unit", "unit_system")


@dataclass(frozen=True)
class DamInputs:
    """Geometry, materials and loading of one dam section.

    Lengths, densities and forces use one consistent unit system
    (m, kN/m³ or ft, lb/ft³); ``unit_system`` only selects the labels
    used in reports.  ``water_density`` may alternatively be a mass
    density in kg/m³, in which case it is converted before use.

    Args:
        profile: Section shape.
        base_width: Base width *b*.
        height: Dam height *h*.
        water_level: Upstream water depth *h_w*.
        concrete_density: Concrete unit weight γ_c.
        water_density: Water density, in ``water_density_unit``.
        water_density_unit: Unit of ``water_density``.
        crest_width: Crest width *c* (trapezoid only).
        friction_coefficient: Base friction coefficient μ.  ``None``
            skips the sliding check.
        heel_uplift: Uplift head at the heel.
        toe_uplift: Uplift head at the toe.
        unit_system: Report units.
        solve: Optional solve request.
    """

    profile: StructureProfile
    base_width: float | None
    height: float
    water_level: float | None
    concrete_density: float
    water_density: float
    water_density_unit: DensityUnit = DensityUnit.KN_PER_M3
    crest_width: float | None = None
    friction_coefficient: float | None = None
    heel_uplift: float = 0.0
    toe_uplift: float = 0.0
    unit_system: UnitSystem = UnitSystem.METRIC
    solve: SolveRequest | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "profile", StructureProfile.parse(self.profile))
        object.__setattr__(
            self, "water_density_unit", DensityUnit(self.water_density_unit)
        )
        object.__setattr__(self, "unit_system", UnitSystem(self.unit_system))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DamInputs:
        """Build inputs from a flat mapping.

        Keys may be snake_case field names or the camelCase names of
        the form layer (``baseWidth``, ``structureType``, ...).  The
        solve request is given by ``solve_for`` (or ``solveFor``) and
        ``target_safety_factor``; ``"none"`` disables it.
        """
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            name = _ALIASES.get(key, key)
            # cleared form fields fall back to the field default
            if value is None and name in _DEFAULTED:
                continue
            kwargs[name] = value

        solve_for = kwargs.pop("solve_for", None)
        target = kwargs.pop("target_safety_factor", None)
        if solve_for not in (None, "none"):
            unknown = _SOLVE_NAMES.get(solve_for, solve_for)
            kwargs["solve"] = SolveRequest(SolveFor(unknown), target)

        kwargs.setdefault("base_width", None)
        kwargs.setdefault("water_level", None)
        return cls(**kwargs)

    def replace(self, **changes: Any) -> DamInputs:
        """Return a copy with *changes* applied."""
        return dataclasses.replace(self, **changes)

    @property
    def unknown(self) -> SolveFor | None:
        """The field being solved for, if any."""
        return self.solve.unknown if self.solve is not None else None

    def validation_errors(self) -> dict[str, str]:
        """Form-level checks, keyed by field name.

        The engine itself does not call this; the collecting layer is
        expected to run it before :func:`pydam.analysis.calculate_stability`.
        """
        errors: dict[str, str] = {}
        unknown = self.unknown

        required = ["base_width", "height", "water_level"]
        if self.profile is StructureProfile.TRAPEZOID:
            required.append("crest_width")
        if unknown is not None and unknown.value in required:
            required.remove(unknown.value)

        for name in required:
            value = getattr(self, name)
            if value is None:
                errors[name] = "This field is required"
            elif value <= 0:
                errors[name] = "Must be greater than zero"

        for name in ("concrete_density", "water_density"):
            value = getattr(self, name)
            if value is None:
                errors[name] = "This field is required"
            elif not value > 0:
                errors[name] = "Must be greater than zero"

        if (
            unknown is not SolveFor.WATER_LEVEL
            and self.water_level is not None
            and self.height is not None
            and self.water_level > self.height
        ):
            errors["water_level"] = "Water level cannot exceed dam height"

        return errors

    def validate(self) -> DamInputs:
        """Raise :class:`InputValidationError` if any check fails.

        Returns:
            ``self``, to allow chaining.
        """
        errors = self.validation_errors()
        if errors:
            raise InputValidationError(errors)
        return self
